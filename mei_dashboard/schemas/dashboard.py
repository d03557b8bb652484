from decimal import Decimal
from pydantic import BaseModel
from typing import List

from mei_dashboard.schemas.transaction import TransactionRead

class MonthPointRead(BaseModel):
    label: str
    year: int
    month: int
    income: Decimal
    expense: Decimal

class DashboardSummary(BaseModel):
    year: int
    month: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    recurring_total: Decimal
    forecast: Decimal
    history: List[MonthPointRead]
    recent_transactions: List[TransactionRead]
