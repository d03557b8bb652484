from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import Optional
from datetime import datetime

class RecurringDebtCreate(BaseModel):
    name: str
    amount: Decimal
    due_day: int = 10
    category: Optional[str] = None
    is_active: bool = True

class RecurringDebtRead(RecurringDebtCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
