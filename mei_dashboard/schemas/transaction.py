from uuid import UUID
from decimal import Decimal
from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import date, datetime
from mei_dashboard.models.enums import TransactionType

class TransactionRead(BaseModel):
    id: int
    user_id: UUID
    type: TransactionType
    amount: Decimal
    transaction_date: date
    category: Optional[str] = None
    description: Optional[str] = None
    file_url: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class DocumentListRead(BaseModel):
    months: List[str]  # "YYYY-MM", mais recente primeiro
    items: List[TransactionRead]
