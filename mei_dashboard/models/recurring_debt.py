from uuid import UUID
from decimal import Decimal
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime, timezone

class RecurringDebt(SQLModel, table=True):
    __tablename__ = "recurring_debt"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    name: str  # Ex: "Internet", "Aluguel da sala"
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    due_day: int  # 1-31, sem validação contra o tamanho do mês
    category: Optional[str] = None
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
