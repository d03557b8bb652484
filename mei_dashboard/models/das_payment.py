from uuid import UUID
from decimal import Decimal
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime, timezone

from mei_dashboard.models.enums import DasStatus

class DasPayment(SQLModel, table=True):
    __tablename__ = "das_payment"
    __table_args__ = (
        UniqueConstraint("user_id", "reference_month", name="uq_das_payment_user_month"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    reference_month: date  # sempre o dia 1 do mês de referência
    amount: Optional[Decimal] = Field(default=None, max_digits=12, decimal_places=2)
    status: DasStatus = Field(default=DasStatus.pending)
    paid_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
