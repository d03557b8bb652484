from uuid import UUID
from decimal import Decimal
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import date, datetime, timezone

from mei_dashboard.models.enums import TransactionType

class Transaction(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: UUID = Field(foreign_key="user.id", index=True)
    type: TransactionType
    # Sempre magnitude positiva; o sinal depende só do tipo
    amount: Decimal = Field(max_digits=12, decimal_places=2)
    transaction_date: date = Field(index=True)
    category: Optional[str] = None
    description: Optional[str] = None
    # Caminho do arquivo no armazenamento de documentos (não é URL pública)
    file_url: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
