from sqlmodel import SQLModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime, timezone

class Profile(SQLModel, table=True):
    # Mesmo id do usuário (relação 1:1)
    id: UUID = Field(primary_key=True, foreign_key="user.id")
    full_name: Optional[str] = None
    cnpj: Optional[str] = None
    mei_status: bool = Field(default=True)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
