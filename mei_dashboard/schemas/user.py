from pydantic import BaseModel, ConfigDict, EmailStr
from typing import Optional
from uuid import UUID
from datetime import datetime

class UserCreate(BaseModel):
    email: EmailStr
    password: str
    full_name: Optional[str] = None
    cnpj: Optional[str] = None

class UserRead(BaseModel):
    id: UUID
    email: EmailStr

    model_config = ConfigDict(from_attributes=True)

class ProfileRead(BaseModel):
    id: UUID
    full_name: Optional[str] = None
    cnpj: Optional[str] = None
    mei_status: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
