# invoicing/models/users.py

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, EmailStr


class UserRecord(BaseModel):
    """A users row without the password hash."""

    id: UUID
    name: str
    email: EmailStr
    company_name: Optional[str] = None
    address: Optional[str] = None
    tax_id: Optional[str] = None
    currency: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
