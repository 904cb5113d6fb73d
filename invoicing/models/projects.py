# invoicing/models/projects.py

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from invoicing.db.schema import ProjectStatus


class ProjectRecord(BaseModel):
    id: UUID
    user_id: UUID
    customer_id: UUID
    name: str
    description: Optional[str] = None
    hourly_rate: Optional[Decimal] = None
    status: Optional[ProjectStatus] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    budget_hours: Optional[Decimal] = None
    budget_amount: Optional[Decimal] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
