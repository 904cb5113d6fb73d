# invoicing/models/time_entries.py

import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TimeEntryRecord(BaseModel):
    id: UUID
    user_id: UUID
    project_id: UUID
    date: datetime.date
    hours: Decimal
    description: str
    billable: Optional[bool] = None
    billed: Optional[bool] = None
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
