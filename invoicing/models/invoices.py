# invoicing/models/invoices.py

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from invoicing.db.schema import InvoiceStatus


class InvoiceRecord(BaseModel):
    id: UUID
    user_id: UUID
    customer_id: UUID
    project_id: Optional[UUID] = None
    invoice_number: str
    issue_date: date
    due_date: date
    status: Optional[InvoiceStatus] = None
    subtotal: Decimal
    tax_rate: Optional[Decimal] = None
    tax_amount: Optional[Decimal] = None
    total_amount: Decimal
    notes: Optional[str] = None
    terms: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class InvoiceLineItemRecord(BaseModel):
    id: UUID
    invoice_id: UUID
    description: str
    quantity: Decimal
    unit_price: Decimal
    amount: Decimal
    taxable: Optional[bool] = None
    order: Optional[int] = None

    class Config:
        from_attributes = True


class PaymentRecord(BaseModel):
    id: UUID
    invoice_id: UUID
    amount: Decimal
    payment_date: date
    method: Optional[str] = None
    reference: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
