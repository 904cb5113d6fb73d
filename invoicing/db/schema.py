# invoicing/db/schema.py

import enum
import uuid

from sqlalchemy import (
    MetaData, Table, Column, Integer, String, Text, Numeric, Date,
    DateTime, Boolean, Enum, ForeignKey, Index, Uuid, func, true, false
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.expression import FunctionElement

metadata = MetaData()

DEFAULT_USER_CURRENCY = "NGN"
DEFAULT_CUSTOMER_CURRENCY = "USD"


class InvoiceStatus(str, enum.Enum):
    draft = "draft"
    sent = "sent"
    paid = "paid"
    overdue = "overdue"
    cancelled = "cancelled"
    partially_paid = "partially_paid"


class ProjectStatus(str, enum.Enum):
    active = "active"
    completed = "completed"
    archived = "archived"
    on_hold = "on_hold"


# Native enum on PostgreSQL, CHECK constraint on other backends.
invoice_status_enum = Enum(
    *[s.value for s in InvoiceStatus],
    name="invoice_status",
    create_constraint=True,
)
project_status_enum = Enum(
    *[s.value for s in ProjectStatus],
    name="project_status",
    create_constraint=True,
)


class random_uuid(FunctionElement):
    """Server-side random UUID for the DDL DEFAULT of primary keys."""

    type = Uuid()
    name = "random_uuid"
    inherit_cache = True


@compiles(random_uuid)
def _random_uuid_default(element, compiler, **kw):
    return "gen_random_uuid()"


@compiles(random_uuid, "sqlite")
def _random_uuid_sqlite(element, compiler, **kw):
    # 32 hex digits with version 4 and RFC 4122 variant nibbles, as the Uuid type stores them
    return (
        "lower(hex(randomblob(6)) || '4' || substr(hex(randomblob(2)), 2) "
        "|| substr('89ab', 1 + (abs(random()) % 4), 1) || substr(hex(randomblob(2)), 2) "
        "|| hex(randomblob(6)))"
    )


def _id_column() -> Column:
    # uuid4 on the client for inserted_primary_key; random_uuid() for raw inserts
    return Column("id", Uuid, primary_key=True, default=uuid.uuid4, server_default=random_uuid())


def _fk_column(name: str, target: str, nullable: bool = False, ondelete: str = "CASCADE") -> Column:
    return Column(name, Uuid, ForeignKey(target, ondelete=ondelete), nullable=nullable)


def _timestamp_columns() -> list:
    return [
        Column("created_at", DateTime, nullable=False, server_default=func.now()),
        Column(
            "updated_at",
            DateTime,
            nullable=False,
            server_default=func.now(),
            onupdate=func.now(),
        ),
    ]


users = Table(
    "users",
    metadata,
    _id_column(),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("company_name", String(255)),
    Column("address", Text),
    Column("tax_id", String(50)),
    Column("currency", String(3), server_default=DEFAULT_USER_CURRENCY),
    *_timestamp_columns(),
)

customers = Table(
    "customers",
    metadata,
    _id_column(),
    _fk_column("user_id", "users.id"),
    Column("name", String(255), nullable=False),
    Column("email", String(255)),
    Column("phone", String(50)),
    Column("address", Text),
    Column("tax_id", String(50)),
    Column("currency", String(3), server_default=DEFAULT_CUSTOMER_CURRENCY),
    Column("notes", Text),
    *_timestamp_columns(),
    Index("customers_user_idx", "user_id"),
)

projects = Table(
    "projects",
    metadata,
    _id_column(),
    _fk_column("user_id", "users.id"),
    _fk_column("customer_id", "customers.id"),
    Column("name", String(255), nullable=False),
    Column("description", Text),
    Column("hourly_rate", Numeric(10, 2)),
    Column("status", project_status_enum, server_default=ProjectStatus.active.value),
    Column("start_date", Date),
    Column("end_date", Date),
    Column("budget_hours", Numeric(10, 2)),
    Column("budget_amount", Numeric(12, 2)),
    *_timestamp_columns(),
    Index("projects_user_idx", "user_id"),
    Index("projects_customer_idx", "customer_id"),
)

time_entries = Table(
    "time_entries",
    metadata,
    _id_column(),
    _fk_column("user_id", "users.id"),
    _fk_column("project_id", "projects.id"),
    Column("date", Date, nullable=False),
    Column("hours", Numeric(8, 2), nullable=False),
    Column("description", Text, nullable=False),
    Column("billable", Boolean, server_default=true()),
    Column("billed", Boolean, server_default=false()),
    *_timestamp_columns(),
    Index("time_entries_user_idx", "user_id"),
    Index("time_entries_project_idx", "project_id"),
    Index("time_entries_date_idx", "date"),
)

invoices = Table(
    "invoices",
    metadata,
    _id_column(),
    _fk_column("user_id", "users.id"),
    _fk_column("customer_id", "customers.id"),
    # Invoices outlive their project.
    _fk_column("project_id", "projects.id", nullable=True, ondelete="SET NULL"),
    Column("invoice_number", String(50), nullable=False),
    Column("issue_date", Date, nullable=False),
    Column("due_date", Date, nullable=False),
    Column("status", invoice_status_enum, server_default=InvoiceStatus.draft.value),
    Column("subtotal", Numeric(12, 2), nullable=False),
    Column("tax_rate", Numeric(5, 2), server_default="0"),
    Column("tax_amount", Numeric(12, 2), server_default="0"),
    Column("total_amount", Numeric(12, 2), nullable=False),
    Column("notes", Text),
    Column("terms", Text),
    *_timestamp_columns(),
    Index("invoices_user_idx", "user_id"),
    Index("invoices_customer_idx", "customer_id"),
    Index("invoices_status_idx", "status"),
    Index("invoices_number_user_unique_idx", "user_id", "invoice_number", unique=True),
)

invoice_line_items = Table(
    "invoice_line_items",
    metadata,
    _id_column(),
    _fk_column("invoice_id", "invoices.id"),
    Column("description", Text, nullable=False),
    Column("quantity", Numeric(10, 2), nullable=False),
    Column("unit_price", Numeric(12, 2), nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("taxable", Boolean, server_default=true()),
    Column("order", Integer, server_default="0"),
    Index("line_items_invoice_idx", "invoice_id"),
)

payments = Table(
    "payments",
    metadata,
    _id_column(),
    _fk_column("invoice_id", "invoices.id"),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("payment_date", Date, nullable=False),
    Column("method", String(100)),
    Column("reference", String(255)),
    Column("notes", Text),
    Column("created_at", DateTime, nullable=False, server_default=func.now()),
    Index("payments_invoice_idx", "invoice_id"),
)
