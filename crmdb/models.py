"""SQLAlchemy 2.0 ORM models for the CRM junction layer.

Everything lives in the crm schema:
  - side entities: only the columns the junction queries join or filter on
    (ids, soft-delete flag, audit dates, type / status / date columns)
  - junction tables: composite primary key (first_id, second_id) plus
    active and modified_date; company_attachment and person_address also
    carry modified_by
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Text,
    Uuid,
    false,
    true,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


# ---------------------------------------------------------------------------
# Shared base
# ---------------------------------------------------------------------------


class Base(DeclarativeBase):
    pass


SCHEMA = "crm"


class _Entity:
    """Columns shared by every soft-deletable business entity."""

    __table_args__ = {"schema": SCHEMA}

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    active: Mapped[bool] = mapped_column(Boolean, server_default=true(), default=True, nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


class _Junction:
    """Audit columns shared by every junction table."""

    __table_args__ = {"schema": SCHEMA}

    active: Mapped[bool] = mapped_column(Boolean, server_default=true(), default=True, nullable=False)
    modified_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )


def _fk(table: str) -> ForeignKey:
    return ForeignKey(f"{SCHEMA}.{table}.id")


# ===========================================================================
# Side entities
# ===========================================================================


class Company(_Entity, Base):
    """crm.company: customer / prospect account."""

    __tablename__ = "company"

    name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Person(_Entity, Base):
    """crm.person: individual contact."""

    __tablename__ = "person"

    first_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class Activity(_Entity, Base):
    __tablename__ = "activity"


class Address(_Entity, Base):
    __tablename__ = "address"

    address_type_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)


class Attachment(_Entity, Base):
    __tablename__ = "attachment"

    attachment_type_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)


class EmailAddress(_Entity, Base):
    """crm.email_address: carries the only real primary flag in the model."""

    __tablename__ = "email_address"

    email_address_type_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_primary: Mapped[bool] = mapped_column(Boolean, server_default=false(), default=False, nullable=False)


class Invoice(_Entity, Base):
    __tablename__ = "invoice"


class InvoiceLineItem(_Entity, Base):
    __tablename__ = "invoice_line_item"


class Note(_Entity, Base):
    __tablename__ = "note"

    note_type_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)


class Payment(_Entity, Base):
    __tablename__ = "payment"


class PaymentLineItem(_Entity, Base):
    __tablename__ = "payment_line_item"


class Phone(_Entity, Base):
    __tablename__ = "phone"

    phone_type_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)


class Quote(_Entity, Base):
    __tablename__ = "quote"

    quote_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class QuoteLineItem(_Entity, Base):
    __tablename__ = "quote_line_item"


class SalesOrder(_Entity, Base):
    __tablename__ = "sales_order"

    sales_order_status_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True)
    order_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class SalesOrderLineItem(_Entity, Base):
    __tablename__ = "sales_order_line_item"


# ===========================================================================
# Junction tables: Company <-> *
# ===========================================================================


class CompanyActivity(_Junction, Base):
    __tablename__ = "company_activity"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class CompanyAddress(_Junction, Base):
    __tablename__ = "company_address"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    address_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("address"), primary_key=True)


class CompanyAttachment(_Junction, Base):
    """crm.company_attachment (audited). Every write stamps modified_by."""

    __tablename__ = "company_attachment"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    attachment_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("attachment"), primary_key=True)
    modified_by: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class CompanyEmailAddress(_Junction, Base):
    __tablename__ = "company_email_address"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    email_address_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("email_address"), primary_key=True)


class CompanyInvoice(_Junction, Base):
    __tablename__ = "company_invoice"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    invoice_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("invoice"), primary_key=True)


class CompanyNote(_Junction, Base):
    __tablename__ = "company_note"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    note_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("note"), primary_key=True)


class CompanyPayment(_Junction, Base):
    __tablename__ = "company_payment"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    payment_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("payment"), primary_key=True)


class CompanyPerson(_Junction, Base):
    __tablename__ = "company_person"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)


class CompanyPhone(_Junction, Base):
    __tablename__ = "company_phone"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    phone_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("phone"), primary_key=True)


class CompanyQuote(_Junction, Base):
    __tablename__ = "company_quote"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    quote_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("quote"), primary_key=True)


class CompanySalesOrder(_Junction, Base):
    __tablename__ = "company_sales_order"

    company_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("company"), primary_key=True)
    sales_order_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("sales_order"), primary_key=True)


# ===========================================================================
# Junction tables: Person <-> *
# ===========================================================================


class PersonActivity(_Junction, Base):
    __tablename__ = "person_activity"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class PersonAddress(_Junction, Base):
    """crm.person_address (audited). Every write stamps modified_by."""

    __tablename__ = "person_address"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    address_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("address"), primary_key=True)
    modified_by: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PersonAttachment(_Junction, Base):
    __tablename__ = "person_attachment"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    attachment_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("attachment"), primary_key=True)


class PersonEmailAddress(_Junction, Base):
    __tablename__ = "person_email_address"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    email_address_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("email_address"), primary_key=True)


class PersonNote(_Junction, Base):
    __tablename__ = "person_note"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    note_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("note"), primary_key=True)


class PersonPhone(_Junction, Base):
    __tablename__ = "person_phone"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    phone_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("phone"), primary_key=True)


class PersonSalesOrder(_Junction, Base):
    __tablename__ = "person_sales_order"

    person_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("person"), primary_key=True)
    sales_order_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("sales_order"), primary_key=True)


# ===========================================================================
# Junction tables: documents (invoice, payment, quote, sales order)
# ===========================================================================


class InvoiceActivity(_Junction, Base):
    __tablename__ = "invoice_activity"

    invoice_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("invoice"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class InvoiceInvoiceLineItem(_Junction, Base):
    __tablename__ = "invoice_invoice_line_item"

    invoice_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("invoice"), primary_key=True)
    invoice_line_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, _fk("invoice_line_item"), primary_key=True
    )


class InvoiceNote(_Junction, Base):
    __tablename__ = "invoice_note"

    invoice_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("invoice"), primary_key=True)
    note_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("note"), primary_key=True)


class PaymentActivity(_Junction, Base):
    __tablename__ = "payment_activity"

    payment_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("payment"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class PaymentPaymentLineItem(_Junction, Base):
    __tablename__ = "payment_payment_line_item"

    payment_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("payment"), primary_key=True)
    payment_line_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, _fk("payment_line_item"), primary_key=True
    )


class QuoteActivity(_Junction, Base):
    __tablename__ = "quote_activity"

    quote_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("quote"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class QuoteQuoteLineItem(_Junction, Base):
    __tablename__ = "quote_quote_line_item"

    quote_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("quote"), primary_key=True)
    quote_line_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, _fk("quote_line_item"), primary_key=True
    )


class SalesOrderActivity(_Junction, Base):
    __tablename__ = "sales_order_activity"

    sales_order_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("sales_order"), primary_key=True)
    activity_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("activity"), primary_key=True)


class SalesOrderNote(_Junction, Base):
    __tablename__ = "sales_order_note"

    sales_order_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("sales_order"), primary_key=True)
    note_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("note"), primary_key=True)


class SalesOrderSalesOrderLineItem(_Junction, Base):
    __tablename__ = "sales_order_sales_order_line_item"

    sales_order_id: Mapped[uuid.UUID] = mapped_column(Uuid, _fk("sales_order"), primary_key=True)
    sales_order_line_item_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, _fk("sales_order_line_item"), primary_key=True
    )
