"""
Reflex-compatible models for the Ledger UI.

These models extend rx.Base so they can be used with rx.foreach and other
Reflex reactive components. They carry display-ready strings; the typed
domain dataclasses stay inside the controllers.
"""

import reflex as rx

from ledger_ui.models.document import (
    DocumentLine,
    DocumentSummary,
    IssuerProfile,
    PrintableDocument,
    RowAction,
)
from ledger_ui.utils import format_currency, format_date


class DocumentRowModel(rx.Base):
    """One row of the document table."""

    id: int = 0
    document_number: str = ""
    document_date: str = ""
    customer_name: str = ""
    status: str = ""
    payment_method: str = ""
    total: str = ""
    can_edit: bool = False
    can_cancel: bool = False


class LineModel(rx.Base):
    """Individual printed line."""

    line_number: int = 0
    description: str = ""
    sku: str = ""
    quantity: str = ""
    unit_price: str = ""
    line_total: str = ""


class PrintDocumentModel(rx.Base):
    """Printable document header, lines and totals."""

    document_number: str = ""
    document_date: str = ""
    due_date: str = ""
    customer_name: str = ""
    customer_address: str = ""
    customer_tax_id: str = ""
    lines: list[LineModel] = []
    subtotal: str = ""
    tax_amount: str = ""
    total: str = ""
    notes: str = ""


class IssuerModel(rx.Base):
    """Issuer identity printed in the document header."""

    name: str = ""
    tax_id: str = ""
    address: str = ""
    phone: str = ""
    email: str = ""
    website: str = ""


def to_row_model(summary: DocumentSummary) -> DocumentRowModel:
    actions = summary.actions
    return DocumentRowModel(
        id=summary.id,
        document_number=summary.document_number,
        document_date=format_date(summary.document_date),
        customer_name=summary.customer_name,
        status=summary.status.label,
        payment_method=summary.payment_method,
        total=summary.formatted_total(),
        can_edit=RowAction.EDIT in actions,
        can_cancel=RowAction.CANCEL in actions,
    )


def _to_line_model(line: DocumentLine, currency: str) -> LineModel:
    return LineModel(
        line_number=line.line_number,
        description=line.description,
        sku=line.sku or "",
        quantity=f"{line.quantity.normalize():f}",
        unit_price=format_currency(line.unit_price, currency),
        line_total=format_currency(line.line_total, currency),
    )


def to_print_model(document: PrintableDocument) -> PrintDocumentModel:
    return PrintDocumentModel(
        document_number=document.document_number,
        document_date=format_date(document.document_date),
        due_date=format_date(document.due_date) if document.due_date else "",
        customer_name=document.customer.name,
        customer_address=document.customer.address,
        customer_tax_id=document.customer.tax_id or "",
        lines=[_to_line_model(line, document.currency) for line in document.lines],
        subtotal=document.as_money(document.subtotal),
        tax_amount=document.as_money(document.tax_amount),
        total=document.as_money(document.total_amount),
        notes=document.notes or "",
    )


def to_issuer_model(issuer: IssuerProfile) -> IssuerModel:
    return IssuerModel(
        name=issuer.name,
        tax_id=issuer.tax_id,
        address=issuer.address or "",
        phone=issuer.phone or "",
        email=issuer.email or "",
        website=issuer.website or "",
    )
