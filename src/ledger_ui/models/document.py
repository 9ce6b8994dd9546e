"""
Document domain models and wire parsers.

The hierarchy mirrors the JSON records returned by the accounting backend:

    DocumentSummary          (one row of the tax-document list)
    PrintableDocument        (full detail for the print view)
    ├── CounterpartyRef      (customer identity)
    └── DocumentLine[]       (items with quantities, prices, tax)
    IssuerProfile            (company identity printed on the document)

Wire records use camelCase keys and ISO-8601 timestamp strings. Parsers read
them through benedict for safe nested access and normalize every timestamp
through utils.normalize_timestamps before the dataclasses are built.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Mapping, Sequence

from benedict import benedict

from ledger_ui.errors import ValidationError
from ledger_ui.utils import format_currency, normalize_timestamps, to_decimal


class LifecycleStatus(Enum):
    """Lifecycle status of a tax document, valued by its wire code."""

    PAID = 1
    CANCELLED = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def can_transition_to(self, target: "LifecycleStatus") -> bool:
        """Return True if the backend permits moving from self to target."""
        return self is LifecycleStatus.PAID and target is LifecycleStatus.CANCELLED

    @classmethod
    def parse(cls, value: Any) -> "LifecycleStatus":
        """
        Parse a status from its wire code (1, "1") or name ("Paid", "cancelled").

        Raises:
            ValidationError: If the value names no known status.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        elif isinstance(value, str):
            text = value.strip()
            if text.isdigit():
                return cls.parse(int(text))
            try:
                return cls[text.upper()]
            except KeyError:
                pass
        raise ValidationError(f"Unknown lifecycle status: {value!r}")


class RowAction(str, Enum):
    """Per-row actions offered by the document table."""

    VIEW = "view"
    EDIT = "edit"
    CANCEL = "cancel"
    DELETE = "delete"


def available_actions(status: LifecycleStatus) -> tuple[RowAction, ...]:
    """Return the actions exposed for a document in the given status."""
    if status is LifecycleStatus.PAID:
        return (RowAction.VIEW, RowAction.EDIT, RowAction.CANCEL, RowAction.DELETE)
    return (RowAction.VIEW, RowAction.DELETE)


@dataclass(frozen=True, slots=True)
class DocumentSummary:
    """Read-only projection of a tax document for list display."""

    id: int
    document_number: str
    document_date: datetime
    customer_name: str
    status: LifecycleStatus
    payment_method: str
    total_amount: Decimal
    currency: str = "ILS"

    def __post_init__(self) -> None:
        if self.total_amount < 0:
            raise ValidationError(
                f"Document {self.document_number} has a negative total: {self.total_amount}"
            )

    @property
    def actions(self) -> tuple[RowAction, ...]:
        return available_actions(self.status)

    def formatted_total(self) -> str:
        return format_currency(self.total_amount, self.currency)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "DocumentSummary":
        """Build a summary from one item of the list response."""
        record = normalize_timestamps(payload, required=("documentDate",))
        return cls(
            id=int(record["id"]),
            document_number=str(record.get("documentNumber") or ""),
            document_date=record["documentDate"],
            customer_name=record.get("customerName") or "",
            status=LifecycleStatus.parse(record.get("status")),
            payment_method=record.get("paymentMethod") or "",
            total_amount=to_decimal(record.get("totalAmount")),
            currency=record.get("currency") or "ILS",
        )


@dataclass(slots=True)
class CounterpartyRef:
    """Customer identity as printed on the document."""

    id: int | None
    name: str
    address: str = ""
    tax_id: str | None = None
    contact: str | None = None


@dataclass(slots=True)
class DocumentLine:
    """An individual line on a printable document."""

    line_number: int
    description: str
    quantity: Decimal
    unit_price: Decimal
    line_total: Decimal
    sku: str | None = None
    discount_percent: Decimal = Decimal("0")
    tax_rate: Decimal = Decimal("0")
    tax_amount: Decimal = Decimal("0")


@dataclass(slots=True)
class PrintableDocument:
    """Full detail record of one document, with typed date fields."""

    id: int
    document_number: str
    document_date: datetime
    customer: CounterpartyRef
    lines: Sequence[DocumentLine]
    subtotal: Decimal
    tax_amount: Decimal
    total_amount: Decimal
    currency: str = "ILS"
    paid_amount: Decimal = Decimal("0")
    status: LifecycleStatus | None = None
    due_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    notes: str | None = None

    @property
    def print_title(self) -> str:
        """Title used for the browser print dialog."""
        return f"Invoice {self.document_number}"

    def as_money(self, value: Decimal) -> str:
        return format_currency(value, self.currency)


@dataclass(slots=True)
class IssuerProfile:
    """Company identity printed on documents."""

    id: str
    name: str
    tax_id: str
    currency: str
    created_at: datetime
    updated_at: datetime
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None


def fallback_issuer(now: datetime) -> IssuerProfile:
    """Return the placeholder issuer used when the profile cannot be fetched."""
    return IssuerProfile(
        id="1",
        name="My Company",
        tax_id="123456789",
        address="Company Address",
        currency="ILS",
        phone="03-1234567",
        email="info@company.co.il",
        website="www.company.co.il",
        created_at=now,
        updated_at=now,
    )


@dataclass(frozen=True, slots=True)
class PrintBundle:
    """Everything the print view renders; both parts are always present."""

    document: PrintableDocument
    issuer: IssuerProfile


_DOCUMENT_OPTIONAL_DATES = ("dueDate", "createdAt", "updatedAt")


def parse_printable_document(payload: Mapping[str, Any]) -> PrintableDocument:
    """
    Convert a full document record into a PrintableDocument.

    Invoice records name their number and date invoiceNumber/invoiceDate;
    tax documents use documentNumber/documentDate. Both are accepted.

    Raises:
        ValidationError: If the record has no id or no parseable document date.
    """
    raw = dict(payload)
    if raw.get("documentDate") is None and "invoiceDate" in raw:
        raw["documentDate"] = raw["invoiceDate"]
    if raw.get("id") is None:
        raise ValidationError("Document record has no id")

    b = benedict(
        normalize_timestamps(raw, required=("documentDate",), optional=_DOCUMENT_OPTIONAL_DATES),
        keyattr_dynamic=True,
    )
    status = b.get("status")

    return PrintableDocument(
        id=int(b["id"]),
        document_number=str(b.get("documentNumber") or b.get("invoiceNumber") or ""),
        document_date=b["documentDate"],
        due_date=b.get("dueDate"),
        created_at=b.get("createdAt"),
        updated_at=b.get("updatedAt"),
        status=LifecycleStatus.parse(status) if status is not None else None,
        customer=CounterpartyRef(
            id=b.get("customerId"),
            name=b.get("customerName") or b.get("customer.name") or "",
            address=b.get("customerAddress") or b.get("customer.address") or "",
            tax_id=b.get("customerTaxId"),
            contact=b.get("customerContact"),
        ),
        lines=[_parse_line(index, line) for index, line in enumerate(b.get("lines") or [], 1)],
        subtotal=to_decimal(b.get("subtotalAmount", b.get("subTotal"))),
        tax_amount=to_decimal(b.get("taxAmount", b.get("vatAmount"))),
        total_amount=to_decimal(b.get("totalAmount")),
        paid_amount=to_decimal(b.get("paidAmount")),
        currency=b.get("currency") or "ILS",
        notes=b.get("notes"),
    )


def _parse_line(index: int, line: Mapping[str, Any]) -> DocumentLine:
    return DocumentLine(
        line_number=int(line.get("lineNumber") or index),
        description=line.get("description") or line.get("itemName") or "",
        sku=line.get("itemSku"),
        quantity=to_decimal(line.get("quantity")),
        unit_price=to_decimal(line.get("unitPrice")),
        discount_percent=to_decimal(line.get("discountPercent")),
        tax_rate=to_decimal(line.get("taxRate", line.get("vatRate"))),
        tax_amount=to_decimal(line.get("taxAmount", line.get("lineVatAmount"))),
        line_total=to_decimal(line.get("lineTotal", line.get("lineTotalAmount"))),
    )


def parse_issuer_profile(payload: Mapping[str, Any]) -> IssuerProfile:
    """
    Convert an issuer (company) record into an IssuerProfile.

    Raises:
        ValidationError: If either timestamp is missing or unparseable.
    """
    record = normalize_timestamps(payload, required=("createdAt", "updatedAt"))
    return IssuerProfile(
        id=str(record.get("id") or ""),
        name=record.get("name") or "",
        tax_id=record.get("israelTaxId") or record.get("taxId") or "",
        address=record.get("address"),
        currency=record.get("currency") or "ILS",
        phone=record.get("phone"),
        email=record.get("email"),
        website=record.get("website"),
        created_at=record["createdAt"],
        updated_at=record["updatedAt"],
    )
