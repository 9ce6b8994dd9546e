"""
Common state models for the Ledger UI.

This module defines the value objects the controllers own:

- FilterCriteria: filters, sort and pagination of one list query
- SearchInputs: raw search-form fields awaiting search()
- PageResult: one page of results plus the total match count
- PendingConfirmation: the single destructive action awaiting confirmation
- LoadState: lifecycle of a print-view load
"""

from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Generic, Sequence, TypeVar

from ledger_ui.errors import ValidationError
from ledger_ui.models.document import LifecycleStatus

T = TypeVar("T")

PAGE_SIZE_OPTIONS = (10, 25, 50, 100)
DEFAULT_PAGE_SIZE = 25
DEFAULT_SORT_BY = "documentDate"


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """
    Filter, sort and pagination parameters of one list query.

    Instances are immutable; transitions build a new value with
    with_page()/with_page_size() or dataclasses.replace(), so a query
    always sees one consistent set of criteria.

    Attributes:
        document_number: Substring matched against the document number.
        customer_id: Counterparty identifier.
        status: Lifecycle status to match.
        from_date: Inclusive lower bound on the document date.
        to_date: Inclusive upper bound on the document date.
        payment_method: Substring matched against the payment method.
        page: Page number (1-indexed).
        page_size: Number of items per page.
        sort_by: Backend sort field, passed through unchanged.
        sort_descending: Sort direction.
    """

    document_number: str | None = None
    customer_id: int | None = None
    status: LifecycleStatus | None = None
    from_date: date | None = None
    to_date: date | None = None
    payment_method: str | None = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    sort_by: str = DEFAULT_SORT_BY
    sort_descending: bool = True

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValidationError(f"page must be >= 1, got {self.page}")
        if self.page_size < 1:
            raise ValidationError(f"page_size must be positive, got {self.page_size}")
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValidationError(
                f"Date range is inverted: {self.from_date.isoformat()} > {self.to_date.isoformat()}"
            )

    @classmethod
    def default(cls, page_size: int = DEFAULT_PAGE_SIZE) -> "FilterCriteria":
        """Return criteria with no filters, page 1 and newest documents first."""
        return cls(page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def with_page(self, page: int) -> "FilterCriteria":
        return replace(self, page=page)

    def with_page_size(self, page_size: int) -> "FilterCriteria":
        """Change the page size and return to the first page."""
        return replace(self, page=1, page_size=page_size)

    def to_params(self) -> dict[str, str]:
        """Return query-string parameters; absent optional fields are omitted."""
        params: dict[str, str] = {}
        if self.document_number:
            params["documentNumber"] = self.document_number
        if self.from_date:
            params["fromDate"] = self.from_date.isoformat()
        if self.to_date:
            params["toDate"] = self.to_date.isoformat()
        if self.customer_id is not None:
            params["customerId"] = str(self.customer_id)
        if self.status is not None:
            params["status"] = str(self.status.value)
        if self.payment_method:
            params["paymentMethod"] = self.payment_method
        params["page"] = str(self.page)
        params["pageSize"] = str(self.page_size)
        params["sortBy"] = self.sort_by
        params["sortDescending"] = "true" if self.sort_descending else "false"
        return params


@dataclass(slots=True)
class SearchInputs:
    """
    Raw search-form values as typed by the user.

    Empty strings mean "no filter". Nothing here reaches a query until the
    controller's search() merges it into FilterCriteria.
    """

    document_number: str = ""
    customer_id: str = ""
    status: str = ""
    from_date: str = ""
    to_date: str = ""
    payment_method: str = ""

    def to_filters(self) -> dict[str, Any]:
        """
        Convert the inputs into FilterCriteria field values.

        Raises:
            ValidationError: If a field cannot be parsed.
        """
        return {
            "document_number": self.document_number.strip() or None,
            "customer_id": _parse_int("customer", self.customer_id),
            "status": LifecycleStatus.parse(self.status) if self.status.strip() else None,
            "from_date": _parse_day("from date", self.from_date),
            "to_date": _parse_day("to date", self.to_date),
            "payment_method": self.payment_method.strip() or None,
        }


def _parse_int(label: str, value: str) -> int | None:
    value = value.strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc


def _parse_day(label: str, value: str) -> date | None:
    value = value.strip()
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Invalid {label}: {value!r}") from exc


@dataclass(frozen=True, slots=True)
class PageResult(Generic[T]):
    """
    One page of results in server-assigned order.

    Attributes:
        items: Items on this page.
        total_count: Number of matches across all pages.
        page: Page number (1-indexed).
        page_size: Requested number of items per page.
    """

    items: Sequence[T] = field(default_factory=tuple)
    total_count: int = 0
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.total_count < 0:
            raise ValueError(f"total_count must be non-negative, got {self.total_count}")
        if len(self.items) > self.page_size:
            raise ValueError(f"{len(self.items)} items exceed page size {self.page_size}")
        if len(self.items) > self.total_count:
            raise ValueError(f"{len(self.items)} items exceed total count {self.total_count}")

    @property
    def total_pages(self) -> int:
        return -(-self.total_count // self.page_size)

    @property
    def has_more(self) -> bool:
        """Return True when additional pages are available."""
        return self.page * self.page_size < self.total_count


class PendingAction(str, Enum):
    """Destructive actions that require confirmation."""

    CANCEL = "cancel"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class PendingConfirmation:
    """The one destructive action currently awaiting confirmation."""

    action: PendingAction
    document_id: int


class ConfirmationOutcome(str, Enum):
    """How a pending confirmation was resolved."""

    CONFIRMED = "confirmed"
    ABORTED = "aborted"
    FAILED = "failed"


class LoadState(str, Enum):
    """Lifecycle of a printable-document load."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
