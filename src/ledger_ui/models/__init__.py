"""
Data models for the Ledger UI.

This package provides:
- Document domain models (DocumentSummary, PrintableDocument, IssuerProfile)
- Query and controller state models (FilterCriteria, PageResult, ...)
- Wire parsers that normalize backend records into typed dataclasses
"""

from ledger_ui.models.common import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_BY,
    PAGE_SIZE_OPTIONS,
    ConfirmationOutcome,
    FilterCriteria,
    LoadState,
    PageResult,
    PendingAction,
    PendingConfirmation,
    SearchInputs,
)
from ledger_ui.models.document import (
    CounterpartyRef,
    DocumentLine,
    DocumentSummary,
    IssuerProfile,
    LifecycleStatus,
    PrintableDocument,
    PrintBundle,
    RowAction,
    available_actions,
    fallback_issuer,
    parse_issuer_profile,
    parse_printable_document,
)

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "DEFAULT_SORT_BY",
    "PAGE_SIZE_OPTIONS",
    "ConfirmationOutcome",
    "CounterpartyRef",
    "DocumentLine",
    "DocumentSummary",
    "FilterCriteria",
    "IssuerProfile",
    "LifecycleStatus",
    "LoadState",
    "PageResult",
    "PendingAction",
    "PendingConfirmation",
    "PrintBundle",
    "PrintableDocument",
    "RowAction",
    "SearchInputs",
    "available_actions",
    "fallback_issuer",
    "parse_issuer_profile",
    "parse_printable_document",
]
