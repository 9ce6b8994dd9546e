"""
Demo implementation of DocumentService using in-memory wire records.

This service is useful for:
- Local development without the accounting backend
- Testing the controllers against realistic filtering and paging
- Demonstrating the application without network access

It mirrors the backend's list semantics: substring matches on document
number and payment method, exact matches on customer and status, an
inclusive date range, sorting by a whitelisted field (document date
otherwise) and soft deletion.
"""

import copy
from datetime import date
from typing import Any, Callable, Iterable, Mapping

from ledger_ui.data.demo_documents import DEMO_DOCUMENTS, DEMO_ISSUER
from ledger_ui.errors import NotFoundError, ValidationError
from ledger_ui.lib import logs
from ledger_ui.models.common import FilterCriteria, PageResult
from ledger_ui.models.document import DocumentSummary, LifecycleStatus
from ledger_ui.services.document_service import DocumentService
from ledger_ui.utils import parse_timestamp, to_decimal

LOG = logs.logger(__file__)

_SORT_KEYS: dict[str, Callable[[Mapping[str, Any]], Any]] = {
    "documentnumber": lambda r: r["documentNumber"],
    "customername": lambda r: r["customerName"],
    "totalamount": lambda r: to_decimal(r["totalAmount"]),
    "status": lambda r: r["status"],
}

_SUMMARY_FIELDS = (
    "id",
    "documentNumber",
    "documentDate",
    "customerName",
    "status",
    "paymentMethod",
    "totalAmount",
    "currency",
)


class DemoDocumentService(DocumentService):
    """
    In-memory document service backed by wire-format records.

    Records are deep-copied on construction so mutations (cancel, delete)
    never leak into the module-level fixtures.

    Attributes:
        issuer: Issuer record, or None to simulate a missing endpoint.
    """

    def __init__(
        self,
        documents: Iterable[Mapping[str, Any]] | None = None,
        issuer: Mapping[str, Any] | None = DEMO_ISSUER,
    ) -> None:
        """
        Args:
            documents: Custom wire records, or None to use DEMO_DOCUMENTS.
            issuer: Issuer wire record; None makes get_issuer_profile fail.
        """
        source = DEMO_DOCUMENTS if documents is None else documents
        self._records: dict[int, dict[str, Any]] = {
            int(record["id"]): copy.deepcopy(dict(record)) for record in source
        }
        self._deleted: set[int] = set()
        self.issuer = copy.deepcopy(dict(issuer)) if issuer is not None else None

    async def list_documents(self, criteria: FilterCriteria) -> PageResult[DocumentSummary]:
        """Return a filtered, sorted page of summaries."""
        matches = [r for r in self._live_records() if _matches(r, criteria)]

        # Document id breaks ties so paging is stable.
        sort_key = _SORT_KEYS.get(criteria.sort_by.lower(), _document_date)
        matches.sort(key=lambda r: r["id"], reverse=criteria.sort_descending)
        matches.sort(key=sort_key, reverse=criteria.sort_descending)

        window = matches[criteria.offset : criteria.offset + criteria.page_size]
        return PageResult(
            items=[DocumentSummary.from_wire(_summary(r)) for r in window],
            total_count=len(matches),
            page=criteria.page,
            page_size=criteria.page_size,
        )

    async def cancel_document(self, document_id: int) -> None:
        record = self._live_record(document_id)
        if LifecycleStatus.parse(record["status"]) is LifecycleStatus.CANCELLED:
            raise ValidationError(f"Document {record['documentNumber']} is already cancelled")
        record["status"] = LifecycleStatus.CANCELLED.value
        LOG.info("Cancelled document %s; reservations released", record["documentNumber"])

    async def delete_document(self, document_id: int) -> None:
        record = self._live_record(document_id)
        self._deleted.add(document_id)
        LOG.info("Deleted document %s", record["documentNumber"])

    async def get_document(self, document_id: int) -> Mapping[str, Any]:
        return copy.deepcopy(self._live_record(document_id))

    async def get_issuer_profile(self) -> Mapping[str, Any]:
        if self.issuer is None:
            raise NotFoundError("Issuer profile is not available")
        return copy.deepcopy(self.issuer)

    def _live_records(self) -> list[dict[str, Any]]:
        return [r for doc_id, r in self._records.items() if doc_id not in self._deleted]

    def _live_record(self, document_id: int) -> dict[str, Any]:
        record = self._records.get(document_id)
        if record is None or document_id in self._deleted:
            raise NotFoundError(f"Document {document_id} not found")
        return record


def _document_date(record: Mapping[str, Any]) -> Any:
    return parse_timestamp(record["documentDate"])


def _summary(record: Mapping[str, Any]) -> dict[str, Any]:
    return {key: record.get(key) for key in _SUMMARY_FIELDS}


def _matches(record: Mapping[str, Any], criteria: FilterCriteria) -> bool:
    """Check a record against every filter present in the criteria."""
    if criteria.document_number and criteria.document_number not in record["documentNumber"]:
        return False
    if criteria.customer_id is not None and record.get("customerId") != criteria.customer_id:
        return False
    if criteria.status is not None and LifecycleStatus.parse(record["status"]) is not criteria.status:
        return False
    if criteria.payment_method and criteria.payment_method not in (record.get("paymentMethod") or ""):
        return False
    day: date = _document_date(record).date()
    if criteria.from_date and day < criteria.from_date:
        return False
    if criteria.to_date and day > criteria.to_date:
        return False
    return True
