"""
Filtered list controller for the tax-document table.

The controller owns the active FilterCriteria, the last successfully loaded
page and the single pending destructive action. Every state transition is an
explicit method; backend failures are converted into the `error` message and
never escape to the caller.

Overlapping queries are resolved by ticket: each refresh takes the next
ticket number and only the response carrying the latest ticket is applied.
An older query that settles later is discarded, so the table always reflects
the most recently issued criteria.
"""

from dataclasses import replace

from ledger_ui.errors import LedgerUIError, ValidationError
from ledger_ui.lib import logs
from ledger_ui.models.common import (
    DEFAULT_PAGE_SIZE,
    ConfirmationOutcome,
    FilterCriteria,
    PageResult,
    PendingAction,
    PendingConfirmation,
    SearchInputs,
)
from ledger_ui.models.document import DocumentSummary
from ledger_ui.services import get_document_service
from ledger_ui.services.document_service import DocumentService

LOG = logs.logger(__file__)


class DocumentListController:
    """
    Translates filter, paging and sort intent into list queries.

    Attributes:
        criteria: Criteria of the current (or last issued) query.
        inputs: Raw search-form values merged by search().
        page: Last successfully loaded page; kept when a query fails.
        loading: True while the latest query is in flight.
        error: Message of the last failure, or None.
        pending: Destructive action awaiting confirmation, or None.
    """

    def __init__(self, service: DocumentService, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        self._service: DocumentService | None = service
        self.criteria = FilterCriteria.default(page_size)
        self.inputs = SearchInputs()
        self.page: PageResult[DocumentSummary] = PageResult(page_size=page_size)
        self.loading = False
        self.error: str | None = None
        self.pending: PendingConfirmation | None = None
        self._issued = 0

    def __getstate__(self) -> dict:
        # Reflex pickles state between events; the service is resolved again on use.
        state = self.__dict__.copy()
        state["_service"] = None
        return state

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)

    @property
    def service(self) -> DocumentService:
        """Backend in use; the configured service once restored from a pickle."""
        if self._service is None:
            self._service = get_document_service()
        return self._service

    @property
    def visible_items(self) -> tuple[DocumentSummary, ...]:
        """Rows to render; the loading indicator replaces them while loading."""
        if self.loading:
            return ()
        return tuple(self.page.items)

    @property
    def page_index(self) -> int:
        """Zero-based page index, as the pagination widget counts."""
        return self.criteria.page - 1

    async def query(self, criteria: FilterCriteria) -> PageResult[DocumentSummary]:
        """
        Run one list query without touching controller state.

        Raises:
            TransportError: On network or HTTP failure.
            ValidationError: If the backend rejects the criteria.
        """
        return await self.service.list_documents(criteria)

    async def refresh(self) -> bool:
        """
        Re-issue the current criteria and apply the result if still current.

        Returns:
            True if this call's result replaced the displayed page.
        """
        self._issued += 1
        ticket = self._issued
        criteria = self.criteria
        self.loading = True
        LOG.info("Query started - ticket:%s criteria:%s", ticket, criteria)

        try:
            result = await self.query(criteria)
        except Exception as exc:
            if ticket != self._issued:
                LOG.info("Discarding stale failure - ticket:%s latest:%s", ticket, self._issued)
                return False
            if isinstance(exc, LedgerUIError):
                LOG.warning("Query failed - ticket:%s error:%s", ticket, exc)
            else:
                LOG.error("Query failed unexpectedly - ticket:%s", ticket, exc_info=True)
            self.error = str(exc) or "Failed to load documents"
            self.loading = False
            return False

        if ticket != self._issued:
            LOG.info("Discarding stale response - ticket:%s latest:%s", ticket, self._issued)
            return False

        self.page = result
        self.error = None
        self.loading = False
        LOG.info(
            "Query complete - ticket:%s items:%s total:%s",
            ticket,
            len(result.items),
            result.total_count,
        )
        return True

    async def set_filters(self, criteria: FilterCriteria) -> bool:
        """Replace the criteria atomically and re-query once."""
        self.criteria = criteria
        return await self.refresh()

    async def change_page(self, page_index: int) -> bool:
        """Show the zero-based page_index with the same filters and page size."""
        if page_index < 0:
            raise ValidationError(f"page_index must be >= 0, got {page_index}")
        return await self.set_filters(self.criteria.with_page(page_index + 1))

    async def change_page_size(self, page_size: int) -> bool:
        """Switch page size and return to the first page."""
        return await self.set_filters(self.criteria.with_page_size(page_size))

    async def search(self) -> bool:
        """Merge the search inputs into the criteria and query from page 1."""
        try:
            criteria = replace(self.criteria, page=1, **self.inputs.to_filters())
        except ValidationError as exc:
            LOG.info("Search rejected: %s", exc)
            self.error = str(exc)
            return False
        return await self.set_filters(criteria)

    async def clear(self) -> bool:
        """Reset every filter input and return to the default criteria."""
        self.inputs = SearchInputs()
        return await self.set_filters(FilterCriteria.default(self.criteria.page_size))

    def dismiss_error(self) -> None:
        self.error = None

    def request_cancel(self, document_id: int) -> PendingConfirmation:
        return self._request(PendingAction.CANCEL, document_id)

    def request_delete(self, document_id: int) -> PendingConfirmation:
        return self._request(PendingAction.DELETE, document_id)

    def _request(self, action: PendingAction, document_id: int) -> PendingConfirmation:
        if self.pending is not None:
            LOG.info("Replacing pending %s of %s", self.pending.action.value, self.pending.document_id)
        self.pending = PendingConfirmation(action=action, document_id=document_id)
        return self.pending

    def abort(self) -> ConfirmationOutcome:
        """Close the confirmation without acting."""
        self.pending = None
        return ConfirmationOutcome.ABORTED

    async def confirm(self) -> ConfirmationOutcome:
        """Run the pending action; the confirmation stays open if it fails."""
        pending = self.pending
        if pending is None:
            return ConfirmationOutcome.ABORTED
        if pending.action is PendingAction.CANCEL:
            succeeded = await self.cancel(pending.document_id)
        else:
            succeeded = await self.delete(pending.document_id)
        return ConfirmationOutcome.CONFIRMED if succeeded else ConfirmationOutcome.FAILED

    async def cancel(self, document_id: int) -> bool:
        """
        Cancel a document and refresh the list.

        The status precondition (Paid) is enforced by which actions the
        table offers; the backend remains the authority and its rejection
        is surfaced through `error`.
        """
        try:
            await self.service.cancel_document(document_id)
        except Exception as exc:
            self._record_failure("Cancel", document_id, exc)
            return False
        LOG.info("Cancelled document %s", document_id)
        self.pending = None
        await self.refresh()
        return True

    async def delete(self, document_id: int) -> bool:
        """Delete a document and refresh the list."""
        try:
            await self.service.delete_document(document_id)
        except Exception as exc:
            self._record_failure("Delete", document_id, exc)
            return False
        LOG.info("Deleted document %s", document_id)
        self.pending = None
        await self.refresh()
        return True

    def _record_failure(self, action: str, document_id: int, exc: Exception) -> None:
        """Surface a failed transition through `error`; the confirmation stays open."""
        if isinstance(exc, LedgerUIError):
            LOG.warning("%s failed - id:%s error:%s", action, document_id, exc)
        else:
            LOG.error("%s failed unexpectedly - id:%s", action, document_id, exc_info=True)
        self.error = str(exc) or f"{action} failed"
