"""
Reflex state management for the Ledger UI application.

The states are thin adapters: each event handler calls one controller
operation and copies the controller's resulting state into Reflex vars.
All filtering, paging, lifecycle and fallback rules live in
ledger_ui.controllers.
"""

import os

import reflex as rx

from ledger_ui.controllers import DocumentListController, PrintableDocumentAssembler
from ledger_ui.errors import LoadError, ValidationError
from ledger_ui.lib import logs
from ledger_ui.models.common import PAGE_SIZE_OPTIONS, LoadState, PendingAction
from ledger_ui.models.reflex_models import (
    DocumentRowModel,
    IssuerModel,
    PrintDocumentModel,
    to_issuer_model,
    to_print_model,
    to_row_model,
)
from ledger_ui.services import get_document_service

LOG = logs.logger(__file__)

# Configuration from environment
PAGE_SIZE = int(os.getenv("LEDGER_UI_PAGE_SIZE", "25"))
# The edit form is served by the host accounting app, not by this one.
EDIT_URL_TEMPLATE = os.getenv("LEDGER_UI_EDIT_URL", "/tax-invoice-receipts/{document_id}/edit")

APP_TITLE = "Tax Invoice Receipts"
APP_SUBTITLE = "Search, print, cancel and delete tax invoice receipts."


def edit_url(document_id: int) -> str:
    """Return the host app URL of the edit form for a document."""
    return EDIT_URL_TEMPLATE.format(document_id=document_id)


def _get_service():
    """Get the configured document service (lazy loaded)."""
    return get_document_service()


class DocumentListState(rx.State):
    """
    State of the tax-document list page.

    Mirrors DocumentListController after every event.
    """

    rows: list[DocumentRowModel] = []
    total_count: int = 0
    page_index: int = 0
    page_size: int = PAGE_SIZE
    total_pages: int = 0
    is_loading: bool = True
    error: str = ""
    pending_action: str = ""
    pending_document_id: int = 0

    # Search form
    search_document_number: str = ""
    search_customer_id: str = ""
    search_status: str = ""
    search_from_date: str = ""
    search_to_date: str = ""

    _controller: DocumentListController | None = None

    @rx.var
    def page_size_options(self) -> list[str]:
        return [str(size) for size in PAGE_SIZE_OPTIONS]

    @rx.var
    def page_label(self) -> str:
        """Range summary such as '26-50 of 112'."""
        if self.total_count == 0:
            return "0 of 0"
        first = self.page_index * self.page_size + 1
        last = min(first + len(self.rows) - 1, self.total_count)
        return f"{first}-{last} of {self.total_count}"

    @rx.var
    def has_previous(self) -> bool:
        return self.page_index > 0

    @rx.var
    def has_next(self) -> bool:
        return (self.page_index + 1) < self.total_pages

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.rows) == 0

    @rx.var
    def confirming_cancel(self) -> bool:
        return self.pending_action == PendingAction.CANCEL.value

    @rx.var
    def confirming_delete(self) -> bool:
        return self.pending_action == PendingAction.DELETE.value

    def _list_controller(self) -> DocumentListController:
        if self._controller is None:
            self._controller = DocumentListController(_get_service(), page_size=PAGE_SIZE)
        return self._controller

    def _sync(self) -> None:
        """Copy the controller's state into the Reflex vars."""
        controller = self._list_controller()
        self.rows = [to_row_model(summary) for summary in controller.visible_items]
        self.total_count = controller.page.total_count
        self.total_pages = controller.page.total_pages
        self.page_index = controller.page_index
        self.page_size = controller.criteria.page_size
        self.is_loading = controller.loading
        self.error = controller.error or ""
        pending = controller.pending
        self.pending_action = pending.action.value if pending else ""
        self.pending_document_id = pending.document_id if pending else 0

    @rx.event
    async def on_load(self):
        """Load the first page on mount."""
        self.is_loading = True
        yield
        await self._list_controller().refresh()
        self._sync()

    @rx.event
    def set_search_document_number(self, value: str):
        self.search_document_number = value

    @rx.event
    def set_search_customer_id(self, value: str):
        self.search_customer_id = value

    @rx.event
    def set_search_status(self, value: str):
        self.search_status = "" if value == "all" else value

    @rx.event
    def set_search_from_date(self, value: str):
        self.search_from_date = value

    @rx.event
    def set_search_to_date(self, value: str):
        self.search_to_date = value

    @rx.event
    async def search(self):
        """Apply the search form from page 1."""
        controller = self._list_controller()
        controller.inputs.document_number = self.search_document_number
        controller.inputs.customer_id = self.search_customer_id
        controller.inputs.status = self.search_status
        controller.inputs.from_date = self.search_from_date
        controller.inputs.to_date = self.search_to_date
        self.is_loading = True
        yield
        await controller.search()
        self._sync()

    @rx.event
    async def clear_search(self):
        """Reset the search form and the criteria."""
        self.search_document_number = ""
        self.search_customer_id = ""
        self.search_status = ""
        self.search_from_date = ""
        self.search_to_date = ""
        self.is_loading = True
        yield
        await self._list_controller().clear()
        self._sync()

    @rx.event
    async def change_page(self, page_index: int):
        self.is_loading = True
        yield
        try:
            await self._list_controller().change_page(int(page_index))
        except ValidationError as exc:
            LOG.warning("Ignoring page change: %s", exc)
        self._sync()

    @rx.event
    def next_page(self):
        return DocumentListState.change_page(self.page_index + 1)

    @rx.event
    def previous_page(self):
        return DocumentListState.change_page(max(self.page_index - 1, 0))

    @rx.event
    async def change_page_size(self, value: str):
        self.is_loading = True
        yield
        try:
            await self._list_controller().change_page_size(int(value))
        except (ValueError, ValidationError) as exc:
            LOG.warning("Ignoring page size %r: %s", value, exc)
        self._sync()

    @rx.event
    def request_cancel(self, document_id: int):
        self._list_controller().request_cancel(int(document_id))
        self._sync()

    @rx.event
    def request_delete(self, document_id: int):
        self._list_controller().request_delete(int(document_id))
        self._sync()

    @rx.event
    def abort(self):
        self._list_controller().abort()
        self._sync()

    @rx.event
    async def confirm(self):
        """Run the pending cancel/delete; the dialog stays open on failure."""
        outcome = await self._list_controller().confirm()
        LOG.info("Confirmation outcome: %s", outcome.value)
        self._sync()

    @rx.event
    def dismiss_error(self):
        self._list_controller().dismiss_error()
        self.error = ""

    @rx.event
    def view_document(self, document_id: int):
        return rx.redirect(f"/print/{document_id}")

    @rx.event
    def edit_document(self, document_id: int):
        return rx.redirect(edit_url(document_id))


class PrintState(rx.State):
    """
    State of the print page.

    A new assembler is created for every page mount, so the document and
    issuer of one print session are never shared with another.
    """

    document: PrintDocumentModel = PrintDocumentModel()
    issuer: IssuerModel = IssuerModel()
    load_state: str = LoadState.IDLE.value
    error: str = ""
    print_title: str = ""

    @rx.var
    def is_ready(self) -> bool:
        return self.load_state == LoadState.READY.value

    @rx.var
    def is_failed(self) -> bool:
        return self.load_state == LoadState.FAILED.value

    @rx.event
    async def on_load(self):
        """Assemble the document named by the route's document_id."""
        raw_id = self.router.page.params.get("document_id", "")
        self.load_state = LoadState.LOADING.value
        self.error = ""
        yield

        try:
            document_id = int(raw_id)
        except (TypeError, ValueError):
            self.load_state = LoadState.FAILED.value
            self.error = f"Invalid document id: {raw_id!r}"
            return

        assembler = PrintableDocumentAssembler(_get_service())
        try:
            bundle = await assembler.load(document_id)
        except LoadError as exc:
            self.load_state = LoadState.FAILED.value
            self.error = str(exc)
            return

        self.document = to_print_model(bundle.document)
        self.issuer = to_issuer_model(bundle.issuer)
        self.print_title = bundle.document.print_title
        self.load_state = assembler.state.value

    @rx.event
    def print_page(self):
        """Open the browser's print dialog."""
        return rx.call_script("window.print()")
