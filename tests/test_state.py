import asyncio
import pickle

from ledger_ui import state
from ledger_ui.controllers import DocumentListController, document_list
from ledger_ui.services import DemoDocumentService, HttpDocumentService


def test_list_controller_pickles_without_its_service(monkeypatch) -> None:
    controller = DocumentListController(HttpDocumentService(), page_size=10)
    controller.inputs.customer_id = "7"
    controller.request_delete(3)

    restored = pickle.loads(pickle.dumps(controller))

    assert restored._service is None
    assert restored.criteria == controller.criteria
    assert restored.inputs.customer_id == "7"
    assert restored.pending == controller.pending
    assert controller._service is not None

    demo = DemoDocumentService()
    monkeypatch.setattr(document_list, "get_document_service", lambda: demo)
    assert asyncio.run(restored.refresh()) is True
    assert restored.service is demo
    assert restored.page.total_count == 6


def test_loaded_page_survives_pickling() -> None:
    controller = DocumentListController(DemoDocumentService(), page_size=4)
    asyncio.run(controller.refresh())

    restored = pickle.loads(pickle.dumps(controller))

    assert restored.page == controller.page
    assert restored.visible_items == controller.visible_items


def test_list_state_serializes_with_http_service(monkeypatch) -> None:
    monkeypatch.setattr(state, "_get_service", HttpDocumentService)
    list_state = state.DocumentListState(_reflex_internal_init=True)
    controller = list_state._list_controller()

    data = list_state._serialize()

    assert isinstance(data, bytes)
    assert data
    assert isinstance(controller.service, HttpDocumentService)


def test_edit_url_points_at_host_app(monkeypatch) -> None:
    monkeypatch.setattr(state, "EDIT_URL_TEMPLATE", "/tax-invoice-receipts/{document_id}/edit")
    assert state.edit_url(42) == "/tax-invoice-receipts/42/edit"

    monkeypatch.setattr(state, "EDIT_URL_TEMPLATE", "https://erp.example/receipts/{document_id}")
    assert state.edit_url(7) == "https://erp.example/receipts/7"
