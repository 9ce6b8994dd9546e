from datetime import datetime
from decimal import Decimal

from ledger_ui.data.demo_documents import DEMO_DOCUMENTS
from ledger_ui.models import LifecycleStatus, fallback_issuer
from ledger_ui.models.document import DocumentSummary, parse_printable_document
from ledger_ui.models.reflex_models import to_issuer_model, to_print_model, to_row_model


def _summary(status: LifecycleStatus) -> DocumentSummary:
    return DocumentSummary(
        id=42,
        document_number="TIR-42",
        document_date=datetime(2025, 7, 1, 10, 30),
        customer_name="Dana Levi Studio",
        status=status,
        payment_method="Cash",
        total_amount=Decimal("1234.5"),
    )


def test_paid_row_offers_edit_and_cancel() -> None:
    row = to_row_model(_summary(LifecycleStatus.PAID))

    assert row.document_date == "01/07/2025"
    assert row.status == "Paid"
    assert row.total == "ILS 1,234.50"
    assert (row.can_edit, row.can_cancel) == (True, True)


def test_cancelled_row_hides_edit_and_cancel() -> None:
    row = to_row_model(_summary(LifecycleStatus.CANCELLED))

    assert row.status == "Cancelled"
    assert (row.can_edit, row.can_cancel) == (False, False)


def test_print_model_formats_lines_and_totals() -> None:
    document = parse_printable_document(DEMO_DOCUMENTS[0])

    model = to_print_model(document)

    assert model.document_number == "TIR-1001"
    assert model.due_date == ""
    assert [line.sku for line in model.lines] == ["DOCK-220", "CBL-HD2"]
    assert model.lines[1].quantity == "3"
    assert model.lines[1].unit_price == "ILS 35.00"
    assert model.total == document.as_money(document.total_amount)


def test_issuer_model_from_fallback() -> None:
    model = to_issuer_model(fallback_issuer(datetime(2025, 7, 15)))

    assert model.name == "My Company"
    assert model.website == "www.company.co.il"


def test_print_model_tolerates_null_nested_customer_fields() -> None:
    document = parse_printable_document(
        {
            "id": 1,
            "documentDate": "2025-07-01T10:00:00",
            "customer": {"name": None, "address": None},
        }
    )

    model = to_print_model(document)

    assert (model.customer_name, model.customer_address) == ("", "")
    assert to_print_model(
        parse_printable_document(
            {"id": 2, "documentDate": "2025-07-01", "customer": {"name": "Acme", "address": None}}
        )
    ).customer_name == "Acme"
