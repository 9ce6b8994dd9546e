from datetime import date, datetime
from decimal import Decimal

import pytest

from ledger_ui.errors import ValidationError
from ledger_ui.models import (
    FilterCriteria,
    LifecycleStatus,
    PageResult,
    RowAction,
    SearchInputs,
    available_actions,
)
from ledger_ui.models.document import (
    DocumentSummary,
    parse_issuer_profile,
    parse_printable_document,
)


def _summary_payload(**overrides):
    payload = {
        "id": 1,
        "documentNumber": "TIR-1001",
        "documentDate": "2025-07-01T10:30:00",
        "customerName": "Dana Levi Studio",
        "status": 1,
        "paymentMethod": "Credit card",
        "totalAmount": 150.0,
    }
    payload.update(overrides)
    return payload


def test_default_criteria_params_omit_absent_filters() -> None:
    params = FilterCriteria.default().to_params()

    assert params == {
        "page": "1",
        "pageSize": "25",
        "sortBy": "documentDate",
        "sortDescending": "true",
    }


def test_criteria_params_include_every_present_filter() -> None:
    criteria = FilterCriteria(
        document_number="1001",
        customer_id=7,
        status=LifecycleStatus.CANCELLED,
        from_date=date(2025, 7, 1),
        to_date=date(2025, 7, 31),
        payment_method="Cash",
        page=2,
        page_size=50,
        sort_by="totalAmount",
        sort_descending=False,
    )

    assert criteria.to_params() == {
        "documentNumber": "1001",
        "fromDate": "2025-07-01",
        "toDate": "2025-07-31",
        "customerId": "7",
        "status": "2",
        "paymentMethod": "Cash",
        "page": "2",
        "pageSize": "50",
        "sortBy": "totalAmount",
        "sortDescending": "false",
    }


@pytest.mark.parametrize(
    "kwargs",
    [
        {"page": 0},
        {"page_size": 0},
        {"from_date": date(2025, 7, 10), "to_date": date(2025, 7, 1)},
    ],
)
def test_invalid_criteria_are_rejected(kwargs) -> None:
    with pytest.raises(ValidationError):
        FilterCriteria(**kwargs)


def test_same_day_range_is_valid() -> None:
    criteria = FilterCriteria(from_date=date(2025, 7, 1), to_date=date(2025, 7, 1))
    assert criteria.from_date == criteria.to_date


def test_page_size_change_returns_to_first_page() -> None:
    criteria = FilterCriteria(customer_id=9, page=3, page_size=10)

    changed = criteria.with_page_size(50)

    assert (changed.page, changed.page_size, changed.customer_id) == (1, 50, 9)
    assert criteria.page == 3
    assert changed.offset == 0
    assert criteria.offset == 20


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, LifecycleStatus.PAID),
        ("2", LifecycleStatus.CANCELLED),
        ("Paid", LifecycleStatus.PAID),
        (" cancelled ", LifecycleStatus.CANCELLED),
        (LifecycleStatus.PAID, LifecycleStatus.PAID),
    ],
)
def test_status_parse(value, expected) -> None:
    assert LifecycleStatus.parse(value) is expected


@pytest.mark.parametrize("value", [0, 3, "3", "Void", "", None, True])
def test_status_parse_rejects_unknown(value) -> None:
    with pytest.raises(ValidationError):
        LifecycleStatus.parse(value)


def test_only_paid_documents_can_be_cancelled() -> None:
    assert LifecycleStatus.PAID.can_transition_to(LifecycleStatus.CANCELLED)
    assert not LifecycleStatus.CANCELLED.can_transition_to(LifecycleStatus.PAID)
    assert not LifecycleStatus.CANCELLED.can_transition_to(LifecycleStatus.CANCELLED)


def test_row_actions_follow_status() -> None:
    assert available_actions(LifecycleStatus.PAID) == (
        RowAction.VIEW,
        RowAction.EDIT,
        RowAction.CANCEL,
        RowAction.DELETE,
    )
    assert available_actions(LifecycleStatus.CANCELLED) == (RowAction.VIEW, RowAction.DELETE)


def test_summary_from_wire() -> None:
    summary = DocumentSummary.from_wire(_summary_payload())

    assert summary.document_date == datetime(2025, 7, 1, 10, 30)
    assert summary.status is LifecycleStatus.PAID
    assert summary.total_amount == Decimal("150.00")
    assert summary.formatted_total() == "ILS 150.00"
    assert RowAction.CANCEL in summary.actions


def test_summary_rejects_negative_total() -> None:
    with pytest.raises(ValidationError):
        DocumentSummary.from_wire(_summary_payload(totalAmount=-1))


def test_summary_requires_document_date() -> None:
    with pytest.raises(ValidationError):
        DocumentSummary.from_wire(_summary_payload(documentDate="yesterday"))


def test_page_result_bounds() -> None:
    with pytest.raises(ValueError):
        PageResult(items=[1, 2, 3], total_count=10, page_size=2)
    with pytest.raises(ValueError):
        PageResult(items=[1, 2], total_count=1, page_size=25)
    with pytest.raises(ValueError):
        PageResult(total_count=-1)


def test_page_result_paging() -> None:
    page = PageResult(items=[1] * 25, total_count=51, page=2, page_size=25)

    assert page.total_pages == 3
    assert page.has_more
    assert not PageResult(items=[1], total_count=51, page=3, page_size=25).has_more
    assert PageResult().total_pages == 0


def test_search_inputs_to_filters() -> None:
    inputs = SearchInputs(
        document_number=" 1001 ",
        customer_id="7",
        status="Paid",
        from_date="2025-07-01",
    )

    assert inputs.to_filters() == {
        "document_number": "1001",
        "customer_id": 7,
        "status": LifecycleStatus.PAID,
        "from_date": date(2025, 7, 1),
        "to_date": None,
        "payment_method": None,
    }


@pytest.mark.parametrize(
    "inputs",
    [
        SearchInputs(customer_id="seven"),
        SearchInputs(from_date="01/07/2025"),
        SearchInputs(status="Draft"),
    ],
)
def test_search_inputs_reject_unparseable_fields(inputs) -> None:
    with pytest.raises(ValidationError):
        inputs.to_filters()


def test_printable_document_accepts_invoice_keys() -> None:
    document = parse_printable_document(
        {
            "id": 10,
            "invoiceNumber": "INV-10",
            "invoiceDate": "2025-07-02",
            "customer": {"name": "Acme", "address": "1 Main St"},
            "subtotalAmount": "100",
            "taxAmount": "17",
            "totalAmount": "117",
            "lines": [
                {"description": "Widget", "quantity": 2, "unitPrice": "50", "lineTotal": "100"},
            ],
        }
    )

    assert document.document_number == "INV-10"
    assert document.document_date == datetime(2025, 7, 2)
    assert document.customer.name == "Acme"
    assert document.customer.address == "1 Main St"
    assert document.lines[0].line_number == 1
    assert document.lines[0].line_total == Decimal("100")
    assert document.total_amount == Decimal("117")
    assert document.due_date is None
    assert document.print_title == "Invoice INV-10"


def test_printable_document_requires_id() -> None:
    with pytest.raises(ValidationError):
        parse_printable_document({"documentDate": "2025-07-02"})


def test_issuer_profile_truncates_seven_digit_fraction() -> None:
    issuer = parse_issuer_profile(
        {
            "id": 1,
            "name": "Orion Hardware Ltd.",
            "israelTaxId": "514789632",
            "createdAt": "2024-01-02T08:00:00Z",
            "updatedAt": "2025-06-30T16:45:12.1234567Z",
        }
    )

    assert issuer.tax_id == "514789632"
    assert issuer.updated_at.replace(tzinfo=None) == datetime(2025, 6, 30, 16, 45, 12, 123456)
    assert issuer.currency == "ILS"


def test_issuer_profile_requires_timestamps() -> None:
    with pytest.raises(ValidationError):
        parse_issuer_profile({"id": 1, "name": "Orion", "createdAt": "2024-01-02T08:00:00Z"})
