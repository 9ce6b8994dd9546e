"""
Document table component for Reflex.

Renders the error alert, the table (or its loading/empty placeholder),
pagination controls and the cancel/delete confirmation dialogs.
"""

import reflex as rx

from ledger_ui.models.reflex_models import DocumentRowModel
from ledger_ui.state import DocumentListState

_COLUMNS = ("Number", "Date", "Customer", "Status", "Payment", "Amount", "Actions")


def document_table() -> rx.Component:
    """
    Build the document list section.

    Returns:
        The table container component.
    """
    return rx.box(
        _error_alert(),
        rx.table.root(
            rx.table.header(
                rx.table.row(*[rx.table.column_header_cell(label) for label in _COLUMNS]),
            ),
            rx.table.body(
                rx.cond(
                    DocumentListState.is_loading,
                    _placeholder_row("Loading..."),
                    rx.cond(
                        DocumentListState.is_empty,
                        _placeholder_row("No tax invoice receipts found"),
                        rx.foreach(DocumentListState.rows, _row),
                    ),
                ),
            ),
            class_name="document-table",
        ),
        _pagination(),
        _confirm_dialog(
            "Cancel tax invoice receipt",
            "The receipt will be marked as cancelled and its stock reservations released.",
            "Cancel receipt",
            DocumentListState.confirming_cancel,
        ),
        _confirm_dialog(
            "Delete tax invoice receipt",
            "The receipt will be removed from the list. This cannot be undone.",
            "Delete",
            DocumentListState.confirming_delete,
        ),
        class_name="card results",
    )


def _error_alert() -> rx.Component:
    return rx.cond(
        DocumentListState.error != "",
        rx.callout.root(
            rx.callout.icon(rx.icon("triangle-alert")),
            rx.callout.text(DocumentListState.error),
            rx.icon_button(
                rx.icon("x", size=14),
                on_click=DocumentListState.dismiss_error,
                variant="ghost",
                size="1",
            ),
            color_scheme="red",
            class_name="error-alert",
        ),
    )


def _placeholder_row(message: str) -> rx.Component:
    return rx.table.row(
        rx.table.cell(rx.text(message, class_name="muted"), col_span=len(_COLUMNS), align="center"),
    )


def _row(row: DocumentRowModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(row.document_number),
        rx.table.cell(row.document_date),
        rx.table.cell(row.customer_name),
        rx.table.cell(
            rx.badge(row.status, color_scheme=rx.cond(row.can_cancel, "green", "gray")),
        ),
        rx.table.cell(row.payment_method),
        rx.table.cell(row.total, align="right"),
        rx.table.cell(_row_actions(row), align="center"),
    )


def _row_actions(row: DocumentRowModel) -> rx.Component:
    """View and delete always; edit and cancel only for paid documents."""
    return rx.hstack(
        _action_button("eye", "View", DocumentListState.view_document(row.id)),
        rx.cond(
            row.can_edit,
            _action_button("pencil", "Edit", DocumentListState.edit_document(row.id)),
        ),
        rx.cond(
            row.can_cancel,
            _action_button("ban", "Cancel", DocumentListState.request_cancel(row.id), "orange"),
        ),
        _action_button("trash-2", "Delete", DocumentListState.request_delete(row.id), "red"),
        spacing="1",
        justify="center",
    )


def _action_button(icon: str, title: str, on_click, color_scheme: str = "gray") -> rx.Component:
    return rx.icon_button(
        rx.icon(icon, size=16),
        on_click=on_click,
        title=title,
        variant="ghost",
        size="1",
        color_scheme=color_scheme,
    )


def _pagination() -> rx.Component:
    return rx.hstack(
        rx.text("Rows per page:", class_name="muted"),
        rx.select(
            DocumentListState.page_size_options,
            value=DocumentListState.page_size.to_string(),
            on_change=DocumentListState.change_page_size,
            size="1",
        ),
        rx.text(DocumentListState.page_label, class_name="muted"),
        rx.icon_button(
            rx.icon("chevron-left", size=16),
            on_click=DocumentListState.previous_page,
            disabled=~DocumentListState.has_previous,
            variant="soft",
            size="1",
        ),
        rx.icon_button(
            rx.icon("chevron-right", size=16),
            on_click=DocumentListState.next_page,
            disabled=~DocumentListState.has_next,
            variant="soft",
            size="1",
        ),
        justify="end",
        align="center",
        class_name="pagination",
    )


def _confirm_dialog(title: str, body: str, confirm_label: str, is_open) -> rx.Component:
    return rx.alert_dialog.root(
        rx.alert_dialog.content(
            rx.alert_dialog.title(title),
            rx.alert_dialog.description(body),
            rx.cond(
                DocumentListState.error != "",
                rx.text(DocumentListState.error, color="red", size="2"),
            ),
            rx.hstack(
                rx.button("Back", on_click=DocumentListState.abort, variant="soft", color_scheme="gray"),
                rx.button(confirm_label, on_click=DocumentListState.confirm, color_scheme="red"),
                justify="end",
                spacing="3",
            ),
        ),
        open=is_open,
    )
