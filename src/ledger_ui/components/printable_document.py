"""
Reflex printable document component.

Renders the fixed print layout (issuer header, customer block, lines and
totals) once PrintState is ready, with a button that opens the browser's
print dialog.
"""

import reflex as rx

from ledger_ui.models.reflex_models import LineModel
from ledger_ui.state import PrintState


def printable_document() -> rx.Component:
    """
    Build the print view for the current PrintState.

    Returns:
        Loading spinner, error alert or the printable layout.
    """
    return rx.cond(
        PrintState.is_ready,
        rx.box(
            rx.button(
                rx.icon("printer", size=16),
                "Print",
                on_click=PrintState.print_page,
                class_name="no-print",
            ),
            _layout(),
        ),
        rx.cond(
            PrintState.is_failed,
            rx.callout(PrintState.error, icon="triangle-alert", color_scheme="red"),
            rx.center(rx.spinner(size="3"), min_height="200px"),
        ),
    )


def _layout() -> rx.Component:
    return rx.box(
        rx.hstack(
            rx.box(
                rx.heading(PrintState.issuer.name, size="5", as_="h1"),
                rx.text("Tax ID: ", PrintState.issuer.tax_id),
                rx.text(PrintState.issuer.address),
                rx.text(PrintState.issuer.phone, " | ", PrintState.issuer.email),
                rx.text(PrintState.issuer.website, class_name="muted"),
            ),
            rx.box(
                rx.heading(PrintState.print_title, size="4", as_="h2"),
                rx.text("Date: ", PrintState.document.document_date),
                rx.cond(
                    PrintState.document.due_date != "",
                    rx.text("Due: ", PrintState.document.due_date),
                ),
            ),
            justify="between",
            class_name="print-header",
        ),
        rx.box(
            rx.text("Bill to", class_name="label"),
            rx.text(PrintState.document.customer_name, weight="bold"),
            rx.text(PrintState.document.customer_address),
            rx.cond(
                PrintState.document.customer_tax_id != "",
                rx.text("Tax ID: ", PrintState.document.customer_tax_id),
            ),
            class_name="print-customer",
        ),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("#"),
                    rx.table.column_header_cell("Description"),
                    rx.table.column_header_cell("SKU"),
                    rx.table.column_header_cell("Qty"),
                    rx.table.column_header_cell("Unit price"),
                    rx.table.column_header_cell("Total"),
                ),
            ),
            rx.table.body(rx.foreach(PrintState.document.lines, _line_row)),
        ),
        rx.box(
            _total_row("Subtotal", PrintState.document.subtotal),
            _total_row("VAT", PrintState.document.tax_amount),
            _total_row("Total", PrintState.document.total),
            class_name="print-totals",
        ),
        rx.cond(
            PrintState.document.notes != "",
            rx.text(PrintState.document.notes, class_name="print-notes"),
        ),
        class_name="printable-invoice",
    )


def _line_row(line: LineModel) -> rx.Component:
    return rx.table.row(
        rx.table.cell(line.line_number),
        rx.table.cell(line.description),
        rx.table.cell(line.sku),
        rx.table.cell(line.quantity),
        rx.table.cell(line.unit_price),
        rx.table.cell(line.line_total),
    )


def _total_row(label: str, value) -> rx.Component:
    return rx.hstack(
        rx.text(label, class_name="label"),
        rx.text(value, weight="bold"),
        justify="between",
    )
