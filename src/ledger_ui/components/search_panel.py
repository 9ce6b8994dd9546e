"""
Search panel component for the document list.

Provides the document number, customer, status and date range inputs with
search and clear buttons.
"""

import reflex as rx

from ledger_ui.state import DocumentListState


def search_panel() -> rx.Component:
    """
    Build the search and filter panel.

    Returns:
        The search panel component.
    """
    return rx.box(
        rx.heading("Search and filter", size="3", as_="h2"),
        rx.box(
            rx.input(
                placeholder="Document number",
                value=DocumentListState.search_document_number,
                on_change=DocumentListState.set_search_document_number,
                class_name="search-input",
            ),
            rx.input(
                placeholder="Customer id",
                value=DocumentListState.search_customer_id,
                on_change=DocumentListState.set_search_customer_id,
                class_name="search-input",
            ),
            rx.select.root(
                rx.select.trigger(placeholder="All statuses"),
                rx.select.content(
                    rx.select.item("All statuses", value="all"),
                    rx.select.item("Paid", value="Paid"),
                    rx.select.item("Cancelled", value="Cancelled"),
                ),
                on_change=DocumentListState.set_search_status,
            ),
            rx.input(
                type="date",
                value=DocumentListState.search_from_date,
                on_change=DocumentListState.set_search_from_date,
                title="From date",
            ),
            rx.input(
                type="date",
                value=DocumentListState.search_to_date,
                on_change=DocumentListState.set_search_to_date,
                title="To date",
            ),
            rx.button(
                rx.icon("search", size=16),
                "Search",
                on_click=DocumentListState.search,
            ),
            rx.button(
                rx.icon("x", size=16),
                "Clear",
                on_click=DocumentListState.clear_search,
                variant="soft",
            ),
            class_name="filter-grid",
        ),
        class_name="card search-card",
    )
