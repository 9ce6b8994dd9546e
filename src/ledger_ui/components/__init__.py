"""
Reflex UI components for the Ledger UI.

- search_panel: Document search and filter inputs
- document_table: Paginated document table with row actions and dialogs
- printable_document: Fixed print layout for one document

All components are pure functions returning rx.Component trees bound to
the states in ledger_ui.state.
"""

from ledger_ui.components.document_table import document_table
from ledger_ui.components.printable_document import printable_document
from ledger_ui.components.search_panel import search_panel

__all__ = ["document_table", "printable_document", "search_panel"]
