"""
Async controllers behind the Ledger UI pages.

- DocumentListController: filtered, paginated tax-document list with
  cancel/delete transitions
- PrintableDocumentAssembler: document + issuer assembly for printing
"""

from ledger_ui.controllers.document_list import DocumentListController
from ledger_ui.controllers.printable import PrintableDocumentAssembler

__all__ = ["DocumentListController", "PrintableDocumentAssembler"]
