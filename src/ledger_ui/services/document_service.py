"""
Abstract base class defining the document backend contract.

All document service implementations must extend DocumentService. Every
method is a coroutine: callers suspend until the backend answers.

Implementations:
- DemoDocumentService: In-memory documents for development and testing
- HttpDocumentService: The accounting backend's REST API via httpx
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping

from ledger_ui.models.common import FilterCriteria, PageResult
from ledger_ui.models.document import DocumentSummary


class DocumentService(ABC):
    """
    Abstract base class for document data access and lifecycle transitions.

    Failures are reported with the ledger_ui.errors taxonomy:
    TransportError, ValidationError and NotFoundError.
    """

    @abstractmethod
    async def list_documents(self, criteria: FilterCriteria) -> PageResult[DocumentSummary]:
        """
        Return one page of document summaries matching the criteria.

        Args:
            criteria: Filters, sort and pagination for the query.
        """

    @abstractmethod
    async def cancel_document(self, document_id: int) -> None:
        """Ask the backend to cancel a document (Paid -> Cancelled)."""

    @abstractmethod
    async def delete_document(self, document_id: int) -> None:
        """Ask the backend to delete a document."""

    @abstractmethod
    async def get_document(self, document_id: int) -> Mapping[str, Any]:
        """
        Return the full wire record of one document.

        Timestamps are left as the backend sent them; normalization happens
        in the models' parsers.
        """

    @abstractmethod
    async def get_issuer_profile(self) -> Mapping[str, Any]:
        """Return the wire record of the issuing company."""

    async def aclose(self) -> None:
        """Release any resources held by the service."""
        return None
