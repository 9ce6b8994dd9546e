"""
httpx implementation of DocumentService against the accounting backend.

Endpoints (relative to LEDGER_UI_API_URL):
- GET    {documents}?<criteria>     -> {items, totalCount, ...}
- POST   {documents}/{id}/cancel
- DELETE {documents}/{id}
- GET    {documents}/{id}           -> full document record
- GET    {issuer}                   -> issuer (company) record

Optional Environment Variables:
    LEDGER_UI_DOCUMENTS_PATH: Documents collection path (default /documents)
    LEDGER_UI_ISSUER_PATH: Issuer profile path (default /issuer-profile)

Status mapping:
- 400/422 -> ValidationError (message from the body's "error" field)
- 404     -> NotFoundError
- other non-2xx, network errors, timeouts, bad JSON -> TransportError
"""

import os
from typing import Any, Mapping

import httpx

from ledger_ui.errors import NotFoundError, TransportError, ValidationError
from ledger_ui.lib import clients, logs
from ledger_ui.models.common import FilterCriteria, PageResult
from ledger_ui.models.document import DocumentSummary
from ledger_ui.services.document_service import DocumentService

LOG = logs.logger(__file__)

_VALIDATION_STATUSES = {400, 422}


class HttpDocumentService(DocumentService):
    """
    Document service backed by the REST API.

    Attributes:
        documents_path: Path of the documents collection.
        issuer_path: Path of the issuer profile resource.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        documents_path: str | None = None,
        issuer_path: str | None = None,
    ) -> None:
        """
        Args:
            client: AsyncClient to use; one is created from the environment
                when omitted and closed by aclose().
            documents_path: Overrides LEDGER_UI_DOCUMENTS_PATH.
            issuer_path: Overrides LEDGER_UI_ISSUER_PATH.
        """
        self._owns_client = client is None
        self._client = client or clients.http_client()
        self.documents_path = (
            documents_path or os.getenv("LEDGER_UI_DOCUMENTS_PATH", "/documents")
        ).rstrip("/")
        self.issuer_path = issuer_path or os.getenv("LEDGER_UI_ISSUER_PATH", "/issuer-profile")

    async def list_documents(self, criteria: FilterCriteria) -> PageResult[DocumentSummary]:
        params = criteria.to_params()
        LOG.info("list_documents - params:%s", params)
        payload = await self._request("GET", self.documents_path, params=params)
        try:
            items = [DocumentSummary.from_wire(item) for item in payload.get("items") or []]
            return PageResult(
                items=items,
                total_count=int(payload.get("totalCount", 0)),
                page=int(payload.get("page") or criteria.page),
                page_size=int(payload.get("pageSize") or criteria.page_size),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise TransportError(f"Malformed document list response: {exc}") from exc

    async def cancel_document(self, document_id: int) -> None:
        LOG.info("cancel_document - id:%s", document_id)
        await self._request("POST", f"{self.documents_path}/{document_id}/cancel")

    async def delete_document(self, document_id: int) -> None:
        LOG.info("delete_document - id:%s", document_id)
        await self._request("DELETE", f"{self.documents_path}/{document_id}")

    async def get_document(self, document_id: int) -> Mapping[str, Any]:
        try:
            return await self._request("GET", f"{self.documents_path}/{document_id}")
        except ValidationError as exc:
            raise NotFoundError(f"Document {document_id} could not be fetched: {exc}") from exc
        except TransportError as exc:
            # Any not-ok status on the primary fetch means the document is unavailable.
            if exc.status_code is None:
                raise
            raise NotFoundError(f"Document {document_id} could not be fetched: {exc}") from exc

    async def get_issuer_profile(self) -> Mapping[str, Any]:
        return await self._request("GET", self.issuer_path)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self, method: str, path: str, params: Mapping[str, str] | None = None
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON object (empty for no body)."""
        try:
            response = await self._client.request(method, path, params=params)
        except httpx.TimeoutException as exc:
            raise TransportError(f"{method} {path} timed out") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            LOG.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            if response.status_code in _VALIDATION_STATUSES:
                raise ValidationError(message)
            if response.status_code == 404:
                raise NotFoundError(message)
            raise TransportError(message, status_code=response.status_code)

        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(f"{method} {path} returned invalid JSON") from exc
        if not isinstance(payload, dict):
            raise TransportError(f"{method} {path} returned {type(payload).__name__}, expected object")
        return payload


def _error_message(response: httpx.Response) -> str:
    """Extract the backend's error text, falling back to the reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed: {response.status_code} {response.reason_phrase}"
