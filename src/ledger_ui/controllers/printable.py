"""
Printable document assembler for the print view.

load() fetches the document and the issuer profile concurrently. The
document is mandatory: if it cannot be fetched or normalized the load fails
with LoadError. The issuer is optional: any failure substitutes the fallback
issuer stamped with the load instant, and the choice is logged and kept in
`issuer_origin`.
"""

import asyncio
from datetime import datetime
from typing import Callable

from ledger_ui.errors import LoadError
from ledger_ui.lib import logs
from ledger_ui.lib.fallbacks import Origin, Sourced, with_fallback
from ledger_ui.models.common import LoadState
from ledger_ui.models.document import (
    IssuerProfile,
    PrintableDocument,
    PrintBundle,
    fallback_issuer,
    parse_issuer_profile,
    parse_printable_document,
)
from ledger_ui.services.document_service import DocumentService

LOG = logs.logger(__file__)


class PrintableDocumentAssembler:
    """
    Gathers one document and its issuer for rendering.

    State moves IDLE -> LOADING -> READY | FAILED on every load(). A load
    that settles after a newer one started leaves the state alone.

    Attributes:
        state: Current LoadState.
        bundle: Result of the last successful load while READY.
        error: Failure message while FAILED.
        issuer_origin: Whether the active issuer was fetched or substituted.
    """

    def __init__(
        self,
        service: DocumentService,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._service = service
        self._clock = clock
        self.state = LoadState.IDLE
        self.bundle: PrintBundle | None = None
        self.error: str | None = None
        self.issuer_origin: Origin | None = None
        self._issued = 0

    @property
    def print_title(self) -> str | None:
        return self.bundle.document.print_title if self.bundle else None

    async def load(self, document_id: int) -> PrintBundle:
        """
        Fetch, normalize and merge the document and issuer.

        Raises:
            LoadError: If the document cannot be fetched or normalized.
        """
        self._issued += 1
        ticket = self._issued
        self.state = LoadState.LOADING
        self.bundle = None
        self.error = None
        loaded_at = self._clock()
        LOG.info("Print load started - id:%s", document_id)

        document, issuer = await asyncio.gather(
            self._fetch_document(document_id),
            self._fetch_issuer(loaded_at),
            return_exceptions=True,
        )
        current = ticket == self._issued

        if isinstance(document, BaseException):
            LOG.warning("Print load failed - id:%s error:%s", document_id, document)
            if current:
                self.state = LoadState.FAILED
                self.error = str(document) or "Failed to load document"
            raise LoadError(f"Document {document_id} could not be loaded: {document}") from document
        if isinstance(issuer, BaseException):
            raise issuer

        bundle = PrintBundle(document=document, issuer=issuer.value)
        LOG.info("Print load ready - id:%s issuer_origin:%s", document_id, issuer.origin.value)
        if current:
            self.bundle = bundle
            self.issuer_origin = issuer.origin
            self.state = LoadState.READY
        else:
            LOG.info("Discarding stale print load - id:%s", document_id)
        return bundle

    async def _fetch_document(self, document_id: int) -> PrintableDocument:
        record = await self._service.get_document(document_id)
        return parse_printable_document(record)

    async def _fetch_issuer(self, loaded_at: datetime) -> Sourced[IssuerProfile]:
        async def _primary() -> IssuerProfile:
            return parse_issuer_profile(await self._service.get_issuer_profile())

        return await with_fallback(_primary, lambda: fallback_issuer(loaded_at), label="Issuer profile")
