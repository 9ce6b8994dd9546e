"""
Service factory for the Ledger UI.

This module provides the get_document_service() factory function that
returns the appropriate DocumentService implementation based on
configuration.

Available Implementations:
- demo: In-memory service with static documents (no backend required)
- http: REST client for the accounting backend (requires LEDGER_UI_API_URL)

The service is cached at the module level, so the same instance is reused
across all requests. Configure via LEDGER_UI_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict

from ledger_ui.lib import logs
from ledger_ui.services.document_service import DocumentService
from ledger_ui.services.document_service_demo import DemoDocumentService
from ledger_ui.services.document_service_http import HttpDocumentService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], DocumentService]] = {
    "demo": lambda: DemoDocumentService(),
    "http": lambda: HttpDocumentService(),
}


@cache
def get_document_service(kind: str | None = None) -> DocumentService:
    """Return the configured document service implementation."""
    resolved_kind = (kind or os.getenv("LEDGER_UI_SERVICE", "http")).lower()
    LOG.info("get_document_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown document service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "DemoDocumentService",
    "DocumentService",
    "HttpDocumentService",
    "get_document_service",
]
