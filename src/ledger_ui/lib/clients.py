"""
HTTP client factory for the accounting backend.

Environment variables used:
- LEDGER_UI_API_URL: Base URL of the backend API
- LEDGER_UI_HTTP_TIMEOUT: Request timeout in seconds
"""

import os

import httpx

DEFAULT_API_URL = "http://localhost:5121/api"
DEFAULT_TIMEOUT = 10.0


def api_url() -> str:
    """Return the configured backend base URL without a trailing slash."""
    return os.getenv("LEDGER_UI_API_URL", DEFAULT_API_URL).rstrip("/")


def http_timeout() -> float:
    """Return the configured request timeout in seconds."""
    return float(os.getenv("LEDGER_UI_HTTP_TIMEOUT", str(DEFAULT_TIMEOUT)))


def http_client(
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Return a new AsyncClient for the backend.

    Args:
        base_url: Overrides LEDGER_UI_API_URL.
        timeout: Overrides LEDGER_UI_HTTP_TIMEOUT.
        transport: Optional transport, e.g. httpx.MockTransport in tests.

    Returns:
        AsyncClient with JSON headers. The caller owns it and must aclose() it.
    """
    return httpx.AsyncClient(
        base_url=base_url or api_url(),
        timeout=timeout if timeout is not None else http_timeout(),
        headers={"Accept": "application/json", "Content-Type": "application/json"},
        follow_redirects=True,
        transport=transport,
    )
