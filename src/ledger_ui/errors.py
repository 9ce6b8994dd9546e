"""Error taxonomy for backend calls made by the Ledger UI."""


class LedgerUIError(Exception):
    """Base class for every error raised by the client layer."""


class TransportError(LedgerUIError):
    """Network failure, timeout, unexpected status or malformed payload."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ValidationError(LedgerUIError, ValueError):
    """The backend (or a local invariant) rejected the supplied parameters."""


class NotFoundError(LedgerUIError):
    """The requested document does not exist or could not be fetched."""


class LoadError(LedgerUIError):
    """Assembling a printable document failed; the cause is chained."""
