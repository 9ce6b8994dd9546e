"""
Primary-or-default resolution for optional data sources.

A secondary source (such as the issuer profile shown on printed documents)
must never block the page that needs it. with_fallback() awaits the primary
loader and, on any failure, substitutes a declared default. The result
records where the value came from so the choice can be logged and inspected.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, TypeVar

from ledger_ui.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")


class Origin(str, Enum):
    """Where a resolved value came from."""

    FETCHED = "fetched"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class Sourced(Generic[T]):
    """A value together with its origin."""

    value: T
    origin: Origin
    reason: str | None = None

    @property
    def is_fallback(self) -> bool:
        return self.origin is Origin.FALLBACK


async def with_fallback(
    primary: Callable[[], Awaitable[T]],
    fallback: Callable[[], T],
    label: str,
) -> Sourced[T]:
    """
    Resolve a value from primary, or from fallback when primary fails.

    Args:
        primary: Coroutine factory producing the preferred value.
        fallback: Factory for the default, called only on failure.
        label: Name of the source used in log messages.

    Returns:
        Sourced value tagged FETCHED or FALLBACK.
    """
    try:
        value = await primary()
    except Exception as exc:
        LOG.warning("%s unavailable, using fallback: %s", label, exc, exc_info=True)
        return Sourced(value=fallback(), origin=Origin.FALLBACK, reason=str(exc))
    LOG.info("%s origin: %s", label, Origin.FETCHED.value)
    return Sourced(value=value, origin=Origin.FETCHED)
