"""
Local library modules shared by the Ledger UI.

Modules:
    logs: Logging utilities
    clients: HTTP client factory for the accounting backend
    fallbacks: Primary-or-default resolution with origin tracking
"""

from ledger_ui.lib import clients, fallbacks, logs

__all__ = ["clients", "fallbacks", "logs"]
