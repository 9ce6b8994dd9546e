"""
Logging utilities for the Ledger UI.

Every module obtains its logger through logger(__file__) so that output
shares one format and one level, taken from the LOG_LEVEL environment
variable.
"""

import logging
import os
from pathlib import Path

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    File paths (e.g. __file__) are reduced to the module stem.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = f"ledger_ui.{Path(name).stem}"

    log = logging.getLogger(name)

    if not log.handlers:
        log.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        log.addHandler(handler)

    return log
