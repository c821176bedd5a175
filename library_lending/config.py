"""
config.py

Defaults shared by the lending components and the logging setup helper.
"""

from __future__ import annotations

import logging
import os
from typing import Dict

# Configuration
FALLBACK_LOAN_DAYS = 14
LOG_FORMAT = "%(levelname)s: %(message)s"
AVAILABILITY_LABELS: Dict[bool, str] = {True: "Available", False: "Issued"}


def _loan_days_from_env(default: int = FALLBACK_LOAN_DAYS) -> int:
    """
    Read the default loan length from LIBRARY_LOAN_DAYS.

    Non-integer or non-positive values fall back to `default`.
    """
    raw = os.environ.get("LIBRARY_LOAN_DAYS", "").strip()
    if not raw:
        return default
    try:
        days = int(raw)
    except ValueError:
        return default
    return days if days > 0 else default


DEFAULT_LOAN_DAYS = _loan_days_from_env()


def configure_logging(level: int = logging.INFO) -> None:
    """
    Install a basic stream handler on the root logger.

    Library modules only create loggers; applications call this once at startup.
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
