"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the application logger, setup helper, and custom Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import TreeEventRichHandler

__all__ = [
    "LOGGER_NAME",
    "TreeEventRichHandler",
    "logger",
    "setup_logger",
]
