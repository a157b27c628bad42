"""Structured logging module for tvcode.

Provides configurable logging with JSON format support, file rotation and
per-file context tagging.
"""

from tvcode.logging.config import configure_logging
from tvcode.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
)
from tvcode.logging.handlers import JSONFormatter

__all__ = [
    "FileContextFilter",
    "JSONFormatter",
    "configure_logging",
    "file_context",
    "get_file_context",
]
