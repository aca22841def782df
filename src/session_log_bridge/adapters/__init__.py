"""Concrete implementations of the application ports."""

from __future__ import annotations

from .console import RichConsoleSink
from .formatting import SupplementFormatter
from .stdlib import StdlibLoggerFactory, StdlibLoggerHandle, install_trace_level

__all__ = [
    "RichConsoleSink",
    "StdlibLoggerFactory",
    "StdlibLoggerHandle",
    "SupplementFormatter",
    "install_trace_level",
]
