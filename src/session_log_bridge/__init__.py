"""Public package surface of the session log bridge.

``SessionLogBridge`` is what a host persistence framework installs as its
session log; the remaining names let hosts build entries, plug in their own
facility or formatter, and inspect the fixed severity and category tables.
"""

from __future__ import annotations

from .adapters import RichConsoleSink, StdlibLoggerFactory, SupplementFormatter
from .application.ports import LoggerFactoryPort, LoggerHandle, MessageFormatterPort
from .bridge import SessionLogBridge, summary_info
from .config import FormatOptions
from .domain import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    ROOT_NAMESPACE,
    SessionLevel,
    SessionLogEntry,
    SeverityTranslator,
    TargetLevel,
)

__all__ = [
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "FormatOptions",
    "LoggerFactoryPort",
    "LoggerHandle",
    "MessageFormatterPort",
    "ROOT_NAMESPACE",
    "RichConsoleSink",
    "SessionLevel",
    "SessionLogBridge",
    "SessionLogEntry",
    "SeverityTranslator",
    "StdlibLoggerFactory",
    "SupplementFormatter",
    "TargetLevel",
    "summary_info",
]
