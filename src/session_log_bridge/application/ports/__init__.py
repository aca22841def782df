"""Protocols the application layer depends on."""

from __future__ import annotations

from .facility import LoggerFactoryPort, LoggerHandle
from .formatter import MessageFormatterPort

__all__ = ["LoggerFactoryPort", "LoggerHandle", "MessageFormatterPort"]
