"""Severity vocabularies on both sides of the bridge.

Purpose
-------
Name the host framework's integer severity codes and the external facility's
target levels, and own the fixed table translating one into the other.

Contents
--------
* :class:`SessionLevel` – integer severity codes carried by session log entries.
* :class:`TargetLevel` – facility severities including the ``OFF`` sentinel.
* :class:`SeverityTranslator` – total lookup from source code to target level.

System Role
-----------
Leaf component of the domain layer. The dispatcher relies on
:meth:`SeverityTranslator.translate` never failing, so unknown codes collapse
to :attr:`TargetLevel.OFF` instead of raising.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any

TRACE = 5
#: Numeric stdlib level used for :attr:`TargetLevel.TRACE`.


class SessionLevel(IntEnum):
    """Severity codes emitted by the host persistence framework."""

    ALL = 0
    FINEST = 1
    FINER = 2
    FINE = 3
    CONFIG = 4
    INFO = 5
    WARNING = 6
    SEVERE = 7
    OFF = 8


class TargetLevel(Enum):
    """Severities understood by the external logging facility."""

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    OFF = "off"

    @property
    def emits(self) -> bool:
        """Return ``False`` only for :attr:`OFF`, which never reaches a sink."""

        return self is not TargetLevel.OFF

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level.

        ``OFF`` maps above ``CRITICAL`` so no stdlib logger ever enables it.
        """

        return _PYTHON_LEVELS[self]

    @classmethod
    def from_name(cls, name: str) -> "TargetLevel":
        normalized = name.strip().upper()
        if normalized == "WARNING":
            normalized = "WARN"
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown target level: {name!r}") from exc


_PYTHON_LEVELS = {
    TargetLevel.TRACE: TRACE,
    TargetLevel.DEBUG: logging.DEBUG,
    TargetLevel.INFO: logging.INFO,
    TargetLevel.WARN: logging.WARNING,
    TargetLevel.ERROR: logging.ERROR,
    TargetLevel.OFF: logging.CRITICAL + 10,
}


_SEVERITY_TABLE = {
    SessionLevel.ALL: TargetLevel.TRACE,
    SessionLevel.FINEST: TargetLevel.TRACE,
    SessionLevel.FINER: TargetLevel.TRACE,
    SessionLevel.FINE: TargetLevel.DEBUG,
    SessionLevel.CONFIG: TargetLevel.INFO,
    SessionLevel.INFO: TargetLevel.INFO,
    SessionLevel.WARNING: TargetLevel.WARN,
    SessionLevel.SEVERE: TargetLevel.ERROR,
}
# Source codes absent from this table (OFF included) translate to TargetLevel.OFF.


class SeverityTranslator:
    """Translate host severity codes into facility levels.

    The table is copied into a read-only mapping at construction and never
    changes afterwards, so one instance can be shared across threads.

    Examples
    --------
    >>> translator = SeverityTranslator()
    >>> translator.translate(SessionLevel.FINE)
    <TargetLevel.DEBUG: 'debug'>
    >>> translator.translate(42)
    <TargetLevel.OFF: 'off'>
    """

    def __init__(self) -> None:
        self._table: Mapping[int, TargetLevel] = MappingProxyType({int(code): level for code, level in _SEVERITY_TABLE.items()})

    def translate(self, source_level: Any) -> TargetLevel:
        """Return the target level for ``source_level`` or ``OFF`` when unmapped."""

        if isinstance(source_level, bool) or not isinstance(source_level, int):
            return TargetLevel.OFF
        return self._table.get(int(source_level), TargetLevel.OFF)

    def items(self) -> Iterator[tuple[SessionLevel, TargetLevel]]:
        """Yield ``(source, target)`` pairs in ascending source order."""

        for code in sorted(self._table):
            yield SessionLevel(code), self._table[code]


__all__ = ["SessionLevel", "SeverityTranslator", "TRACE", "TargetLevel"]
