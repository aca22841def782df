"""Facility ports describing the external logging contract.

Purpose
-------
Define what the bridge needs from the external logging facility: a factory
returning named handles, and per-handle enablement queries and emission calls
for each of the five target levels.

Contents
--------
* :class:`LoggerHandle` – per-logger enablement and emission protocol.
* :class:`LoggerFactoryPort` – factory resolving namespaced names to handles.

System Role
-----------
Keeps the dispatcher independent of any concrete logging library. The stdlib
adapter implements these protocols; tests supply recording fakes. The bridge
never configures the facility, so no setup methods appear here.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerHandle(Protocol):
    """Externally owned logger answering enablement queries and emitting text."""

    def is_trace_enabled(self) -> bool: ...

    def is_debug_enabled(self) -> bool: ...

    def is_info_enabled(self) -> bool: ...

    def is_warn_enabled(self) -> bool: ...

    def is_error_enabled(self) -> bool: ...

    def trace(self, msg: str) -> None: ...

    def debug(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def error(self, msg: str) -> None: ...


@runtime_checkable
class LoggerFactoryPort(Protocol):
    """Return the facility logger registered under ``name``."""

    def get_logger(self, name: str) -> LoggerHandle:
        """Return a handle for the namespaced logger ``name``."""


__all__ = ["LoggerFactoryPort", "LoggerHandle"]
