"""Use case routing a session log entry to the matching facility call.

Purpose
-------
Answer "should this be logged?" by delegating to the facility, and emit an
entry only after that answer is yes so message assembly is never wasted on
discarded lines.

Contents
--------
* ``_ENABLEMENT`` / ``_EMISSION`` – closed dispatch tables keyed by
  :class:`TargetLevel`.
* :class:`SessionLogDispatcher` – ``should_log`` and ``log`` operations.

System Role
-----------
Application-layer orchestrator wired by :class:`session_log_bridge.SessionLogBridge`.
It holds only read-only collaborators, so concurrent calls need no locking.
Failures raised by the facility are not caught here.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType

from session_log_bridge.application.ports.facility import LoggerHandle
from session_log_bridge.application.ports.formatter import MessageFormatterPort
from session_log_bridge.domain.categories import DEFAULT_CATEGORY
from session_log_bridge.domain.entry import SessionLogEntry
from session_log_bridge.domain.levels import SeverityTranslator, TargetLevel

from .registry import CategoryRegistry

_ENABLEMENT: Mapping[TargetLevel, Callable[[LoggerHandle], bool]] = MappingProxyType(
    {
        TargetLevel.TRACE: lambda handle: handle.is_trace_enabled(),
        TargetLevel.DEBUG: lambda handle: handle.is_debug_enabled(),
        TargetLevel.INFO: lambda handle: handle.is_info_enabled(),
        TargetLevel.WARN: lambda handle: handle.is_warn_enabled(),
        TargetLevel.ERROR: lambda handle: handle.is_error_enabled(),
    }
)

_EMISSION: Mapping[TargetLevel, Callable[[LoggerHandle, str], None]] = MappingProxyType(
    {
        TargetLevel.TRACE: lambda handle, msg: handle.trace(msg),
        TargetLevel.DEBUG: lambda handle, msg: handle.debug(msg),
        TargetLevel.INFO: lambda handle, msg: handle.info(msg),
        TargetLevel.WARN: lambda handle, msg: handle.warn(msg),
        TargetLevel.ERROR: lambda handle, msg: handle.error(msg),
    }
)
# OFF has no entry in either table: it is never queried and never emitted.


class SessionLogDispatcher:
    """Route entries to facility handles without owning any mutable state.

    Parameters
    ----------
    registry:
        Category → handle lookup built at startup.
    translator:
        Source severity → target level lookup.
    formatter:
        Collaborator assembling the final message text; called at most once per
        :meth:`log` and only for enabled entries.

    Examples
    --------
    >>> class Handle:
    ...     def is_debug_enabled(self):
    ...         return True
    ...     def debug(self, msg):
    ...         print(f"debug: {msg}")
    >>> class Factory:
    ...     def get_logger(self, name):
    ...         return Handle()
    >>> class Formatter:
    ...     def format(self, entry):
    ...         return entry.message.upper()
    >>> dispatcher = SessionLogDispatcher(CategoryRegistry(Factory()), SeverityTranslator(), Formatter())
    >>> dispatcher.log(SessionLogEntry(level=3, message="select 1", category="sql"))
    debug: SELECT 1
    >>> dispatcher.should_log(99, "sql")
    False
    """

    def __init__(
        self,
        registry: CategoryRegistry,
        translator: SeverityTranslator,
        formatter: MessageFormatterPort,
    ) -> None:
        self._registry = registry
        self._translator = translator
        self._formatter = formatter

    def resolve(self, source_level: int, category: str | None) -> tuple[LoggerHandle, TargetLevel]:
        """Return the handle and target level an entry would be routed to."""

        return self._registry.resolve(category), self._translator.translate(source_level)

    def should_log(self, source_level: int, category: str | None = DEFAULT_CATEGORY) -> bool:
        """Return ``True`` when the facility has the translated level enabled.

        ``OFF`` answers ``False`` without consulting the facility.
        """

        handle, level = self.resolve(source_level, category)
        return self._is_enabled(handle, level)

    def log(self, entry: SessionLogEntry) -> None:
        """Format and emit ``entry`` if, and only if, its level is enabled."""

        handle, level = self.resolve(entry.level, entry.category)
        if not self._is_enabled(handle, level):
            return
        message = self._formatter.format(entry)
        _EMISSION[level](handle, message)

    @staticmethod
    def _is_enabled(handle: LoggerHandle, level: TargetLevel) -> bool:
        query = _ENABLEMENT.get(level)
        if query is None:
            return False
        return bool(query(handle))


__all__ = ["SessionLogDispatcher"]
