"""Standard-library :mod:`logging` implementation of the facility ports.

Purpose
-------
Use Python's :mod:`logging` module as the external facility: handles wrap
``logging.getLogger(name)``, enablement follows each logger's effective level,
and emission goes through :meth:`logging.Logger.log`.

Contents
--------
* :func:`install_trace_level` – registers the ``TRACE`` level name.
* :class:`StdlibLoggerHandle` – :class:`LoggerHandle` over a stdlib logger.
* :class:`StdlibLoggerFactory` – :class:`LoggerFactoryPort` returning handles.

System Role
-----------
Default facility for :class:`session_log_bridge.SessionLogBridge`. Handlers,
levels and propagation remain the host application's business; nothing in
this module calls ``setLevel`` or ``addHandler``.
"""

from __future__ import annotations

import logging

from session_log_bridge.application.ports.facility import LoggerFactoryPort, LoggerHandle
from session_log_bridge.domain.levels import TRACE, TargetLevel


def install_trace_level() -> None:
    """Register ``TRACE`` with :mod:`logging` unless a name is already set."""

    if logging.getLevelName(TRACE) == f"Level {TRACE}":
        logging.addLevelName(TRACE, "TRACE")


class StdlibLoggerHandle(LoggerHandle):
    """Adapt a :class:`logging.Logger` to the facility handle protocol.

    Examples
    --------
    >>> import logging
    >>> handle = StdlibLoggerHandle(logging.getLogger("persistence.logging.doc"))
    >>> handle.name
    'persistence.logging.doc'
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def logger(self) -> logging.Logger:
        """Return the wrapped stdlib logger."""

        return self._logger

    def is_enabled(self, level: TargetLevel) -> bool:
        return self._logger.isEnabledFor(level.to_python_level())

    def is_trace_enabled(self) -> bool:
        return self.is_enabled(TargetLevel.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_enabled(TargetLevel.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_enabled(TargetLevel.INFO)

    def is_warn_enabled(self) -> bool:
        return self.is_enabled(TargetLevel.WARN)

    def is_error_enabled(self) -> bool:
        return self.is_enabled(TargetLevel.ERROR)

    def trace(self, msg: str) -> None:
        self._emit(TargetLevel.TRACE, msg)

    def debug(self, msg: str) -> None:
        self._emit(TargetLevel.DEBUG, msg)

    def info(self, msg: str) -> None:
        self._emit(TargetLevel.INFO, msg)

    def warn(self, msg: str) -> None:
        self._emit(TargetLevel.WARN, msg)

    def error(self, msg: str) -> None:
        self._emit(TargetLevel.ERROR, msg)

    def _emit(self, level: TargetLevel, msg: str) -> None:
        self._logger.log(level.to_python_level(), msg)

    def __repr__(self) -> str:
        return f"StdlibLoggerHandle({self._logger.name!r})"


class StdlibLoggerFactory(LoggerFactoryPort):
    """Hand out :class:`StdlibLoggerHandle` instances by logger name."""

    def __init__(self) -> None:
        install_trace_level()

    def get_logger(self, name: str) -> StdlibLoggerHandle:
        """Return a handle wrapping ``logging.getLogger(name)``."""

        return StdlibLoggerHandle(logging.getLogger(name))


__all__ = ["StdlibLoggerFactory", "StdlibLoggerHandle", "install_trace_level"]
