"""Session log façade that wires domain, application, and adapter layers together.

Purpose
-------
Expose the object a host persistence framework installs as its session log.
Construction is the composition root: it builds the category registry and the
severity translator exactly once, then every ``log``/``should_log`` call runs
through the stateless dispatcher.

Contents
--------
* :class:`SessionLogBridge` – façade with ``log``, ``should_log`` and host
  convenience calls.
* :func:`summary_info` – metadata banner used by the CLI.

System Role
-----------
Outer shell of the package. Policy stays in the inner layers; the façade only
picks default collaborators (stdlib :mod:`logging` and the supplement
formatter) when the host does not provide its own.
"""

from __future__ import annotations

import logging
from typing import Any

from .adapters.formatting import SupplementFormatter
from .adapters.stdlib import StdlibLoggerFactory
from .application.ports import LoggerFactoryPort, LoggerHandle, MessageFormatterPort
from .application.use_cases import CategoryRegistry, SessionLogDispatcher
from .config import FormatOptions
from .domain import DEFAULT_CATEGORY, SessionLogEntry, SeverityTranslator, TargetLevel

logger = logging.getLogger(__name__)


class SessionLogBridge:
    """Forward host session log entries to the external logging facility.

    The facility decides which levels are enabled; the bridge only translates
    severities, routes categories, and skips formatting for disabled entries.

    Parameters
    ----------
    factory:
        Facility factory; defaults to :class:`StdlibLoggerFactory`.
    formatter:
        Message assembly collaborator; defaults to :class:`SupplementFormatter`
        configured from the environment via :meth:`FormatOptions.from_env`.

    Examples
    --------
    >>> bridge = SessionLogBridge()
    >>> bridge.translate(3)
    <TargetLevel.DEBUG: 'debug'>
    >>> bridge.get_logger("not-a-category") is bridge.get_logger("default")
    True
    >>> bridge.should_log(8)
    False
    """

    def __init__(
        self,
        factory: LoggerFactoryPort | None = None,
        formatter: MessageFormatterPort | None = None,
    ) -> None:
        self._factory = factory if factory is not None else StdlibLoggerFactory()
        self._formatter = formatter if formatter is not None else SupplementFormatter(FormatOptions.from_env())
        self._registry = CategoryRegistry(self._factory)
        self._translator = SeverityTranslator()
        self._dispatcher = SessionLogDispatcher(self._registry, self._translator, self._formatter)
        logger.debug(
            "session log bridge ready",
            extra={"factory": type(self._factory).__name__, "formatter": type(self._formatter).__name__},
        )

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry

    @property
    def translator(self) -> SeverityTranslator:
        return self._translator

    @property
    def formatter(self) -> MessageFormatterPort:
        return self._formatter

    def log(self, entry: SessionLogEntry) -> None:
        """Emit ``entry`` if the facility has its translated level enabled."""

        self._dispatcher.log(entry)

    def should_log(self, level: int, category: str | None = DEFAULT_CATEGORY) -> bool:
        """Return ``True`` when an entry at ``level`` in ``category`` would be emitted."""

        return self._dispatcher.should_log(level, category)

    def log_message(
        self,
        level: int,
        message: str,
        *parameters: Any,
        category: str | None = None,
        session: str | None = None,
        connection: str | None = None,
    ) -> None:
        """Build an entry from plain arguments and log it.

        The entry is only constructed once the enablement check has passed.
        """

        if not self.should_log(level, category):
            return
        self.log(
            SessionLogEntry(
                level=level,
                message=message,
                category=category,
                parameters=parameters,
                session=session,
                connection=connection,
            )
        )

    def log_throwable(
        self,
        level: int,
        exc: BaseException,
        *,
        category: str | None = None,
        session: str | None = None,
    ) -> None:
        """Log ``exc`` with its traceback at ``level``."""

        if not self.should_log(level, category):
            return
        self.log(SessionLogEntry(level=level, category=category, session=session, exception=exc))

    def get_logger(self, category: str | None = DEFAULT_CATEGORY) -> LoggerHandle:
        """Return the facility handle ``category`` is routed to."""

        return self._registry.resolve(category)

    def translate(self, level: int) -> TargetLevel:
        """Return the facility level ``level`` maps to (``OFF`` when unmapped)."""

        return self._translator.translate(level)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["SessionLogBridge", "summary_info"]
