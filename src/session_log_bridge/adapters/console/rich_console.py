"""Rich-powered console sink for bridged session log records.

Purpose
-------
Give hosts (and the ``demo`` CLI command) a ready-made stdlib handler that
renders records under the bridge's root namespace through Rich.

Contents
--------
* :data:`_STYLE_MAP` - default level-to-style mapping, ``TRACE`` included.
* :class:`RichConsoleSink` - owns a :class:`rich.logging.RichHandler` and
  attaches it to a stdlib logger.

System Role
-----------
Host-side configuration helper. The bridge itself never attaches handlers or
sets thresholds; this sink is what a host would do instead.
"""

from __future__ import annotations

import logging
from typing import Mapping, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from session_log_bridge.domain.categories import ROOT_NAMESPACE
from session_log_bridge.domain.levels import TargetLevel

#: Default Rich styles keyed by :class:`TargetLevel`; stdlib names the warn level ``warning``.
_STYLE_MAP: Mapping[TargetLevel, str] = {
    TargetLevel.TRACE: "dim",
    TargetLevel.DEBUG: "green",
    TargetLevel.INFO: "cyan",
    TargetLevel.WARN: "yellow",
    TargetLevel.ERROR: "red",
}


def _theme_for(styles: Mapping[TargetLevel, str]) -> Theme:
    names = {TargetLevel.WARN: "warning"}
    return Theme({f"logging.level.{names.get(level, level.value)}": style for level, style in styles.items()})


class RichConsoleSink:
    """Render stdlib log records with Rich.

    Examples
    --------
    >>> from io import StringIO
    >>> console = Console(file=StringIO(), record=True, width=120)
    >>> sink = RichConsoleSink(console=console)
    >>> logger = sink.attach("persistence.logging.doc", TargetLevel.DEBUG)
    >>> logger.debug("select 1")
    >>> "select 1" in console.export_text()
    True
    >>> sink.detach("persistence.logging.doc")
    """

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        styles: MutableMapping[TargetLevel | str, str] | None = None,
    ) -> None:
        merged = dict(_STYLE_MAP)
        for key, value in (styles or {}).items():
            level = TargetLevel.from_name(key) if isinstance(key, str) else key
            merged[level] = value
        merged.pop(TargetLevel.OFF, None)
        self._theme = _theme_for(merged)
        self._borrowed = console is not None
        self._theme_pushed = False
        if console is not None:
            self._console = console
        else:
            self._console = Console(force_terminal=force_color or None, no_color=no_color, theme=self._theme)
        self._handler = RichHandler(
            console=self._console,
            show_time=False,
            show_path=False,
            markup=False,
        )
        self._previous_levels: dict[str, int] = {}

    @property
    def console(self) -> Console:
        return self._console

    @property
    def handler(self) -> RichHandler:
        return self._handler

    def attach(self, logger_name: str = ROOT_NAMESPACE, level: TargetLevel = TargetLevel.INFO) -> logging.Logger:
        """Attach the handler to ``logger_name`` and set its threshold to ``level``.

        A console passed in by the caller receives the level styles while at
        least one logger is attached.
        """

        if self._borrowed and not self._theme_pushed:
            self._console.push_theme(self._theme)
            self._theme_pushed = True
        target = logging.getLogger(logger_name)
        self._previous_levels.setdefault(logger_name, target.level)
        target.setLevel(level.to_python_level())
        if self._handler not in target.handlers:
            target.addHandler(self._handler)
        return target

    def detach(self, logger_name: str = ROOT_NAMESPACE) -> None:
        """Remove the handler from ``logger_name`` and restore its prior level."""

        target = logging.getLogger(logger_name)
        target.removeHandler(self._handler)
        if logger_name in self._previous_levels:
            target.setLevel(self._previous_levels.pop(logger_name))
        if self._theme_pushed and not self._previous_levels:
            self._console.pop_theme()
            self._theme_pushed = False


__all__ = ["RichConsoleSink"]
