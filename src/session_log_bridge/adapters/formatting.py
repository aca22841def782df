"""Default message formatter mirroring the host framework's decorations.

Why
---
The dispatcher only knows it must call a formatter once per emitted entry.
Hosts that do not bring their own assembly logic get this one, which prepends
the classic supplement (timestamp, session, connection, thread), renders
``{0}``-style parameters, and lists bind values when asked to.

Contents
--------
* :class:`SupplementFormatter` – :class:`MessageFormatterPort` implementation.
"""

from __future__ import annotations

import traceback

from session_log_bridge.application.ports.formatter import MessageFormatterPort
from session_log_bridge.config import FormatOptions
from session_log_bridge.domain.entry import SessionLogEntry

_SEPARATOR = "--"
_BIND_PREFIX = "\n\tbind => "


class SupplementFormatter(MessageFormatterPort):
    """Render entries as ``<supplement><message>[\\n<traceback>]``.

    Examples
    --------
    >>> from datetime import datetime, timezone
    >>> entry = SessionLogEntry(
    ...     level=5,
    ...     message="login {0}",
    ...     parameters=("alice",),
    ...     session="ServerSession-1",
    ...     thread="main",
    ...     timestamp=datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc),
    ... )
    >>> SupplementFormatter(FormatOptions(date_format="%H:%M")).format(entry)
    '12:00--ServerSession(ServerSession-1)--Thread(main)--login alice'
    >>> update = SessionLogEntry(level=3, message="UPDATE T SET A = ?", parameters=(7, "x"), thread="")
    >>> SupplementFormatter(FormatOptions(timestamp=False, parameters=True)).format(update)
    'UPDATE T SET A = ?\\n\\tbind => [7, x]'
    >>> SupplementFormatter(FormatOptions(timestamp=False)).format(update)
    'UPDATE T SET A = ?'
    """

    def __init__(self, options: FormatOptions | None = None) -> None:
        self._options = options if options is not None else FormatOptions()

    @property
    def options(self) -> FormatOptions:
        return self._options

    def format(self, entry: SessionLogEntry) -> str:
        """Return the supplement followed by the rendered message body."""

        text = self.supplement(entry) + self.body(entry)
        if entry.exception is not None:
            rendered = "".join(traceback.format_exception(type(entry.exception), entry.exception, entry.exception.__traceback__))
            text = f"{text}\n{rendered.rstrip()}" if text else rendered.rstrip()
        return text

    def supplement(self, entry: SessionLogEntry) -> str:
        """Return the decoration prefix, each part terminated by ``--``."""

        options = self._options
        parts: list[str] = []
        if options.timestamp:
            parts.append(entry.timestamp.strftime(options.date_format))
        if options.session and entry.session:
            parts.append(f"ServerSession({entry.session})")
        if options.connection and entry.connection:
            parts.append(f"Connection({entry.connection})")
        if options.thread and entry.thread:
            parts.append(f"Thread({entry.thread})")
        return "".join(part + _SEPARATOR for part in parts)

    def body(self, entry: SessionLogEntry) -> str:
        """Return the message with its parameters applied.

        Messages carrying ``{`` placeholders are always rendered. Any other
        message lists its parameters as bind values, and only when
        :attr:`FormatOptions.parameters` is on.
        """

        message = entry.message
        if not entry.parameters:
            return message
        if "{" in message:
            try:
                return message.format(*entry.parameters)
            except (AttributeError, IndexError, KeyError, ValueError):
                return message
        if self._options.parameters:
            values = ", ".join(str(value) for value in entry.parameters)
            return f"{message}{_BIND_PREFIX}[{values}]"
        return message


__all__ = ["SupplementFormatter"]
