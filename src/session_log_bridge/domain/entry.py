"""Session log entry handed over by the host framework.

Purpose
-------
Provide an immutable representation of a single host log call so the
dispatcher can inspect severity and category before anyone pays for message
assembly.

Contents
--------
* :class:`SessionLogEntry` dataclass.
* Utility function ``_ensure_aware`` for timestamp validation.

System Role
-----------
Sits in the domain layer. Entries are created per log call, consumed
synchronously by the dispatcher, and never stored.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _ensure_aware(ts: datetime) -> datetime:
    """Validate that ``ts`` is timezone-aware and normalise to UTC."""
    if ts.tzinfo is None or ts.tzinfo.utcoffset(ts) is None:
        raise ValueError("timestamp must be timezone-aware")
    return ts.astimezone(timezone.utc)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _current_thread_name() -> str:
    return threading.current_thread().name


@dataclass(slots=True, frozen=True)
class SessionLogEntry:
    """Immutable log call captured from the host framework.

    Attributes
    ----------
    level:
        Host severity code, usually a :class:`~session_log_bridge.domain.levels.SessionLevel`.
        Any integer is accepted; unknown codes are simply never emitted.
    message:
        Raw message, possibly containing ``{0}``-style placeholders.
    category:
        Host category name; ``None`` or unknown names route to the default logger.
    parameters:
        Positional values substituted into ``message`` when the formatter is
        configured to show parameters.
    session:
        Identifier of the host session that produced the entry.
    connection:
        Identifier of the database connection involved, if any.
    thread:
        Name of the thread that created the entry.
    timestamp:
        Creation time, timezone-aware UTC.
    exception:
        Optional exception whose traceback accompanies the message.
    """

    level: int
    message: str = ""
    category: str | None = None
    parameters: tuple[Any, ...] = ()
    session: str | None = None
    connection: str | None = None
    thread: str = field(default_factory=_current_thread_name)
    timestamp: datetime = field(default_factory=_now)
    exception: BaseException | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "timestamp", _ensure_aware(self.timestamp))
        object.__setattr__(self, "parameters", tuple(self.parameters or ()))


__all__ = ["SessionLogEntry"]
