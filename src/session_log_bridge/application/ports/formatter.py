"""Port for assembling the final message text of a session log entry."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from session_log_bridge.domain.entry import SessionLogEntry


@runtime_checkable
class MessageFormatterPort(Protocol):
    """Render ``entry`` into the single string handed to the facility."""

    def format(self, entry: SessionLogEntry) -> str:
        """Return the decorated message for ``entry``."""


__all__ = ["MessageFormatterPort"]
