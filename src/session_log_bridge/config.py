"""Environment-driven configuration with optional ``.env`` support.

Purpose
-------
Read the message decoration switches the host framework exposes (timestamp,
thread, session, connection, parameters) from environment variables, and
optionally populate the environment from the nearest ``.env`` file first.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle deciding whether ``.env`` is loaded.
* :func:`should_use_dotenv` / :func:`enable_dotenv` – dotenv helpers.
* :class:`FormatOptions` – frozen switches consumed by the default formatter.

System Role
-----------
Configuration never reaches the level-enablement decision: thresholds belong
to the external facility. Only message decoration is configured here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "SESSION_LOG_USE_DOTENV"

ENV_TIMESTAMP = "SESSION_LOG_TIMESTAMP"
ENV_THREAD = "SESSION_LOG_THREAD"
ENV_SESSION = "SESSION_LOG_SESSION"
ENV_CONNECTION = "SESSION_LOG_CONNECTION"
ENV_PARAMETERS = "SESSION_LOG_PARAMETERS"
ENV_DATE_FORMAT = "SESSION_LOG_DATE_FORMAT"

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S.%f"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOCK = Lock()
_DOTENV_LOADED: Path | None = None


def parse_bool(name: str, value: str | None, default: bool) -> bool:
    """Interpret ``value`` as a boolean flag named ``name``.

    Examples
    --------
    >>> parse_bool("X", None, default=True)
    True
    >>> parse_bool("X", " Off ", default=True)
    False
    >>> parse_bool("X", "maybe", default=True)
    Traceback (most recent call last):
    ...
    ValueError: X must be a boolean flag, got 'maybe'
    """
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {value!r}")


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` should be loaded.

    An explicit CLI choice wins over the :data:`DOTENV_ENV_VAR` toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    return parse_bool(DOTENV_ENV_VAR, env_value, default=False)


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` without overriding existing variables.

    Returns the resolved path of the loaded file, or ``None`` when no file was
    found. Repeated calls reuse the first successful load.
    """
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        if _DOTENV_LOADED is not None:
            return _DOTENV_LOADED
        if search_from is not None:
            candidate = _search_upwards(search_from)
        else:
            found = find_dotenv(usecwd=True)
            candidate = Path(found) if found else None
        if candidate is None:
            return None
        load_dotenv(candidate, override=False)
        _DOTENV_LOADED = candidate.resolve()
        return _DOTENV_LOADED


def _search_upwards(start: Path) -> Path | None:
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    with _DOTENV_LOCK:
        _DOTENV_LOADED = None


@dataclass(slots=True, frozen=True)
class FormatOptions:
    """Decoration switches applied by the default message formatter.

    Attributes
    ----------
    timestamp, thread, session, connection:
        Include the corresponding supplement part when the entry has a value.
    parameters:
        Append bind values to messages without ``{0}``-style placeholders.
        Off by default, matching the host framework. Placeholders are always
        rendered.
    date_format:
        :meth:`datetime.strftime` pattern for the timestamp part.
    """

    timestamp: bool = True
    thread: bool = True
    session: bool = True
    connection: bool = True
    parameters: bool = False
    date_format: str = DEFAULT_DATE_FORMAT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FormatOptions":
        """Build options from ``environ`` (defaults to :data:`os.environ`).

        Examples
        --------
        >>> FormatOptions.from_env({"SESSION_LOG_PARAMETERS": "true", "SESSION_LOG_THREAD": "0"})
        FormatOptions(timestamp=True, thread=False, session=True, connection=True, parameters=True, date_format='%Y-%m-%d %H:%M:%S.%f')
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        date_format = env.get(ENV_DATE_FORMAT, "").strip() or defaults.date_format
        return cls(
            timestamp=parse_bool(ENV_TIMESTAMP, env.get(ENV_TIMESTAMP), defaults.timestamp),
            thread=parse_bool(ENV_THREAD, env.get(ENV_THREAD), defaults.thread),
            session=parse_bool(ENV_SESSION, env.get(ENV_SESSION), defaults.session),
            connection=parse_bool(ENV_CONNECTION, env.get(ENV_CONNECTION), defaults.connection),
            parameters=parse_bool(ENV_PARAMETERS, env.get(ENV_PARAMETERS), defaults.parameters),
            date_format=date_format,
        )


__all__ = [
    "DEFAULT_DATE_FORMAT",
    "DOTENV_ENV_VAR",
    "ENV_CONNECTION",
    "ENV_DATE_FORMAT",
    "ENV_PARAMETERS",
    "ENV_SESSION",
    "ENV_THREAD",
    "ENV_TIMESTAMP",
    "FormatOptions",
    "enable_dotenv",
    "parse_bool",
    "should_use_dotenv",
]
