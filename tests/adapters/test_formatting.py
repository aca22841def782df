from __future__ import annotations

from datetime import datetime, timezone

import pytest

from session_log_bridge.adapters.formatting import SupplementFormatter
from session_log_bridge.config import FormatOptions
from session_log_bridge.domain.entry import SessionLogEntry
from session_log_bridge.domain.levels import SessionLevel

_TS = datetime(2025, 9, 23, 12, 30, 15, 250000, tzinfo=timezone.utc)


def _entry(**overrides: object) -> SessionLogEntry:
    fields: dict[str, object] = {
        "level": SessionLevel.FINE,
        "message": "SELECT ID FROM EMPLOYEE WHERE NAME = {0}",
        "category": "sql",
        "parameters": ("bob",),
        "session": "ServerSession-42",
        "connection": "1138",
        "thread": "worker-1",
        "timestamp": _TS,
    }
    fields.update(overrides)
    return SessionLogEntry(**fields)  # type: ignore[arg-type]


def test_full_supplement_order() -> None:
    formatter = SupplementFormatter()

    text = formatter.format(_entry())

    assert text == (
        "2025-09-23 12:30:15.250000--ServerSession(ServerSession-42)--Connection(1138)--Thread(worker-1)--"
        "SELECT ID FROM EMPLOYEE WHERE NAME = bob"
    )


def test_placeholders_rendered_by_default() -> None:
    formatter = SupplementFormatter()

    assert formatter.body(_entry()) == "SELECT ID FROM EMPLOYEE WHERE NAME = bob"


def test_bind_values_hidden_by_default() -> None:
    formatter = SupplementFormatter()

    assert formatter.body(_entry(message="SELECT ID FROM EMPLOYEE WHERE NAME = ?")) == "SELECT ID FROM EMPLOYEE WHERE NAME = ?"


def test_bind_values_listed_when_enabled() -> None:
    formatter = SupplementFormatter(FormatOptions(parameters=True))

    body = formatter.body(_entry(message="SELECT ID FROM EMPLOYEE WHERE NAME = ? AND AGE > ?", parameters=("bob", 40)))

    assert body == "SELECT ID FROM EMPLOYEE WHERE NAME = ? AND AGE > ?\n\tbind => [bob, 40]"


def test_placeholders_ignore_bind_switch() -> None:
    formatter = SupplementFormatter(FormatOptions(parameters=True))

    assert formatter.body(_entry()) == "SELECT ID FROM EMPLOYEE WHERE NAME = bob"


@pytest.mark.parametrize(
    "switch, missing",
    [
        ("timestamp", "2025-09-23"),
        ("session", "ServerSession("),
        ("connection", "Connection("),
        ("thread", "Thread("),
    ],
)
def test_each_switch_removes_its_part(switch: str, missing: str) -> None:
    formatter = SupplementFormatter(FormatOptions(**{switch: False}))  # type: ignore[arg-type]

    text = formatter.format(_entry())

    assert missing not in text
    assert text.endswith("= bob")


def test_parts_without_values_are_skipped() -> None:
    formatter = SupplementFormatter(FormatOptions(timestamp=False))

    assert formatter.supplement(_entry(session=None, connection=None, thread="")) == ""


def test_custom_date_format() -> None:
    formatter = SupplementFormatter(FormatOptions(date_format="%H:%M", session=False, connection=False, thread=False))

    assert formatter.format(_entry(message="ping", parameters=())) == "12:30--ping"


@pytest.mark.parametrize("message", ["value {1}", "value {name}", "value {"])
def test_bad_placeholders_leave_raw_message(message: str) -> None:
    formatter = SupplementFormatter()

    assert formatter.body(_entry(message=message)) == message


def test_exception_traceback_is_appended() -> None:
    formatter = SupplementFormatter(FormatOptions(timestamp=False, session=False, connection=False, thread=False))
    try:
        raise LookupError("row missing")
    except LookupError as exc:
        error = exc

    text = formatter.format(_entry(message="query failed", parameters=(), exception=error))

    first, _, rest = text.partition("\n")
    assert first == "query failed"
    assert "Traceback (most recent call last)" in rest
    assert rest.endswith("LookupError: row missing")


def test_exception_without_message() -> None:
    formatter = SupplementFormatter(FormatOptions(timestamp=False, session=False, connection=False, thread=False))

    text = formatter.format(_entry(message="", parameters=(), exception=ValueError("bad")))

    assert text == "ValueError: bad"
