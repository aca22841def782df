"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

import sys
from typing import Callable

name = "session_log_bridge"
title = "Route persistence-framework session logs through Python logging"
version = "0.1.0"
author = "session_log_bridge contributors"
shell_command = "session-log-bridge"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to stdout).

    Each line is passed to ``writer`` with its trailing newline.
    """

    emit = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n\n")
    for label, value in fields:
        emit(f"    {label:<{pad}} = {value}\n")
