from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator

import pytest
from rich.console import Console

from session_log_bridge.domain.categories import ROOT_NAMESPACE
from tests.fakes import CountingFormatter, RecordingFactory


@pytest.fixture
def recording_factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def counting_formatter() -> CountingFormatter:
    return CountingFormatter()


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=160, color_system=None)


@pytest.fixture
def bridged_logger() -> Iterator[logging.Logger]:
    """Root namespace stdlib logger restored to its original state afterwards."""

    target = logging.getLogger(ROOT_NAMESPACE)
    previous_level = target.level
    previous_handlers = list(target.handlers)
    try:
        yield target
    finally:
        target.setLevel(previous_level)
        target.handlers[:] = previous_handlers
