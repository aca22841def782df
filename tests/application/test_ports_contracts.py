from __future__ import annotations

import logging

from session_log_bridge.adapters.formatting import SupplementFormatter
from session_log_bridge.adapters.stdlib import StdlibLoggerFactory, StdlibLoggerHandle
from session_log_bridge.application.ports.facility import LoggerFactoryPort, LoggerHandle
from session_log_bridge.application.ports.formatter import MessageFormatterPort
from tests.fakes import CountingFormatter, RecordingFactory, RecordingHandle


def test_recording_fakes_satisfy_ports() -> None:
    assert isinstance(RecordingHandle("x"), LoggerHandle)
    assert isinstance(RecordingFactory(), LoggerFactoryPort)
    assert isinstance(CountingFormatter(), MessageFormatterPort)


def test_stdlib_adapters_satisfy_ports() -> None:
    factory = StdlibLoggerFactory()
    assert isinstance(factory, LoggerFactoryPort)
    assert isinstance(factory.get_logger("persistence.logging.contract"), LoggerHandle)
    assert isinstance(StdlibLoggerHandle(logging.getLogger("contract")), LoggerHandle)


def test_supplement_formatter_satisfies_port() -> None:
    assert isinstance(SupplementFormatter(), MessageFormatterPort)


def test_objects_missing_methods_do_not_satisfy_handle_port() -> None:
    class OnlyEmits:
        def info(self, msg: str) -> None:
            pass

    assert not isinstance(OnlyEmits(), LoggerHandle)
