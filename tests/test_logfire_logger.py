import sys

import pytest

from seatmon.infra.logging import LogfireLogger, configure_logfire


class _RecordingLogfire:
    def __init__(self) -> None:
        self.configured: list[dict] = []
        self.tags: list[tuple[str, ...]] = []
        self.calls: list[tuple[str, str, dict]] = []

    def configure(self, **kwargs) -> None:
        self.configured.append(kwargs)

    def with_tags(self, *tags: str) -> "_RecordingLogfire":
        self.tags.append(tags)
        return self

    def _record(self, level: str):
        def log(message: str, **attributes) -> None:
            self.calls.append((level, message, attributes))

        return log

    def __getattr__(self, name: str):
        if name in ("debug", "info", "warn", "error", "exception"):
            return self._record(name)
        raise AttributeError(name)


@pytest.fixture
def fake_logfire(monkeypatch):
    recorder = _RecordingLogfire()
    monkeypatch.setitem(sys.modules, "logfire", recorder)
    return recorder


class TestConfigureLogfire:
    def test_passes_token_and_service_name(self, fake_logfire) -> None:
        configure_logfire("token", "seatmon")

        assert fake_logfire.configured == [
            {"token": "token", "service_name": "seatmon"}
        ]


class TestLogfireLogger:
    def test_tags_with_logger_name(self, fake_logfire) -> None:
        LogfireLogger("seatmon")

        assert fake_logfire.tags == [("seatmon",)]

    def test_forwards_levels_and_context(self, fake_logfire) -> None:
        logger = LogfireLogger("seatmon")

        logger.debug("Checking sold seats...", timestamp="t0")
        logger.info("Sold seats: 5 (+2)", timestamp="t1")
        logger.warning("Slow response")
        logger.error("Error: Request timeout", error_type="SourceTimeoutError")
        logger.exception("Error: boom")

        assert fake_logfire.calls == [
            ("debug", "Checking sold seats...", {"timestamp": "t0"}),
            ("info", "Sold seats: 5 (+2)", {"timestamp": "t1"}),
            ("warn", "Slow response", {}),
            ("error", "Error: Request timeout", {"error_type": "SourceTimeoutError"}),
            ("exception", "Error: boom", {}),
        ]

    def test_missing_library_raises_runtime_error(self, monkeypatch) -> None:
        monkeypatch.setitem(sys.modules, "logfire", None)

        with pytest.raises(RuntimeError, match="logfire library is not installed"):
            LogfireLogger("seatmon")
