import pytest

from tests.settings import get_test_settings

SEATMON_ENV_VARS = (
    "SEATMON_URL",
    "SEATMON_QUERY",
    "SEATMON_INTERVAL_MINUTES",
    "SEATMON_REQUEST_TIMEOUT",
    "SEATMON_LOGGER_BACKEND",
    "SEATMON_LOGGER_NAME",
    "SEATMON_LOGFIRE_TOKEN",
)


@pytest.fixture(autouse=True)
def _clean_seatmon_env(monkeypatch):
    for name in SEATMON_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings():
    return get_test_settings()
