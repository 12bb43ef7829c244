from seatmon.config.settings import (
    DEFAULT_QUERY,
    LoggingSettings,
    MonitorSettings,
    Settings,
)


def get_test_settings() -> Settings:
    return Settings(
        monitor=MonitorSettings(
            url="https://example.test/prices?id=event&publicKey=key",
            query=DEFAULT_QUERY,
            interval_minutes=5.0,
            request_timeout=10.0,
        ),
        logging=LoggingSettings(
            backend="console",
            name="seatmon-test",
            logfire_token=None,
        ),
    )
