from seatmon.config.settings import (
    DEFAULT_INTERVAL_MINUTES,
    DEFAULT_QUERY,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_URL,
    LoggingSettings,
    MonitorSettings,
    Settings,
    load_settings,
)

__all__ = [
    'Settings',
    'MonitorSettings',
    'LoggingSettings',
    'load_settings',
    'DEFAULT_URL',
    'DEFAULT_QUERY',
    'DEFAULT_INTERVAL_MINUTES',
    'DEFAULT_REQUEST_TIMEOUT',
]
