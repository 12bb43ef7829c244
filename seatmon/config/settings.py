import os
from dataclasses import dataclass
from typing import Optional

from seatmon.core.exceptions import ConfigurationError

DEFAULT_URL = (
    'https://booking-service.services.ditix.app/api/public/v1.0/event/prices/'
    '?id=3249d4cb-c92b-4c68-bbb3-6a6213b7cbaf'
    '&publicKey=e16be350-4367-48d7-861d-00f4645b3cba'
)
DEFAULT_QUERY = "length(seats[?@[3] == 'SOLD'])"
DEFAULT_INTERVAL_MINUTES = 5.0
DEFAULT_REQUEST_TIMEOUT = 10.0


@dataclass(frozen=True, slots=True)
class MonitorSettings:
    url: str
    query: str
    interval_minutes: float
    request_timeout: float


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    backend: str
    name: str
    logfire_token: Optional[str]


@dataclass(frozen=True, slots=True)
class Settings:
    monitor: MonitorSettings
    logging: LoggingSettings


def load_settings() -> Settings:
    from dotenv import load_dotenv

    load_dotenv()

    url = _get_env_or_default('SEATMON_URL', DEFAULT_URL)
    query = _get_env_or_default('SEATMON_QUERY', DEFAULT_QUERY)
    interval_minutes = _env_float(
        'SEATMON_INTERVAL_MINUTES', DEFAULT_INTERVAL_MINUTES
    )
    request_timeout = _env_float('SEATMON_REQUEST_TIMEOUT', DEFAULT_REQUEST_TIMEOUT)

    logging_backend = _get_env_or_default('SEATMON_LOGGER_BACKEND', 'console').lower()
    logging_name = _get_env_or_default('SEATMON_LOGGER_NAME', 'seatmon')
    logfire_token = _get_env_or_default('SEATMON_LOGFIRE_TOKEN')

    if interval_minutes <= 0:
        raise ConfigurationError('SEATMON_INTERVAL_MINUTES must be greater than 0')
    if request_timeout <= 0:
        raise ConfigurationError('SEATMON_REQUEST_TIMEOUT must be greater than 0')

    return Settings(
        monitor=MonitorSettings(
            url=url,
            query=query,
            interval_minutes=interval_minutes,
            request_timeout=request_timeout,
        ),
        logging=LoggingSettings(
            backend=logging_backend,
            name=logging_name,
            logfire_token=logfire_token,
        ),
    )


def _get_env_or_default(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if not value:
        return default
    return value


def _env_float(name: str, default: float) -> float:
    value = _get_env_or_default(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as error:
        raise ConfigurationError(f'{name} must be a number, got {value!r}') from error
