import logging
import sys
from datetime import datetime, timezone
from typing import Any

from seatmon.core.ports.logger import Logger
from seatmon.core.schema.sample import format_timestamp


class _TimestampFormatter(logging.Formatter):
    """Renders ``[<timestamp>] <message> | key=value ...``."""

    def format(self, record: logging.LogRecord) -> str:
        context = dict(getattr(record, 'context', None) or {})
        timestamp = context.pop('timestamp', None)
        if timestamp is None:
            timestamp = format_timestamp(
                datetime.fromtimestamp(record.created, tz=timezone.utc)
            )
        line = f'[{timestamp}] {record.getMessage()}'
        if context:
            pairs = ' '.join(f'{key}={value!r}' for key, value in context.items())
            line = f'{line} | {pairs}'
        if record.exc_info:
            line = f'{line}\n{self.formatException(record.exc_info)}'
        return line


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self._max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno <= self._max_level


class ConsoleLogger(Logger):
    """Info and below go to stdout, warnings and errors to stderr."""

    def __init__(self, name: str, level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            formatter = _TimestampFormatter()

            stdout_handler = logging.StreamHandler(sys.stdout)
            stdout_handler.setFormatter(formatter)
            stdout_handler.addFilter(_MaxLevelFilter(logging.INFO))
            self._logger.addHandler(stdout_handler)

            stderr_handler = logging.StreamHandler(sys.stderr)
            stderr_handler.setFormatter(formatter)
            stderr_handler.setLevel(logging.WARNING)
            self._logger.addHandler(stderr_handler)
        self._logger.propagate = False

    def debug(self, message: str, **context: Any) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context: Any) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context: Any) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, **context: Any) -> None:
        self._log(logging.ERROR, message, **context)

    def exception(self, message: str, **context: Any) -> None:
        self._logger.exception(message, extra={'context': context})

    def _log(self, level: int, message: str, **context: Any) -> None:
        self._logger.log(level, message, extra={'context': context})
