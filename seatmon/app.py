import signal
import sys
import threading
from typing import Optional, Sequence

from seatmon.cli import parse_arguments, usage_text
from seatmon.config import Settings, load_settings
from seatmon.core.exceptions import ArgumentError, ConfigurationError
from seatmon.core.jobs import SeatMonitor
from seatmon.core.ports.logger import Logger
from seatmon.infra import (
    ConsoleLogger,
    HttpDocumentSource,
    JmesPathQuery,
    LogfireLogger,
    SystemClock,
    ThreadingScheduler,
    configure_logfire,
)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        arguments = parse_arguments(args)
    except ArgumentError as error:
        print(f'Error: {error.message}', file=sys.stderr)
        return 1

    if arguments.show_help:
        print(usage_text())
        return 0

    try:
        settings = load_settings()
        logger = _build_logger(settings)
        interval_minutes = arguments.interval_minutes
        if interval_minutes is None:
            interval_minutes = settings.monitor.interval_minutes
        monitor = _build_monitor(settings, logger, interval_minutes)
    except Exception as error:
        print(f'Error: {error}', file=sys.stderr)
        return 1

    shutdown = threading.Event()
    _install_signal_handlers(monitor, shutdown)

    try:
        monitor.start()
    except Exception as error:
        print(f'Failed to start monitor: {error}', file=sys.stderr)
        monitor.stop()
        return 1

    _wait_for_shutdown(shutdown)
    return 0


def run() -> None:
    sys.exit(main())


def _build_logger(settings: Settings) -> Logger:
    if settings.logging.backend == 'console':
        return ConsoleLogger(settings.logging.name)
    if settings.logging.backend == 'logfire':
        if not settings.logging.logfire_token:
            raise ConfigurationError(
                'Logfire backend selected but SEATMON_LOGFIRE_TOKEN is not set'
            )
        configure_logfire(settings.logging.logfire_token, settings.logging.name)
        return LogfireLogger(settings.logging.name)
    raise ConfigurationError(f'Unknown logging backend {settings.logging.backend}')


def _build_monitor(
    settings: Settings,
    logger: Logger,
    interval_minutes: float,
) -> SeatMonitor:
    source = HttpDocumentSource(
        settings.monitor.url,
        timeout=settings.monitor.request_timeout,
    )
    return SeatMonitor(
        logger=logger,
        clock=SystemClock(),
        scheduler=ThreadingScheduler(),
        source=source,
        query=JmesPathQuery(settings.monitor.query),
        interval_minutes=interval_minutes,
    )


def _install_signal_handlers(
    monitor: SeatMonitor,
    shutdown: threading.Event,
) -> None:
    def _handle(signum, frame) -> None:
        monitor.stop()
        shutdown.set()

    for signum in SHUTDOWN_SIGNALS:
        signal.signal(signum, _handle)


def _wait_for_shutdown(shutdown: threading.Event) -> None:
    while not shutdown.wait(timeout=0.5):
        pass
