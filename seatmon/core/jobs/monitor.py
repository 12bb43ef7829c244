import threading
from functools import partial
from typing import Optional

from seatmon.core.exceptions import ConfigurationError, SeatmonError
from seatmon.core.ports.clock import Clock
from seatmon.core.ports.document_source import DocumentSource
from seatmon.core.ports.logger import Logger
from seatmon.core.ports.metric_query import MetricQuery
from seatmon.core.ports.scheduler import Scheduler
from seatmon.core.schema.sample import MetricSample, format_timestamp
from seatmon.core.schema.state import PollState


class SeatMonitor:
    """Polls a document source and reports the sold seat count and its change.

    After each check resolves, successfully or not, the next check is armed as
    a one-shot timer. Checks never overlap and at most one timer is pending.
    """

    def __init__(
        self,
        logger: Logger,
        clock: Clock,
        scheduler: Scheduler,
        source: DocumentSource,
        query: MetricQuery,
        *,
        interval_minutes: float,
    ) -> None:
        if not interval_minutes > 0:
            raise ConfigurationError('Interval must be greater than 0')
        self._logger = logger
        self._clock = clock
        self._scheduler = scheduler
        self._source = source
        self._query = query
        self._interval_minutes = interval_minutes
        self._state = PollState(interval_seconds=interval_minutes * 60)
        self._lock = threading.RLock()

    @property
    def interval_seconds(self) -> float:
        return self._state.interval_seconds

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def previous_metric(self) -> Optional[int]:
        return self._state.previous_metric

    def start(self) -> None:
        with self._lock:
            if self._state.is_running:
                self._logger.info('Monitor is already running')
                return
            self._state.is_running = True
            self._state.generation += 1
            generation = self._state.generation

        self._logger.info(
            'Starting seat monitor',
            url=self._source.url,
            interval_minutes=self._interval_minutes,
            query=self._query.expression,
        )
        self._logger.info('Press Ctrl+C to stop')
        self._run_cycle(generation)

    def stop(self) -> None:
        with self._lock:
            if not self._state.is_running:
                return
            self._state.is_running = False
            if self._state.pending_timer is not None:
                self._state.pending_timer.cancel()
                self._state.pending_timer = None
        self._logger.info('Monitor stopped')

    def check_once(self) -> Optional[MetricSample]:
        checked_at = self._clock.now()
        timestamp = format_timestamp(checked_at)
        self._logger.info('Checking sold seats...', timestamp=timestamp)

        try:
            document = self._source.fetch()
            metric = self._query.evaluate(document)
        except SeatmonError as error:
            self._logger.error(
                f'Error: {error.message}',
                timestamp=timestamp,
                error_type=type(error).__name__,
            )
            return None
        except Exception as error:
            self._logger.exception(
                f'Error: {error}',
                timestamp=timestamp,
                error_type=type(error).__name__,
            )
            return None

        sample = MetricSample(
            value=metric,
            previous=self._state.previous_metric,
            checked_at=checked_at,
        )
        self._logger.info(sample.summary, timestamp=timestamp)
        self._state.previous_metric = metric
        return sample

    def _run_cycle(self, generation: int) -> None:
        self.check_once()
        self._schedule_next(generation)

    def _is_current(self, generation: int) -> bool:
        return self._state.is_running and self._state.generation == generation

    def _schedule_next(self, generation: int) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            if self._state.pending_timer is not None:
                return
            timer = self._scheduler.call_later(
                self._state.interval_seconds,
                partial(self._on_timer, generation),
            )
            # stop() may have run on this thread while the timer was being armed
            if self._is_current(generation):
                self._state.pending_timer = timer
                return
        timer.cancel()

    def _on_timer(self, generation: int) -> None:
        with self._lock:
            if not self._is_current(generation):
                return
            self._state.pending_timer = None
        self._run_cycle(generation)
