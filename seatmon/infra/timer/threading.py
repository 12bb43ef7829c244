import threading
from typing import Callable

from seatmon.core.ports.scheduler import Scheduler, TimerHandle


class ThreadingScheduler(Scheduler):
    def __init__(self, name: str = 'SeatMonitorTimer') -> None:
        self._name = name

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.name = self._name
        timer.daemon = True
        timer.start()
        return timer
