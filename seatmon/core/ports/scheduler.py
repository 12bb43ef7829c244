from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class TimerHandle(Protocol):
    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Arms one-shot timers. Each call fires its callback at most once."""

    def call_later(
        self, delay: float, callback: Callable[[], None]
    ) -> TimerHandle: ...
