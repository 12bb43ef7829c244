from collections.abc import Iterable
from datetime import datetime, timedelta

from seatmon.core.ports.clock import Clock


class FakeClock(Clock):
    def __init__(
        self,
        now_values: datetime | Iterable[datetime],
        step: timedelta | None = None,
    ) -> None:
        if isinstance(now_values, datetime):
            self._times = iter([now_values])
            self._repeat_last = True
        else:
            self._times = iter(now_values)
            self._repeat_last = False
        self._step = step
        self._last: datetime | None = None

    def now(self) -> datetime:
        try:
            self._last = next(self._times)
            return self._last
        except StopIteration:
            if self._repeat_last and self._last is not None:
                if self._step is not None:
                    self._last = self._last + self._step
                return self._last
            raise
