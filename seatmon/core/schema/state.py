from dataclasses import dataclass
from typing import Optional

from seatmon.core.ports.scheduler import TimerHandle


@dataclass(slots=True)
class PollState:
    interval_seconds: float
    is_running: bool = False
    pending_timer: Optional[TimerHandle] = None
    previous_metric: Optional[int] = None
    generation: int = 0
