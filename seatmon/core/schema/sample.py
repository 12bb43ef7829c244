from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

METRIC_LABEL = 'Sold seats'


def format_delta(change: int) -> str:
    """Render a signed change as ``(+N)``, ``(-N)`` or ``(no change)``."""
    if change > 0:
        return f'(+{change})'
    if change < 0:
        return f'({change})'
    return '(no change)'


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


@dataclass(frozen=True, slots=True)
class MetricSample:
    value: int
    previous: Optional[int]
    checked_at: datetime

    @property
    def change(self) -> Optional[int]:
        if self.previous is None:
            return None
        return self.value - self.previous

    @property
    def delta_annotation(self) -> Optional[str]:
        change = self.change
        if change is None:
            return None
        return format_delta(change)

    @property
    def summary(self) -> str:
        text = f'{METRIC_LABEL}: {self.value}'
        annotation = self.delta_annotation
        if annotation is None:
            return text
        return f'{text} {annotation}'
