from seatmon.core.schema.sample import (
    MetricSample,
    format_delta,
    format_timestamp,
)
from seatmon.core.schema.state import PollState

__all__ = [
    "PollState",
    "MetricSample",
    "format_delta",
    "format_timestamp",
]
