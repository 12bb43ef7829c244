from seatmon.core.ports.clock import Clock
from seatmon.core.ports.document_source import DocumentSource
from seatmon.core.ports.logger import Logger
from seatmon.core.ports.metric_query import MetricQuery
from seatmon.core.ports.scheduler import Scheduler, TimerHandle

__all__ = [
    "Logger",
    "Clock",
    "Scheduler",
    "TimerHandle",
    "DocumentSource",
    "MetricQuery",
]
