from seatmon.infra.clock import SystemClock
from seatmon.infra.http import HttpDocumentSource
from seatmon.infra.logging import ConsoleLogger, LogfireLogger, configure_logfire
from seatmon.infra.query import JmesPathQuery
from seatmon.infra.timer import ThreadingScheduler

__all__ = [
    'HttpDocumentSource',
    'JmesPathQuery',
    'ConsoleLogger',
    'LogfireLogger',
    'configure_logfire',
    'SystemClock',
    'ThreadingScheduler',
]
