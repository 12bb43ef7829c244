from tests.fakes.clock import FakeClock
from tests.fakes.document_source import FakeDocumentSource
from tests.fakes.logger import FakeLogger
from tests.fakes.scheduler import FakeScheduler, FakeTimer

__all__ = [
    "FakeClock",
    "FakeDocumentSource",
    "FakeLogger",
    "FakeScheduler",
    "FakeTimer",
]
