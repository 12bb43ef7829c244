from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MetricQuery(Protocol):
    @property
    def expression(self) -> str: ...

    def evaluate(self, document: Any) -> int:
        ...
