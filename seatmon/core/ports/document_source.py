from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DocumentSource(Protocol):
    @property
    def url(self) -> str: ...

    def fetch(self) -> Any:
        ...
