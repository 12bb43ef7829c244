from typing import Optional


class SeatmonError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ArgumentError(SeatmonError):
    pass


class ConfigurationError(SeatmonError):
    pass


class SourceError(SeatmonError):
    def __init__(self, message: str, url: Optional[str] = None) -> None:
        self.url = url
        super().__init__(message)


class SourceTimeoutError(SourceError):
    def __init__(
        self,
        message: str,
        timeout: float,
        url: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        super().__init__(message, url)


class DocumentParseError(SeatmonError):
    pass


class QueryError(SeatmonError):
    def __init__(self, message: str, expression: str) -> None:
        self.expression = expression
        super().__init__(message)
