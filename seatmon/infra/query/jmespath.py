from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError

from seatmon.core.exceptions import ConfigurationError, QueryError
from seatmon.core.ports.metric_query import MetricQuery


class JmesPathQuery(MetricQuery):
    def __init__(self, expression: str) -> None:
        self._expression = expression
        try:
            self._compiled = jmespath.compile(expression)
        except JMESPathError as error:
            raise ConfigurationError(
                f'Invalid query expression {expression!r}: {error}'
            ) from error

    @property
    def expression(self) -> str:
        return self._expression

    def evaluate(self, document: Any) -> int:
        try:
            result = self._compiled.search(document)
        except JMESPathError as error:
            raise QueryError(
                f'Query evaluation failed: {error}',
                self._expression,
            ) from error
        if isinstance(result, bool) or not isinstance(result, int):
            raise QueryError(
                f'Query returned {type(result).__name__}, expected an integer',
                self._expression,
            )
        return result
