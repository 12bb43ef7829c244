import json
from typing import Any, Optional

import httpx

from seatmon.core.exceptions import (
    DocumentParseError,
    SourceError,
    SourceTimeoutError,
)
from seatmon.core.ports.document_source import DocumentSource

USER_AGENT = 'seatmon/0.1.0'


class HttpDocumentSource(DocumentSource):
    """Fetches a JSON document with a fresh client per request."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    def fetch(self) -> Any:
        try:
            with httpx.Client(
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                headers={'User-Agent': USER_AGENT, 'Accept': 'application/json'},
                transport=self._transport,
            ) as client:
                response = client.get(self._url)
                response.raise_for_status()
                body = response.content
        except httpx.TimeoutException as error:
            raise SourceTimeoutError(
                'Request timeout',
                self._timeout,
                self._url,
            ) from error
        except httpx.HTTPStatusError as error:
            raise SourceError(
                f'Request failed: HTTP {error.response.status_code}',
                self._url,
            ) from error
        except httpx.HTTPError as error:
            raise SourceError(f'Request failed: {error}', self._url) from error

        return self._parse(body)

    def _parse(self, body: bytes) -> Any:
        try:
            return json.loads(body)
        except ValueError as error:
            raise DocumentParseError(f'Failed to parse JSON: {error}') from error
