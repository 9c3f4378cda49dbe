"""HTTP transport protocol used by EnvoyClient.

The client only needs to issue a GET and read back a status code and a
body. Any object with that shape can be injected, which keeps the client
independent of a concrete HTTP library. ``aiohttp.ClientSession`` satisfies
:class:`HTTPRequester` as-is.

Example:
    class RecordingRequester:
        def __init__(self, response):
            self.urls = []
            self._response = response

        def get(self, url):
            self.urls.append(url)
            return self._response  # an async context manager

    client = EnvoyClient("192.168.1.50", session=RecordingRequester(resp))
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import Protocol, runtime_checkable


@runtime_checkable
class HTTPResponse(Protocol):
    """Response yielded by an :class:`HTTPRequester` request."""

    @property
    def status(self) -> int:  # pragma: no cover
        """HTTP status code of the response."""
        ...

    async def read(self) -> bytes:  # pragma: no cover
        """Read and return the complete response body."""
        ...


@runtime_checkable
class HTTPRequester(Protocol):
    """Anything that can issue an HTTP GET.

    ``get`` returns an async context manager. Entering it performs the
    request and yields an :class:`HTTPResponse`; leaving it releases the
    connection.
    """

    def get(self, url: str) -> AbstractAsyncContextManager[HTTPResponse]:  # pragma: no cover
        """Start a GET request for ``url``."""
        ...


__all__ = [
    "HTTPRequester",
    "HTTPResponse",
]
