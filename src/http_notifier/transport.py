"""Transports that execute notification requests."""

import logging
from types import TracebackType
from typing import Protocol

import httpx

from http_notifier.errors import TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to send a request and return its response.

    Implementations raise ``TransportError`` when the request cannot be
    delivered.
    """

    def execute(self, request: httpx.Request) -> httpx.Response: ...


class HttpxTransport:
    """Send requests through an ``httpx.Client``.

    A client passed in is shared and left open on ``close()``; otherwise the
    transport creates and owns one.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = client is None
        self._client = (
            client if client is not None else httpx.Client(timeout=timeout)
        )

    def execute(self, request: httpx.Request) -> httpx.Response:
        """Send *request* and return the fully read response."""
        try:
            return self._client.send(request)
        except httpx.TransportError as exc:
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            raise TransportError(str(exc) or type(exc).__name__) from exc

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
