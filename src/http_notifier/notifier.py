"""HTTP request notifier."""

import logging
from collections.abc import Mapping
from types import TracebackType
from typing import Any

import httpx

from http_notifier.base import Notifier
from http_notifier.config import NotificationConfig
from http_notifier.errors import ConfigurationError, DeliveryFailure
from http_notifier.transport import HttpxTransport, Transport

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST", "PUT", "DELETE"})
_BODY_METHODS = frozenset({"POST", "PUT"})


def _validate_url(url: str | None) -> str:
    if url is None or not url.strip() or any(c.isspace() for c in url):
        raise ConfigurationError(f"Invalid URL: {url}")
    return url


def _validate_method(method: str | None) -> str:
    if method is None or method.upper() not in SUPPORTED_METHODS:
        raise ConfigurationError(f"Unsupported HTTP method: {method}")
    return method.upper()


def _encode_content_type(content_type: str) -> bytes:
    try:
        return content_type.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ConfigurationError(
            f"Invalid content type: {content_type}"
        ) from exc


def build_request(config: NotificationConfig) -> httpx.Request:
    """Validate *config* and build the request it describes.

    Only POST and PUT carry a body, and only when one is configured. The
    content type is sent alongside a body and never on its own.
    """
    url = _validate_url(config.url)
    method = _validate_method(config.method)

    headers: dict[str, bytes] = {}
    content: bytes | None = None
    if method in _BODY_METHODS and config.body:
        # No default Content-Type; the body is always sent as UTF-8.
        content = config.body.encode("utf-8")
        if config.content_type:
            content_type = _encode_content_type(config.content_type)
            headers["Content-Type"] = content_type

    try:
        return httpx.Request(method, url, headers=headers, content=content)
    except httpx.InvalidURL as exc:
        raise ConfigurationError(f"Invalid URL: {url}") from exc


def notify(config: NotificationConfig, transport: Transport) -> bool:
    """Send the notification described by *config* through *transport*.

    Returns True if the target answered with a 2xx status and False if it
    answered otherwise or could not be reached. A ``ConfigurationError`` is
    raised before anything is sent.
    """
    request = build_request(config)
    try:
        response = transport.execute(request)
    except (DeliveryFailure, httpx.TransportError, OSError):
        logger.exception("Notification %s %s failed", request.method, request.url)
        return False

    success = 200 <= response.status_code < 300
    if success:
        logger.info(
            "Notification %s %s delivered (status %d)",
            request.method,
            request.url,
            response.status_code,
        )
    else:
        logger.warning(
            "Notification %s %s rejected (status %d)",
            request.method,
            request.url,
            response.status_code,
        )
    return success


class HttpNotifier(Notifier):
    """Send a notification as a single configurable HTTP request."""

    def __init__(
        self,
        config: NotificationConfig,
        transport: Transport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.config = config
        self._owned: HttpxTransport | None = None
        if transport is None:
            transport = self._owned = HttpxTransport(timeout=timeout)
        self.transport: Transport = transport

    def post_notification(
        self,
        trigger: str,
        execution_data: Mapping[str, Any],
        config: Mapping[str, Any] | None = None,
    ) -> bool:
        """Send the configured request.

        The trigger and execution data do not change the request.
        """
        logger.debug("Notification triggered by %r", trigger)
        return notify(self.config, self.transport)

    def close(self) -> None:
        """Close the transport if this notifier created it."""
        if self._owned is not None:
            self._owned.close()

    def __enter__(self) -> "HttpNotifier":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
