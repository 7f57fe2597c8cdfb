"""Bearer-token authentication for the notification endpoint.

Hosts triggering `POST /notify/{trigger}` must present `NOTIFY_API_KEY`,
since every accepted call sends a request to the configured target.
"""

import secrets
from collections.abc import Callable, Coroutine

from fastapi import Header, HTTPException

from http_notifier.config import Settings


def make_require_api_key(
    settings: Settings,
) -> Callable[..., Coroutine[None, None, None]]:
    """Create the dependency guarding notification dispatch."""

    async def require_api_key(
        authorization: str = Header(...),
    ) -> None:
        scheme, _, token = authorization.partition(" ")
        valid = secrets.compare_digest(
            token.encode("utf-8"), settings.notify_api_key.encode("utf-8")
        )
        if scheme.lower() != "bearer" or not valid:
            raise HTTPException(status_code=401, detail="Invalid API key")

    return require_api_key
