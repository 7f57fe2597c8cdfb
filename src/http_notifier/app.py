"""FastAPI application exposing the HTTP notifier."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import Depends, FastAPI, HTTPException

from http_notifier.config import Settings
from http_notifier.deps import make_require_api_key
from http_notifier.errors import ConfigurationError
from http_notifier.notifier import HttpNotifier

logger = logging.getLogger(__name__)

settings = Settings()  # type: ignore[call-arg]

notifier = HttpNotifier(
    settings.notification_config(),
    timeout=settings.http_timeout,
)

require_api_key = make_require_api_key(settings)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    yield
    notifier.close()


app = FastAPI(title="HTTP Notifier", lifespan=lifespan)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check."""
    return {"status": "ok"}


@app.post("/notify/{trigger}")
def post_notification(
    trigger: str,
    execution_data: dict[str, Any],
    _auth: None = Depends(require_api_key),
) -> dict[str, Any]:
    """Send the configured notification for *trigger*."""
    try:
        success = notifier.post_notification(trigger, execution_data)
    except ConfigurationError as exc:
        logger.error("Notification for %s not sent: %s", trigger, exc)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return {"status": "sent" if success else "failed", "success": success}


def main() -> None:
    """Entry point for the notifier service."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
