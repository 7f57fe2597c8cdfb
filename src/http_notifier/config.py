"""Notification parameters and service settings."""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class NotificationConfig(BaseModel):
    """Parameters of a single notification request.

    Values are checked when the request is built, so an invalid URL or method
    is reported as a ``ConfigurationError`` rather than at construction time.
    """

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    method: str | None = "POST"
    content_type: str | None = None
    body: str | None = None


class Settings(BaseSettings):
    """Notifier service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    notification_url: str = ""
    notification_http_method: str = "POST"
    notification_content_type: str = ""
    notification_request_body: str = ""
    notify_api_key: str
    http_timeout: float = 10.0

    host: str = "0.0.0.0"
    port: int = 8002
    log_level: str = "info"

    def notification_config(self) -> NotificationConfig:
        """Build the notification parameters from these settings."""
        return NotificationConfig(
            url=self.notification_url,
            method=self.notification_http_method,
            content_type=self.notification_content_type or None,
            body=self.notification_request_body or None,
        )
