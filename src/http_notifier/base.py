"""Abstract notifier interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class Notifier(ABC):
    """Base class for notification backends."""

    @abstractmethod
    def post_notification(
        self,
        trigger: str,
        execution_data: Mapping[str, Any],
        config: Mapping[str, Any] | None = None,
    ) -> bool:
        """Send a notification for the given trigger.

        Returns True when the target accepted the notification.
        """
