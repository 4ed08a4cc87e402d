"""Open/closed: a sender that works with any notification channel."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class NotificationService(ABC):
    """A channel that can deliver a notification message."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver ``message``, raising on failure."""


@dataclass
class NotificationSender:
    """Sends notifications through whichever service it holds."""

    notification_service: NotificationService

    def send_notification(self, message: str) -> None:
        logger.info("Sending Notification...")
        self.notification_service.send_notification(message)


class EmailNotification(NotificationService):
    """Notification delivered by e-mail."""

    def send_notification(self, message: str) -> None:
        print("Email Notification:", message)


class SmsNotification(NotificationService):
    """Notification delivered by SMS."""

    def send_notification(self, message: str) -> None:
        print("SMS Notification:", message)