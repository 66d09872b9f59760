"""Notification sink that returns messages with the API response"""

import logging
from typing import List
from transaction_dashboard.domain.models import Notification


class CollectingNotifier:
    """Collects user-facing notifications for the current request"""

    def __init__(self, request_id: str = "unknown"):
        self.request_id = request_id
        self.notifications: List[Notification] = []

    def error(self, message: str) -> None:
        logging.warning(f"User notification: {message}", extra={"request_id": self.request_id})
        self.notifications.append(Notification(level="error", message=message))
