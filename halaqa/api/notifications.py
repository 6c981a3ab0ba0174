"""
Push-notification endpoints.

Routes are mounted at /firebase-notifications (no /api prefix). The backend
sends the notifications themselves; these calls register the device token
and update read state.
"""

import logging

from ..exceptions import ValidationError
from .client import ApiClient

logger = logging.getLogger(__name__)


class NotificationsApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def save_device_token(self, fcm_token: str):
        """Register this device's push token for the logged-in user."""
        if not fcm_token:
            raise ValidationError("A device token is required")
        logger.info("Registering push token")
        return self.client.post("/firebase-notifications/fcm-token", json={"fcmToken": fcm_token})

    def mark_read(self, notification_id):
        return self.client.patch(f"/firebase-notifications/{notification_id}/read")

    def mark_all_read(self):
        return self.client.patch("/firebase-notifications/read-all")

    def delete(self, notification_id):
        return self.client.delete(f"/firebase-notifications/{notification_id}")
