"""
Event endpoints: listing, administration and participation.
"""

import logging

from ..exceptions import ValidationError
from ..models import RsvpStatus
from .client import ApiClient
from .payload import as_list, unwrap

logger = logging.getLogger(__name__)


class EventsApi:
    """
    Mosque events.

    Creating, updating and deleting is for mosque admins; approving and
    rejecting is for ministry admins. The backend enforces roles.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    def list_events(self, **params) -> list:
        body = self.client.get("/api/events", params=params or None)
        return as_list(unwrap(body, "events"))

    def my_enrolled_mosques_events(self, **params) -> list:
        """Events of the mosques where the user has an enrollment."""
        body = self.client.get("/api/events/my-enrolled-mosques", params=params or None)
        return as_list(unwrap(body, "events"))

    def my_mosque_events(self) -> list:
        body = self.client.get("/api/events/my-mosque-events")
        return as_list(unwrap(body, "events"))

    def get_event(self, event_id) -> dict:
        event = unwrap(self.client.get(f"/api/events/{event_id}"), "event")
        return event if isinstance(event, dict) else {}

    def create_event(self, event_data: dict):
        return self.client.post("/api/events", json=event_data)

    def update_event(self, event_id, event_data: dict):
        return self.client.put(f"/api/events/{event_id}", json=event_data)

    def delete_event(self, event_id):
        return self.client.delete(f"/api/events/{event_id}")

    def approve_event(self, event_id):
        return self.client.put(f"/api/events/{event_id}/approve")

    def reject_event(self, event_id, reason: str):
        if not reason or not reason.strip():
            raise ValidationError("A rejection reason is required")
        return self.client.put(f"/api/events/{event_id}/reject", json={"reason": reason})

    def rsvp(self, event_id, status):
        """Answer an invitation with going / maybe / not_going."""
        try:
            status = RsvpStatus(status.value if isinstance(status, RsvpStatus) else status)
        except ValueError:
            raise ValidationError(f"Unknown RSVP status: {status!r}") from None
        logger.info("RSVP %s for event %s", status.value, event_id)
        return self.client.post(f"/api/events/{event_id}/rsvp", json={"status": status.value})

    def like(self, event_id):
        return self.client.post(f"/api/events/{event_id}/like")

    def unlike(self, event_id):
        return self.client.delete(f"/api/events/{event_id}/like")

    def comment(self, event_id, comment: str):
        if not comment or not comment.strip():
            raise ValidationError("Comment cannot be empty")
        return self.client.post(f"/api/events/{event_id}/comment", json={"comment": comment})
