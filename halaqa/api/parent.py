"""
Parent endpoints.

Endpoints for parents to monitor their children's course progress,
enrollments and overall learning statistics. Progress routes are mounted
at /api/parent-progress; linking children lives under /api/parent.
"""

import logging

from ..exceptions import ValidationError
from ..models import Enrollment
from .client import ApiClient
from .payload import as_list, to_enrollments, unwrap

logger = logging.getLogger(__name__)


class ParentApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def my_children(self) -> list:
        """Children linked to the logged-in parent."""
        body = self.client.get("/api/parent/my-children")
        return as_list(unwrap(body, "children"))

    def request_relationship(self, child_email: str):
        if not child_email or "@" not in child_email:
            raise ValidationError("A valid child email is required")
        logger.info("Requesting parent relationship with %s", child_email)
        return self.client.post("/api/parent/request-relationship", json={"childEmail": child_email})

    def children(self) -> list:
        """Children with their per-child progress figures."""
        body = self.client.get("/api/parent-progress/children")
        return as_list(unwrap(body, "children"))

    def summary(self) -> dict:
        body = self.client.get("/api/parent-progress/summary")
        summary = unwrap(body, "summary")
        return summary if isinstance(summary, dict) else {}

    def enrollments(self) -> list:
        """Enrollments across all children."""
        return to_enrollments(self.client.get("/api/parent-progress/enrollments"), "enrollments")

    def child_overview(self, child_id) -> dict:
        body = self.client.get(f"/api/parent-progress/children/{child_id}")
        overview = unwrap(body, "child")
        return overview if isinstance(overview, dict) else {}

    def child_progress(self, enrollment_id) -> Enrollment:
        body = self.client.get(f"/api/parent-progress/progress/{enrollment_id}")
        return Enrollment.from_dict(unwrap(body, "progress"))

    def child_progress_history(self, enrollment_id) -> list:
        body = self.client.get(f"/api/parent-progress/history/{enrollment_id}")
        return as_list(unwrap(body, "history"))
