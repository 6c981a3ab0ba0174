"""
Student endpoints: enrollments, progress and course enrollment.
"""

import logging
from typing import Optional

from ..exceptions import ValidationError
from ..models import Enrollment
from .client import ApiClient
from .payload import as_list, find, to_enrollments, unwrap

logger = logging.getLogger(__name__)


class StudentApi:
    """
    Calls made from the student's screens.

    Enrollment-returning calls hand back Enrollment objects so the progress
    engine can consume them directly.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    # -------------------------------------------------------------------------
    # Enrollments
    # -------------------------------------------------------------------------

    def my_enrollments(self, status: Optional[str] = None, **params) -> list:
        """The student's enrollments, optionally filtered by status."""
        if status:
            params["status"] = status
        body = self.client.get("/api/enrollment/my-enrollments", params=params or None)
        return to_enrollments(body, "enrollments")

    def enrollment_details(self, enrollment_id) -> Enrollment:
        body = self.client.get(f"/api/enrollment/{enrollment_id}")
        return Enrollment.from_dict(unwrap(body, "enrollment"))

    def stats(self, **params) -> dict:
        """Active courses, average progress and attendance for the student."""
        body = self.client.get("/api/student/stats", params=params or None)
        stats = unwrap(body, "stats")
        return stats if isinstance(stats, dict) else {}

    def withdraw(self, enrollment_id):
        logger.info("Withdrawing from enrollment %s", enrollment_id)
        return self.client.post(f"/api/student/enrollments/{enrollment_id}/withdraw")

    # -------------------------------------------------------------------------
    # Progress
    # -------------------------------------------------------------------------

    def my_progress(self, enrollment_id) -> Enrollment:
        """Detailed progress for one enrollment (nested attendance block included)."""
        body = self.client.get(f"/api/student-progress/my-progress/{enrollment_id}")
        return Enrollment.from_dict(unwrap(body, "progress"))

    def my_progress_history(self, enrollment_id) -> list:
        body = self.client.get(f"/api/student-progress/my-progress-history/{enrollment_id}")
        return as_list(unwrap(body, "history"))

    # -------------------------------------------------------------------------
    # Course catalogue and enrollment
    # -------------------------------------------------------------------------

    def browse_courses(self, **params) -> list:
        body = self.client.get("/api/public/courses", params=params or None)
        return as_list(unwrap(body, "courses"))

    def course_details(self, course_id) -> dict:
        body = self.client.get(f"/api/public/courses/{course_id}")
        course = unwrap(body, "course")
        return course if isinstance(course, dict) else {}

    def check_eligibility(self, course_id):
        if course_id is None:
            raise ValidationError("course_id is required")
        return self.client.post("/api/enrollment/check-eligibility", json={"courseId": course_id})

    def enroll_free(self, course_id):
        if course_id is None:
            raise ValidationError("course_id is required")
        logger.info("Enrolling in free course %s", course_id)
        return self.client.post("/api/enrollment/enroll-free", json={"courseId": course_id})

    def enroll_paid(self, course_id) -> dict:
        """
        Start a paid enrollment.

        The backend opens a hosted checkout session; the student pays at
        `url`, then complete_payment(session_id) finishes the enrollment.

        Returns:
            {"url": str or None, "session_id": str or None}
        """
        if course_id is None:
            raise ValidationError("course_id is required")
        logger.info("Starting checkout for course %s", course_id)
        body = self.client.post("/api/enrollment/enroll-paid", json={"courseId": course_id})
        return {"url": find(body, "url"), "session_id": find(body, "sessionId")}

    def complete_payment(self, session_id):
        """Verify a finished checkout and enroll the student."""
        if not session_id:
            raise ValidationError("session_id is required")
        logger.info("Completing payment for checkout session %s", session_id)
        return self.client.post("/api/enrollment/complete-payment", json={"sessionId": session_id})
