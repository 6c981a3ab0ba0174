"""
Teacher endpoints: courses, students and attendance marking.
"""

import logging
from typing import Iterable, Optional

from ..exceptions import ValidationError
from ..models import AttendanceRecord
from .client import ApiClient
from .payload import as_list, to_enrollments, unwrap

logger = logging.getLogger(__name__)


class TeacherApi:
    def __init__(self, client: ApiClient):
        self.client = client

    def my_courses(self) -> list:
        body = self.client.get("/api/teacher/my-courses")
        return as_list(unwrap(body, "courses"))

    def course_students(self, course_id, course_type: Optional[str] = None) -> list:
        """
        Students enrolled in one course, as Enrollment objects.

        The student rows do not repeat the course category, so the caller
        passes the course's type; it is filled in where a row lacks one.
        """
        body = self.client.get(f"/api/teacher/courses/{course_id}/students")
        records = as_list(unwrap(body, "students"))
        if course_type:
            records = [
                r if (r.get("course_type") or r.get("course_type_name")) else {**r, "course_type": course_type}
                for r in records if isinstance(r, dict)
            ]
        return to_enrollments(records)

    def all_students(self, **filters) -> list:
        params = {k: v for k, v in filters.items() if v not in (None, "")}
        body = self.client.get("/api/teacher/students", params=params or None)
        return to_enrollments(body, "students")

    def session_students(self, course_id, date: str) -> list:
        body = self.client.get(
            f"/api/teacher/courses/{course_id}/session-students", params={"date": date}
        )
        return as_list(unwrap(body, "students"))

    def bulk_mark_attendance(self, records: Iterable[AttendanceRecord]):
        """Submit attendance for several students in one request."""
        payload = [r.to_payload() for r in records]
        if not payload:
            raise ValidationError("No attendance records to submit")
        logger.info("Submitting %d attendance records", len(payload))
        return self.client.post("/api/teacher/attendance/bulk", json={"attendanceRecords": payload})

    def course_progress(self, course_id):
        return unwrap(self.client.get(f"/api/teacher/courses/{course_id}/progress"), "progress")

    def course_materials(self, course_id) -> list:
        body = self.client.get(f"/api/teacher/courses/{course_id}/materials")
        return as_list(unwrap(body, "materials"))
