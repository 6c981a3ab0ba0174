"""
Progress Dashboard - Main Orchestrator.

This module contains the ProgressDashboard class that connects the API
layer, the progress engine and the presentation layer.
"""

import logging
from typing import Iterable, Optional

from .api import ApiClient, AuthApi, EventsApi, ParentApi, SessionStore, StudentApi, TeacherApi
from .engines import ProgressCalculator
from .models import AttendanceRecord, FallbackPolicy
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class ProgressDashboard:
    """
    Main interface for the halaqa client.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    1. Fetches records through the API wrappers (fresh on every call)
    2. Runs them through the ProgressCalculator (pure data)
    3. Passes the results to the display

    Every enrollment shown anywhere goes through the same calculator, so
    the student, parent and teacher views always agree on a percentage.

    TO CHANGE THE UI:
    -----------------
    Pass another display object with the same method signatures as
    TerminalDisplay. The show_* methods also return the computed data, so
    a caller can ignore the display entirely.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        dashboard = ProgressDashboard()
        dashboard.auth.login("student@example.com", "secret")
        result = dashboard.show_my_enrollments()
        result["summary"].average_progress
    """

    def __init__(self, client: Optional[ApiClient] = None, display=None,
                 policy: Optional[FallbackPolicy] = None):
        self.client = client if client is not None else ApiClient(SessionStore())
        self.auth = AuthApi(self.client)
        self.student = StudentApi(self.client)
        self.teacher = TeacherApi(self.client)
        self.parent = ParentApi(self.client)
        self.events = EventsApi(self.client)

        self.calculator = ProgressCalculator(policy)
        self.display = display if display is not None else TerminalDisplay()

    @property
    def session(self):
        return self.client.session_store.session

    def evaluate_all(self, enrollments: Iterable) -> list:
        """Pair each enrollment with its ProgressResult."""
        return [(e, self.calculator.evaluate(e)) for e in enrollments]

    def show_my_enrollments(self, status: Optional[str] = None) -> dict:
        """
        Student view: enrollment cards plus a summary card.

        Returns:
            {"enrollments": [(Enrollment, ProgressResult), ...],
             "summary": ProgressSummary}
        """
        enrollments = self.student.my_enrollments(status=status)
        rows = self.evaluate_all(enrollments)
        summary = self.calculator.summarize(enrollments)

        self.display.print_summary(summary)
        self.display.print_enrollments(rows)
        return {"enrollments": rows, "summary": summary}

    def show_children_progress(self) -> dict:
        """Parent view: linked children, then every child's enrollments."""
        children = self.parent.children()
        enrollments = self.parent.enrollments()
        rows = self.evaluate_all(enrollments)
        summary = self.calculator.summarize(enrollments)

        self.display.print_children(children)
        self.display.print_summary(summary)
        self.display.print_enrollments(rows, title="CHILDREN'S ENROLLMENTS")
        return {"children": children, "enrollments": rows, "summary": summary}

    def show_course_students(self, course: dict) -> dict:
        """Teacher view: progress of every student in one course."""
        course_id = course.get("course_id", course.get("id"))
        course_type = course.get("course_type") or course.get("course_type_name")
        students = self.teacher.course_students(course_id, course_type=course_type)
        rows = self.evaluate_all(students)
        summary = self.calculator.summarize(students)

        name = course.get("course_name") or course.get("name") or f"Course {course_id}"
        self.display.print_summary(summary)
        self.display.print_enrollments(rows, title=f"STUDENTS: {name.upper()}")
        return {"students": rows, "summary": summary}

    def show_teacher_courses(self) -> list:
        courses = self.teacher.my_courses()
        self.display.print_courses(courses)
        return courses

    def show_events(self) -> list:
        events = self.events.list_events()
        self.display.print_events(events)
        return events

    def rsvp(self, event_id, status) -> None:
        self.events.rsvp(event_id, status)
        self.display.print_success("RSVP saved")

    def mark_attendance(self, records: Iterable[AttendanceRecord]) -> None:
        records = list(records)
        self.teacher.bulk_mark_attendance(records)
        self.display.print_success(f"Attendance saved for {len(records)} student(s)")
