"""
Command-Line Interface for the halaqa client.

This module provides the interactive CLI. It handles user input and
orchestrates the display of results.

MODES:
------
The menu depends on the logged-in user's role:
1. STUDENT: enrollments with progress, events
2. PARENT: children's progress, events
3. TEACHER: course students with progress, attendance marking, events

Run with:
    halaqa
    python -m halaqa
"""

import logging
from datetime import date
from getpass import getpass

from .config import LOG_FORMAT, LOG_LEVEL
from .dashboard import ProgressDashboard
from .exceptions import ApiError, AuthenticationError, NetworkError, ValidationError
from .models import AttendanceRecord, AttendanceStatus, RsvpStatus
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


def _prompt(text: str, default: str = "") -> str:
    try:
        value = input(text).strip()
    except EOFError:
        return default
    return value or default


def _login(dashboard: ProgressDashboard) -> bool:
    """
    Make sure a valid session exists.

    A stored token is re-verified first; only when that fails is the user
    asked for credentials.
    """
    if dashboard.session.is_authenticated:
        try:
            dashboard.auth.refresh_session()
            return True
        except AuthenticationError:
            TerminalDisplay.print_error("Your session has expired. Please log in again.")

    for _ in range(3):
        print(f"\n{TerminalDisplay.BOLD}Log in{TerminalDisplay.RESET}")
        email = _prompt("  Email: ")
        try:
            password = getpass("  Password: ")
        except EOFError:
            return False
        try:
            dashboard.auth.login(email, password)
            return True
        except (ValidationError, AuthenticationError) as e:
            TerminalDisplay.print_error(str(e))
        except ApiError as e:
            TerminalDisplay.print_error(e.message)
    return False


def _safe_login(dashboard: ProgressDashboard) -> bool:
    """_login() that reports failures instead of raising."""
    try:
        if _login(dashboard):
            return True
        TerminalDisplay.print_error("Login failed.")
    except NetworkError as e:
        TerminalDisplay.print_error(e.message)
    return False


def _pick(items: list, label: str):
    """Ask for a 1-based index into items; None when cancelled or invalid."""
    if not items:
        return None
    choice = _prompt(f"\n  Select {label} (1-{len(items)}, Enter to cancel): ")
    try:
        return items[int(choice) - 1]
    except (ValueError, IndexError):
        return None


def _rsvp_flow(dashboard: ProgressDashboard):
    events = dashboard.show_events()
    event = _pick(events, "event")
    if event is None:
        return
    print(f"  {', '.join(s.value for s in RsvpStatus)}")
    status = _prompt("  Your answer: ").lower()
    dashboard.rsvp(event.get("id", event.get("event_id")), status)


def _attendance_flow(dashboard: ProgressDashboard):
    courses = dashboard.show_teacher_courses()
    course = _pick(courses, "course")
    if course is None:
        return
    course_id = course.get("course_id", course.get("id"))
    session_date = _prompt(f"  Session date [{date.today().isoformat()}]: ", date.today().isoformat())

    students = dashboard.teacher.session_students(course_id, session_date)
    records = []
    for student in students:
        name = student.get("full_name") or student.get("student_name") or "Student"
        answer = _prompt(f"  {name} present? [Y/n]: ", "y").lower()
        status = AttendanceStatus.ABSENT if answer.startswith("n") else AttendanceStatus.PRESENT
        records.append(AttendanceRecord(
            enrollment_id=student.get("enrollment_id"),
            date=session_date,
            status=status,
        ))
    dashboard.mark_attendance(records)


def _course_students_flow(dashboard: ProgressDashboard):
    courses = dashboard.show_teacher_courses()
    course = _pick(courses, "course")
    if course is not None:
        dashboard.show_course_students(course)


def _menu_for(role: str) -> list:
    """(label, action) pairs for the user's role."""
    if role == "teacher":
        entries = [
            ("My courses & students", _course_students_flow),
            ("Mark attendance", _attendance_flow),
        ]
    elif role == "parent":
        entries = [("Children's progress", lambda d: d.show_children_progress())]
    else:
        entries = [("My enrollments", lambda d: d.show_my_enrollments())]
    entries += [
        ("Events", lambda d: d.show_events()),
        ("RSVP to an event", _rsvp_flow),
    ]
    return entries


def main():
    """Command-line interface for the halaqa client."""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    dashboard = ProgressDashboard()

    print(f"\n{TerminalDisplay.BOLD}{TerminalDisplay.CYAN}")
    print("╔══════════════════════════════════════════════════════════════════╗")
    print("║         HALAQA - ISLAMIC EDUCATION PORTAL                        ║")
    print("╚══════════════════════════════════════════════════════════════════╝")
    print(f"{TerminalDisplay.RESET}")

    if not _safe_login(dashboard):
        return

    while True:
        session = dashboard.session
        TerminalDisplay.print_user_info(session.user)
        entries = _menu_for(session.role)

        print()
        for i, (label, _) in enumerate(entries, 1):
            print(f"  {i}. {label}")
        print("  0. Log out")
        print("  q. Quit")

        choice = _prompt(f"\n{TerminalDisplay.BOLD}Choose: {TerminalDisplay.RESET}", "q").lower()
        if choice == "q":
            return
        if choice == "0":
            dashboard.auth.logout()
            TerminalDisplay.print_success("Logged out.")
            return

        try:
            _, action = entries[int(choice) - 1]
        except (ValueError, IndexError):
            TerminalDisplay.print_error("Invalid choice.")
            continue

        try:
            action(dashboard)
        except AuthenticationError:
            TerminalDisplay.print_error("Your session has expired. Please log in again.")
            if not _safe_login(dashboard):
                return
        except ValidationError as e:
            TerminalDisplay.print_error(str(e))
        except ApiError as e:
            TerminalDisplay.print_error(e.message)


if __name__ == "__main__":
    main()
