"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
Apart from the CLI's menus, it is the only place that prints.

To create a different UI (web, GUI), create a new class with the same
method signatures but different output handling.
"""

from typing import Optional

from ..engines import ProgressCalculator, clamp_percentage
from ..models import Enrollment, EnrollmentStatus, ProgressBand, ProgressResult, ProgressSummary, parse_number


class TerminalDisplay:
    """
    Pretty terminal output for enrollments, progress and events.

    Every method takes data already computed by the engines (ProgressResult,
    ProgressSummary) or raw backend dicts; nothing here calculates progress.
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_BLUE = "\033[44m"
    BG_RED = "\033[41m"

    BAR_WIDTH = 20

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def band_color(cls, band: ProgressBand) -> str:
        return {
            ProgressBand.SUCCESS: cls.GREEN,
            ProgressBand.WARNING: cls.YELLOW,
            ProgressBand.ERROR: cls.RED,
        }[band]

    @classmethod
    def progress_bar(cls, result: ProgressResult) -> str:
        """
        Colored bar for one progress value.

            ████████████████░░░░ 80%
        """
        filled = result.percentage * cls.BAR_WIDTH // 100
        bar = "█" * filled + "░" * (cls.BAR_WIDTH - filled)
        color = cls.band_color(result.band)
        return f"{color}{bar} {result.percentage}%{cls.RESET}"

    @classmethod
    def status_badge(cls, status: Optional[EnrollmentStatus]) -> str:
        """Return a colored enrollment status badge."""
        if status == EnrollmentStatus.ACTIVE:
            return f"{cls.BG_GREEN}{cls.WHITE} ACTIVE {cls.RESET}"
        if status == EnrollmentStatus.COMPLETED:
            return f"{cls.BG_BLUE}{cls.WHITE} COMPLETED {cls.RESET}"
        if status == EnrollmentStatus.DROPPED:
            return f"{cls.BG_RED}{cls.WHITE} DROPPED {cls.RESET}"
        return f"{cls.GRAY}UNKNOWN{cls.RESET}"

    @staticmethod
    def format_label(value: Optional[str]) -> str:
        """quran_recitation -> Quran Recitation, mosque_admin -> Mosque Admin"""
        if not value:
            return "Course"
        return " ".join(word.capitalize() for word in value.split("_"))

    @classmethod
    def print_user_info(cls, user: dict):
        """Print the logged-in user's identification."""
        cls.print_header("WELCOME")
        name = user.get("full_name") or user.get("name") or user.get("email", "Unknown")
        print(f"  {cls.BOLD}Name:{cls.RESET} {name}")
        print(f"  {cls.BOLD}Role:{cls.RESET} {cls.format_label(user.get('role')) if user.get('role') else 'Unknown'}")

    @classmethod
    def print_enrollments(cls, rows: list, title: str = "MY ENROLLMENTS"):
        """
        Print enrollment cards.

        Args:
            rows: List of (Enrollment, ProgressResult) pairs
        """
        cls.print_header(title)
        if not rows:
            print(f"\n  {cls.DIM}No enrollments found.{cls.RESET}")
            return
        for i, (enrollment, result) in enumerate(rows, 1):
            cls._print_enrollment(i, enrollment, result)

    @classmethod
    def _print_enrollment(cls, num: int, enrollment: Enrollment, result: ProgressResult):
        """
        Print one enrollment card.

        Memorization courses show the pages line when the backend sends it;
        other courses show the attendance line once sessions are recorded.
        """
        name = enrollment.course_name or "Untitled course"
        kind = cls.format_label(enrollment.course_type)

        print()
        print(f"  {cls.BOLD}{num:2}. {name}{cls.RESET}  {cls.status_badge(enrollment.status)}")
        print(f"      {cls.DIM}{kind}", end="")
        mosque = enrollment.get("mosque_name")
        if mosque:
            print(f" · {mosque}", end="")
        print(cls.RESET)
        print(f"      Progress {cls.progress_bar(result)}")

        if result.is_memorization:
            current = enrollment.get("current_page")
            target = enrollment.get("total_pages")
            if current is not None and target:
                print(f"      {cls.DIM}Pages: {current}/{target}{cls.RESET}")
        elif enrollment.total_attendance_records:
            present = int(enrollment.present_count or 0)
            total = int(enrollment.total_attendance_records)
            rate = ProgressCalculator.attendance_rate(present, total)
            rate_str = f"{rate}%" if rate is not None else "N/A"
            print(f"      {cls.DIM}Attendance: {present}/{total} sessions ({rate_str}){cls.RESET}")

    @classmethod
    def print_summary(cls, summary: ProgressSummary):
        """Print the summary card shown above an enrollment list."""
        cls.print_subheader("Summary")
        avg_color = cls.band_color(ProgressCalculator.band_for(summary.average_progress))
        print(f"  {cls.BOLD}Courses:{cls.RESET} {summary.total}"
              f"  ({cls.GREEN}{summary.active} active{cls.RESET},"
              f" {cls.BLUE}{summary.completed} completed{cls.RESET},"
              f" {cls.RED}{summary.dropped} dropped{cls.RESET})")
        print(f"  {cls.BOLD}Average progress:{cls.RESET} {avg_color}{summary.average_progress}%{cls.RESET}")

    @classmethod
    def print_children(cls, children: list):
        """Print a parent's children with their headline figures."""
        cls.print_header("MY CHILDREN")
        if not children:
            print(f"\n  {cls.DIM}No children linked to this account yet.{cls.RESET}")
            return
        for i, child in enumerate(children, 1):
            name = child.get("full_name") or child.get("name") or "Unnamed"
            courses = child.get("total_enrollments", child.get("enrollment_count", 0)) or 0
            print(f"\n  {cls.BOLD}{i:2}. {name}{cls.RESET}  {cls.DIM}{courses} course(s){cls.RESET}")
            for label, key in (("Progress", "avg_progress"), ("Attendance", "attendance_rate")):
                value = parse_number(child.get(key))
                if value is None:
                    continue
                shown = clamp_percentage(value)
                color = cls.band_color(ProgressCalculator.band_for(shown))
                print(f"      {label}: {color}{shown}%{cls.RESET}")

    @classmethod
    def print_courses(cls, courses: list, title: str = "MY COURSES"):
        """Print a numbered course list (teacher view or catalogue)."""
        cls.print_header(title)
        if not courses:
            print(f"\n  {cls.DIM}No courses found.{cls.RESET}")
            return
        for i, course in enumerate(courses, 1):
            name = course.get("course_name") or course.get("name") or "Untitled course"
            kind = cls.format_label(course.get("course_type") or course.get("course_type_name"))
            sessions = course.get("total_sessions") or 0
            print(f"  {i:2}. {cls.BOLD}{name}{cls.RESET} {cls.DIM}({kind}, {sessions} sessions){cls.RESET}")

    @classmethod
    def print_events(cls, events: list):
        """Print events with the user's RSVP answer."""
        cls.print_header("EVENTS")
        if not events:
            print(f"\n  {cls.DIM}No upcoming events.{cls.RESET}")
            return
        rsvp_labels = {
            "going": f"{cls.GREEN}Going{cls.RESET}",
            "maybe": f"{cls.YELLOW}Maybe{cls.RESET}",
            "not_going": f"{cls.RED}Not going{cls.RESET}",
        }
        for i, event in enumerate(events, 1):
            title = event.get("title") or event.get("name") or "Untitled event"
            date = event.get("event_date") or event.get("date") or ""
            rsvp = rsvp_labels.get(event.get("user_rsvp_status"), f"{cls.DIM}No answer{cls.RESET}")
            print(f"  {i:2}. {cls.BOLD}{title}{cls.RESET} {cls.DIM}{date}{cls.RESET}  [{rsvp}]")
            if event.get("mosque_name"):
                print(f"      {cls.DIM}{event['mosque_name']}{cls.RESET}")

    @classmethod
    def print_error(cls, message: str):
        print(f"\n  {cls.RED}✗ {message}{cls.RESET}")

    @classmethod
    def print_success(cls, message: str):
        print(f"\n  {cls.GREEN}✓ {message}{cls.RESET}")
