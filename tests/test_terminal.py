from __future__ import annotations

import re

import pytest

from halaqa.engines import ProgressCalculator
from halaqa.models import Enrollment, EnrollmentStatus, FallbackPolicy, ProgressBand, ProgressResult, ProgressSummary
from halaqa.ui import TerminalDisplay

ANSI = re.compile(r"\033\[[0-9;]*m")


def plain(text: str) -> str:
    return ANSI.sub("", text)


@pytest.fixture
def calculator() -> ProgressCalculator:
    return ProgressCalculator(FallbackPolicy.ZERO)


@pytest.mark.parametrize(
    "percentage, filled",
    [(0, 0), (4, 0), (5, 1), (50, 10), (99, 19), (100, 20)],
)
def test_progress_bar_width(percentage, filled):
    bar = plain(TerminalDisplay.progress_bar(ProgressResult(percentage, ProgressBand.ERROR, False, "fallback")))
    assert bar.count("█") == filled
    assert bar.count("░") == TerminalDisplay.BAR_WIDTH - filled
    assert bar.endswith(f" {percentage}%")


@pytest.mark.parametrize(
    "band, color",
    [
        (ProgressBand.SUCCESS, TerminalDisplay.GREEN),
        (ProgressBand.WARNING, TerminalDisplay.YELLOW),
        (ProgressBand.ERROR, TerminalDisplay.RED),
    ],
)
def test_progress_bar_uses_band_color(band, color):
    assert TerminalDisplay.progress_bar(ProgressResult(80, band, False, "attendance_rate")).startswith(color)


@pytest.mark.parametrize(
    "status, label",
    [
        (EnrollmentStatus.ACTIVE, "ACTIVE"),
        (EnrollmentStatus.COMPLETED, "COMPLETED"),
        (EnrollmentStatus.DROPPED, "DROPPED"),
        (None, "UNKNOWN"),
    ],
)
def test_status_badge(status, label):
    assert plain(TerminalDisplay.status_badge(status)).strip() == label


@pytest.mark.parametrize(
    "value, expected",
    [("quran_recitation", "Quran Recitation"), ("memorization", "Memorization"), (None, "Course"), ("", "Course")],
)
def test_format_label(value, expected):
    assert TerminalDisplay.format_label(value) == expected


def test_attendance_course_card(capsys, calculator):
    enrollment = Enrollment.from_dict({
        "course_name": "Fiqh of Salah",
        "course_type": "fiqh",
        "present_count": 8,
        "total_attendance_records": 10,
        "status": "active",
        "mosque_name": "Al-Noor",
    })
    TerminalDisplay.print_enrollments([(enrollment, calculator.evaluate(enrollment))])

    out = plain(capsys.readouterr().out)
    assert "MY ENROLLMENTS" in out
    assert "1. Fiqh of Salah" in out
    assert "ACTIVE" in out
    assert "Fiqh · Al-Noor" in out
    assert "80%" in out
    assert "Attendance: 8/10 sessions (80%)" in out
    assert "Pages" not in out


def test_memorization_card_shows_pages_not_attendance(capsys, calculator):
    enrollment = Enrollment.from_dict({
        "course_name": "Juz Amma",
        "course_type": "memorization",
        "completion_percentage": 62.5,
        "present_count": 2,
        "total_attendance_records": 10,
        "current_page": 15,
        "total_pages": 24,
    })
    TerminalDisplay.print_enrollments([(enrollment, calculator.evaluate(enrollment))])

    out = plain(capsys.readouterr().out)
    assert "63%" in out
    assert "Pages: 15/24" in out
    assert "Attendance:" not in out


def test_card_without_sessions_has_no_attendance_line(capsys, calculator):
    enrollment = Enrollment.from_dict({"course_type": "tajweed", "total_attendance_records": 0})
    TerminalDisplay.print_enrollments([(enrollment, calculator.evaluate(enrollment))], title="STUDENTS")

    out = plain(capsys.readouterr().out)
    assert "STUDENTS" in out
    assert "Untitled course" in out
    assert "UNKNOWN" in out
    assert "Attendance:" not in out


def test_empty_enrollment_list(capsys):
    TerminalDisplay.print_enrollments([])
    assert "No enrollments found." in plain(capsys.readouterr().out)


def test_summary_card(capsys):
    summary = ProgressSummary(total=3, active=2, completed=1, dropped=0, average_progress=71,
                              bands={"success": 1, "warning": 2, "error": 0})
    TerminalDisplay.print_summary(summary)

    out = plain(capsys.readouterr().out)
    assert "Courses: 3  (2 active, 1 completed, 0 dropped)" in out
    assert "Average progress: 71%" in out


def test_children_figures_are_rounded_and_clamped(capsys):
    TerminalDisplay.print_children([
        {"full_name": "Maryam", "total_enrollments": 2, "avg_progress": "62.5", "attendance_rate": 140},
        {"name": "Yusuf", "avg_progress": None},
    ])

    out = plain(capsys.readouterr().out)
    assert "1. Maryam" in out
    assert "2 course(s)" in out
    assert "Progress: 63%" in out
    assert "Attendance: 100%" in out
    assert "2. Yusuf" in out
    assert "0 course(s)" in out


def test_no_children(capsys):
    TerminalDisplay.print_children([])
    assert "No children linked" in plain(capsys.readouterr().out)


def test_events_show_rsvp_answer(capsys):
    TerminalDisplay.print_events([
        {"title": "Eid Prayer", "event_date": "2026-03-20", "user_rsvp_status": "going", "mosque_name": "Al-Noor"},
        {"title": "Lecture"},
    ])

    out = plain(capsys.readouterr().out)
    assert "1. Eid Prayer 2026-03-20  [Going]" in out
    assert "Al-Noor" in out
    assert "[No answer]" in out


def test_courses_and_user_info(capsys):
    TerminalDisplay.print_courses([{"course_name": "Tajweed I", "course_type": "tajweed", "total_sessions": 12}])
    TerminalDisplay.print_user_info({"full_name": "Aisha", "role": "mosque_admin"})

    out = plain(capsys.readouterr().out)
    assert "Tajweed I (Tajweed, 12 sessions)" in out
    assert "Name: Aisha" in out
    assert "Role: Mosque Admin" in out


def test_messages(capsys):
    TerminalDisplay.print_error("Course is full")
    TerminalDisplay.print_success("RSVP saved")
    out = plain(capsys.readouterr().out)
    assert "✗ Course is full" in out
    assert "✓ RSVP saved" in out
