from __future__ import annotations

import pytest

from halaqa.models import (
    AttendanceRecord,
    AttendanceStatus,
    Enrollment,
    EnrollmentStatus,
    Session,
    parse_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (5, 5.0),
        (62.5, 62.5),
        ("62.50", 62.5),
        (" 7 ", 7.0),
        (None, None),
        (True, None),
        ("abc", None),
        (float("nan"), None),
        (float("inf"), None),
        ([1], None),
    ],
)
def test_parse_number(value, expected):
    assert parse_number(value) == expected


def test_enrollment_from_dict_maps_aliases():
    raw = {
        "enrollment_id": 12,
        "course_name": "Juz Amma",
        "course_type_name": "memorization",
        "completion_percentage": "40.5",
        "present_count": 3,
        "total_sessions": 6,
        "status": "ACTIVE",
        "mosque_name": "Al-Noor",
    }
    enrollment = Enrollment.from_dict(raw)

    assert enrollment.enrollment_id == 12
    assert enrollment.course_name == "Juz Amma"
    assert enrollment.course_type == "memorization"
    assert enrollment.category == "memorization"
    assert enrollment.completion_percentage == 40.5
    assert enrollment.total_attendance_records == 6
    assert enrollment.status == EnrollmentStatus.ACTIVE
    assert enrollment.get("mosque_name") == "Al-Noor"
    assert enrollment.raw is raw


def test_enrollment_prefers_total_attendance_records_over_aliases():
    enrollment = Enrollment.from_dict({"total_attendance_records": 4, "total_sessions": 10, "total_attendance": 8})
    assert enrollment.total_attendance_records == 4


def test_enrollment_nested_attendance_percentage():
    enrollment = Enrollment.from_dict({"attendance": {"completionPercentage": 81}})
    assert enrollment.attendance_percentage == 81


def test_flat_attendance_percentage_wins_over_nested():
    enrollment = Enrollment.from_dict({"attendance_percentage": 50, "attendance": {"completionPercentage": 81}})
    assert enrollment.attendance_percentage == 50


def test_enrollment_falls_back_to_id_and_unknown_status():
    enrollment = Enrollment.from_dict({"id": 3, "status": "paused"})
    assert enrollment.enrollment_id == 3
    assert enrollment.status is None
    assert enrollment.category == ""


def test_enrollment_from_non_dict_is_empty():
    enrollment = Enrollment.from_dict(["not", "a", "dict"])
    assert enrollment.course_type is None
    assert enrollment.raw == {}


def test_session_round_trip_and_role():
    session = Session(token="abc", user={"role": "Parent"})
    restored = Session.from_dict(session.to_dict())
    assert restored == session
    assert restored.is_authenticated
    assert restored.role == "parent"


def test_session_from_bad_data():
    assert Session.from_dict("junk") == Session()
    assert Session.from_dict({"authToken": "", "userData": "x"}) == Session()


def test_attendance_record_payload():
    record = AttendanceRecord(enrollment_id=9, date="2026-03-01", status=AttendanceStatus.ABSENT)
    assert record.to_payload() == {"enrollment_id": 9, "date": "2026-03-01", "status": "absent"}

    with_note = AttendanceRecord(9, "2026-03-01", AttendanceStatus.PRESENT, notes="late by 5 min")
    assert with_note.to_payload()["notes"] == "late by 5 min"


def test_enrollment_keeps_both_category_fields():
    enrollment = Enrollment.from_dict({"course_type": "Fiqh", "course_type_name": " Memorization "})
    assert enrollment.course_type == "Fiqh"
    assert enrollment.course_type_name == " Memorization "
    assert enrollment.category == "fiqh"
    assert enrollment.categories == {"fiqh", "memorization"}
    assert Enrollment.from_dict({}).categories == set()
