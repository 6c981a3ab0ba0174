"""
Enrollment data models.

Contains the Enrollment dataclass and EnrollmentStatus enum that represent
a student's registration in a course, as returned by the backend.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class EnrollmentStatus(Enum):
    """
    Possible states of an enrollment.

    ACTIVE: Student is currently attending the course
    COMPLETED: Course finished
    DROPPED: Student withdrew or was removed
    """
    ACTIVE = "active"
    COMPLETED = "completed"
    DROPPED = "dropped"

    @classmethod
    def parse(cls, value: Any) -> Optional["EnrollmentStatus"]:
        """Map a backend status string to the enum; unknown values give None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


def parse_number(value: Any) -> Optional[float]:
    """
    Coerce a JSON value to a finite float, or None when it is not a number.

    Numeric strings are accepted because NUMERIC columns often arrive
    serialized as strings ("62.50"). Booleans are not numbers here.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _first_number(data: dict, *keys: str) -> Optional[float]:
    """First key whose value is a number (nullish-coalescing over aliases)."""
    for key in keys:
        number = parse_number(data.get(key))
        if number is not None:
            return number
    return None


def _first_text(data: dict, *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


@dataclass
class Enrollment:
    """
    A student's enrollment in one course.

    The backend is not consistent about field names: the enrollment list,
    the teacher's student list and the progress-detail endpoint each use
    their own spelling. from_dict() folds the aliases into one shape:

        course_type              <- course_type | course_type_name
        completion_percentage    <- completion_percentage
        progress                 <- progress
        present_count            <- present_count
        total_attendance_records <- total_attendance_records | total_sessions
                                    | total_attendance
        attendance_rate          <- attendance_rate
        attendance_percentage    <- attendance_percentage
                                    | attendance.completionPercentage

    Numeric fields are None when absent or not a number. The untouched
    backend dict stays on `raw` for display fields the model does not name.
    """
    course_type: Optional[str] = None
    completion_percentage: Optional[float] = None
    progress: Optional[float] = None
    present_count: Optional[float] = None
    total_attendance_records: Optional[float] = None
    attendance_rate: Optional[float] = None
    attendance_percentage: Optional[float] = None
    status: Optional[EnrollmentStatus] = None
    enrollment_id: Optional[Any] = None
    course_name: Optional[str] = None
    course_type_name: Optional[str] = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: dict) -> "Enrollment":
        """Build an Enrollment from a raw backend record."""
        if not isinstance(data, dict):
            data = {}

        attendance_percentage = _first_number(data, "attendance_percentage")
        nested = data.get("attendance")
        if attendance_percentage is None and isinstance(nested, dict):
            attendance_percentage = parse_number(nested.get("completionPercentage"))

        enrollment_id = data.get("enrollment_id")
        if enrollment_id is None:
            enrollment_id = data.get("id")

        return cls(
            course_type=_first_text(data, "course_type", "course_type_name"),
            completion_percentage=_first_number(data, "completion_percentage"),
            progress=_first_number(data, "progress"),
            present_count=_first_number(data, "present_count"),
            total_attendance_records=_first_number(
                data, "total_attendance_records", "total_sessions", "total_attendance"
            ),
            attendance_rate=_first_number(data, "attendance_rate"),
            attendance_percentage=attendance_percentage,
            status=EnrollmentStatus.parse(data.get("status")),
            enrollment_id=enrollment_id,
            course_name=_first_text(data, "course_name", "name", "title"),
            course_type_name=_first_text(data, "course_type_name"),
            raw=data,
        )

    @property
    def category(self) -> str:
        """Normalized course category ("" when unknown)."""
        return (self.course_type or "").strip().lower()

    @property
    def categories(self) -> set:
        """
        Every normalized category the record names.

        Some endpoints send both course_type and course_type_name and they
        can disagree; rules that ask "is this a memorization course?" check
        both.
        """
        names = (self.course_type, self.course_type_name)
        return {n.strip().lower() for n in names if n and n.strip()}

    def get(self, key: str, default: Any = None) -> Any:
        """Read a display field from the raw backend record."""
        return self.raw.get(key, default)
