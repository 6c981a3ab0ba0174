"""
Attendance and event participation models.

These are the payloads the client sends back to the backend when a teacher
marks attendance or a user answers an event invitation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AttendanceStatus(Enum):
    """Attendance outcome of one student for one session."""
    PRESENT = "present"
    ABSENT = "absent"


class RsvpStatus(Enum):
    """Answer to an event invitation."""
    GOING = "going"
    MAYBE = "maybe"
    NOT_GOING = "not_going"


@dataclass
class AttendanceRecord:
    """
    One row of a bulk attendance submission.

    Attributes:
        enrollment_id: Enrollment the session belongs to
        date: Session date as YYYY-MM-DD
        status: AttendanceStatus
        notes: Optional teacher remark
    """
    enrollment_id: Any
    date: str
    status: AttendanceStatus
    notes: Optional[str] = None

    def to_payload(self) -> dict:
        payload = {
            "enrollment_id": self.enrollment_id,
            "date": self.date,
            "status": self.status.value,
        }
        if self.notes:
            payload["notes"] = self.notes
        return payload
