"""
Data models for the halaqa client.

This package contains all dataclasses and enums used throughout the client.
These serve as "contracts" between the API layer, the progress engine and
the display.
"""

from .enrollment import Enrollment, EnrollmentStatus, parse_number
from .progress import ProgressBand, FallbackPolicy, ProgressResult, ProgressSummary
from .activity import AttendanceRecord, AttendanceStatus, RsvpStatus
from .session import Session

__all__ = [
    # Enrollment models
    "Enrollment",
    "EnrollmentStatus",
    "parse_number",
    # Progress models
    "ProgressBand",
    "FallbackPolicy",
    "ProgressResult",
    "ProgressSummary",
    # Activity models
    "AttendanceRecord",
    "AttendanceStatus",
    "RsvpStatus",
    # Session
    "Session",
]
