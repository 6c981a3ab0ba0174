"""
Progress result data models.

Contains the dataclasses and enums produced by the progress engine.
"""

from dataclasses import dataclass, field
from enum import Enum


class ProgressBand(Enum):
    """
    Severity band used to color a progress bar.

    SUCCESS: progress >= 75
    WARNING: 50 <= progress < 75
    ERROR:   progress < 50
    """
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class FallbackPolicy(Enum):
    """
    What a non-memorization course reports when it has no attendance data.

    ZERO: report 0% until the first session is recorded
    COMPLETION: reuse completion_percentage / progress from the backend
    """
    ZERO = "zero"
    COMPLETION = "completion"


@dataclass
class ProgressResult:
    """
    Outcome of evaluating one enrollment.

    `source` names the field family the percentage came from:
    "completion", "attendance_rate", "attendance_percentage",
    "attendance_counts" or "fallback".
    """
    percentage: int
    band: ProgressBand
    is_memorization: bool
    source: str


@dataclass
class ProgressSummary:
    """
    Aggregate numbers for a dashboard summary card.

    Example for a parent with two children in three courses:
        total: 3
        active: 2
        completed: 1
        dropped: 0
        average_progress: 71
        bands: {"success": 1, "warning": 2, "error": 0}
    """
    total: int
    active: int
    completed: int
    dropped: int
    average_progress: int
    bands: dict = field(default_factory=dict)
