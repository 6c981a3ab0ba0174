"""
Progress Calculation Engine.

This module turns raw enrollment/attendance records into a single
completion percentage and a severity band for display.
"""

import logging
import math
from typing import Iterable, Optional, Union

from ..config import (
    MEMORIZATION_CATEGORY,
    PROGRESS_FALLBACK_POLICY,
    SUCCESS_THRESHOLD,
    WARNING_THRESHOLD,
)
from ..models import (
    Enrollment,
    EnrollmentStatus,
    FallbackPolicy,
    ProgressBand,
    ProgressResult,
    ProgressSummary,
    parse_number,
)

logger = logging.getLogger(__name__)

EnrollmentLike = Union[Enrollment, dict]


def round_half_up(value: float) -> int:
    """Round .5 away from the floor (62.5 -> 63), unlike Python's round()."""
    return int(math.floor(value + 0.5))


def clamp_percentage(value: float) -> int:
    """Round and clamp a percentage into [0, 100]."""
    return max(0, min(100, round_half_up(value)))


def default_policy() -> FallbackPolicy:
    """Fallback policy from configuration; unknown values mean ZERO."""
    try:
        return FallbackPolicy(PROGRESS_FALLBACK_POLICY)
    except ValueError:
        logger.warning("Unknown progress fallback policy %r, using 'zero'", PROGRESS_FALLBACK_POLICY)
        return FallbackPolicy.ZERO


class ProgressCalculator:
    """
    Computes course progress for one enrollment.

    COURSE CATEGORIES:
    ------------------
    Memorization courses track progress directly: the teacher records how
    much has been memorized and the backend reports completion_percentage
    (older endpoints call it progress). Attendance does not count. A record
    is a memorization course when either course_type or course_type_name
    says so.

    Every other category (recitation, tajweed, fiqh, ...) measures progress
    by attendance, using the first of these that is available:

        1. attendance_rate          (precomputed by the backend)
        2. attendance_percentage    (precomputed by the backend)
        3. present_count / total_attendance_records * 100
        4. the fallback policy      (no sessions recorded yet)

    FALLBACK POLICY:
    ----------------
    FallbackPolicy.ZERO reports 0% until the first session is recorded.
    FallbackPolicy.COMPLETION reuses completion_percentage / progress.
    The default comes from config.PROGRESS_FALLBACK_POLICY.

    The result is always an int in [0, 100]. Missing or non-numeric fields
    count as absent; nothing here raises.

    Usage:
        calculator = ProgressCalculator()
        calculator.calculate({"course_type": "fiqh", "attendance_rate": 91.4})  # 91
        calculator.band_for(91)  # ProgressBand.SUCCESS
    """

    def __init__(self, policy: Optional[FallbackPolicy] = None):
        self.policy = policy if policy is not None else default_policy()

    @staticmethod
    def _as_enrollment(record: EnrollmentLike) -> Enrollment:
        if isinstance(record, Enrollment):
            return record
        return Enrollment.from_dict(record)

    @staticmethod
    def is_memorization(record: EnrollmentLike) -> bool:
        enrollment = ProgressCalculator._as_enrollment(record)
        return MEMORIZATION_CATEGORY in enrollment.categories

    @staticmethod
    def _completion_value(enrollment: Enrollment) -> float:
        if enrollment.completion_percentage is not None:
            return enrollment.completion_percentage
        if enrollment.progress is not None:
            return enrollment.progress
        return 0.0

    def evaluate(self, record: EnrollmentLike) -> ProgressResult:
        """
        Evaluate one enrollment and report which rule produced the value.

        Returns:
            ProgressResult(percentage, band, is_memorization, source)
        """
        enrollment = self._as_enrollment(record)
        memorization = MEMORIZATION_CATEGORY in enrollment.categories

        if memorization:
            value, source = self._completion_value(enrollment), "completion"
        elif enrollment.attendance_rate is not None:
            value, source = enrollment.attendance_rate, "attendance_rate"
        elif enrollment.attendance_percentage is not None:
            value, source = enrollment.attendance_percentage, "attendance_percentage"
        elif enrollment.total_attendance_records is not None and enrollment.total_attendance_records > 0:
            present = enrollment.present_count or 0.0
            value = present / enrollment.total_attendance_records * 100
            source = "attendance_counts"
        elif self.policy == FallbackPolicy.COMPLETION:
            value, source = self._completion_value(enrollment), "fallback"
        else:
            value, source = 0.0, "fallback"

        percentage = clamp_percentage(value)
        return ProgressResult(
            percentage=percentage,
            band=self.band_for(percentage),
            is_memorization=memorization,
            source=source,
        )

    def calculate(self, record: EnrollmentLike) -> int:
        """Completion percentage in [0, 100] for one enrollment."""
        return self.evaluate(record).percentage

    @staticmethod
    def band_for(progress: float) -> ProgressBand:
        """Severity band for a progress value."""
        if progress >= SUCCESS_THRESHOLD:
            return ProgressBand.SUCCESS
        if progress >= WARNING_THRESHOLD:
            return ProgressBand.WARNING
        return ProgressBand.ERROR

    @staticmethod
    def attendance_rate(present_count, total) -> Optional[int]:
        """
        Rounded share of sessions attended, or None when nothing is recorded.

        Used for the "Attendance: 8/10 (80%)" line, which shows N/A for None.
        """
        total_value = parse_number(total)
        if total_value is None or total_value <= 0:
            return None
        present_value = parse_number(present_count) or 0.0
        return clamp_percentage(present_value / total_value * 100)

    def summarize(self, records: Iterable[EnrollmentLike]) -> ProgressSummary:
        """
        Aggregate a list of enrollments for a summary card.

        The average is taken over every enrollment regardless of status,
        rounded half-up; an empty list averages to 0.
        """
        enrollments = [self._as_enrollment(r) for r in records]
        bands = {band.value: 0 for band in ProgressBand}
        status_counts = {status: 0 for status in EnrollmentStatus}
        total_progress = 0

        for enrollment in enrollments:
            result = self.evaluate(enrollment)
            total_progress += result.percentage
            bands[result.band.value] += 1
            if enrollment.status is not None:
                status_counts[enrollment.status] += 1

        average = round_half_up(total_progress / len(enrollments)) if enrollments else 0

        return ProgressSummary(
            total=len(enrollments),
            active=status_counts[EnrollmentStatus.ACTIVE],
            completed=status_counts[EnrollmentStatus.COMPLETED],
            dropped=status_counts[EnrollmentStatus.DROPPED],
            average_progress=average,
            bands=bands,
        )


_default_calculator = ProgressCalculator()


def calculate_progress(record: EnrollmentLike, policy: Optional[FallbackPolicy] = None) -> int:
    """Completion percentage using the configured (or given) fallback policy."""
    if policy is None:
        return _default_calculator.calculate(record)
    return ProgressCalculator(policy).calculate(record)


def band_for(progress: float) -> ProgressBand:
    """Severity band for a progress value."""
    return ProgressCalculator.band_for(progress)
