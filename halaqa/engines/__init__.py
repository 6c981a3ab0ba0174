"""
Business-rule engines.

This package contains the pure logic of the client. Engines take plain
records and return dataclasses; they never perform I/O.
"""

from .progress import (
    ProgressCalculator,
    calculate_progress,
    band_for,
    round_half_up,
    clamp_percentage,
)

__all__ = [
    "ProgressCalculator",
    "calculate_progress",
    "band_for",
    "round_half_up",
    "clamp_percentage",
]
