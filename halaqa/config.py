"""
Configuration constants for the halaqa client.

This module contains all configuration values and constants used throughout
the client. Centralizing these makes it easy to point the client at another
backend or adjust the progress rules as policies change.

Every value that depends on the deployment can be overridden with a
HALAQA_* environment variable, read once at import time.
"""

import os
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad input."""
    try:
        return int(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    """Read a float environment variable, falling back on bad input."""
    try:
        return float(os.environ.get(name, default))
    except (TypeError, ValueError):
        return default


# =============================================================================
# BACKEND CONNECTION
# =============================================================================

# Base URL of the REST backend. Endpoint paths already carry the /api prefix.
#   - Android emulator: http://10.0.2.2:5000
#   - Local backend:    http://localhost:5000
API_BASE_URL = os.environ.get("HALAQA_API_URL", "http://localhost:5000").rstrip("/")

# Seconds before a request is abandoned
REQUEST_TIMEOUT = _env_float("HALAQA_TIMEOUT", 10.0)

# Retries apply to GET only. 0 keeps plain request/response semantics.
MAX_RETRIES = _env_int("HALAQA_MAX_RETRIES", 0)
RETRY_BACKOFF_FACTOR = 1.0
RETRY_STATUS_CODES = [502, 503, 504]

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": "halaqa-client",
}


# =============================================================================
# SESSION PERSISTENCE
# =============================================================================

# The stored token and user profile survive between CLI runs in this file.
SESSION_FILE = Path(
    os.environ.get("HALAQA_SESSION_FILE", Path.home() / ".halaqa" / "session.json")
)


# =============================================================================
# PROGRESS RULES
# =============================================================================

# Courses in this category report progress directly (pages memorized);
# every other category derives progress from attendance.
MEMORIZATION_CATEGORY = "memorization"

# Severity bands for progress bars
#   progress >= 75        -> success
#   50 <= progress < 75   -> warning
#   progress < 50         -> error
SUCCESS_THRESHOLD = 75
WARNING_THRESHOLD = 50

# What a non-memorization course shows when it has no attendance data yet:
#   "zero"       -> 0%
#   "completion" -> reuse completion_percentage / progress
PROGRESS_FALLBACK_POLICY = os.environ.get("HALAQA_PROGRESS_FALLBACK", "zero").lower()


# =============================================================================
# LOGGING & MESSAGES
# =============================================================================

LOG_LEVEL = os.environ.get("HALAQA_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

GENERIC_NETWORK_ERROR = "Network error. Please check your connection."
GENERIC_SERVER_ERROR = "Something went wrong. Please try again."
SESSION_EXPIRED_MESSAGE = "Session expired. Please log in again."
