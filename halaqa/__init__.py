"""
Halaqa Client Package
=====================

Client library and terminal front end for an Islamic-education management
platform serving students, parents, teachers and administrators.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                           ENGINE LAYER                                   │
│        (Pure logic - returns data structures, NO I/O or printing)       │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │ ProgressCalculator                                               │   │
│  │  • enrollment record -> percentage in [0, 100] + severity band  │   │
│  │  • memorization: completion percentage                          │   │
│  │  • everything else: attendance                                   │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   ▲
                                   │ Enrollment dataclasses
                                   │
┌─────────────────────────────────────────────────────────────────────────┐
│                             API LAYER                                    │
│                                                                         │
│  ┌─────────────┐  ┌──────────────┐  ┌──────────────────────────────┐   │
│  │ ApiClient   │  │ SessionStore │  │ AuthApi, StudentApi,         │   │
│  │ (HTTP)      │  │ (token)      │  │ TeacherApi, ParentApi, ...   │   │
│  └─────────────┘  └──────────────┘  └──────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                     ProgressDashboard                                    │
│       (Orchestrator - connects API, engine and TerminalDisplay)         │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

halaqa/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # ApiError and friends
├── dashboard.py         # ProgressDashboard orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── enrollment.py    # Enrollment, EnrollmentStatus
│   ├── progress.py      # ProgressBand, FallbackPolicy, ProgressResult, ...
│   ├── activity.py      # AttendanceRecord, RsvpStatus
│   └── session.py       # Session
│
├── engines/
│   └── progress.py      # ProgressCalculator
│
├── api/                 # Backend access
│   ├── client.py        # ApiClient
│   ├── session.py       # SessionStore
│   └── auth.py, student.py, teacher.py, parent.py, events.py, profile.py,
│       mosques.py, notifications.py
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

Progress without any network access:

    from halaqa import calculate_progress, band_for

    calculate_progress({"course_type": "memorization", "completion_percentage": 62})  # 62
    band_for(62)  # ProgressBand.WARNING

Talking to the backend:

    from halaqa import ApiClient, SessionStore, AuthApi, StudentApi

    client = ApiClient(SessionStore())
    AuthApi(client).login("student@example.com", "secret")
    enrollments = StudentApi(client).my_enrollments(status="active")

Running from command line:

    python -m halaqa

"""

# Version
__version__ = "1.0.0"

# Main exports
from .dashboard import ProgressDashboard
from .cli import main

# Model exports
from .models import (
    Enrollment,
    EnrollmentStatus,
    ProgressBand,
    FallbackPolicy,
    ProgressResult,
    ProgressSummary,
    AttendanceRecord,
    AttendanceStatus,
    RsvpStatus,
    Session,
)

# Engine exports
from .engines import ProgressCalculator, calculate_progress, band_for

# API exports
from .api import (
    ApiClient,
    SessionStore,
    AuthApi,
    ProfileApi,
    StudentApi,
    TeacherApi,
    ParentApi,
    EventsApi,
    MosquesApi,
    NotificationsApi,
)

# Error exports
from .exceptions import (
    HalaqaError,
    ApiError,
    AuthenticationError,
    NetworkError,
    ValidationError,
)

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "ProgressDashboard",
    "main",
    # Models
    "Enrollment",
    "EnrollmentStatus",
    "ProgressBand",
    "FallbackPolicy",
    "ProgressResult",
    "ProgressSummary",
    "AttendanceRecord",
    "AttendanceStatus",
    "RsvpStatus",
    "Session",
    # Engines
    "ProgressCalculator",
    "calculate_progress",
    "band_for",
    # API
    "ApiClient",
    "SessionStore",
    "AuthApi",
    "ProfileApi",
    "StudentApi",
    "TeacherApi",
    "ParentApi",
    "EventsApi",
    "MosquesApi",
    "NotificationsApi",
    # Errors
    "HalaqaError",
    "ApiError",
    "AuthenticationError",
    "NetworkError",
    "ValidationError",
    # UI
    "TerminalDisplay",
]
