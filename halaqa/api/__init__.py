"""
Backend access.

This package handles all HTTP I/O: the ApiClient, the persisted session
and one wrapper class per area of the backend.
"""

from .session import SessionStore
from .client import ApiClient, create_http_session, extract_error_message
from .payload import unwrap, find, to_enrollments
from .auth import AuthApi
from .profile import ProfileApi
from .student import StudentApi
from .teacher import TeacherApi
from .parent import ParentApi
from .events import EventsApi
from .mosques import MosquesApi
from .notifications import NotificationsApi

__all__ = [
    "SessionStore",
    "ApiClient",
    "create_http_session",
    "extract_error_message",
    "unwrap",
    "find",
    "to_enrollments",
    "AuthApi",
    "ProfileApi",
    "StudentApi",
    "TeacherApi",
    "ParentApi",
    "EventsApi",
    "MosquesApi",
    "NotificationsApi",
]
