"""
Helpers for reading backend response bodies.
"""

from typing import Any

from ..models import Enrollment


def unwrap(body: Any, *keys: str) -> Any:
    """
    Extract the payload from a response envelope.

    The backend wraps results inconsistently:

        [...]                                   -> returned as is
        {"enrollments": [...]}                  -> body["enrollments"]
        {"success": true, "data": [...]}        -> body["data"]
        {"data": {"enrollments": [...]}}        -> body["data"]["enrollments"]

    Named keys are tried first at the top level, then inside "data".
    """
    if not isinstance(body, dict):
        return body
    data = body.get("data")
    for source in (body, data if isinstance(data, dict) else {}):
        for key in keys:
            if source.get(key) is not None:
                return source[key]
    if data is not None:
        return data
    return body


def find(body: Any, key: str) -> Any:
    """Value of `key` at the top level or inside "data", else None."""
    if not isinstance(body, dict):
        return None
    if body.get(key) is not None:
        return body[key]
    data = body.get("data")
    if isinstance(data, dict):
        return data.get(key)
    return None


def as_list(value: Any) -> list:
    """A list payload, or [] when the backend sent nothing usable."""
    return value if isinstance(value, list) else []


def to_enrollments(body: Any, *keys: str) -> list:
    """Unwrap a list of enrollment records into Enrollment objects."""
    records = as_list(unwrap(body, *keys))
    return [Enrollment.from_dict(r) for r in records if isinstance(r, dict)]
