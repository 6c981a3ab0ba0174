"""
Authenticated session model.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Session:
    """
    The logged-in user's credentials.

    Attributes:
        token: Bearer token issued by /api/users/login, None when logged out
        user: User profile returned alongside the token (id, name, role, ...)
    """
    token: Optional[str] = None
    user: dict = field(default_factory=dict)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def role(self) -> str:
        """User role as reported by the backend ("" when unknown)."""
        return str(self.user.get("role") or "").lower()

    def to_dict(self) -> dict:
        return {"authToken": self.token, "userData": self.user}

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        if not isinstance(data, dict):
            return cls()
        user = data.get("userData")
        return cls(
            token=data.get("authToken") or None,
            user=user if isinstance(user, dict) else {},
        )
