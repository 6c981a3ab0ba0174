"""
Authentication endpoints.

Backend routes are mounted at /api/users.
"""

import logging

from ..exceptions import ApiError, ValidationError
from ..models import Session
from .client import ApiClient
from .payload import find

logger = logging.getLogger(__name__)


class AuthApi:
    """
    Login, registration and the session refresh routine.

    login() and refresh_session() are the only places that write a token
    into the SessionStore; logout() and the client's 401 handling are the
    only places that clear it.
    """

    def __init__(self, client: ApiClient):
        self.client = client

    @property
    def store(self):
        return self.client.session_store

    def login(self, email: str, password: str) -> Session:
        """Log in and persist the returned token and user profile."""
        if not email or not password:
            raise ValidationError("Email and password are required")

        body = self.client.post("/api/users/login", json={"email": email, "password": password})
        token = find(body, "token")
        user = find(body, "user")
        if not isinstance(token, str) or not token:
            raise ApiError("Login response did not include a token", payload=body)

        session = Session(token=token, user=user if isinstance(user, dict) else {})
        self.store.save(session)
        logger.info("Logged in as %s", session.user.get("email", email))
        return session

    def register(self, user_data: dict):
        return self.client.post("/api/users/register", json=user_data)

    def register_teacher(self, user_data: dict):
        return self.client.post("/api/users/register-teacher", json=user_data)

    def logout(self) -> None:
        """
        Tell the backend, then forget the session locally.

        The local session is cleared even when the backend call fails
        (an expired token cannot log out).
        """
        try:
            self.client.post("/api/users/logout")
        except ApiError as e:
            logger.info("Logout call failed (token may be expired): %s", e)
        finally:
            self.store.clear()

    def verify(self):
        return self.client.get("/api/users/verify")

    def refresh_session(self) -> Session:
        """
        Re-validate the stored token and refresh the stored profile.

        A rotated token in the response replaces the stored one. A 401
        clears the store (inside ApiClient) and propagates as
        AuthenticationError.
        """
        current = self.store.session
        body = self.verify()

        token = find(body, "token")
        user = find(body, "user")
        session = Session(
            token=token if isinstance(token, str) and token else current.token,
            user=user if isinstance(user, dict) else current.user,
        )
        self.store.save(session)
        return session
