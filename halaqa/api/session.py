"""
Session persistence.

The session (bearer token plus user profile) is owned by a SessionStore that
is handed to the ApiClient at construction. Nothing else reads the token.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..config import SESSION_FILE
from ..models import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Holds the current Session and mirrors it to a JSON file.

    WHY A FILE: the CLI is a fresh process on every run; keeping the token
    on disk means the user logs in once.

    Pass path=None to keep the session in memory only (tests, scripts).

    Usage:
        store = SessionStore()             # ~/.halaqa/session.json
        store.save(Session(token="abc", user={"role": "student"}))
        store.token                         # "abc"
        store.clear()                       # logged out, file removed
    """

    def __init__(self, path: Optional[Path] = SESSION_FILE):
        self.path = Path(path) if path is not None else None
        self._session = None  # None means "not loaded yet"

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = self.load()
        return self._session

    @property
    def token(self) -> Optional[str]:
        return self.session.token

    def load(self) -> Session:
        """Read the persisted session; a missing or unreadable file means logged out."""
        if self.path is None or not self.path.exists():
            return Session()
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, e)
            return Session()
        return Session.from_dict(data)

    def save(self, session: Session) -> None:
        self._session = session
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)

        # The file holds a bearer token: owner-only, and replaced in one step
        # so a crash never leaves half a file behind.
        fd, tmp_path = tempfile.mkstemp(prefix=".session-", suffix=".tmp", dir=str(self.path.parent))
        try:
            os.chmod(tmp_path, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(session.to_dict(), f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
        logger.debug("Session saved to %s", self.path)

    def clear(self) -> None:
        """Forget the token and user profile, in memory and on disk."""
        self._session = Session()
        if self.path is not None and self.path.exists():
            self.path.unlink()
        logger.debug("Session cleared")
