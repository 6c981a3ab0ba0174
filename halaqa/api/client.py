"""
HTTP client for the halaqa backend.

This module is the only place that talks to the network. It attaches the
bearer token, maps error responses to exceptions and clears the stored
session when the backend rejects the token.
"""

import logging
from typing import Any, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import (
    API_BASE_URL,
    DEFAULT_HEADERS,
    GENERIC_NETWORK_ERROR,
    GENERIC_SERVER_ERROR,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_BACKOFF_FACTOR,
    RETRY_STATUS_CODES,
    SESSION_EXPIRED_MESSAGE,
)
from ..exceptions import ApiError, AuthenticationError, NetworkError
from .session import SessionStore

logger = logging.getLogger(__name__)


def create_http_session(max_retries: int = MAX_RETRIES) -> requests.Session:
    """
    Build the requests.Session used for every call.

    Retries only ever apply to GET, so a POST that reached the server is
    never sent twice.
    """
    session = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=RETRY_BACKOFF_FACTOR,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update(DEFAULT_HEADERS)
    return session


def extract_error_message(payload: Any) -> Optional[str]:
    """
    Pull the human-readable message out of an error body.

    The backend answers errors as {"message": "..."} or {"error": "..."},
    occasionally {"error": {"message": "..."}}. Anything else gives None.
    """
    if not isinstance(payload, dict):
        return None
    for key in ("message", "error"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value
        if isinstance(value, dict):
            nested = value.get("message")
            if isinstance(nested, str) and nested.strip():
                return nested
    return None


class ApiClient:
    """
    Thin request/response pass-through against one backend.

    ═══════════════════════════════════════════════════════════════════════════
    CONTRACT
    ═══════════════════════════════════════════════════════════════════════════

    * Every request carries "Authorization: Bearer <token>" when the
      SessionStore holds a token.
    * 2xx: returns the parsed JSON body (None for an empty body).
    * 401: clears the SessionStore, raises AuthenticationError. Sending the
      user back to the login prompt is the caller's job.
    * Other non-2xx: raises ApiError carrying the server's message when it
      sent one.
    * No response at all: raises NetworkError with a generic message.

    ═══════════════════════════════════════════════════════════════════════════

    Usage:
        client = ApiClient(SessionStore())
        enrollments = client.get("/api/enrollment/my-enrollments", params={"status": "active"})
    """

    def __init__(self, session_store: Optional[SessionStore] = None,
                 base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT,
                 http: Optional[requests.Session] = None):
        self.session_store = session_store if session_store is not None else SessionStore()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http if http is not None else create_http_session()

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self) -> dict:
        headers = {}
        token = self.session_store.token
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def request(self, method: str, path: str, params: Optional[dict] = None,
                json: Any = None) -> Any:
        """Send one request and return the parsed body, raising on failure."""
        method = method.upper()
        logger.debug("%s %s", method, path)

        try:
            response = self.http.request(
                method,
                self.url_for(path),
                params=params,
                json=json,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise NetworkError(GENERIC_NETWORK_ERROR) from e

        payload = self._parse_body(response)
        status = response.status_code

        if status == 401:
            logger.warning("%s %s returned 401, clearing stored session", method, path)
            self.session_store.clear()
            message = extract_error_message(payload) or SESSION_EXPIRED_MESSAGE
            raise AuthenticationError(message, status, payload)

        if not 200 <= status < 300:
            message = extract_error_message(payload) or GENERIC_SERVER_ERROR
            logger.error("%s %s returned %s: %s", method, path, status, message)
            raise ApiError(message, status, payload)

        return payload

    @staticmethod
    def _parse_body(response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("GET", path, params=params)

    def post(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def patch(self, path: str, json: Any = None, params: Optional[dict] = None) -> Any:
        return self.request("PATCH", path, params=params, json=json)

    def delete(self, path: str, params: Optional[dict] = None) -> Any:
        return self.request("DELETE", path, params=params)
