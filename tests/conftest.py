from __future__ import annotations

import json as jsonlib
from typing import Any, Optional

import pytest

from halaqa.api import ApiClient, SessionStore
from halaqa.models import Session


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        if text is None:
            text = "" if body is None else jsonlib.dumps(body)
        self.text = text
        self.content = text.encode("utf-8")

    def json(self):
        return jsonlib.loads(self.text)


class FakeHttp:
    """Stands in for requests.Session: records calls, replays queued responses."""

    def __init__(self):
        self.calls: list[dict] = []
        self._responses: list[Any] = []

    def queue(self, status_code: int = 200, body: Any = None, text: Optional[str] = None):
        self._responses.append(FakeResponse(status_code, body, text))
        return self

    def queue_error(self, exc: Exception):
        self._responses.append(exc)
        return self

    def request(self, method, url, params=None, json=None, headers=None, timeout=None):
        self.calls.append({
            "method": method,
            "url": url,
            "params": params,
            "json": json,
            "headers": dict(headers or {}),
            "timeout": timeout,
        })
        item = self._responses.pop(0) if self._responses else FakeResponse(200, {})
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def last(self) -> dict:
        return self.calls[-1]


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def store() -> SessionStore:
    return SessionStore(path=None)


@pytest.fixture
def logged_in_store(store) -> SessionStore:
    store.save(Session(token="tok-123", user={"id": 7, "role": "student", "email": "a@b.c"}))
    return store


@pytest.fixture
def client(logged_in_store, http) -> ApiClient:
    return ApiClient(logged_in_store, base_url="http://api.test", timeout=5, http=http)
