from __future__ import annotations

import json
import os
import stat

import pytest

from halaqa.api import ApiClient, AuthApi, SessionStore
from halaqa.exceptions import ApiError, AuthenticationError, ValidationError
from halaqa.models import Session


# ---------------------------------------------------------------------------
# SessionStore
# ---------------------------------------------------------------------------

def test_store_persists_and_reloads(tmp_path):
    path = tmp_path / "nested" / "session.json"
    SessionStore(path).save(Session(token="abc", user={"role": "student"}))

    with open(path, "r", encoding="utf-8") as f:
        assert json.load(f) == {"authToken": "abc", "userData": {"role": "student"}}

    reloaded = SessionStore(path)
    assert reloaded.token == "abc"
    assert reloaded.session.role == "student"


def test_store_missing_file_is_logged_out(tmp_path):
    store = SessionStore(tmp_path / "absent.json")
    assert store.token is None
    assert not store.session.is_authenticated


def test_store_corrupt_file_is_logged_out(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json", encoding="utf-8")
    assert SessionStore(path).token is None


def test_store_clear_removes_file(tmp_path):
    path = tmp_path / "session.json"
    store = SessionStore(path)
    store.save(Session(token="abc"))
    store.clear()
    assert not path.exists()
    assert store.token is None
    store.clear()  # clearing twice is fine


def test_memory_store_never_touches_disk(store):
    store.save(Session(token="abc"))
    assert store.token == "abc"
    assert store.path is None


# ---------------------------------------------------------------------------
# AuthApi
# ---------------------------------------------------------------------------

@pytest.fixture
def auth(store, http) -> AuthApi:
    return AuthApi(ApiClient(store, base_url="http://api.test", http=http))


def test_login_stores_token_and_user(auth, http, store):
    http.queue(200, {"success": True, "token": "new-token", "user": {"id": 1, "role": "parent"}})

    session = auth.login("p@example.com", "pw")

    assert http.last["url"] == "http://api.test/api/users/login"
    assert http.last["json"] == {"email": "p@example.com", "password": "pw"}
    assert session.token == "new-token"
    assert store.token == "new-token"
    assert store.session.role == "parent"


def test_login_accepts_data_envelope(auth, http, store):
    http.queue(200, {"data": {"token": "t2", "user": {"role": "teacher"}}})
    auth.login("t@example.com", "pw")
    assert store.token == "t2"
    assert store.session.role == "teacher"


def test_login_without_token_is_an_error(auth, http, store):
    http.queue(200, {"success": True})
    with pytest.raises(ApiError):
        auth.login("a@example.com", "pw")
    assert store.token is None


def test_login_requires_credentials(auth, http):
    with pytest.raises(ValidationError):
        auth.login("", "pw")
    assert http.calls == []


def test_bad_credentials_propagate(auth, http):
    http.queue(401, {"message": "Invalid email or password"})
    with pytest.raises(AuthenticationError, match="Invalid email or password"):
        auth.login("a@example.com", "wrong")


@pytest.mark.parametrize(
    "method, path",
    [("register", "/api/users/register"), ("register_teacher", "/api/users/register-teacher")],
)
def test_registration_posts_user_data(auth, http, store, method, path):
    http.queue(201, {"success": True, "message": "Registered"})
    result = getattr(auth, method)({"email": "new@example.com", "password": "pw"})
    assert result == {"success": True, "message": "Registered"}
    assert http.last["url"] == "http://api.test" + path
    assert http.last["json"]["email"] == "new@example.com"
    assert store.token is None


def test_logout_clears_even_when_backend_fails(auth, http, store):
    store.save(Session(token="abc"))
    http.queue(500, {"message": "oops"})
    auth.logout()
    assert http.last["url"] == "http://api.test/api/users/logout"
    assert store.token is None


def test_refresh_keeps_token_and_updates_user(auth, http, store):
    store.save(Session(token="abc", user={"role": "student", "name": "Old"}))
    http.queue(200, {"valid": True, "user": {"role": "student", "name": "New"}})

    session = auth.refresh_session()

    assert http.last["method"] == "GET"
    assert http.last["url"] == "http://api.test/api/users/verify"
    assert http.last["headers"]["Authorization"] == "Bearer abc"
    assert session.token == "abc"
    assert store.session.user["name"] == "New"


def test_refresh_takes_rotated_token(auth, http, store):
    store.save(Session(token="abc", user={"role": "student"}))
    http.queue(200, {"token": "rotated"})
    auth.refresh_session()
    assert store.token == "rotated"
    assert store.session.user == {"role": "student"}


def test_refresh_with_expired_token_clears_store(auth, http, store):
    store.save(Session(token="abc", user={"role": "student"}))
    http.queue(401, {"message": "jwt expired"})
    with pytest.raises(AuthenticationError):
        auth.refresh_session()
    assert store.token is None


@pytest.mark.skipif(os.name != "posix", reason="POSIX file modes")
def test_session_file_is_owner_only(tmp_path):
    path = tmp_path / "session.json"
    SessionStore(path).save(Session(token="secret"))
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_save_replaces_file_without_leftovers(tmp_path):
    path = tmp_path / "session.json"
    store = SessionStore(path)
    store.save(Session(token="first"))
    store.save(Session(token="second", user={"role": "parent"}))

    assert [p.name for p in tmp_path.iterdir()] == ["session.json"]
    assert SessionStore(path).token == "second"
