from __future__ import annotations

import time

from src.student_portal.student_portal.core.exceptions import BackendError


def test_gated_pages_redirect_to_login(client):
    for path in ("/", "/select", "/dashboard/CSE/2/3", "/students/add"):
        res = client.get(path)
        assert res.status_code == 302
        assert res.headers["Location"].endswith("/login")


def test_login_stores_tokens_and_redirects(client):
    res = client.post("/login", data={"email": "staff@college.edu", "password": "secret1"})

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/")
    with client.session_transaction() as sess:
        assert sess["access_token"] == "access-1"
        assert sess["user_id"] == "user-1"


def test_login_failure_shows_provider_message(client):
    res = client.post("/login", data={"email": "staff@college.edu", "password": "nope"})

    assert res.status_code == 200
    assert b"Invalid login credentials" in res.data


def test_signup_with_confirmation_goes_to_login(client, auth_provider):
    auth_provider.confirm_email = True

    res = client.post("/signup", data={"name": "Ravi", "email": "ravi@college.edu", "password": "abcdef"})

    assert res.status_code == 302
    assert res.headers["Location"].endswith("/login")
    with client.session_transaction() as sess:
        assert "access_token" not in sess


def test_signup_rejects_short_password(client, auth_provider):
    res = client.post("/signup", data={"name": "Ravi", "email": "ravi@college.edu", "password": "abc"})

    assert res.status_code == 200
    assert "ravi@college.edu" not in auth_provider.users


def test_expired_session_is_restored(client, auth_provider):
    with client.session_transaction() as sess:
        sess["access_token"] = "access-1"
        sess["refresh_token"] = "refresh-1"
        sess["expires_at"] = int(time.time()) - 10
        sess["user_id"] = "user-1"

    res = client.get("/select")

    assert res.status_code == 200
    assert auth_provider.restored == ["access-1"]
    with client.session_transaction() as sess:
        assert sess["access_token"] == "access-refreshed"


def test_revoked_session_is_cleared(client, auth_provider):
    auth_provider.revoked.add("access-1")
    with client.session_transaction() as sess:
        sess["access_token"] = "access-1"
        sess["refresh_token"] = "refresh-1"
        sess["expires_at"] = int(time.time()) - 10
        sess["user_id"] = "user-1"

    res = client.get("/select")

    assert res.headers["Location"].endswith("/login")
    with client.session_transaction() as sess:
        assert "access_token" not in sess


def test_logout_keeps_selection(signed_in_client, auth_provider):
    with signed_in_client.session_transaction() as sess:
        sess["selection-storage"] = {"department_code": "CSE"}

    res = signed_in_client.post("/logout")

    assert res.headers["Location"].endswith("/login")
    assert auth_provider.signed_out == ["access-1"]
    with signed_in_client.session_transaction() as sess:
        assert "access_token" not in sess
        assert sess["selection-storage"] == {"department_code": "CSE"}


def test_backend_outage_during_restore_keeps_tokens(client, auth_provider):
    auth_provider.restore_error = BackendError("Could not reach the sign-in service")
    with client.session_transaction() as sess:
        sess["access_token"] = "access-1"
        sess["refresh_token"] = "refresh-1"
        sess["expires_at"] = int(time.time()) - 10
        sess["user_id"] = "user-1"

    res = client.get("/select", follow_redirects=True)

    assert b"Could not reach the sign-in service" in res.data
    with client.session_transaction() as sess:
        assert sess["access_token"] == "access-1"
        assert sess["refresh_token"] == "refresh-1"


def test_logout_clears_session_when_provider_fails(signed_in_client, auth_provider):
    auth_provider.sign_out_error = BackendError("Could not reach the sign-in service")

    res = signed_in_client.post("/logout")

    assert res.headers["Location"].endswith("/login")
    with signed_in_client.session_transaction() as sess:
        assert "access_token" not in sess
