"""Tests for the server-rendered password reset flow."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from backoffice.infrastructure.database import SessionLocal
from backoffice.infrastructure.models import LogModel, UserModel
from backoffice.infrastructure.repositories import UserRepository
from backoffice.infrastructure.security import create_reset_token, verify_password

from conftest import OLD_PASSWORD


def _stored_user(user_id: int) -> UserModel:
    with SessionLocal() as session:
        return session.get(UserModel, user_id)


def _token_for(db_session, settings, user_id: int, **kwargs) -> str:
    user = UserRepository(db_session).get(user_id)
    return create_reset_token(settings, user, **kwargs)


def _submit(client: TestClient, **form) -> str:
    response = client.post("/reset-password", data=form)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    return response.text


def test_reset_form_prefills_token(client: TestClient) -> None:
    response = client.get("/reset-password", params={"token": "abc.def.ghi"})

    assert response.status_code == 200
    assert 'name="token" value="abc.def.ghi"' in response.text
    assert "<title>Reset Password</title>" in response.text


def test_missing_token_renders_error(client: TestClient) -> None:
    html = _submit(client, password="secret1", confirmPassword="secret1")

    assert "Invalid token." in html


def test_missing_password_renders_error(client: TestClient, make_user, db_session, settings) -> None:
    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)

    html = _submit(client, token=token, password="secret1")

    assert "Password and confirmation are required." in html
    assert f'value="{token}"' in html


def test_expired_token_leaves_store_unchanged(
    client: TestClient, make_user, db_session, settings
) -> None:
    user_id = make_user("target", "target@b.com")
    before = _stored_user(user_id).password
    token = _token_for(db_session, settings, user_id, expires_delta=timedelta(seconds=-1))

    html = _submit(client, token=token, password="newsecret", confirmPassword="newsecret")

    assert "Token is invalid or has expired." in html
    assert _stored_user(user_id).password == before


def test_tampered_token_is_rejected(client: TestClient, make_user, db_session, settings) -> None:
    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)

    html = _submit(client, token=token[:-2] + "xx", password="newsecret", confirmPassword="newsecret")

    assert "Token is invalid or has expired." in html


def test_token_for_deleted_user(client: TestClient, make_user, db_session, settings) -> None:
    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)
    client.delete(f"/users/{user_id}")

    html = _submit(client, token=token, password="newsecret", confirmPassword="newsecret")

    assert "User not found." in html


@pytest.mark.parametrize(
    ("password", "confirmation", "message"),
    [
        ("newsecret", "different", "Password and confirmation do not match."),
        ("abc", "abc", "Password must be at least 6 characters."),
    ],
)
def test_invalid_password_leaves_hash_unchanged(
    client: TestClient, make_user, db_session, settings, password, confirmation, message
) -> None:
    user_id = make_user("target", "target@b.com")
    before = _stored_user(user_id).password
    token = _token_for(db_session, settings, user_id)

    html = _submit(client, token=token, password=password, confirmPassword=confirmation)

    assert message in html
    assert _stored_user(user_id).password == before


def test_successful_reset_updates_hash_and_logs(
    client: TestClient, make_user, db_session, settings
) -> None:
    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)

    html = _submit(client, token=token, password="brandnew", confirmPassword="brandnew")

    assert "<title>Login</title>" in html
    assert "Your password has been reset." in html

    stored = _stored_user(user_id)
    assert verify_password("brandnew", stored.password)
    assert not verify_password(OLD_PASSWORD, stored.password)

    with SessionLocal() as session:
        logs = session.query(LogModel).filter(LogModel.action == "reset-password").all()
    assert len(logs) == 1
    assert logs[0].user_id == user_id
    assert logs[0].data == {"username": "target"}


def test_token_can_be_redeemed_again(client: TestClient, make_user, db_session, settings) -> None:
    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)

    _submit(client, token=token, password="firstnew", confirmPassword="firstnew")
    html = _submit(client, token=token, password="secondnew", confirmPassword="secondnew")

    assert "Your password has been reset." in html
    assert verify_password("secondnew", _stored_user(user_id).password)


def test_unexpected_failure_renders_generic_error(
    client: TestClient, make_user, db_session, settings, monkeypatch
) -> None:
    from backoffice.interfaces.api.routes import pages

    user_id = make_user("target", "target@b.com")
    token = _token_for(db_session, settings, user_id)

    def broken_reset(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(pages, "reset_password_uc", broken_reset)

    html = _submit(client, token=token, password="brandnew", confirmPassword="brandnew")

    assert "Something went wrong while resetting your password." in html
    assert f'value="{token}"' in html


def test_login_page_renders(client: TestClient) -> None:
    response = client.get("/login")

    assert response.status_code == 200
    assert "<title>Login</title>" in response.text


def test_login_page_has_no_dead_form(client: TestClient) -> None:
    response = client.get("/login")

    assert "<form" not in response.text
    assert "Continue to sign in" not in response.text


def test_login_page_links_to_configured_sign_in(client: TestClient, settings) -> None:
    from backoffice.config import get_settings

    configured = settings.model_copy(update={"login_url": "https://app.example.com/sign-in"})
    client.app.dependency_overrides[get_settings] = lambda: configured
    try:
        response = client.get("/login")
    finally:
        client.app.dependency_overrides.clear()

    assert 'href="https://app.example.com/sign-in"' in response.text


def test_token_issued_to_previous_email_is_rejected(
    client: TestClient, make_user, db_session, settings
) -> None:
    user_id = make_user("target", "target@b.com")
    before = _stored_user(user_id).password
    token = _token_for(db_session, settings, user_id)

    with SessionLocal() as session:
        session.get(UserModel, user_id).email = "moved@b.com"
        session.commit()

    html = _submit(client, token=token, password="newsecret", confirmPassword="newsecret")

    assert "Token is invalid or has expired." in html
    assert _stored_user(user_id).password == before
