"""Shared fixtures: a throwaway SQLite database, reference rows and a test client."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

TEST_DB_PATH = Path(tempfile.gettempdir()) / "backoffice_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["BASE_URL"] = "http://testserver"
os.environ["ENVIRONMENT"] = "production"
os.environ.pop("SENDGRID_API_KEY", None)
os.environ.pop("SENDGRID_SENDER", None)

from backoffice.config import get_settings  # noqa: E402

get_settings.cache_clear()

from backoffice.infrastructure import email as email_module  # noqa: E402
from backoffice.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from backoffice.infrastructure.models import MajorModel, RoleModel, UserModel  # noqa: E402
from backoffice.infrastructure.repositories import UserRepository  # noqa: E402
from backoffice.infrastructure.security import (  # noqa: E402
    create_access_token,
    get_password_hash,
)

OLD_PASSWORD = "OldSecret1"
_OLD_PASSWORD_HASH = get_password_hash(OLD_PASSWORD)


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def settings():
    return get_settings()


@pytest.fixture()
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def references(db_session):
    """Insert one role and one major; return their ids."""

    role = RoleModel(code="ADMIN", name="Administrator", active=True)
    other_role = RoleModel(code="STAFF", name="Staff", active=True)
    major = MajorModel(code="IF", name="Informatics", active=True)
    db_session.add_all([role, other_role, major])
    db_session.commit()
    return {"role_id": role.id, "other_role_id": other_role.id, "major_id": major.id}


@pytest.fixture()
def make_user(db_session, references):
    """Return a factory inserting users whose password is ``OLD_PASSWORD``."""

    def _make_user(username: str, email: str, fullname: str = "Test User", active: bool = True) -> int:
        model = UserModel(
            username=username,
            fullname=fullname,
            email=email,
            password=_OLD_PASSWORD_HASH,
            role_id=references["role_id"],
            major_id=references["major_id"],
            active=active,
        )
        db_session.add(model)
        db_session.commit()
        return model.id

    return _make_user


@pytest.fixture()
def auth_headers(db_session, settings):
    """Return a factory building bearer headers for an existing user id."""

    def _auth_headers(user_id: int) -> dict[str, str]:
        user = UserRepository(db_session).get(user_id)
        token = create_access_token(settings, user)
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture()
def sent_emails(monkeypatch):
    """Capture outgoing emails instead of calling SendGrid."""

    outbox: list[dict[str, str]] = []

    def fake_send_email(settings, subject, html_content, recipient):
        outbox.append({"subject": subject, "html": html_content, "to": recipient})
        return True

    monkeypatch.setattr(email_module, "send_email", fake_send_email)
    return outbox


@pytest.fixture()
def failing_emails(monkeypatch):
    """Make every email delivery fail."""

    attempts: list[str] = []

    def fake_send_email(settings, subject, html_content, recipient):
        attempts.append(recipient)
        return False

    monkeypatch.setattr(email_module, "send_email", fake_send_email)
    return attempts


@pytest.fixture()
def client():
    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def broken_email_template(monkeypatch, sent_emails):
    """Make email rendering blow up before anything reaches SendGrid."""

    def fake_render_email(name, **context):
        raise RuntimeError(f"template {name} is broken")

    monkeypatch.setattr(email_module, "render_email", fake_render_email)
    return sent_emails
