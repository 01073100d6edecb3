"""Unit tests for the SendGrid email helpers."""

from __future__ import annotations

import json
import types

import pytest

from backoffice.domain.entities import User
from backoffice.infrastructure import email as email_module


class _StubSendGridAPIClient:
    """Default stand-in client that returns a successful response."""

    sent: list = []

    def __init__(self, api_key: str):
        self.api_key = api_key

    def send(self, message):
        self.sent.append(message)
        return types.SimpleNamespace(status_code=202, body=None)


@pytest.fixture()
def sendgrid_settings(settings):
    return settings.model_copy(
        update={"sendgrid_api_key": "SG.fake", "sendgrid_sender": "sender@example.com"}
    )


def test_send_email_without_configuration(settings) -> None:
    """When SendGrid settings are missing the helper should exit early."""

    assert email_module.send_email(settings, "Subject", "<p>Body</p>", "user@example.com") is False


def test_send_email_success(monkeypatch: pytest.MonkeyPatch, sendgrid_settings) -> None:
    monkeypatch.setattr(email_module, "SendGridAPIClient", _StubSendGridAPIClient)

    assert (
        email_module.send_email(sendgrid_settings, "Subject", "<p>Body</p>", "user@example.com")
        is True
    )


def test_send_email_logs_forbidden_error(
    monkeypatch: pytest.MonkeyPatch, caplog, sendgrid_settings
) -> None:
    """Forbidden responses from SendGrid should surface meaningful log details."""

    class FakeForbiddenError(Exception):
        status_code = 403
        body = json.dumps(
            {"errors": [{"message": "The provided authorization grant is invalid."}]}
        ).encode()

    class FailingClient(_StubSendGridAPIClient):
        def send(self, message):
            raise FakeForbiddenError()

    monkeypatch.setattr(email_module, "SendGridAPIClient", FailingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email(
            sendgrid_settings, "Subject", "<p>Body</p>", "user@example.com"
        )

    assert result is False
    assert "status 403" in caplog.text
    assert "authorization grant is invalid" in caplog.text


def test_send_email_rejects_non_2xx_response(
    monkeypatch: pytest.MonkeyPatch, caplog, sendgrid_settings
) -> None:
    class RejectingClient(_StubSendGridAPIClient):
        def send(self, message):
            return types.SimpleNamespace(status_code=400, body=b"bad request")

    monkeypatch.setattr(email_module, "SendGridAPIClient", RejectingClient)

    with caplog.at_level("ERROR"):
        result = email_module.send_email(
            sendgrid_settings, "Subject", "<p>Body</p>", "user@example.com"
        )

    assert result is False
    assert "bad request" in caplog.text


def test_reset_password_email_renders_link(sent_emails, settings) -> None:
    user = User(
        id=3,
        username="target",
        fullname="Target <User>",
        email="target@b.com",
        password="",
        role_id=1,
        major_id=1,
        active=True,
        created_on=None,
        updated_on=None,
    )

    assert email_module.send_reset_password_email(settings, user, "tok.en.value") is True

    assert len(sent_emails) == 1
    message = sent_emails[0]
    assert message["to"] == "target@b.com"
    assert message["subject"] == email_module.RESET_PASSWORD_SUBJECT
    assert 'href="http://testserver/reset-password?token=tok.en.value"' in message["html"]
    assert "Target &lt;User&gt;" in message["html"]
    assert settings.mail_logo_url in message["html"]


def test_templated_email_render_failure_is_a_failed_send(
    broken_email_template, settings, caplog
) -> None:
    with caplog.at_level("ERROR"):
        result = email_module.send_templated_email(
            settings,
            to="user@example.com",
            subject="Subject",
            template="reset-password",
            context={},
        )

    assert result is False
    assert broken_email_template == []
    assert "Could not render the reset-password email" in caplog.text
