"""Tests for the audit column clock helpers."""

from __future__ import annotations

from datetime import datetime, timezone

import backoffice.utils as utils
from backoffice.utils import datetime as app_datetime


def test_public_helpers() -> None:
    assert sorted(utils.__all__) == [
        "ensure_app_naive_datetime",
        "ensure_app_timezone",
        "now_in_app_naive_datetime",
        "now_in_app_timezone",
    ]


def test_aware_value_is_stored_as_local_wall_clock() -> None:
    value = datetime(2024, 1, 1, 0, 30, tzinfo=timezone.utc)

    assert utils.ensure_app_naive_datetime(value) == datetime(2024, 1, 1, 7, 30)


def test_naive_column_value_gets_app_zone() -> None:
    restored = utils.ensure_app_timezone(datetime(2024, 1, 1, 7, 30))

    assert restored.utcoffset().total_seconds() == 7 * 3600
    assert utils.ensure_app_timezone(None) is None


def test_unknown_timezone_falls_back(monkeypatch, settings, caplog) -> None:
    broken = settings.model_copy(update={"app_timezone": "Mars/Olympus"})
    monkeypatch.setattr(app_datetime, "get_settings", lambda: broken)

    with caplog.at_level("WARNING"):
        now = utils.now_in_app_timezone()

    assert now.utcoffset().total_seconds() == 7 * 3600
    assert "Unknown APP_TIMEZONE" in caplog.text
