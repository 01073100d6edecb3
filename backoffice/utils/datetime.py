"""Clock helpers for the ``created_on``/``updated_on`` audit columns.

Columns are stored as naive ``DATETIME`` values in the zone named by
``APP_TIMEZONE``; entities carry aware values in that same zone.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from functools import lru_cache

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from backoffice.config import get_settings

logger = logging.getLogger(__name__)

FALLBACK_TIMEZONE = "Asia/Jakarta"


@lru_cache(maxsize=8)
def _zone(name: str) -> tzinfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown APP_TIMEZONE %r, using %s", name, FALLBACK_TIMEZONE)
        return ZoneInfo(FALLBACK_TIMEZONE)


def _app_zone() -> tzinfo:
    return _zone(get_settings().app_timezone.strip() or FALLBACK_TIMEZONE)


def now_in_app_timezone() -> datetime:
    return datetime.now(tz=_app_zone())


def now_in_app_naive_datetime() -> datetime:
    """Column default: the local wall-clock time without ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Attach the app zone to a value read from a naive column."""

    if value is None:
        return None
    zone = _app_zone()
    if value.tzinfo is None:
        return value.replace(tzinfo=zone)
    return value.astimezone(zone)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    return ensure_app_timezone(value).replace(tzinfo=None)
