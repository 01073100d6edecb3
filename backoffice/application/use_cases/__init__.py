"""Aggregate application use cases."""

from .audit_logs import list_logs, record_log
from .references import list_majors, list_roles

__all__ = [
    "list_logs",
    "list_majors",
    "list_roles",
    "record_log",
]
