"""Utility helpers for reusable functionality."""

from .datetime import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    format_display_date,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    parse_app_datetime,
)
from .identifiers import generate_record_id

__all__ = [
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "format_display_date",
    "generate_record_id",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "parse_app_datetime",
]
