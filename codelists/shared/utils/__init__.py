"""Shared utility helpers (UTC datetimes)."""

from codelists.shared.utils.datetime import ensure_utc, today_utc, utc_now

__all__ = [
    "utc_now",
    "today_utc",
    "ensure_utc",
]
