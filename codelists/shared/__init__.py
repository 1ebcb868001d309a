"""Shared utilities: telemetry (logging) and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from codelists.shared.utils import ensure_utc, today_utc, utc_now

__all__ = [
    "utc_now",
    "today_utc",
    "ensure_utc",
]
