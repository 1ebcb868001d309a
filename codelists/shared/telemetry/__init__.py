"""Shared telemetry: logging setup and request-id correlation."""

from codelists.shared.telemetry.logging import (
    RequestIdFilter,
    bind_request_id,
    get_logger,
    get_request_id,
    reset_request_id,
    setup_logging,
)

__all__ = [
    "RequestIdFilter",
    "bind_request_id",
    "get_logger",
    "get_request_id",
    "reset_request_id",
    "setup_logging",
]
