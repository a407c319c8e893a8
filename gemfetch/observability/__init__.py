"""Observability utilities."""

from gemfetch.observability.logging import (
    bind_run_context,
    clear_run_context,
    configure_logging,
)


__all__ = [
    "configure_logging",
    "bind_run_context",
    "clear_run_context",
]
