"""Gemini fetch layer with redirect following and typed failures.

This module provides:
- Single request/response round-trips over a pluggable transport
- Redirect following bounded by a configurable limit
- A TLS transport with optional certificate verification
- Metrics collection for observability
"""

from gemfetch.fetch.client import GeminiFetcher, fetch_once, fetch_with_redirects
from gemfetch.fetch.config import FetchConfig, TransportConfig
from gemfetch.fetch.metrics import FetchMetrics
from gemfetch.fetch.models import (
    FetchError,
    FetchPhase,
    InvalidUrlError,
    ResponseDecodeError,
    TooManyRedirectsError,
    TransportError,
    UnsupportedSchemeError,
)
from gemfetch.fetch.protocols import Stream, Transport
from gemfetch.fetch.redact import redact_url
from gemfetch.fetch.state_machine import FetchState, FetchStateMachine
from gemfetch.fetch.transport import TlsTransport, build_ssl_context


__all__ = [
    # Client
    "GeminiFetcher",
    "fetch_once",
    "fetch_with_redirects",
    # Transport
    "TlsTransport",
    "build_ssl_context",
    "Stream",
    "Transport",
    # Config
    "FetchConfig",
    "TransportConfig",
    # Errors
    "FetchError",
    "FetchPhase",
    "ResponseDecodeError",
    "TooManyRedirectsError",
    "TransportError",
    "InvalidUrlError",
    "UnsupportedSchemeError",
    # State
    "FetchState",
    "FetchStateMachine",
    # Metrics
    "FetchMetrics",
    # Redaction
    "redact_url",
]
