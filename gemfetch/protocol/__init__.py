"""Gemini protocol codec.

This module provides the wire-level pieces of the client:
- Request line framing
- Response header and body parsing
- Status code classification
"""

from gemfetch.protocol.codec import decode_response, encode_request
from gemfetch.protocol.constants import CRLF, DEFAULT_PORT, GEMINI_SCHEME
from gemfetch.protocol.errors import (
    DecodeError,
    DecodeErrorClass,
    HeaderTooShortError,
    InvalidEncodingError,
    MissingSpaceCharacterError,
    MissingTerminatorError,
    UnknownStatusError,
)
from gemfetch.protocol.models import Header, Response
from gemfetch.protocol.status import StatusCategory, classify


__all__ = [
    # Codec
    "encode_request",
    "decode_response",
    "classify",
    # Models
    "Header",
    "Response",
    "StatusCategory",
    # Errors
    "DecodeError",
    "DecodeErrorClass",
    "MissingTerminatorError",
    "HeaderTooShortError",
    "MissingSpaceCharacterError",
    "InvalidEncodingError",
    "UnknownStatusError",
    # Constants
    "CRLF",
    "DEFAULT_PORT",
    "GEMINI_SCHEME",
]
