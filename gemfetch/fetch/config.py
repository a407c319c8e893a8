"""Configuration models for the fetch layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from gemfetch.fetch.constants import (
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_READ_CHUNK_SIZE,
    DEFAULT_TIMEOUT_SECONDS,
)
from gemfetch.protocol.constants import DEFAULT_PORT


class FetchConfig(BaseModel):
    """Configuration for the redirect-following fetcher."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_redirects: Annotated[int, Field(ge=0, le=100)] = DEFAULT_MAX_REDIRECTS
    read_chunk_size: Annotated[int, Field(ge=1, le=1024 * 1024)] = (
        DEFAULT_READ_CHUNK_SIZE
    )


class TransportConfig(BaseModel):
    """Configuration for the TLS transport.

    Certificate handling lives here rather than in the protocol core.
    Gemini servers commonly use self-signed certificates (trust on first
    use), so verification is off unless requested.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    verify_certificates: bool = Field(
        default=False,
        description="Validate server certificates against the system trust store",
    )
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )
    default_port: Annotated[int, Field(ge=1, le=65535)] = DEFAULT_PORT
