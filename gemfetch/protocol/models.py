"""Data models for decoded Gemini responses."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from gemfetch.protocol.constants import STATUS_LENGTH
from gemfetch.protocol.status import StatusCategory, classify


class Header(BaseModel):
    """Response header line: status code and meta field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    status: Annotated[
        str,
        Field(
            min_length=STATUS_LENGTH,
            max_length=STATUS_LENGTH,
            description="Two-character status code",
        ),
    ]
    meta: str = Field(
        default="",
        description="MIME type, redirect target, or error message",
    )


class Response(BaseModel):
    """Decoded Gemini response.

    Owns its text; nothing refers back to the buffer it was decoded from.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    header: Header
    body: str = Field(default="", description="Response body text")

    @property
    def category(self) -> StatusCategory:
        """Classify the status code.

        Raises:
            UnknownStatusError: If the status code is not classifiable.
        """
        return classify(self.header.status)
