"""Error types for the Gemini response codec."""

from enum import Enum


class DecodeErrorClass(str, Enum):
    """Classification of response decoding errors.

    - MISSING_TERMINATOR: No CRLF separating header and body
    - HEADER_TOO_SHORT: Header shorter than status code plus space
    - MISSING_SPACE_CHARACTER: No space after the status code
    - INVALID_ENCODING: Status, meta, or body is not valid text
    - UNKNOWN_STATUS: Leading status digit outside 1-6
    """

    MISSING_TERMINATOR = "MISSING_TERMINATOR"
    HEADER_TOO_SHORT = "HEADER_TOO_SHORT"
    MISSING_SPACE_CHARACTER = "MISSING_SPACE_CHARACTER"
    INVALID_ENCODING = "INVALID_ENCODING"
    UNKNOWN_STATUS = "UNKNOWN_STATUS"


class DecodeError(Exception):
    """Base exception for response decoding errors.

    Provides structured error information for logging and error reporting.
    """

    def __init__(
        self,
        error_class: DecodeErrorClass,
        message: str,
        details: dict[str, str | int | None] | None = None,
    ) -> None:
        """Initialize the decode error.

        Args:
            error_class: Classification of the error.
            message: Human-readable error message.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.error_class = error_class
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, str | int | None]]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "details": self.details,
        }


class MissingTerminatorError(DecodeError):
    """Raised when the response has no CRLF after the header."""

    def __init__(self) -> None:
        super().__init__(
            error_class=DecodeErrorClass.MISSING_TERMINATOR,
            message="server response is missing CRLF",
        )


class HeaderTooShortError(DecodeError):
    """Raised when the header line cannot hold a status code and a space."""

    def __init__(self, length: int) -> None:
        """Initialize the error.

        Args:
            length: Length of the header line in bytes.
        """
        super().__init__(
            error_class=DecodeErrorClass.HEADER_TOO_SHORT,
            message="header is too short",
            details={"length": length},
        )
        self.length = length


class MissingSpaceCharacterError(DecodeError):
    """Raised when the status code is not followed by a space."""

    def __init__(self) -> None:
        super().__init__(
            error_class=DecodeErrorClass.MISSING_SPACE_CHARACTER,
            message="header is missing space character",
        )


class InvalidEncodingError(DecodeError):
    """Raised when part of the response is not valid text."""

    def __init__(self, part: str, reason: str) -> None:
        """Initialize the error.

        Args:
            part: Which part failed to decode (status, meta, or body).
            reason: Underlying decoder message.
        """
        super().__init__(
            error_class=DecodeErrorClass.INVALID_ENCODING,
            message=f"response {part} is not valid text: {reason}",
            details={"part": part},
        )
        self.part = part


class UnknownStatusError(DecodeError):
    """Raised when the status code does not map to a known category."""

    def __init__(self, status: str) -> None:
        """Initialize the error.

        Args:
            status: The status code that could not be classified.
        """
        super().__init__(
            error_class=DecodeErrorClass.UNKNOWN_STATUS,
            message=f"unknown status returned ({status})",
            details={"status": status},
        )
        self.status = status
