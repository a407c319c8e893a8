"""Error types for the fetch layer."""

from enum import Enum

from gemfetch.protocol.errors import DecodeError


class FetchPhase(str, Enum):
    """Phase of a fetch attempt in which a failure occurred.

    - CONNECT: Opening the stream (URL, TCP, or TLS handshake)
    - WRITE: Sending the request line
    - READ: Reading the response bytes
    - DECODE: Parsing or classifying the response
    - REDIRECT: Redirect chain exceeded its limit
    """

    CONNECT = "CONNECT"
    WRITE = "WRITE"
    READ = "READ"
    DECODE = "DECODE"
    REDIRECT = "REDIRECT"


class FetchError(Exception):
    """Base exception for fetch failures.

    Every failure aborts the current attempt; none are retried.
    """

    def __init__(
        self,
        phase: FetchPhase,
        message: str,
        url: str | None = None,
    ) -> None:
        """Initialize the fetch error.

        Args:
            phase: Phase in which the fetch failed.
            message: Human-readable error message.
            url: URL being fetched when the failure occurred.
        """
        super().__init__(message)
        self.phase = phase
        self.message = message
        self.url = url

    def to_dict(self) -> dict[str, str | None]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "phase": self.phase.value,
            "message": self.message,
            "url": self.url,
        }


class ResponseDecodeError(FetchError):
    """Raised when a response was read but could not be decoded."""

    def __init__(self, decode_error: DecodeError, url: str | None = None) -> None:
        """Initialize the error.

        Args:
            decode_error: The underlying codec error.
            url: URL whose response failed to decode.
        """
        super().__init__(
            phase=FetchPhase.DECODE,
            message=f"failed to parse response: {decode_error.message}",
            url=url,
        )
        self.decode_error = decode_error


class TooManyRedirectsError(FetchError):
    """Raised when a redirect chain exceeds the configured limit."""

    def __init__(self, limit: int, url: str | None = None) -> None:
        """Initialize the error.

        Args:
            limit: The configured maximum number of redirects.
            url: Last redirect target that was not followed.
        """
        super().__init__(
            phase=FetchPhase.REDIRECT,
            message=f"maximum redirects ({limit}) exceeded",
            url=url,
        )
        self.limit = limit


class TransportError(FetchError):
    """Raised by a transport that cannot open a stream for a URL."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(phase=FetchPhase.CONNECT, message=message, url=url)


class InvalidUrlError(TransportError):
    """Raised when a URL has no usable host or port."""


class UnsupportedSchemeError(TransportError):
    """Raised when a URL uses a scheme other than gemini."""

    def __init__(self, scheme: str, url: str | None = None) -> None:
        """Initialize the error.

        Args:
            scheme: The rejected URL scheme.
            url: The full URL.
        """
        super().__init__(message=f'unknown scheme "{scheme}"', url=url)
        self.scheme = scheme
