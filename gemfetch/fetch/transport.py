"""TLS transport: opens one encrypted stream per fetch attempt."""

import socket
import ssl
from urllib.parse import urlsplit

import structlog

from gemfetch.fetch.config import TransportConfig
from gemfetch.fetch.constants import COMPONENT_TRANSPORT
from gemfetch.fetch.models import InvalidUrlError, UnsupportedSchemeError
from gemfetch.fetch.redact import redact_url
from gemfetch.protocol.constants import GEMINI_SCHEME


logger = structlog.get_logger()


def build_ssl_context(verify_certificates: bool) -> ssl.SSLContext:
    """Create the client TLS context.

    Args:
        verify_certificates: Validate the server certificate and hostname.

    Returns:
        Configured SSL context.
    """
    context = ssl.create_default_context()
    if not verify_certificates:
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
    return context


class TlsStream:
    """TLS socket wrapper that treats an unclean TLS shutdown as EOF.

    Many Gemini servers close the TCP connection without sending
    close_notify once the body is written.
    """

    def __init__(self, sock: ssl.SSLSocket) -> None:
        self._sock = sock

    def sendall(self, data: bytes) -> None:
        self._sock.sendall(data)

    def recv(self, bufsize: int) -> bytes:
        try:
            return self._sock.recv(bufsize)
        except ssl.SSLEOFError:
            return b""

    def close(self) -> None:
        self._sock.close()


class TlsTransport:
    """Opens TLS streams to Gemini servers.

    The certificate policy is fixed at construction; the protocol core
    never sees it.
    """

    def __init__(self, config: TransportConfig | None = None) -> None:
        """Initialize the transport.

        Args:
            config: Transport configuration. Defaults are used if omitted.
        """
        self._config = config or TransportConfig()
        self._context = build_ssl_context(self._config.verify_certificates)
        self._log = logger.bind(
            component=COMPONENT_TRANSPORT,
            verify_certificates=self._config.verify_certificates,
        )

    @property
    def config(self) -> TransportConfig:
        """Get the transport configuration."""
        return self._config

    def parse_target(self, url: str) -> tuple[str, int]:
        """Extract host and port from a Gemini URL.

        Args:
            url: Absolute URL. The scheme must be gemini or empty.

        Returns:
            Tuple of (host, port).

        Raises:
            UnsupportedSchemeError: If the scheme is not gemini.
            InvalidUrlError: If the URL has no host, a bad port or a host
                the IDNA codec rejects.
        """
        try:
            parsed = urlsplit(url)
            port = parsed.port
        except ValueError as e:
            raise InvalidUrlError(f"invalid URL: {e}", url=url) from e

        if parsed.scheme not in (GEMINI_SCHEME, ""):
            raise UnsupportedSchemeError(parsed.scheme, url=url)

        host = parsed.hostname
        if not host:
            raise InvalidUrlError("invalid host", url=url)

        try:
            host.encode("idna")
        except UnicodeError as e:
            raise InvalidUrlError(f"invalid host: {e}", url=url) from e

        return host, (port if port is not None else self._config.default_port)

    def open(self, url: str) -> TlsStream:
        """Connect and complete the TLS handshake.

        Args:
            url: URL of the request about to be sent.

        Returns:
            Connected TLS stream.

        Raises:
            TransportError: If the URL cannot be mapped to a server.
            OSError: If the TCP connection or TLS handshake fails.
        """
        host, port = self.parse_target(url)
        self._log.debug("connecting", host=host, port=port, url=redact_url(url))

        sock = socket.create_connection(
            (host, port), timeout=self._config.timeout_seconds
        )
        try:
            tls_sock = self._context.wrap_socket(sock, server_hostname=host)
        except OSError:
            sock.close()
            raise

        return TlsStream(tls_sock)
