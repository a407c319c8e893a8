"""Protocol interfaces for the transport collaborator."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stream(Protocol):
    """Open, bidirectional byte stream to a server.

    A plain or TLS-wrapped ``socket.socket`` satisfies this protocol.
    """

    def sendall(self, data: bytes) -> None:
        """Write all bytes to the stream."""
        ...

    def recv(self, bufsize: int) -> bytes:
        """Read up to ``bufsize`` bytes; ``b""`` means the peer closed."""
        ...

    def close(self) -> None:
        """Release the stream."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Factory for streams, one per fetch attempt.

    Any object that implements ``open`` with the matching signature can be
    used by the fetcher, whether it speaks TLS or is a test stub.
    """

    def open(self, url: str) -> Stream:
        """Open a stream to the server named by ``url``.

        Args:
            url: URL of the request about to be sent.

        Returns:
            A connected stream.

        Raises:
            OSError: If the connection cannot be established.
            TransportError: If the URL cannot be mapped to a server.
        """
        ...
