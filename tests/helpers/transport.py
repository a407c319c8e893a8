"""Scripted in-memory transports for fetcher tests."""

from collections.abc import Callable
from dataclasses import dataclass, field


class StubStream:
    """In-memory stream that replays a canned server response.

    Attributes:
        response: Bytes handed out by ``recv``.
        sent: Everything written with ``sendall``.
        closed: Whether ``close`` has been called.
    """

    def __init__(
        self,
        response: bytes,
        recv_error: OSError | None = None,
        send_error: OSError | None = None,
    ) -> None:
        self.response = response
        self.sent = b""
        self.closed = False
        self._offset = 0
        self._recv_error = recv_error
        self._send_error = send_error

    def sendall(self, data: bytes) -> None:
        if self._send_error is not None:
            raise self._send_error
        self.sent += data

    def recv(self, bufsize: int) -> bytes:
        if self._offset >= len(self.response) and self._recv_error is not None:
            raise self._recv_error
        chunk = self.response[self._offset : self._offset + bufsize]
        self._offset += len(chunk)
        return chunk

    def close(self) -> None:
        self.closed = True


@dataclass
class StubTransport:
    """Transport that builds a stream per attempt from a responder.

    Attributes:
        responder: Maps the requested URL to the stream to hand out.
        opened: URLs passed to ``open``, in order.
        streams: Streams handed out, in order.
    """

    responder: Callable[[str], StubStream]
    opened: list[str] = field(default_factory=list)
    streams: list[StubStream] = field(default_factory=list)

    @classmethod
    def replaying(cls, *responses: bytes) -> "StubTransport":
        """Create a transport that serves ``responses`` one per attempt.

        The last response is repeated once the list is exhausted.
        """
        queue = list(responses)

        def responder(_url: str) -> StubStream:
            raw = queue.pop(0) if len(queue) > 1 else queue[0]
            return StubStream(raw)

        return cls(responder=responder)

    @property
    def attempts(self) -> int:
        """Number of streams opened."""
        return len(self.opened)

    def open(self, url: str) -> StubStream:
        self.opened.append(url)
        stream = self.responder(url)
        self.streams.append(stream)
        return stream


class FailingTransport:
    """Transport whose ``open`` always raises the given error."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.opened: list[str] = []

    def open(self, url: str) -> StubStream:
        self.opened.append(url)
        raise self.error


def always(raw: bytes) -> Callable[[str], StubStream]:
    """Responder that serves the same response to every URL."""
    return lambda _url: StubStream(raw)
