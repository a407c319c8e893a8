"""Gemini fetcher: single round-trips and redirect following."""

import time
from contextlib import closing
from io import BytesIO

import structlog

from gemfetch.fetch.config import FetchConfig
from gemfetch.fetch.constants import COMPONENT_FETCH
from gemfetch.fetch.metrics import FetchMetrics
from gemfetch.fetch.models import (
    FetchError,
    FetchPhase,
    ResponseDecodeError,
    TooManyRedirectsError,
)
from gemfetch.fetch.protocols import Stream, Transport
from gemfetch.fetch.redact import redact_url
from gemfetch.fetch.state_machine import FetchStateMachine
from gemfetch.protocol.codec import decode_response, encode_request
from gemfetch.protocol.errors import DecodeError
from gemfetch.protocol.models import Response
from gemfetch.protocol.status import StatusCategory, classify


logger = structlog.get_logger()


class GeminiFetcher:
    """Gemini client that follows redirects.

    Opens at most one stream at a time; each stream is closed before
    the next attempt starts. Nothing is retried.
    """

    def __init__(
        self,
        transport: Transport,
        config: FetchConfig | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            transport: Opens one stream per attempt.
            config: Fetch configuration. Defaults are used if omitted.
        """
        self._transport = transport
        self._config = config or FetchConfig()
        self._metrics = FetchMetrics.get_instance()
        self._log = logger.bind(component=COMPONENT_FETCH)

    def fetch(self, url: str, max_redirects: int | None = None) -> Response:
        """Fetch a URL, following redirects.

        Up to ``max_redirects + 1`` attempts are made. Redirect targets
        are used verbatim and there is no cycle detection.

        Args:
            url: The URL to fetch.
            max_redirects: Redirect limit; the configured one if omitted.

        Returns:
            The first non-redirect response.

        Raises:
            FetchError: If an attempt fails or the limit is exceeded.
            ValueError: If max_redirects is negative.
        """
        limit = self._config.max_redirects if max_redirects is None else max_redirects
        if limit < 0:
            msg = f"max_redirects must be non-negative, got {limit}"
            raise ValueError(msg)

        machine = FetchStateMachine(url)
        log = self._log.bind(url=redact_url(url), max_redirects=limit)

        try:
            while machine.redirects <= limit:
                response = self.fetch_once(machine.current_url)
                category = self._classify(response, machine.current_url)

                if category is StatusCategory.REDIRECT:
                    self._metrics.record_redirect()
                    log.info(
                        "redirect_followed",
                        from_url=redact_url(machine.current_url),
                        to_url=redact_url(response.header.meta),
                        status=response.header.status,
                        redirects=machine.redirects + 1,
                    )
                    machine.follow(response.header.meta)
                    continue

                machine.to_done()
                log.info(
                    "fetch_complete",
                    status=response.header.status,
                    category=category.value,
                    final_url=redact_url(machine.current_url),
                    redirects=machine.redirects,
                )
                return response

            raise self._record_failure(
                TooManyRedirectsError(limit, url=machine.current_url)
            )
        except FetchError:
            machine.to_failed()
            raise

    def fetch_once(self, url: str) -> Response:
        """Perform one request/response round-trip.

        A ConnectionAbortedError while reading means the peer closed after
        responding and ends the read normally.

        Args:
            url: The URL to request.

        Returns:
            Decoded response.

        Raises:
            FetchError: With the phase (connect, write, read, decode) that failed.
        """
        log = self._log.bind(url=redact_url(url))
        log.debug("fetch_attempt")
        start_time_ns = time.perf_counter_ns()

        try:
            data = self._round_trip(url)

            try:
                response = decode_response(data)
            except DecodeError as e:
                raise ResponseDecodeError(e, url=url) from e
        except FetchError as e:
            self._record_failure(e)
            raise

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_request(response.header.status, len(data))
        self._metrics.record_duration(duration_ms)
        log.debug(
            "fetch_response",
            status=response.header.status,
            meta=response.header.meta,
            bytes=len(data),
            duration_ms=round(duration_ms, 2),
        )
        return response

    def _round_trip(self, url: str) -> bytes:
        """Open a stream, send the request, and read until EOF.

        Args:
            url: The URL to request.

        Returns:
            All bytes the server sent.
        """
        try:
            stream = self._transport.open(url)
        except FetchError:
            raise
        except OSError as e:
            msg = f"connection failed: {e}"
            raise FetchError(FetchPhase.CONNECT, msg, url=url) from e

        with closing(stream):
            try:
                stream.sendall(encode_request(url))
            except OSError as e:
                msg = f"failed sending gemini request: {e}"
                raise FetchError(FetchPhase.WRITE, msg, url=url) from e

            return self._read_all(stream, url)

    def _read_all(self, stream: Stream, url: str) -> bytes:
        """Read a stream until the peer closes it.

        Args:
            stream: Open stream.
            url: URL being fetched, for error context.

        Returns:
            All bytes read.
        """
        buffer = BytesIO()
        chunk_size = self._config.read_chunk_size

        while True:
            try:
                chunk = stream.recv(chunk_size)
            except ConnectionAbortedError:
                # Server closed the connection after responding
                break
            except OSError as e:
                msg = f"read error: {e}"
                raise FetchError(FetchPhase.READ, msg, url=url) from e

            if not chunk:
                break
            buffer.write(chunk)

        return buffer.getvalue()

    def _classify(self, response: Response, url: str) -> StatusCategory:
        """Classify a response, mapping unknown statuses to a fetch error."""
        try:
            return classify(response.header.status)
        except DecodeError as e:
            raise self._record_failure(ResponseDecodeError(e, url=url)) from e

    def _record_failure(self, error: FetchError) -> FetchError:
        """Count and log a failure, returning it for the caller to raise."""
        self._metrics.record_failure(error.phase)
        self._log.warning("fetch_failed", **error.to_dict())
        return error


def fetch_once(transport: Transport, url: str) -> Response:
    """Perform one request/response round-trip over ``transport``.

    Args:
        transport: Opens the stream for the attempt.
        url: The URL to request.

    Returns:
        Decoded response.

    Raises:
        FetchError: If the attempt fails.
    """
    return GeminiFetcher(transport).fetch_once(url)


def fetch_with_redirects(
    transport: Transport,
    url: str,
    max_redirects: int,
) -> Response:
    """Fetch ``url`` over ``transport``, following up to ``max_redirects``.

    Args:
        transport: Opens one stream per attempt.
        url: The URL to fetch.
        max_redirects: Maximum number of redirects to follow.

    Returns:
        The first non-redirect response.

    Raises:
        TooManyRedirectsError: If the redirect chain exceeds the limit.
        FetchError: If any attempt fails.
    """
    return GeminiFetcher(transport).fetch(url, max_redirects=max_redirects)
