"""Metrics collection for the fetch layer."""

from dataclasses import dataclass, field
from typing import ClassVar

from gemfetch.fetch.models import FetchPhase


@dataclass
class FetchMetrics:
    """Metrics for Gemini fetch operations.

    Singleton class that tracks request counts by status code,
    redirects followed, and failures by phase.
    """

    gemini_requests_total: dict[str, int] = field(default_factory=dict)
    gemini_redirects_total: int = 0
    gemini_failures_total: dict[str, int] = field(default_factory=dict)
    gemini_bytes_total: int = 0
    gemini_duration_ms_total: float = 0.0
    gemini_request_count: int = 0

    _instance: ClassVar["FetchMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "FetchMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_request(self, status: str, bytes_received: int) -> None:
        """Record a completed request.

        Args:
            status: Two-character status code.
            bytes_received: Number of bytes read from the stream.
        """
        self.gemini_requests_total[status] = (
            self.gemini_requests_total.get(status, 0) + 1
        )
        self.gemini_bytes_total += bytes_received
        self.gemini_request_count += 1

    def record_redirect(self) -> None:
        """Record a followed redirect."""
        self.gemini_redirects_total += 1

    def record_failure(self, phase: FetchPhase) -> None:
        """Record a fetch failure.

        Args:
            phase: Phase in which the fetch failed.
        """
        key = phase.value
        self.gemini_failures_total[key] = self.gemini_failures_total.get(key, 0) + 1

    def record_duration(self, duration_ms: float) -> None:
        """Record the duration of one completed request.

        Paired with record_request so both count the same attempts.

        Args:
            duration_ms: Time from opening the stream to decoding the response.
        """
        self.gemini_duration_ms_total += duration_ms

    def to_dict(self) -> dict[str, int | float | dict[str, int]]:
        """Convert metrics to dictionary.

        Returns:
            Dictionary of metric name to value.
        """
        return {
            "gemini_requests_total": dict(self.gemini_requests_total),
            "gemini_redirects_total": self.gemini_redirects_total,
            "gemini_failures_total": dict(self.gemini_failures_total),
            "gemini_bytes_total": self.gemini_bytes_total,
            "gemini_duration_ms_total": self.gemini_duration_ms_total,
            "gemini_request_count": self.gemini_request_count,
        }

    @property
    def avg_duration_ms(self) -> float:
        """Calculate average duration per completed request.

        Returns:
            Average duration in milliseconds.
        """
        if self.gemini_request_count == 0:
            return 0.0
        return self.gemini_duration_ms_total / self.gemini_request_count
