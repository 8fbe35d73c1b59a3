"""Rate limiter interfaces and their pass-through implementations."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

R = TypeVar("R")


class RateLimitControl(Protocol):
    """Lets the caller report how a rate-limited operation went."""

    def success(self) -> None:
        """The operation succeeded."""

    def backoff(self) -> None:
        """The operation took too long; the limiter should back off."""

    def failed(self) -> None:
        """The operation failed, but no backoff is needed."""


class RateLimiter(Protocol):
    """Runs operations so that only a bounded number can be queued at once."""

    def run_rate_limited(self, f: Callable[[], R]) -> R: ...

    def queue_fill_pct(self) -> float: ...


class AdaptiveRateLimiter(Protocol):
    """Runs operations with a window that shrinks on backoff and grows on success."""

    def run_rate_limited(self, f: Callable[[], object]) -> RateLimitControl: ...


class AdaptiveRateLimitTracker(Protocol):
    """Tracks rate limiting for work that the caller runs itself."""

    def run_rate_limited(self, label: str) -> RateLimitControl: ...

    def run_rate_limited_f(
        self, label: str, f: Callable[[RateLimitControl], R]
    ) -> R: ...

    def is_rate_limited(self) -> bool: ...


@dataclass
class NoOpRateLimitControl:
    """A control that only tallies the reports it receives; it never changes any limit."""

    successes: int = 0
    backoffs: int = 0
    failures: int = 0

    def success(self) -> None:
        self.successes += 1

    def backoff(self) -> None:
        self.backoffs += 1

    def failed(self) -> None:
        self.failures += 1


class NoOpRateLimiter:
    """Runs every operation immediately."""

    def run_rate_limited(self, f: Callable[[], R]) -> R:
        return f()

    def queue_fill_pct(self) -> float:
        return 0.0


class NoOpAdaptiveRateLimiter:
    """Runs every operation immediately and hands back a no-op control."""

    def run_rate_limited(self, f: Callable[[], object]) -> NoOpRateLimitControl:
        f()
        return NoOpRateLimitControl()


class NoOpAdaptiveRateLimitTracker:
    """Never limits anything."""

    def run_rate_limited(self, label: str) -> NoOpRateLimitControl:
        return NoOpRateLimitControl()

    def run_rate_limited_f(
        self, label: str, f: Callable[[RateLimitControl], R]
    ) -> R:
        return f(NoOpRateLimitControl())

    def is_rate_limited(self) -> bool:
        return False