"""Wait for a changing collection of completion notifiers."""

from __future__ import annotations

import threading
import time
from typing import Protocol


class Notifier(Protocol):
    def wait(self, timeout: float | None = None) -> bool: ...


class WaitGroup:
    """Waits for every added notifier (e.g. a threading.Event) to be set.

    Notifiers added after wait_for_done has started are not guaranteed to be
    waited for.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._notifiers: dict[Notifier, None] = {}

    def add_notifier(self, notifier: Notifier) -> None:
        with self._lock:
            self._notifiers[notifier] = None

    def _pending(self) -> list[Notifier]:
        with self._lock:
            return list(self._notifiers)

    def _complete(self, notifier: Notifier) -> None:
        with self._lock:
            self._notifiers.pop(notifier, None)

    def wait_for_done(self, timeout: float) -> bool:
        """Wait up to timeout seconds; return False if the timeout was reached."""
        deadline = time.monotonic() + timeout
        pending = self._pending()
        while pending:
            for notifier in pending:
                remaining = max(0.0, deadline - time.monotonic())
                if not notifier.wait(remaining):
                    return False
                self._complete(notifier)
            pending = self._pending()
        return True