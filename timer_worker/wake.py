"""
Wake assertion held around notification delivery.

The assertion is acquired before the hand-off and released on every exit path.
A minimum hold is honoured with a deferred release, so the caller never sleeps.
"""
import logging
import threading
import time
from contextlib import contextmanager
from typing import Iterator

from .scheduler_config import WAKE_HOLD_SECONDS

logger = logging.getLogger(__name__)


class WakeAssertion:
    """Reference-counted keep-awake token."""

    def __init__(self, tag: str = "Timer") -> None:
        self.tag = tag
        self._count = 0
        self._lock = threading.Lock()

    @property
    def held(self) -> bool:
        with self._lock:
            return self._count > 0

    def acquire(self) -> None:
        with self._lock:
            self._count += 1
        logger.debug(f"Got wake assertion '{self.tag}'")

    def release(self) -> None:
        with self._lock:
            if self._count == 0:
                logger.warning(f"Wake assertion '{self.tag}' released while not held")
                return
            self._count -= 1
        logger.debug(f"Released wake assertion '{self.tag}'")


@contextmanager
def hold_wake(assertion: WakeAssertion, hold_seconds: float = WAKE_HOLD_SECONDS) -> Iterator[WakeAssertion]:
    """Hold ``assertion`` for the block and at least ``hold_seconds`` overall."""
    assertion.acquire()
    started = time.monotonic()
    try:
        yield assertion
    finally:
        remaining = hold_seconds - (time.monotonic() - started)
        if remaining > 0:
            release_timer = threading.Timer(remaining, assertion.release)
            release_timer.daemon = True
            release_timer.start()
        else:
            assertion.release()
