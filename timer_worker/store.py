"""
Timer stores for the worker.

ApiTimerStore goes through HTTP calls to server/routes/internals.py; the
in-memory store backs local runs and tests.
"""
import logging
import threading
from dataclasses import replace
from typing import Dict, List, Optional
import requests

from .config import config
from .timer_state import TimerState

logger = logging.getLogger(__name__)

# Fields the scheduler owns and writes back after a decision
OWNED_FIELDS = ("next_fire_millis", "night_next", "seen")


class TimerStoreUnavailable(Exception):
    """The store could not be reached; distinct from a timer that does not exist."""


class ApiTimerStore:
    def __init__(self, base_url: Optional[str] = None) -> None:
        self.base_url = (base_url or config.INTERNAL_API_URL).rstrip("/")

    def _api_url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get(self, timer_id: int) -> Optional[TimerState]:
        """Fetch one timer; None only when the API answers 404."""
        try:
            resp = requests.get(self._api_url(f"/timers/{timer_id}"), timeout=5)
            if resp.status_code == 404:
                return None
            resp.raise_for_status()
            return TimerState.from_dict(resp.json())
        except requests.RequestException as e:
            logger.error(f"Failed to get timer {timer_id}: {e}")
            raise TimerStoreUnavailable(str(e)) from e

    def list(self) -> List[TimerState]:
        try:
            resp = requests.get(self._api_url("/timers"), timeout=10)
            resp.raise_for_status()
            return [TimerState.from_dict(item) for item in resp.json()]
        except requests.RequestException as e:
            logger.error(f"Failed to list timers: {e}")
            raise TimerStoreUnavailable(str(e)) from e

    def save(self, state: TimerState) -> bool:
        try:
            resp = requests.put(
                self._api_url(f"/timers/{state.id}/state"),
                json={name: getattr(state, name) for name in OWNED_FIELDS},
                timeout=5
            )
            resp.raise_for_status()
            return True
        except requests.RequestException as e:
            logger.error(f"Failed to save timer {state.id}: {e}")
            return False


class InMemoryTimerStore:
    def __init__(self, timers: Optional[List[TimerState]] = None) -> None:
        self._timers: Dict[int, TimerState] = {t.id: t for t in timers or []}
        self._lock = threading.Lock()

    def put(self, state: TimerState) -> None:
        """Replace the whole record, as an edit surface would."""
        with self._lock:
            self._timers[state.id] = state

    def get(self, timer_id: int) -> Optional[TimerState]:
        with self._lock:
            return self._timers.get(timer_id)

    def list(self) -> List[TimerState]:
        with self._lock:
            return list(self._timers.values())

    def save(self, state: TimerState) -> bool:
        with self._lock:
            current = self._timers.get(state.id)
            if current is None:
                return False
            self._timers[state.id] = replace(
                current, **{name: getattr(state, name) for name in OWNED_FIELDS}
            )
            return True
