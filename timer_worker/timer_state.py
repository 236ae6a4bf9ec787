"""Timer configuration and scheduling state."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Mapping, Optional

from .config import config
from .scheduler_config import (
    DEFAULT_INTERVAL_SECS,
    DEFAULT_NAME,
    DEFAULT_NIGHT_START,
    DEFAULT_NIGHT_STOP,
    RESET_EPSILON_MILLIS,
)


def _default_tone() -> Optional[str]:
    return config.DEFAULT_ALARM_TONE


@dataclass
class TimerConfig:
    id: int = -1
    name: str = ""
    interval_secs: int = DEFAULT_INTERVAL_SECS
    night_start: int = DEFAULT_NIGHT_START
    night_stop: int = DEFAULT_NIGHT_STOP
    day_tone: Optional[str] = field(default_factory=_default_tone)
    night_tone: Optional[str] = None
    day_led: bool = True
    night_led: bool = False
    day_wait: bool = True
    night_wait: bool = True

    @property
    def display_name(self) -> str:
        return self.name if self.name else DEFAULT_NAME


@dataclass
class TimerState(TimerConfig):
    """
    One timer as seen by the scheduler.

    ``next_fire_millis`` is 0 only while the timer is disabled and has never been
    armed. ``night_next`` forces the next decision to treat the fire as night and
    is cleared by that decision.
    """
    enabled: bool = False
    next_fire_millis: int = 0
    night_next: bool = False
    seen: bool = False

    def reset(self, now: int) -> TimerState:
        """Return a copy armed for one interval after ``now`` (or after 0 if disabled)."""
        base = now if self.enabled else 0
        return replace(
            self,
            next_fire_millis=base + self.interval_secs * 1000 + RESET_EPSILON_MILLIS
        )

    def is_late_by_mins(self, now: int, mins: int) -> bool:
        if not self.enabled:
            return False
        late = now - self.next_fire_millis
        # late >= 0 covers mins == 0 inside the final minute
        return late >= 0 and late // 60000 >= mins

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TimerState:
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})
