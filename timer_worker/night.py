"""
Night window classification.

A timer's fire instant is "night" when it falls after the most recent night start
and before the following night stop, unless the daily force-wake time has already
passed that stop. The one-shot ``night_next`` flag overrides the clock.
"""
import logging
from typing import Optional
import pytz

from .clock import occurrence
from .scheduler_config import FORCE_WAKE_TIME
from .timer_state import TimerState

logger = logging.getLogger(__name__)


def is_night(state: TimerState, now: int, tz: Optional[pytz.BaseTzInfo] = None) -> bool:
    """Classify ``state.next_fire_millis`` against the night windows around ``now``."""
    if state.night_next:
        return True

    last_night_start = occurrence(state.night_start, now, False, tz)
    next_night_stop = occurrence(state.night_stop, last_night_start, True, tz)
    last_force_wake = occurrence(FORCE_WAKE_TIME, now, False, tz)
    fire = state.next_fire_millis

    night = last_night_start <= fire and not (
        next_night_stop <= fire or last_force_wake >= next_night_stop
    )
    logger.debug(
        f"is_night(timer={state.id}): {night} "
        f"(start={last_night_start}, stop={next_night_stop}, force_wake={last_force_wake}, fire={fire})"
    )
    return night
