"""
Notify Decision

Given a timer and the current time, decide whether to notify or suppress,
which tone and indicator to use, and whether the timer is rescheduled.
The decision never touches collaborators; it returns effects for the
scheduler service to execute.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional
import pytz

from .effects import (
    CancelAlarm,
    CancelNotification,
    IndicatorProfile,
    RequestRequery,
    ScheduleAlarm,
    ShowNotification,
)
from .enums import OutcomeKind, TimerPhase
from .night import is_night
from .plan import to_plan
from .timer_state import TimerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotifyOutcome:
    kind: OutcomeKind
    text: Optional[str] = None
    tone: Optional[str] = None
    use_indicator: bool = False


SUPPRESS = NotifyOutcome(OutcomeKind.suppress)


@dataclass
class Decision:
    state: TimerState
    outcome: NotifyOutcome
    need_save: bool = False
    night: bool = False
    rescheduled: bool = False
    effects: List[object] = field(default_factory=list)


def phase_of(state: TimerState, now: int) -> TimerPhase:
    """Phase of a timer at rest (no decision in flight)."""
    if not state.enabled or state.next_fire_millis == 0:
        return TimerPhase.idle
    if now >= state.next_fire_millis and not state.seen:
        return TimerPhase.awaiting_ack
    return TimerPhase.armed


def decide(state: TimerState, now: int, tz: Optional[pytz.BaseTzInfo] = None) -> Decision:
    """
    Run one scheduling decision for ``state`` at ``now``.

    Disabled timers are suppressed: their notification and alarm are cancelled.
    Enabled timers always notify; they are reset for another interval unless the
    day/night policy says to wait or the interval is 0 (one-shot).
    The input state is never mutated.
    """
    if not state.enabled:
        logger.info(f"Timer {state.id}: not notifying because timer is disabled")
        return Decision(
            state=state,
            outcome=SUPPRESS,
            effects=[CancelNotification(state.id), CancelAlarm(state.id), RequestRequery()]
        )

    night = is_night(state, now, tz)
    # a one-shot flag is about to be cleared
    need_save = state.night_next
    new_state = replace(state, night_next=False)

    use_indicator = new_state.night_led if night else new_state.day_led
    tone = new_state.night_tone if night else new_state.day_tone
    text = new_state.display_name
    outcome = NotifyOutcome(OutcomeKind.notify, text=text, tone=tone, use_indicator=use_indicator)
    effects: List[object] = [
        ShowNotification(
            new_state.id,
            text,
            tone,
            use_indicator,
            when_millis=new_state.next_fire_millis,
            indicator=IndicatorProfile() if use_indicator else None
        )
    ]

    wait = new_state.night_wait if night else new_state.day_wait
    rescheduled = False
    if not wait and new_state.interval_secs > 0:
        new_state = replace(new_state.reset(now), seen=False)
        need_save = True  # new alarm time
        rescheduled = True
        effects.append(RequestRequery())
        effects.append(ScheduleAlarm(new_state.id, to_plan(new_state)))
        logger.info(f"Timer {new_state.id}: rescheduled for {new_state.next_fire_millis}")
    else:
        logger.info(f"Timer {new_state.id}: notified without reschedule ({'night' if night else 'day'})")

    return Decision(
        state=new_state,
        outcome=outcome,
        need_save=need_save,
        night=night,
        rescheduled=rescheduled,
        effects=effects
    )
