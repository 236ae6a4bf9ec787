"""Translate timer state into an instruction for the alarm facility."""
from dataclasses import dataclass

from .enums import InstructionKind
from .scheduler_config import ALARM_REPEAT_MILLIS
from .timer_state import TimerState


@dataclass(frozen=True)
class ScheduleInstruction:
    kind: InstructionKind
    fire_at_millis: int = 0
    repeat_millis: int = 0

    @property
    def is_cancel(self) -> bool:
        return self.kind == InstructionKind.cancel


CANCEL = ScheduleInstruction(InstructionKind.cancel)


def to_plan(state: TimerState) -> ScheduleInstruction:
    """Enabled timers repeat every tick from their next fire time; others are cancelled."""
    if state.enabled:
        return ScheduleInstruction(
            InstructionKind.repeat,
            fire_at_millis=state.next_fire_millis,
            repeat_millis=ALARM_REPEAT_MILLIS
        )
    return CANCEL
