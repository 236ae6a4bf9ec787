from .timer_state import TimerConfig, TimerState
from .clock import occurrence
from .night import is_night
from .decision import Decision, NotifyOutcome, decide, phase_of
from .plan import ScheduleInstruction, to_plan
from .scheduler import TimerScheduler
