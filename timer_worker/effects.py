"""
Effects emitted by a scheduling decision.

Each effect is an instruction for one collaborator: the alarm facility, the
notifier, or the requery channel. The scheduler service executes them in order.
"""
from dataclasses import dataclass
from typing import Optional

from .enums import EffectKind
from .plan import ScheduleInstruction
from .scheduler_config import INDICATOR_ARGB, INDICATOR_OFF_MS, INDICATOR_ON_MS


@dataclass(frozen=True)
class IndicatorProfile:
    on_ms: int = INDICATOR_ON_MS
    off_ms: int = INDICATOR_OFF_MS
    argb: int = INDICATOR_ARGB


@dataclass(frozen=True)
class ScheduleAlarm:
    timer_id: int
    instruction: ScheduleInstruction
    kind: EffectKind = EffectKind.schedule_alarm


@dataclass(frozen=True)
class CancelAlarm:
    timer_id: int
    kind: EffectKind = EffectKind.cancel_alarm


@dataclass(frozen=True)
class ShowNotification:
    timer_id: int
    text: str
    tone: Optional[str]
    use_indicator: bool
    when_millis: int = 0
    indicator: Optional[IndicatorProfile] = None
    persistent: bool = True
    kind: EffectKind = EffectKind.show_notification


@dataclass(frozen=True)
class CancelNotification:
    timer_id: int
    kind: EffectKind = EffectKind.cancel_notification


@dataclass(frozen=True)
class RequestRequery:
    kind: EffectKind = EffectKind.request_requery
