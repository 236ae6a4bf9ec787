import enum
# =========================================================
# ENUMS
# =========================================================
class TimerPhase(str, enum.Enum):
    idle = "idle"
    armed = "armed"
    firing = "firing"
    awaiting_ack = "awaiting_ack"

class OutcomeKind(str, enum.Enum):
    suppress = "suppress"
    notify = "notify"

class InstructionKind(str, enum.Enum):
    repeat = "repeat"
    cancel = "cancel"

class EffectKind(str, enum.Enum):
    schedule_alarm = "schedule_alarm"
    cancel_alarm = "cancel_alarm"
    show_notification = "show_notification"
    cancel_notification = "cancel_notification"
    request_requery = "request_requery"
