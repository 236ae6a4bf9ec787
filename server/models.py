from datetime import datetime
from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime, CheckConstraint
from server.database import Base
from timer_worker.config import config as worker_config
from timer_worker.scheduler_config import (
    DEFAULT_INTERVAL_SECS,
    DEFAULT_NIGHT_START,
    DEFAULT_NIGHT_STOP,
)
from timer_worker.timer_state import TimerState

# =========================================================
# DATABASE MODELS
# =========================================================
class TimerRecord(Base):
    __tablename__ = "timers"
    __table_args__ = (
        CheckConstraint('interval_secs >= 0', name='ck_timers_interval'),
        CheckConstraint('night_start >= 0 AND night_start < 86400', name='ck_timers_night_start'),
        CheckConstraint('night_stop >= 0 AND night_stop < 86400', name='ck_timers_night_stop'),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False, default="")
    enabled = Column(Boolean, nullable=False, default=False)
    interval_secs = Column(Integer, nullable=False, default=DEFAULT_INTERVAL_SECS)
    night_start = Column(Integer, nullable=False, default=DEFAULT_NIGHT_START)
    night_stop = Column(Integer, nullable=False, default=DEFAULT_NIGHT_STOP)
    day_tone = Column(String(500), default=lambda: worker_config.DEFAULT_ALARM_TONE)
    night_tone = Column(String(500))
    day_led = Column(Boolean, nullable=False, default=True)
    night_led = Column(Boolean, nullable=False, default=False)
    day_wait = Column(Boolean, nullable=False, default=True)
    night_wait = Column(Boolean, nullable=False, default=True)
    # Scheduler-owned fields
    next_fire_millis = Column(BigInteger, nullable=False, default=0)
    night_next = Column(Boolean, nullable=False, default=False)
    seen = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_state(self) -> TimerState:
        return TimerState(
            id=self.id,
            name=self.name or "",
            enabled=self.enabled,
            interval_secs=self.interval_secs,
            night_start=self.night_start,
            night_stop=self.night_stop,
            day_tone=self.day_tone,
            night_tone=self.night_tone,
            day_led=self.day_led,
            night_led=self.night_led,
            day_wait=self.day_wait,
            night_wait=self.night_wait,
            next_fire_millis=self.next_fire_millis,
            night_next=self.night_next,
            seen=self.seen,
        )
