from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, validator
from timer_worker.config import config as worker_config
from timer_worker.scheduler_config import (
    DEFAULT_INTERVAL_SECS,
    DEFAULT_NIGHT_START,
    DEFAULT_NIGHT_STOP,
    SECONDS_PER_DAY,
)

# =========================================================
# PYDANTIC SCHEMAS
# =========================================================

# Fields that may be explicitly cleared (null = silent)
NULLABLE_FIELDS = {"day_tone", "night_tone"}

def _check_time_of_day(v):
    if v is not None and not 0 <= v < SECONDS_PER_DAY:
        raise ValueError(f"time of day must be within [0, {SECONDS_PER_DAY}) seconds")
    return v

def _check_interval(v):
    if v is not None and v < 0:
        raise ValueError("interval_secs must be >= 0")
    return v

# Timer Schemas
class TimerCreate(BaseModel):
    name: str = Field("", max_length=100)
    enabled: bool = False
    interval_secs: int = DEFAULT_INTERVAL_SECS
    night_start: int = DEFAULT_NIGHT_START
    night_stop: int = DEFAULT_NIGHT_STOP
    day_tone: Optional[str] = Field(default_factory=lambda: worker_config.DEFAULT_ALARM_TONE)
    night_tone: Optional[str] = None
    day_led: bool = True
    night_led: bool = False
    day_wait: bool = True
    night_wait: bool = True

    @validator('night_start', 'night_stop')
    def validate_time_of_day(cls, v):
        return _check_time_of_day(v)

    @validator('interval_secs')
    def validate_interval(cls, v):
        return _check_interval(v)

class TimerUpdate(BaseModel):
    name: Optional[str] = Field(None, max_length=100)
    enabled: Optional[bool] = None
    interval_secs: Optional[int] = None
    night_start: Optional[int] = None
    night_stop: Optional[int] = None
    day_tone: Optional[str] = None
    night_tone: Optional[str] = None
    day_led: Optional[bool] = None
    night_led: Optional[bool] = None
    day_wait: Optional[bool] = None
    night_wait: Optional[bool] = None

    @validator('night_start', 'night_stop')
    def validate_time_of_day(cls, v):
        return _check_time_of_day(v)

    @validator('interval_secs')
    def validate_interval(cls, v):
        return _check_interval(v)

class TimerStateUpdate(BaseModel):
    next_fire_millis: int
    night_next: bool
    seen: bool

class TimerResponse(BaseModel):
    id: int
    name: str
    enabled: bool
    interval_secs: int
    night_start: int
    night_stop: int
    day_tone: Optional[str]
    night_tone: Optional[str]
    day_led: bool
    night_led: bool
    day_wait: bool
    night_wait: bool
    next_fire_millis: int
    night_next: bool
    seen: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ConditionResponse(BaseModel):
    timer_id: int
    late: bool
    night: bool
