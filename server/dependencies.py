import time
from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session
import pytz
from server.database import SessionLocal
from server.models import TimerRecord
from server.config import config
from timer_worker.events import RequeryChannel, default_channel

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_now() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)

def get_timezone() -> pytz.BaseTzInfo:
    return pytz.timezone(config.TIMEZONE)

def get_timer(timer_id: int, db: Session = Depends(get_db)) -> TimerRecord:
    timer = db.query(TimerRecord).filter(TimerRecord.id == timer_id).first()
    if not timer:
        raise HTTPException(status_code=404, detail="Timer not found")
    return timer

def get_requery() -> RequeryChannel:
    return default_channel()
