from typing import List
import logging
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from server.schemas import TimerCreate, TimerUpdate, TimerResponse, NULLABLE_FIELDS
from server.models import TimerRecord
from server.dependencies import get_db, get_now, get_requery, get_timer
from timer_worker.events import RequeryChannel

logger = logging.getLogger(__name__)

router = APIRouter()

def _rearm(timer: TimerRecord, now: int, requery: RequeryChannel) -> None:
    timer.next_fire_millis = timer.to_state().reset(now).next_fire_millis
    requery.request_requery()

# =========================================================
# TIMER ENDPOINTS
# =========================================================
@router.post("/", response_model=TimerResponse, status_code=status.HTTP_201_CREATED)
def create_timer(
    timer_data: TimerCreate,
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    requery: RequeryChannel = Depends(get_requery)
):
    timer = TimerRecord(**timer_data.dict())
    if timer.enabled:
        _rearm(timer, now, requery)
    db.add(timer)
    db.commit()
    db.refresh(timer)
    logger.info(f"Created timer {timer.id} ({timer.name or 'Timer'})")
    return timer

@router.get("/", response_model=List[TimerResponse])
def get_timers(db: Session = Depends(get_db)):
    return db.query(TimerRecord).order_by(TimerRecord.id).all()

@router.get("/{timer_id}", response_model=TimerResponse)
def get_timer_by_id(timer: TimerRecord = Depends(get_timer)):
    return timer

@router.put("/{timer_id}", response_model=TimerResponse)
def update_timer(
    timer_data: TimerUpdate,
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    requery: RequeryChannel = Depends(get_requery)
):
    was_enabled = timer.enabled
    updates = timer_data.dict(exclude_unset=True)
    for field, value in updates.items():
        # null only clears the tone fields; elsewhere it means "unchanged"
        if value is None and field not in NULLABLE_FIELDS:
            continue
        setattr(timer, field, value)

    # Switching a timer on starts a fresh interval
    if timer.enabled and not was_enabled:
        _rearm(timer, now, requery)
        timer.seen = False

    db.commit()
    db.refresh(timer)
    return timer

@router.delete("/{timer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_timer(
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db)
):
    timer_id = timer.id
    db.delete(timer)
    db.commit()
    logger.info(f"Deleted timer {timer_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# =========================================================
# TIMER ACTIONS
# =========================================================
@router.post("/{timer_id}/reset", response_model=TimerResponse)
def reset_timer(
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db),
    now: int = Depends(get_now),
    requery: RequeryChannel = Depends(get_requery)
):
    """Manual re-arm, the only way to restart a one-shot (interval 0) timer."""
    _rearm(timer, now, requery)
    db.commit()
    db.refresh(timer)
    return timer

@router.post("/{timer_id}/seen", response_model=TimerResponse)
def mark_seen(
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db)
):
    timer.seen = True
    db.commit()
    db.refresh(timer)
    return timer

@router.post("/{timer_id}/night-next", response_model=TimerResponse)
def set_night_next(
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db)
):
    """Treat the next fire as night regardless of the clock."""
    timer.night_next = True
    db.commit()
    db.refresh(timer)
    return timer
