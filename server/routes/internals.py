from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from server.models import TimerRecord
from server.schemas import TimerResponse, TimerStateUpdate
from server.dependencies import get_db, get_timer

router = APIRouter()

# =========================================================
# INTERNAL ENDPOINTS (No Authentication Required)
# Used by timer_worker as its timer store
# =========================================================

@router.get("/timers", response_model=List[TimerResponse])
def list_timers(db: Session = Depends(get_db)):
    """All timers, enabled or not, for alarm reconciliation."""
    return db.query(TimerRecord).order_by(TimerRecord.id).all()


@router.get("/timers/{timer_id}", response_model=TimerResponse)
def get_timer_state(timer: TimerRecord = Depends(get_timer)):
    return timer


@router.put("/timers/{timer_id}/state", response_model=TimerResponse)
def save_timer_state(
    state: TimerStateUpdate,
    timer: TimerRecord = Depends(get_timer),
    db: Session = Depends(get_db)
):
    """Write back the scheduler-owned fields after a decision."""
    timer.next_fire_millis = state.next_fire_millis
    timer.night_next = state.night_next
    timer.seen = state.seen
    db.commit()
    db.refresh(timer)
    return timer
