from fastapi import APIRouter, Depends, Query
import pytz
from server.models import TimerRecord
from server.schemas import ConditionResponse
from server.dependencies import get_now, get_timer, get_timezone
from timer_worker.night import is_night

router = APIRouter()

# =========================================================
# HOST PLUGIN CONDITIONS
# Polled by automation hosts after a requery request
# =========================================================

@router.get("/{timer_id}", response_model=ConditionResponse)
def get_condition(
    late_by_mins: int = Query(0, ge=0),
    timer: TimerRecord = Depends(get_timer),
    now: int = Depends(get_now),
    tz: pytz.BaseTzInfo = Depends(get_timezone)
):
    """Is the timer overdue by at least ``late_by_mins`` minutes, and is its fire in the night window."""
    state = timer.to_state()
    return {
        "timer_id": state.id,
        "late": state.is_late_by_mins(now, late_by_mins),
        "night": state.enabled and is_night(state, now, tz),
    }
