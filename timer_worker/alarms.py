"""
Alarm facility backed by APScheduler.

Each enabled timer owns one interval job that first runs at the timer's next
fire time and then repeats every tick.
"""
import logging
from datetime import datetime
from typing import Callable, Optional
import pytz
from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.base import BaseScheduler

from .clock import local_timezone
from .plan import ScheduleInstruction

logger = logging.getLogger(__name__)


def job_id(timer_id: int) -> str:
    return f"timer:{timer_id}"


class AlarmFacility:
    def __init__(
        self,
        scheduler: BaseScheduler,
        on_fire: Callable[[int], object],
        tz: Optional[pytz.BaseTzInfo] = None
    ) -> None:
        self.scheduler = scheduler
        self.on_fire = on_fire
        self.tz = local_timezone(tz)

    def apply(self, timer_id: int, instruction: ScheduleInstruction) -> None:
        if instruction.is_cancel:
            self.cancel(timer_id)
            return

        start = datetime.fromtimestamp(instruction.fire_at_millis / 1000, self.tz)
        self.scheduler.add_job(
            self.on_fire,
            'interval',
            seconds=instruction.repeat_millis / 1000,
            start_date=start,
            args=[timer_id],
            id=job_id(timer_id),
            coalesce=True,
            max_instances=1,
            replace_existing=True
        )
        logger.info(f"⏰ Alarm for timer {timer_id} set at {start.isoformat()}, repeating every {instruction.repeat_millis // 1000}s")

    def cancel(self, timer_id: int) -> None:
        try:
            self.scheduler.remove_job(job_id(timer_id))
            logger.info(f"Alarm for timer {timer_id} cancelled")
        except JobLookupError:
            logger.debug(f"No alarm to cancel for timer {timer_id}")

    def next_run(self, timer_id: int) -> Optional[datetime]:
        job = self.scheduler.get_job(job_id(timer_id))
        # pending jobs (scheduler not started) have no run time yet
        return getattr(job, "next_run_time", None) if job else None
