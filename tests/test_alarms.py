from datetime import datetime, timedelta

import pytest
from apscheduler.schedulers.background import BackgroundScheduler

from timer_worker.alarms import AlarmFacility, job_id
from timer_worker.plan import CANCEL, ScheduleInstruction
from timer_worker.enums import InstructionKind


@pytest.fixture
def scheduler(utc):
    scheduler = BackgroundScheduler(timezone=utc)
    scheduler.start(paused=True)
    yield scheduler
    scheduler.shutdown(wait=False)


def test_repeat_instruction_adds_interval_job(scheduler, utc):
    fired = []
    alarms = AlarmFacility(scheduler, fired.append, tz=utc)
    fire_at = datetime.now(utc).replace(microsecond=0) + timedelta(hours=1)
    instruction = ScheduleInstruction(
        InstructionKind.repeat,
        fire_at_millis=int(fire_at.timestamp()) * 1000,
        repeat_millis=300000
    )

    alarms.apply(5, instruction)

    job = scheduler.get_job(job_id(5))
    assert job is not None
    assert job.args == (5,)
    assert job.trigger.interval == timedelta(minutes=5)
    assert alarms.next_run(5) == fire_at


def test_reapplying_replaces_the_job(scheduler, utc):
    alarms = AlarmFacility(scheduler, lambda timer_id: None, tz=utc)
    base = int(datetime.now(utc).timestamp()) * 1000 + 3600 * 1000
    alarms.apply(5, ScheduleInstruction(InstructionKind.repeat, base, 300000))
    alarms.apply(5, ScheduleInstruction(InstructionKind.repeat, base + 60000, 300000))
    assert len(scheduler.get_jobs()) == 1


def test_cancel_instruction_removes_job(scheduler, utc):
    alarms = AlarmFacility(scheduler, lambda timer_id: None, tz=utc)
    base = int(datetime.now(utc).timestamp()) * 1000 + 3600 * 1000
    alarms.apply(5, ScheduleInstruction(InstructionKind.repeat, base, 300000))
    alarms.apply(5, CANCEL)
    assert scheduler.get_job(job_id(5)) is None
    assert alarms.next_run(5) is None


def test_cancel_without_job_is_harmless(scheduler, utc):
    alarms = AlarmFacility(scheduler, lambda timer_id: None, tz=utc)
    alarms.cancel(99)
    assert scheduler.get_jobs() == []
