"""
Interval Timer Scheduler

Owns every timer's scheduling state. External triggers only submit ticks;
each tick reloads the timer, runs one decision and executes its effects.
"""
import logging
import threading
import time
from typing import Callable, Dict, Optional
import pytz
from apscheduler.schedulers.background import BackgroundScheduler

from .alarms import AlarmFacility
from .clock import local_timezone
from .decision import Decision, decide, phase_of
from .effects import (
    CancelAlarm,
    CancelNotification,
    RequestRequery,
    ScheduleAlarm,
    ShowNotification,
)
from .enums import OutcomeKind, TimerPhase
from .events import RequeryChannel, default_channel
from .metrics import DECISION_COUNT, EFFECT_FAILURE_COUNT, RESCHEDULE_COUNT
from .plan import to_plan
from .scheduler_config import SYNC_INTERVAL_SECONDS
from .send import Notifier, default_notifier
from .store import TimerStoreUnavailable
from .wake import WakeAssertion, hold_wake

logger = logging.getLogger(__name__)


def current_millis() -> int:
    return int(time.time() * 1000)


class TimerScheduler:
    def __init__(
        self,
        store,
        scheduler: Optional[BackgroundScheduler] = None,
        notifier: Optional[Notifier] = None,
        requery: Optional[RequeryChannel] = None,
        wake: Optional[WakeAssertion] = None,
        wake_hold_seconds: Optional[float] = None,
        clock: Callable[[], int] = current_millis,
        tz: Optional[pytz.BaseTzInfo] = None
    ) -> None:
        self.store = store
        self.tz = local_timezone(tz)
        self.scheduler = scheduler or BackgroundScheduler(timezone=self.tz)
        self.alarms = AlarmFacility(self.scheduler, self.tick, tz=self.tz)
        self.notifier = notifier or default_notifier()
        self.requery = requery or default_channel()
        self.wake = wake or WakeAssertion("Timer")
        self.wake_hold_seconds = wake_hold_seconds
        self.clock = clock
        # timer_id -> lock serialising decisions for that timer
        self._locks: Dict[int, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, timer_id: int) -> threading.Lock:
        with self._locks_guard:
            if timer_id not in self._locks:
                self._locks[timer_id] = threading.Lock()
            return self._locks[timer_id]

    def _drop_lock(self, timer_id: int) -> None:
        with self._locks_guard:
            self._locks.pop(timer_id, None)

    def tick(self, timer_id: int, now: Optional[int] = None) -> Optional[Decision]:
        """
        Main job: run one decision for a timer.

        Called by the timer's alarm job, or manually for an immediate check.
        Returns None when no decision ran: the timer is gone, the store is
        unreachable, or the timer is enabled but not due yet.
        """
        with self._lock_for(timer_id):
            now = self.clock() if now is None else now
            try:
                state = self.store.get(timer_id)
            except TimerStoreUnavailable as e:
                EFFECT_FAILURE_COUNT.labels(effect="load").inc()
                logger.error(f"❌ Could not load timer {timer_id}, keeping its alarm: {e}")
                return None

            if state is None:
                logger.warning(f"Timer {timer_id} not found, dropping its alarm")
                self.alarms.cancel(timer_id)
                self.notifier.cancel(timer_id)
                self._drop_lock(timer_id)
                return None

            # An edit moved the fire time forward; the running job is stale
            if state.enabled and now < state.next_fire_millis:
                logger.info(f"Timer {timer_id} not due for {state.next_fire_millis - now} ms, rescheduling alarm")
                self.alarms.apply(timer_id, to_plan(state))
                return None

            decision = decide(state, now, self.tz)
            DECISION_COUNT.labels(outcome=decision.outcome.kind.value).inc()
            if decision.rescheduled:
                RESCHEDULE_COUNT.inc()

            for effect in decision.effects:
                self._execute(effect)

            if decision.need_save and not self.store.save(decision.state):
                EFFECT_FAILURE_COUNT.labels(effect="persist").inc()
                logger.error(f"❌ Failed to persist timer {timer_id}; next tick will retry")

            if decision.outcome.kind == OutcomeKind.notify:
                logger.info(f"✅ Tick for timer {timer_id} done (night={decision.night}, rescheduled={decision.rescheduled})")
            return decision

    def _execute(self, effect) -> None:
        try:
            if isinstance(effect, ShowNotification):
                with self._hold():
                    result, status_code = self.notifier.show(effect)
                if status_code != 200:
                    EFFECT_FAILURE_COUNT.labels(effect=effect.kind.value).inc()
                    logger.error(f"❌ Failed to deliver notification for timer {effect.timer_id}: {result}")
            elif isinstance(effect, CancelNotification):
                self.notifier.cancel(effect.timer_id)
            elif isinstance(effect, ScheduleAlarm):
                self.alarms.apply(effect.timer_id, effect.instruction)
            elif isinstance(effect, CancelAlarm):
                self.alarms.cancel(effect.timer_id)
            elif isinstance(effect, RequestRequery):
                self.requery.request_requery()
            else:
                logger.warning(f"Unknown effect {effect!r}")
        except Exception as e:
            EFFECT_FAILURE_COUNT.labels(effect=effect.kind.value).inc()
            logger.error(f"Error executing {effect.kind.value}: {e}", exc_info=True)

    def _hold(self):
        if self.wake_hold_seconds is None:
            return hold_wake(self.wake)
        return hold_wake(self.wake, self.wake_hold_seconds)

    def arm(self, timer_id: int, now: Optional[int] = None) -> bool:
        """Manual re-arm: reset the timer from now and schedule its alarm."""
        with self._lock_for(timer_id):
            now = self.clock() if now is None else now
            try:
                state = self.store.get(timer_id)
            except TimerStoreUnavailable as e:
                logger.error(f"❌ Could not load timer {timer_id} to re-arm: {e}")
                return False
            if state is None:
                self._drop_lock(timer_id)
                return False
            state = state.reset(now)
            if not self.store.save(state):
                logger.error(f"❌ Failed to persist re-armed timer {timer_id}")
                return False
            self.alarms.apply(timer_id, to_plan(state))
            self.requery.request_requery()
            return True

    def phase(self, timer_id: int, now: Optional[int] = None) -> Optional[TimerPhase]:
        with self._locks_guard:
            lock = self._locks.get(timer_id)
        if lock is not None and lock.locked():
            return TimerPhase.firing
        state = self.store.get(timer_id)
        if state is None:
            return None
        return phase_of(state, self.clock() if now is None else now)

    def sync(self) -> int:
        """
        Reconcile the alarm facility with every stored timer.

        Each timer is re-read under its lock so a plan a tick just applied is
        never overwritten with an older one. Returns the number of timers synced.
        """
        try:
            timers = self.store.list()
        except TimerStoreUnavailable as e:
            logger.error(f"❌ Alarm sync skipped, store unavailable: {e}")
            return 0

        synced = 0
        for listed in timers:
            with self._lock_for(listed.id):
                try:
                    state = self.store.get(listed.id)
                except TimerStoreUnavailable as e:
                    logger.error(f"❌ Alarm sync skipped timer {listed.id}: {e}")
                    continue
                if state is None:
                    self.alarms.cancel(listed.id)
                    self._drop_lock(listed.id)
                    continue
                self.alarms.apply(state.id, to_plan(state))
                synced += 1
        logger.info(f"🔄 Synced alarms for {synced} timers")
        return synced

    def start(self) -> None:
        """Start the alarm facility and the periodic reconciliation job."""
        self.scheduler.add_job(
            self.sync,
            'interval',
            seconds=SYNC_INTERVAL_SECONDS,
            id='timer_sync_job',
            replace_existing=True
        )
        self.scheduler.start()
        self.sync()
        logger.info(f"🚀 Scheduler started: alarm sync every {SYNC_INTERVAL_SECONDS}s")

    def stop(self) -> None:
        """Stop the scheduler gracefully."""
        self.scheduler.shutdown(wait=False)
        logger.info("🛑 Scheduler stopped")
