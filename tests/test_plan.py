from timer_worker.enums import InstructionKind
from timer_worker.plan import to_plan


def test_enabled_timer_repeats_from_next_fire(make_state):
    plan = to_plan(make_state(next_fire_millis=1_700_000_000_003))
    assert plan.kind == InstructionKind.repeat
    assert plan.fire_at_millis == 1_700_000_000_003
    assert plan.repeat_millis == 300000
    assert plan.is_cancel is False


def test_disabled_timer_is_cancelled(make_state):
    plan = to_plan(make_state(enabled=False, next_fire_millis=1_700_000_000_003))
    assert plan.kind == InstructionKind.cancel
    assert plan.is_cancel is True
