import time

import pytest

from timer_worker.wake import WakeAssertion, hold_wake


def _wait_released(assertion, timeout=2.0):
    deadline = time.monotonic() + timeout
    while assertion.held and time.monotonic() < deadline:
        time.sleep(0.01)
    return not assertion.held


def test_held_inside_block_and_released_after():
    assertion = WakeAssertion()
    with hold_wake(assertion, 0):
        assert assertion.held
    assert not assertion.held


def test_released_when_block_raises():
    assertion = WakeAssertion()
    with pytest.raises(RuntimeError):
        with hold_wake(assertion, 0):
            raise RuntimeError("delivery failed")
    assert not assertion.held


def test_minimum_hold_is_deferred_not_blocking():
    assertion = WakeAssertion()
    started = time.monotonic()
    with hold_wake(assertion, 0.2):
        pass
    assert time.monotonic() - started < 0.2
    assert assertion.held
    assert _wait_released(assertion)


def test_release_without_acquire_is_ignored():
    assertion = WakeAssertion()
    assertion.release()
    assert not assertion.held
