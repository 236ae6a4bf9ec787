import pytest

from timer_worker.night import is_night

HOUR = 60 * 60


def _check(make_state, utc, now, fire=None, **window):
    state = make_state(next_fire_millis=now if fire is None else fire, **window)
    return is_night(state, now, utc)


def test_fire_inside_default_window_is_night(make_state, at, utc):
    assert _check(make_state, utc, at(2024, 5, 1, 3, 0)) is True


def test_fire_after_window_is_day(make_state, at, utc):
    assert _check(make_state, utc, at(2024, 5, 1, 10, 0)) is False
    assert _check(make_state, utc, at(2024, 5, 1, 23, 0)) is False


def test_window_start_is_inclusive(make_state, at, utc):
    assert _check(make_state, utc, at(2024, 5, 1, 0, 0)) is True


def test_window_stop_is_exclusive(make_state, at, utc):
    assert _check(make_state, utc, at(2024, 5, 1, 8, 0)) is False
    assert _check(make_state, utc, at(2024, 5, 1, 7, 59, 59)) is True


@pytest.mark.parametrize("hour,minute,expected", [
    (21, 59, False),
    (22, 0, True),
    (23, 30, True),
    (2, 0, True),
    (5, 59, True),
    (6, 0, False),
    (12, 0, False),
])
def test_window_wrapping_midnight(make_state, at, utc, hour, minute, expected):
    now = at(2024, 5, 1, hour, minute)
    assert _check(make_state, utc, now, night_start=22 * HOUR, night_stop=6 * HOUR) is expected


@pytest.mark.parametrize("bound", [0, 6 * HOUR, 41400, 23 * HOUR])
def test_zero_width_window_is_never_night(make_state, at, utc, bound):
    for hour in range(24):
        for minute in (0, 29, 30, 59):
            now = at(2024, 5, 1, hour, minute)
            for fire in (now, now - 3 * HOUR * 1000, now + 3 * HOUR * 1000, 0):
                assert _check(make_state, utc, now, fire=fire, night_start=bound, night_stop=bound) is False


def test_night_next_forces_night(make_state, at, utc):
    now = at(2024, 5, 1, 14, 0)
    state = make_state(next_fire_millis=now, night_next=True, night_start=0, night_stop=0)
    assert is_night(state, now, utc) is True
    # the oracle does not consume the flag
    assert state.night_next is True


def test_waited_fire_stays_night_until_force_wake(make_state, at, utc):
    fire = at(2024, 5, 1, 3, 0)
    assert _check(make_state, utc, at(2024, 5, 1, 8, 5), fire=fire) is True
    assert _check(make_state, utc, at(2024, 5, 1, 11, 29, 59), fire=fire) is True
    assert _check(make_state, utc, at(2024, 5, 1, 11, 30), fire=fire) is False
    assert _check(make_state, utc, at(2024, 5, 1, 11, 35), fire=fire) is False


def test_fire_before_last_night_start_is_day(make_state, at, utc):
    fire = at(2024, 4, 30, 3, 0)
    assert _check(make_state, utc, at(2024, 5, 1, 3, 0), fire=fire) is False


def test_window_ending_after_force_wake(make_state, at, utc):
    window = {"night_start": 22 * HOUR, "night_stop": 12 * HOUR}
    assert _check(make_state, utc, at(2024, 5, 2, 11, 45), **window) is True
    assert _check(make_state, utc, at(2024, 5, 2, 12, 0), **window) is False
