MINUTE = 60000

def _shift_fire(api_client, timer_id, fire):
    api_client.put(
        f"/internals/timers/{timer_id}/state",
        json={"next_fire_millis": fire, "night_next": False, "seen": False}
    )

def test_not_late_before_fire(api_client, create_timer, now):
    timer = create_timer(enabled=True)
    response = api_client.get(f"/conditions/{timer['id']}", params={"late_by_mins": 0})
    assert response.status_code == 200
    assert response.json() == {"timer_id": timer["id"], "late": False, "night": False}

def test_late_by_minutes(api_client, create_timer, now):
    timer = create_timer(enabled=True)
    _shift_fire(api_client, timer["id"], now - 5 * MINUTE)
    assert api_client.get(f"/conditions/{timer['id']}", params={"late_by_mins": 5}).json()["late"] is True
    assert api_client.get(f"/conditions/{timer['id']}", params={"late_by_mins": 6}).json()["late"] is False

def test_disabled_timer_is_not_late(api_client, create_timer, now):
    timer = create_timer(enabled=False)
    _shift_fire(api_client, timer["id"], now - 60 * MINUTE)
    assert api_client.get(f"/conditions/{timer['id']}").json()["late"] is False

def test_night_condition(api_client, create_timer, now):
    # 14:00 UTC falls inside a 12:00-18:00 window
    timer = create_timer(enabled=True, night_start=12 * 3600, night_stop=18 * 3600)
    _shift_fire(api_client, timer["id"], now)
    assert api_client.get(f"/conditions/{timer['id']}").json()["night"] is True

def test_negative_minutes_rejected(api_client, create_timer):
    timer = create_timer(enabled=True)
    response = api_client.get(f"/conditions/{timer['id']}", params={"late_by_mins": -1})
    assert response.status_code == 422

def test_unknown_timer(api_client):
    assert api_client.get("/conditions/5").status_code == 404
