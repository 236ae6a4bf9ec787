def test_worker_lists_all_timers(api_client, create_timer):
    create_timer(enabled=True)
    create_timer(enabled=False)
    response = api_client.get("/internals/timers")
    assert response.status_code == 200
    assert len(response.json()) == 2

def test_worker_reads_single_timer(api_client, create_timer):
    timer = create_timer(enabled=True)
    response = api_client.get(f"/internals/timers/{timer['id']}")
    assert response.status_code == 200
    assert response.json()["next_fire_millis"] == timer["next_fire_millis"]

def test_worker_saves_owned_fields_only(api_client, create_timer):
    timer = create_timer(enabled=True, night_next=False)
    response = api_client.put(
        f"/internals/timers/{timer['id']}/state",
        json={"next_fire_millis": 123, "night_next": False, "seen": True, "enabled": False}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["next_fire_millis"] == 123
    assert data["seen"] is True
    assert data["enabled"] is True

def test_worker_save_missing_timer(api_client):
    response = api_client.put(
        "/internals/timers/77/state",
        json={"next_fire_millis": 1, "night_next": False, "seen": False}
    )
    assert response.status_code == 404
