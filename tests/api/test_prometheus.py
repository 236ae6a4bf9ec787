def test_prometheus_metrics(api_client, create_timer):
    create_timer(enabled=True)
    response = api_client.get("/metrics/")
    assert response.status_code == 200
    assert "timer_api_requests_total" in response.text
    assert "timers_enabled 1.0" in response.text
