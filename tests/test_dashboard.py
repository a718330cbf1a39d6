"""Admin dashboard and analytics aggregates."""


def _enroll(client, headers, training_id, **extra):
    response = client.post("/api/training/enrollment", headers=headers, json={"training_id": training_id, **extra})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_dashboard_counts(client, make_user, auth, training_payload, job_payload):
    _, admin = make_user("admin")
    make_user(active=False)
    _, student = make_user(name="Robin Student")

    training = client.post("/api/training", headers=admin, json=training_payload).json()["data"]
    _enroll(client, student, training["_id"], payment_info={"amount": 499, "status": "completed"})
    client.post("/api/jobs", headers=admin, json=job_payload)

    response = client.get("/api/admin/dashboard", headers=admin)
    assert response.status_code == 200
    data = response.json()["data"]

    stats = data["stats"]
    assert stats["users"]["total"] == 3
    assert stats["users"]["active"] == 2
    assert stats["users"]["new"] == 3
    assert stats["trainings"] == {
        "total": 1, "active": 1, "enrolled": 1, "new_enrollments": 1, "growth": 100.0
    }
    assert stats["jobs"]["active"] == 1
    assert stats["revenue"]["collected"] == 499

    assert len(data["charts"]["labels"]) == 6
    assert data["charts"]["users"][-1] == 3

    titles = [a["title"] for a in data["recent_activities"]]
    assert f"Robin Student enrolled in {training_payload['title']}" in titles
    assert len(titles) <= 8

    top = data["top_performers"]["trainings"]
    assert top[0]["enrollments"] == 1
    assert top[0]["training"]["title"] == training_payload["title"]

    assert data["estimated"]["is_estimate"] is True
    assert data["estimated"]["revenue"]["total"] == 180


def test_dashboard_is_admin_only(client, auth):
    assert client.get("/api/admin/dashboard").status_code == 401
    assert client.get("/api/admin/dashboard", headers=auth("manager")).status_code == 403


def test_analytics_window(client, auth):
    headers = auth("manager")
    response = client.get("/api/admin/analytics?time_range=30d", headers=headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["time_range"] == "30d"
    assert data["overview"]["total_users"] == 1
    assert data["overview"]["new_users"] == 1
    assert data["estimated"]["is_estimate"] is True
    assert data["estimated"]["page_views"] == 40


def test_analytics_rejects_unknown_range(client, auth):
    response = client.get("/api/admin/analytics?time_range=1y", headers=auth("admin"))
    assert response.status_code == 400
    assert response.json()["message"] == "time_range must be one of: 24h, 7d, 30d, 90d"


def test_analytics_is_staff_only(client, auth):
    assert client.get("/api/admin/analytics", headers=auth("hr")).status_code == 403
