"""Announcements: scheduling window, display order and engagement counters."""

from datetime import datetime, timedelta


def _create(client, headers, **fields):
    payload = {"title": "Maintenance tonight", "content": "The portal is down from 22:00."}
    payload.update(fields)
    response = client.post("/api/announcements", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_signed_in_view_counts_once(client, auth):
    announcement = _create(client, auth("editor"))
    url = f"/api/announcements/{announcement['_id']}/view"
    viewer = auth()

    for _ in range(3):
        analytics = client.post(url, headers=viewer).json()["data"]
    assert analytics["views"] == 1
    assert analytics["unique_viewers"] == 1

    client.post(url, headers=auth())
    analytics = client.post(url, headers=viewer).json()["data"]
    assert analytics["views"] == 2
    assert analytics["unique_viewers"] == 2


def test_anonymous_view_counts_every_call(client, auth):
    announcement = _create(client, auth("admin"))
    url = f"/api/announcements/{announcement['_id']}/view"
    client.post(url)
    analytics = client.post(url).json()["data"]
    assert analytics["views"] == 2
    assert analytics["unique_viewers"] == 0


def test_dismiss_needs_a_prior_view(client, auth):
    announcement = _create(client, auth("manager"))
    base = f"/api/announcements/{announcement['_id']}"
    viewer = auth()

    assert client.post(f"{base}/dismiss", headers=viewer).json()["data"]["dismissals"] == 0

    client.post(f"{base}/view", headers=viewer)
    assert client.post(f"{base}/dismiss", headers=viewer).json()["data"]["dismissals"] == 1
    assert client.post(f"{base}/dismiss", headers=viewer).json()["data"]["dismissals"] == 1


def test_anonymous_dismiss_only_counts(client, auth):
    announcement = _create(client, auth("admin"))
    analytics = client.post(f"/api/announcements/{announcement['_id']}/dismiss").json()["data"]
    assert analytics["dismissals"] == 1


def test_clicks_always_count(client, auth):
    announcement = _create(client, auth("admin"))
    url = f"/api/announcements/{announcement['_id']}/click"
    client.post(url)
    analytics = client.post(url, headers=auth()).json()["data"]
    assert analytics["clicks"] == 2


def test_per_user_records_stay_private(client, auth):
    announcement = _create(client, auth("admin"))
    client.post(f"/api/announcements/{announcement['_id']}/view", headers=auth())
    detail = client.get(f"/api/announcements/{announcement['_id']}").json()["data"]
    assert "unique_views" not in detail["analytics"]
    assert detail["analytics"]["unique_viewers"] == 1


def test_active_window_and_priority_order(client, auth):
    headers = auth("admin")
    now = datetime.utcnow()
    _create(client, headers, title="Low", priority="low")
    _create(client, headers, title="Urgent", priority="urgent")
    _create(client, headers, title="High", priority="high")
    _create(client, headers, title="Switched off", priority="urgent", is_active=False)
    _create(client, headers, title="Expired", end_date=(now - timedelta(seconds=1)).isoformat(),
            start_date=(now - timedelta(days=2)).isoformat())
    _create(client, headers, title="Scheduled", start_date=(now + timedelta(days=1)).isoformat())

    titles = [a["title"] for a in client.get("/api/announcements/active").json()["data"]]
    assert titles == ["Urgent", "High", "Low"]


def test_active_filters_by_audience_and_location(client, auth):
    headers = auth("admin")
    _create(client, headers, title="Everyone")
    _create(client, headers, title="Students only", target_audience="students")
    _create(client, headers, title="Instructors on dashboard", target_audience="instructors",
            display_location=["dashboard"])

    def titles(url, **kwargs):
        return sorted(a["title"] for a in client.get(url, **kwargs).json()["data"])

    assert titles("/api/announcements/active?audience=students") == ["Everyone", "Students only"]
    assert titles("/api/announcements/active", headers=auth("instructor")) == [
        "Everyone", "Instructors on dashboard"
    ]
    assert titles("/api/announcements/active?audience=instructors&location=homepage") == ["Everyone"]


def test_end_before_start_is_rejected(client, auth):
    now = datetime.utcnow()
    response = client.post("/api/announcements", headers=auth("editor"), json={
        "title": "Backwards",
        "content": "This window ends before it starts.",
        "start_date": (now + timedelta(days=2)).isoformat(),
        "end_date": (now + timedelta(days=1)).isoformat(),
    })
    assert response.status_code == 400
    assert "end_date must be after start_date" in response.json()["message"]


def test_update_cannot_invert_the_window(client, auth):
    headers = auth("editor")
    announcement = _create(client, headers, start_date=(datetime.utcnow() + timedelta(days=1)).isoformat())
    response = client.put(
        f"/api/announcements/{announcement['_id']}",
        headers=headers,
        json={"end_date": datetime.utcnow().isoformat()},
    )
    assert response.status_code == 400


def test_announcement_write_gates(client, auth):
    payload = {"title": "Hi", "content": "Hello"}
    assert client.post("/api/announcements", json=payload).status_code == 401
    assert client.post("/api/announcements", headers=auth("hr"), json=payload).status_code == 403

    announcement = _create(client, auth("editor"))
    url = f"/api/announcements/{announcement['_id']}"
    assert client.delete(url, headers=auth("editor")).status_code == 403
    assert client.delete(url, headers=auth("manager")).status_code == 200


def test_update_ignores_explicit_nulls(client, auth):
    headers = auth("editor")
    announcement = _create(client, headers)

    response = client.put(f"/api/announcements/{announcement['_id']}", headers=headers, json={
        "title": None, "content": None, "priority": None, "type": "warning",
    })
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["title"] == "Maintenance tonight"
    assert data["content"] == "The portal is down from 22:00."
    assert data["priority"] == announcement["priority"]
    assert data["type"] == "warning"
