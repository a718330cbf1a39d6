"""Trainings and enrollments, including the enrollment counter."""

from bson import ObjectId


def _create_training(client, headers, payload, **overrides):
    response = client.post("/api/training", headers=headers, json={**payload, **overrides})
    assert response.status_code == 201, response.text
    return response.json()["data"]


def _count(db, training_id):
    return db["trainings"].find_one({"_id": ObjectId(training_id)})["enrollment_count"]


def test_enroll_then_unenroll_keeps_counter_in_step(client, make_user, auth, db, training_payload):
    instructor, instructor_headers = make_user("instructor", name="Dana Lee")
    training = _create_training(client, instructor_headers, training_payload)
    assert training["enrollment_count"] == 0
    assert training["created_by"]["name"] == "Dana Lee"
    assert training["created_by"]["_id"] == str(instructor["_id"])

    _, student = make_user()
    enrolled = client.post("/api/training/enrollment", headers=student, json={"training_id": training["_id"]})
    assert enrolled.status_code == 201
    enrollment = enrolled.json()["data"]
    assert enrollment["status"] == "confirmed"
    assert enrollment["training"]["title"] == training_payload["title"]
    assert _count(db, training["_id"]) == 1

    again = client.post("/api/training/enrollment", headers=student, json={"training_id": training["_id"]})
    assert again.status_code == 409
    assert _count(db, training["_id"]) == 1
    assert db["enrollments"].count_documents({}) == 1

    staff = auth("manager")
    assert client.delete(f"/api/training/enrollment/{enrollment['_id']}", headers=staff).status_code == 200
    assert _count(db, training["_id"]) == 0


def test_counter_never_goes_negative(client, auth, make_user, db, training_payload):
    training = _create_training(client, auth("admin"), training_payload)
    _, student = make_user()
    enrollment = client.post(
        "/api/training/enrollment", headers=student, json={"training_id": training["_id"]}
    ).json()["data"]

    # Counter drifted to zero out of band
    db["trainings"].update_one({"_id": ObjectId(training["_id"])}, {"$set": {"enrollment_count": 0}})
    client.delete(f"/api/training/enrollment/{enrollment['_id']}", headers=auth("admin"))
    assert _count(db, training["_id"]) == 0


def test_enroll_in_inactive_training(client, auth, training_payload):
    training = _create_training(client, auth("admin"), training_payload, active=False)
    response = client.post("/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]})
    assert response.status_code == 400


def test_enroll_in_full_training(client, auth, db, training_payload):
    training = _create_training(client, auth("admin"), training_payload, max_capacity=1)
    assert client.post(
        "/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]}
    ).status_code == 201

    response = client.post("/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]})
    assert response.status_code == 400
    assert response.json()["message"] == "Training is full"
    assert _count(db, training["_id"]) == 1


def test_enroll_in_missing_training(client, auth):
    response = client.post("/api/training/enrollment", headers=auth(), json={"training_id": str(ObjectId())})
    assert response.status_code == 404


def test_enroll_with_malformed_training_id(client, auth):
    response = client.post("/api/training/enrollment", headers=auth(), json={"training_id": "abc"})
    assert response.status_code == 400


def test_enroll_requires_session(client, db):
    response = client.post("/api/training/enrollment", json={"training_id": str(ObjectId())})
    assert response.status_code == 401


def test_progress_completes_only_in_progress_enrollments(client, auth, training_payload):
    staff = auth("manager")
    training = _create_training(client, staff, training_payload)
    enrollment = client.post(
        "/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]}
    ).json()["data"]
    url = f"/api/training/enrollment/{enrollment['_id']}"

    client.put(url, headers=staff, json={"status": "in-progress"})
    response = client.patch(f"{url}/progress", headers=staff, json={"completed_modules": 2, "total_modules": 4})
    assert response.json()["data"]["progress_percentage"] == 50
    assert response.json()["data"]["status"] == "in-progress"

    response = client.patch(f"{url}/progress", headers=staff, json={"completed_modules": 4, "total_modules": 4})
    data = response.json()["data"]
    assert data["progress_percentage"] == 100
    assert data["status"] == "completed"
    assert data["is_complete"] is True


def test_progress_on_cancelled_enrollment(client, auth, training_payload):
    staff = auth("admin")
    training = _create_training(client, staff, training_payload)
    enrollment = client.post(
        "/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]}
    ).json()["data"]
    url = f"/api/training/enrollment/{enrollment['_id']}"

    client.put(url, headers=staff, json={"status": "cancelled"})
    data = client.patch(
        f"{url}/progress", headers=staff, json={"completed_modules": 3, "total_modules": 3}
    ).json()["data"]
    assert data["progress_percentage"] == 100
    assert data["status"] == "cancelled"


def test_progress_rejects_more_completed_than_total(client, auth, training_payload):
    staff = auth("admin")
    training = _create_training(client, staff, training_payload)
    enrollment = client.post(
        "/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]}
    ).json()["data"]
    response = client.patch(
        f"/api/training/enrollment/{enrollment['_id']}/progress",
        headers=staff,
        json={"completed_modules": 5, "total_modules": 4},
    )
    assert response.status_code == 400


def test_enrollment_visible_to_owner_and_staff_only(client, make_user, auth, training_payload):
    training = _create_training(client, auth("admin"), training_payload)
    _, owner = make_user()
    enrollment = client.post(
        "/api/training/enrollment", headers=owner, json={"training_id": training["_id"]}
    ).json()["data"]
    url = f"/api/training/enrollment/{enrollment['_id']}"

    assert client.get(url, headers=owner).status_code == 200
    assert client.get(url, headers=auth()).status_code == 403
    assert client.get(url, headers=auth("manager")).status_code == 200

    mine = client.get("/api/training/enrollment/mine", headers=owner).json()["data"]
    assert [e["_id"] for e in mine["items"]] == [enrollment["_id"]]


def test_enrollment_list_is_staff_only(client, auth):
    assert client.get("/api/training/enrollment", headers=auth()).status_code == 403
    assert client.get("/api/training/enrollment", headers=auth("instructor")).status_code == 403
    assert client.get("/api/training/enrollment", headers=auth("manager")).status_code == 200


def test_training_write_gates(client, auth, training_payload):
    assert client.post("/api/training", json=training_payload).status_code == 401
    assert client.post("/api/training", headers=auth(), json=training_payload).status_code == 403
    assert client.post("/api/training", headers=auth("hr"), json=training_payload).status_code == 403

    training = _create_training(client, auth("instructor"), training_payload)
    url = f"/api/training/{training['_id']}"
    assert client.delete(url, headers=auth("instructor")).status_code == 403
    assert client.delete(url, headers=auth("manager")).status_code == 403
    assert client.delete(url, headers=auth("admin")).status_code == 200


def test_training_requires_known_category(client, auth, training_payload):
    response = client.post("/api/training", headers=auth("admin"), json={**training_payload, "category": "Cooking"})
    assert response.status_code == 400
    assert response.json()["message"].startswith("category")


def test_public_list_shows_active_trainings(client, auth, training_payload):
    staff = auth("admin")
    _create_training(client, staff, training_payload, title="Live Course")
    _create_training(client, staff, training_payload, title="Retired Course", active=False)

    items = client.get("/api/training").json()["data"]["items"]
    assert [t["title"] for t in items] == ["Live Course"]

    items = client.get("/api/training?active=false").json()["data"]["items"]
    assert [t["title"] for t in items] == ["Retired Course"]


def test_update_training_cannot_touch_counter(client, auth, db, training_payload):
    staff = auth("admin")
    training = _create_training(client, staff, training_payload)
    response = client.put(
        f"/api/training/{training['_id']}",
        headers=staff,
        json={"price": 299, "enrollment_count": 50},
    )
    assert response.status_code == 200
    assert response.json()["data"]["price"] == 299
    assert _count(db, training["_id"]) == 0


def test_update_ignores_explicit_nulls(client, auth, db, training_payload):
    staff = auth("admin")
    training = _create_training(client, staff, training_payload)
    response = client.put(
        f"/api/training/{training['_id']}",
        headers=staff,
        json={"title": None, "price": None, "duration": "10 weeks"},
    )
    assert response.status_code == 200
    stored = db["trainings"].find_one({"_id": ObjectId(training["_id"])})
    assert stored["title"] == "Full Stack Web Development"
    assert stored["price"] == 499
    assert stored["duration"] == "10 weeks"


def test_enrollment_update_ignores_explicit_nulls(client, auth, db, training_payload):
    staff = auth("manager")
    training = _create_training(client, staff, training_payload)
    enrollment = client.post(
        "/api/training/enrollment", headers=auth(), json={"training_id": training["_id"]}
    ).json()["data"]

    response = client.put(
        f"/api/training/enrollment/{enrollment['_id']}",
        headers=staff,
        json={"status": None, "progress_percentage": None, "notes": "Paid at the desk"},
    )
    assert response.status_code == 200
    stored = db["enrollments"].find_one({"_id": ObjectId(enrollment["_id"])})
    assert stored["status"] == enrollment["status"]
    assert stored["progress_percentage"] == enrollment["progress_percentage"]
    assert stored["notes"] == "Paid at the desk"
