"""Blog posts, visibility rules and comment threads."""

from bson import ObjectId


def _create(client, headers, **fields):
    payload = {"title": "Hello, World!", "content": "<p>Our <b>first</b> post.</p>"}
    payload.update(fields)
    response = client.post("/api/blog", headers=headers, json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


def test_create_derives_slug_and_excerpt(client, make_user):
    author, headers = make_user("editor", name="Eddie Tor")
    post = _create(client, headers)
    assert post["slug"] == "hello-world"
    assert post["excerpt"] == "Our first post."
    assert post["status"] == "draft"
    assert post["published_at"] is None
    assert post["author"]["name"] == "Eddie Tor"
    assert post["seo"]["meta_title"] == "Hello, World!"


def test_publishing_stamps_published_at(client, auth, db):
    headers = auth("editor")
    post = _create(client, headers)
    published = client.put(f"/api/blog/{post['_id']}", headers=headers, json={"status": "published"}).json()["data"]
    assert published["published_at"] is not None
    stamped = db["blog_posts"].find_one({"_id": ObjectId(post["_id"])})["published_at"]

    client.put(f"/api/blog/{post['_id']}", headers=headers, json={"is_featured": True})
    assert db["blog_posts"].find_one({"_id": ObjectId(post["_id"])})["published_at"] == stamped


def test_duplicate_title_conflicts(client, auth, db):
    headers = auth("admin")
    _create(client, headers)
    response = client.post("/api/blog", headers=headers, json={"title": "hello world", "content": "Again"})
    assert response.status_code == 409
    assert db["blog_posts"].count_documents({}) == 1


def test_retitle_to_existing_slug_conflicts(client, auth):
    headers = auth("admin")
    _create(client, headers, title="First")
    second = _create(client, headers, title="Second")
    response = client.put(f"/api/blog/{second['_id']}", headers=headers, json={"title": "first!"})
    assert response.status_code == 409

    response = client.put(f"/api/blog/{second['_id']}", headers=headers, json={"title": "Third Post"})
    assert response.json()["data"]["slug"] == "third-post"


def test_anonymous_readers_only_see_published(client, auth):
    headers = auth("editor")
    _create(client, headers, title="Draft Post")
    _create(client, headers, title="Live Post", status="published")

    public = client.get("/api/blog").json()["data"]["items"]
    assert [p["title"] for p in public] == ["Live Post"]

    # Asking for drafts does not widen a non-staff listing
    public = client.get("/api/blog?status=draft", headers=auth()).json()["data"]["items"]
    assert [p["title"] for p in public] == ["Live Post"]

    staff = client.get("/api/blog?status=draft", headers=auth("manager")).json()["data"]["items"]
    assert [p["title"] for p in staff] == ["Draft Post"]


def test_draft_is_forbidden_to_anonymous_readers(client, auth):
    post = _create(client, auth("editor"))
    assert client.get(f"/api/blog/{post['_id']}").status_code == 403
    assert client.get(f"/api/blog/{post['_id']}", headers=auth("admin")).status_code == 200


def test_read_by_slug_counts_views(client, auth):
    _create(client, auth("editor"), status="published")
    client.get("/api/blog/slug/hello-world")
    response = client.get("/api/blog/slug/Hello-World")
    assert response.status_code == 200
    assert response.json()["data"]["views"] == 2
    assert client.get("/api/blog/slug/missing").status_code == 404


def test_cannot_comment_on_a_draft(client, auth):
    post = _create(client, auth("editor"))
    response = client.post(f"/api/blog/{post['_id']}/comments", headers=auth(), json={"content": "Nice"})
    assert response.status_code == 400


def test_comment_reply_and_approval(client, make_user, auth, db):
    editor = auth("editor")
    post = _create(client, editor, status="published")
    reader, reader_headers = make_user()

    assert client.post(f"/api/blog/{post['_id']}/comments", json={"content": "Hi"}).status_code == 401

    response = client.post(f"/api/blog/{post['_id']}/comments", headers=reader_headers, json={"content": "Great read"})
    assert response.status_code == 201
    comment = response.json()["data"]
    assert comment["is_approved"] is False
    assert comment["user"] == str(reader["_id"])

    reply = client.post(
        f"/api/blog/{post['_id']}/comments/{comment['_id']}/replies",
        headers=auth(),
        json={"content": "Agreed"},
    )
    assert reply.status_code == 201

    assert client.patch(
        f"/api/blog/{post['_id']}/comments/{comment['_id']}/approval", headers=reader_headers
    ).status_code == 403
    approval = client.patch(f"/api/blog/{post['_id']}/comments/{comment['_id']}/approval", headers=editor)
    assert approval.json()["data"]["is_approved"] is True

    stored = db["blog_posts"].find_one({"_id": ObjectId(post["_id"])})["comments"][0]
    assert stored["is_approved"] is True
    assert [r["content"] for r in stored["replies"]] == ["Agreed"]


def test_reply_to_missing_comment(client, auth):
    post = _create(client, auth("editor"), status="published")
    response = client.post(
        f"/api/blog/{post['_id']}/comments/{ObjectId()}/replies",
        headers=auth(),
        json={"content": "Hello?"},
    )
    assert response.status_code == 404


def test_likes(client, auth):
    headers = auth("editor")
    live = _create(client, headers, title="Live", status="published")
    draft = _create(client, headers, title="Hidden")

    client.post(f"/api/blog/{live['_id']}/like")
    assert client.post(f"/api/blog/{live['_id']}/like").json()["data"] == {"likes": 2}
    assert client.post(f"/api/blog/{draft['_id']}/like").status_code == 404


def test_summary_is_staff_only(client, auth):
    headers = auth("editor")
    _create(client, headers, title="One", status="published")
    _create(client, headers, title="Two")

    assert client.get("/api/blog?summary=true").status_code == 403
    assert client.get("/api/blog?summary=true", headers=headers).status_code == 403
    summary = client.get("/api/blog?summary=true", headers=auth("admin")).json()["data"]
    assert summary["total"] == 2
    assert summary["published"] == 1
    assert summary["drafts"] == 1


def test_update_ignores_explicit_nulls(client, auth, db):
    headers = auth("editor")
    post = _create(client, headers)

    response = client.put(f"/api/blog/{post['_id']}", headers=headers, json={
        "title": None, "content": None, "status": None, "tags": ["news"],
    })
    assert response.status_code == 200
    stored = db["blog_posts"].find_one({"_id": ObjectId(post["_id"])})
    assert stored["title"] == "Hello, World!"
    assert stored["slug"] == "hello-world"
    assert stored["content"] == "<p>Our <b>first</b> post.</p>"
    assert stored["status"] == "draft"
    assert stored["tags"] == ["news"]
