"""Products catalogue."""


def _product(**fields):
    payload = {
        "name": "Resume Review",
        "description": "A one-to-one review of your CV.",
        "category": "Consultation",
        "price": 49,
    }
    payload.update(fields)
    return payload


def test_public_only_sees_active_products(client, auth):
    staff = auth("manager")
    client.post("/api/products", headers=staff, json=_product(name="Draft thing"))
    client.post("/api/products", headers=staff, json=_product(name="On sale", status="active"))

    assert [p["name"] for p in client.get("/api/products?status=all").json()["data"]["items"]] == ["On sale"]
    assert [p["name"] for p in client.get("/api/products?status=draft").json()["data"]["items"]] == ["On sale"]

    staff_view = client.get("/api/products?status=all", headers=staff).json()["data"]["items"]
    assert {p["name"] for p in staff_view} == {"Draft thing", "On sale"}


def test_single_primary_image_is_enforced(client, auth):
    response = client.post("/api/products", headers=auth("admin"), json=_product(images=[
        {"url": "/uploads/products/a.png", "is_primary": True},
        {"url": "/uploads/products/b.png", "is_primary": True},
    ]))
    assert response.status_code == 201
    images = response.json()["data"]["images"]
    assert [i["is_primary"] for i in images] == [True, False]


def test_sort_by_price(client, auth):
    staff = auth("admin")
    for name, price in (("Mid", 50), ("Cheap", 10), ("Pricey", 90)):
        client.post("/api/products", headers=staff, json=_product(name=name, price=price, status="active"))

    items = client.get("/api/products?sort_by=price&sort_order=asc").json()["data"]["items"]
    assert [p["name"] for p in items] == ["Cheap", "Mid", "Pricey"]


def test_view_counter_and_low_stock(client, auth):
    product = client.post("/api/products", headers=auth("admin"), json=_product(
        status="active", inventory={"track_inventory": True, "quantity": 1}
    )).json()["data"]
    assert product["is_low_stock"] is True

    client.get(f"/api/products/{product['_id']}")
    assert client.get(f"/api/products/{product['_id']}").json()["data"]["view_count"] == 2


def test_product_writes_are_staff_only(client, auth):
    assert client.post("/api/products", headers=auth("editor"), json=_product()).status_code == 403
    assert client.post("/api/products", headers=auth("admin"), json=_product(category="Gadgets")).status_code == 400


def test_update_ignores_explicit_nulls(client, auth, db):
    headers = auth("admin")
    product = client.post("/api/products", headers=headers, json=_product()).json()["data"]

    response = client.put(f"/api/products/{product['_id']}", headers=headers, json={
        "name": None, "price": None, "category": None, "original_price": 79,
    })
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Resume Review"
    assert data["price"] == 49
    assert data["category"] == "Consultation"
    assert data["original_price"] == 79
