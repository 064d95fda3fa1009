def add_product(client, name, category="clothing", new_price=10, old_price=20):
    return client.post(
        "/addproduct",
        json={
            "name": name,
            "image": f"http://localhost/images/{name}.png",
            "category": category,
            "new_price": new_price,
            "old_price": old_price,
        },
    )


def test_add_product(client):
    response = add_product(client, "Tee")

    assert response.status_code == 200
    assert response.json == {"success": True, "id": 1, "name": "Tee"}

    products = client.get("/allproducts").json
    assert len(products) == 1
    assert products[0]["name"] == "Tee"
    assert products[0]["new_price"] == 10.0
    assert products[0]["available"] is True


def test_add_product_missing_fields(client):
    response = client.post("/addproduct", json={"name": "Tee"})

    assert response.status_code == 400
    assert set(response.json["details"]["missing"]) == {"image", "category", "new_price", "old_price"}


def test_add_product_rejects_non_numeric_price(client):
    response = add_product(client, "Tee", new_price="cheap")
    assert response.status_code == 400
    assert response.json["details"]["field"] == "new_price"


def test_product_ids_are_never_reused(client):
    add_product(client, "A")
    add_product(client, "B")
    client.post("/removeproduct", json={"id": 2})

    response = add_product(client, "C")
    assert response.json["id"] == 3


def test_remove_product(client):
    add_product(client, "A")
    response = client.post("/removeproduct", json={"id": 1})

    assert response.status_code == 200
    assert response.json == {"success": True, "id": 1, "name": "A"}
    assert client.get("/allproducts").json == []


def test_remove_unknown_product(client):
    response = client.post("/removeproduct", json={"id": 42})
    assert response.status_code == 404
    assert response.json["code"] == "not_found"


def test_new_collections_returns_last_eight(client):
    for i in range(10):
        add_product(client, f"P{i}")

    names = [p["name"] for p in client.get("/newcollections").json]
    assert names == [f"P{i}" for i in range(2, 10)]


def test_popular_products_filters_category_and_limits(client):
    add_product(client, "Shoe", category="shoes")
    for i in range(6):
        add_product(client, f"C{i}")

    products = client.get("/popularproducts").json
    assert [p["name"] for p in products] == ["C0", "C1", "C2", "C3"]
    assert all(p["category"] == "clothing" for p in products)


def test_add_product_rejects_non_finite_price(client):
    for field, value in (("new_price", "inf"), ("old_price", "-inf"), ("new_price", "nan")):
        payload = {field: value}
        response = add_product(client, "Tee", **payload)

        assert response.status_code == 400
        assert response.json["code"] == "validation_error"
        assert response.json["details"]["field"] == field

    assert client.get("/allproducts").json == []
