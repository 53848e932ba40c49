def test_order_from_empty_cart_fails(client, auth_headers):
    response = client.post("/api/orders/create", json={"total": 100}, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["detail"] == "Cart is empty"


def test_order_snapshots_cart_and_empties_it(client, auth_headers, make_product):
    studs = make_product(name="Studs", price=2500)
    hoops = make_product(name="Hoops", price=1800)
    client.post("/api/cart/add", json={"productId": studs.id, "quantity": 2}, headers=auth_headers)
    client.post("/api/cart/add", json={"productId": hoops.id}, headers=auth_headers)
    snapshot = [
        (line["product"]["id"], line["quantity"])
        for line in client.get("/api/cart", headers=auth_headers).json()["items"]
    ]

    response = client.post(
        "/api/orders/create",
        json={"total": 6800, "shippingAddress": {"city": "Jaipur", "pincode": "302001"}},
        headers=auth_headers,
    )
    assert response.status_code == 200
    order = response.json()
    assert [(line["product"]["id"], line["quantity"]) for line in order["items"]] == snapshot
    assert [line["price"] for line in order["items"]] == [2500, 1800]
    assert order["total"] == 6800
    assert order["status"] == "completed"
    assert order["shippingAddress"]["city"] == "Jaipur"

    assert client.get("/api/cart", headers=auth_headers).json()["items"] == []


def test_order_total_defaults_to_line_sum(client, auth_headers, make_product):
    product = make_product(price=1200)
    client.post("/api/cart/add", json={"productId": product.id, "quantity": 3}, headers=auth_headers)
    order = client.post("/api/orders/create", json={}, headers=auth_headers).json()
    assert order["total"] == 3600


def test_second_order_without_refill_fails(client, auth_headers, make_product):
    product = make_product()
    client.post("/api/cart/add", json={"productId": product.id}, headers=auth_headers)
    assert client.post("/api/orders/create", json={}, headers=auth_headers).status_code == 200
    assert client.post("/api/orders/create", json={}, headers=auth_headers).status_code == 400


def test_list_and_get_orders(client, auth_headers, make_product):
    product = make_product()
    ids = []
    for _ in range(2):
        client.post("/api/cart/add", json={"productId": product.id}, headers=auth_headers)
        ids.append(client.post("/api/orders/create", json={}, headers=auth_headers).json()["id"])

    orders = client.get("/api/orders", headers=auth_headers).json()
    assert [o["id"] for o in orders] == list(reversed(ids))

    order = client.get(f"/api/orders/{ids[0]}", headers=auth_headers).json()
    assert order["id"] == ids[0]
    assert order["items"][0]["product"]["id"] == product.id


def test_other_users_order_is_404(client, register, make_product):
    product = make_product()
    alice = {"Authorization": f"Bearer {register(email='alice@example.com')['token']}"}
    bob = {"Authorization": f"Bearer {register(email='bob@example.com')['token']}"}
    client.post("/api/cart/add", json={"productId": product.id}, headers=alice)
    order_id = client.post("/api/orders/create", json={}, headers=alice).json()["id"]
    assert client.get(f"/api/orders/{order_id}", headers=bob).status_code == 404


def test_order_status_is_stored_as_enum(client, db, auth_headers, make_product):
    from app.models.order import Order, OrderStatus

    product = make_product()
    client.post("/api/cart/add", json={"productId": product.id}, headers=auth_headers)
    order = client.post("/api/orders/create", json={}, headers=auth_headers).json()
    assert order["status"] == "completed"
    assert db.get(Order, order["id"]).status is OrderStatus.completed
