def _lines(cart):
    return [(line["product"]["id"], line["quantity"]) for line in cart["items"]]


def test_add_same_product_accumulates_quantity(client, auth_headers, make_product):
    product = make_product()
    client.post("/api/cart/add", json={"productId": product.id, "quantity": 2}, headers=auth_headers)
    response = client.post("/api/cart/add", json={"productId": product.id, "quantity": 3}, headers=auth_headers)
    assert response.status_code == 200
    assert _lines(response.json()) == [(product.id, 5)]


def test_add_appends_new_lines_in_order(client, auth_headers, make_product):
    first = make_product(name="First")
    second = make_product(name="Second")
    client.post("/api/cart/add", json={"productId": first.id}, headers=auth_headers)
    cart = client.post("/api/cart/add", json={"productId": second.id}, headers=auth_headers).json()
    assert _lines(cart) == [(first.id, 1), (second.id, 1)]
    assert cart["items"][1]["product"]["name"] == "Second"


def test_add_rejects_non_positive_quantity(client, auth_headers, make_product):
    product = make_product()
    response = client.post("/api/cart/add", json={"productId": product.id, "quantity": 0}, headers=auth_headers)
    assert response.status_code == 400
    assert client.get("/api/cart", headers=auth_headers).json()["items"] == []


def test_add_unknown_product_is_404(client, auth_headers):
    response = client.post("/api/cart/add", json={"productId": 404}, headers=auth_headers)
    assert response.status_code == 404


def test_update_sets_quantity(client, auth_headers, make_product):
    product = make_product()
    client.post("/api/cart/add", json={"productId": product.id}, headers=auth_headers)
    response = client.put("/api/cart/update", json={"productId": product.id, "quantity": 7}, headers=auth_headers)
    assert _lines(response.json()) == [(product.id, 7)]


def test_update_to_zero_or_below_removes_line(client, auth_headers, make_product):
    keep = make_product(name="Keep")
    drop = make_product(name="Drop")
    gone = make_product(name="Gone")
    for product in (keep, drop, gone):
        client.post("/api/cart/add", json={"productId": product.id}, headers=auth_headers)

    client.put("/api/cart/update", json={"productId": drop.id, "quantity": 0}, headers=auth_headers)
    cart = client.put("/api/cart/update", json={"productId": gone.id, "quantity": -2}, headers=auth_headers).json()
    assert _lines(cart) == [(keep.id, 1)]


def test_update_product_not_in_cart_is_404(client, auth_headers, make_product):
    product = make_product()
    response = client.put("/api/cart/update", json={"productId": product.id, "quantity": 1}, headers=auth_headers)
    assert response.status_code == 404


def test_remove_filters_line_out(client, auth_headers, make_product):
    first = make_product(name="First")
    second = make_product(name="Second")
    client.post("/api/cart/add", json={"productId": first.id}, headers=auth_headers)
    client.post("/api/cart/add", json={"productId": second.id}, headers=auth_headers)
    cart = client.post("/api/cart/remove", json={"productId": first.id}, headers=auth_headers).json()
    assert _lines(cart) == [(second.id, 1)]


def test_clear_empties_cart(client, auth_headers, make_product):
    product = make_product()
    client.post("/api/cart/add", json={"productId": product.id, "quantity": 2}, headers=auth_headers)
    response = client.delete("/api/cart/clear", headers=auth_headers)
    assert response.json() == {"message": "Cart cleared successfully"}
    assert client.get("/api/cart", headers=auth_headers).json()["items"] == []


def test_carts_are_per_user(client, register, make_product):
    product = make_product()
    alice = {"Authorization": f"Bearer {register(email='alice@example.com')['token']}"}
    bob = {"Authorization": f"Bearer {register(email='bob@example.com')['token']}"}
    client.post("/api/cart/add", json={"productId": product.id}, headers=alice)
    assert client.get("/api/cart", headers=bob).json()["items"] == []


def test_wishlist_add_is_idempotent(client, auth_headers, make_product):
    product = make_product()
    client.post("/api/wishlist/add", json={"productId": product.id}, headers=auth_headers)
    wishlist = client.post("/api/wishlist/add", json={"productId": product.id}, headers=auth_headers).json()
    assert [p["id"] for p in wishlist["items"]] == [product.id]


def test_wishlist_remove(client, auth_headers, make_product):
    first = make_product(name="First")
    second = make_product(name="Second")
    client.post("/api/wishlist/add", json={"productId": first.id}, headers=auth_headers)
    client.post("/api/wishlist/add", json={"productId": second.id}, headers=auth_headers)
    wishlist = client.post("/api/wishlist/remove", json={"productId": first.id}, headers=auth_headers).json()
    assert [p["id"] for p in wishlist["items"]] == [second.id]


def test_wishlist_add_unknown_product_is_404(client, auth_headers):
    response = client.post("/api/wishlist/add", json={"productId": 999}, headers=auth_headers)
    assert response.status_code == 404
