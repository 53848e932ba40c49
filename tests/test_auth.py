from datetime import timedelta

from app.core import security


def test_register_returns_token_and_sanitized_user(client):
    response = client.post(
        "/api/auth/register",
        json={"name": "Asha", "email": "Asha@Example.com", "password": "s3cret", "phone": "+91 98000 00000"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["token"]
    assert body["user"]["email"] == "asha@example.com"
    assert body["user"]["phone"] == "+91 98000 00000"
    assert "password" not in body["user"]
    assert "hashedPassword" not in body["user"]


def test_register_duplicate_email_rejected(client, register):
    register(email="dup@example.com")
    response = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "dup@example.com", "password": "another"},
    )
    assert response.status_code == 400
    assert "already exists" in response.json()["detail"]


def test_register_missing_fields_is_client_error(client):
    response = client.post("/api/auth/register", json={"email": "x@example.com"})
    assert response.status_code == 400


def test_register_provisions_empty_cart_and_wishlist(client, auth_headers):
    cart = client.get("/api/cart", headers=auth_headers).json()
    wishlist = client.get("/api/wishlist", headers=auth_headers).json()
    assert cart["id"] is not None and cart["items"] == []
    assert wishlist["id"] is not None and wishlist["items"] == []


def test_login_success_and_token_claims(client, register):
    user = register(email="login@example.com", password="pw")["user"]
    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "pw"})
    assert response.status_code == 200
    claims = security.decode_access_token(response.json()["token"])
    assert claims["sub"] == str(user["id"])
    assert claims["email"] == "login@example.com"
    assert "exp" in claims


def test_login_wrong_password(client, register):
    register(email="login@example.com", password="pw")
    response = client.post("/api/auth/login", json={"email": "login@example.com", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "pw"})
    assert response.status_code == 401


def test_protected_endpoint_requires_token(client):
    assert client.get("/api/cart").status_code == 401


def test_protected_endpoint_rejects_garbage_token(client):
    response = client.get("/api/cart", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_protected_endpoint_rejects_expired_token(client, register):
    user = register()["user"]
    token = security.create_access_token(user["id"], user["email"], expires_delta=timedelta(seconds=-5))
    response = client.get("/api/cart", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_token_for_missing_user_is_unauthorized(client):
    token = security.create_access_token(999, "nobody@example.com")
    response = client.get("/api/orders", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_password_hash_roundtrip():
    hashed = security.get_password_hash("s3cret")
    assert hashed != "s3cret"
    assert security.verify_password("s3cret", hashed)
    assert not security.verify_password("wrong", hashed)
