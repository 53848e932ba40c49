def test_get_profile(client, auth_headers):
    body = client.get("/api/user/profile", headers=auth_headers).json()
    assert body["email"] == "asha@example.com"
    assert body["name"] == "Asha"


def test_update_profile_only_touches_given_fields(client, auth_headers):
    response = client.put(
        "/api/user/profile",
        json={
            "phone": "12345",
            "preferences": {"faceShape": "oval", "priceRange": "1000-3000", "metalPreference": ["gold"]},
        },
        headers=auth_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Asha"
    assert body["phone"] == "12345"
    assert body["preferences"]["faceShape"] == "oval"
    assert body["preferences"]["metalPreference"] == ["gold"]


def test_recommendations_follow_preferences(client, auth_headers, make_product):
    make_product(name="Oval cheap", tags=["oval"], price=1500)
    make_product(name="Oval pricey", tags=["oval"], price=4500)
    make_product(name="Round", tags=["round"], price=1500)
    make_product(name="Oval sold out", tags=["oval"], price=1000, in_stock=False)
    make_product(name="Oval ring", category="rings", tags=["oval"], price=1000)

    client.put(
        "/api/user/profile",
        json={"preferences": {"faceShape": "oval", "priceRange": "1000-3000"}},
        headers=auth_headers,
    )
    names = [p["name"] for p in client.get("/api/recommendations", headers=auth_headers).json()]
    assert names == ["Oval cheap"]


def test_recommendations_without_preferences(client, auth_headers, make_product):
    for i in range(7):
        make_product(name=f"E{i}")
    assert len(client.get("/api/recommendations", headers=auth_headers).json()) == 5


def test_recommendations_require_auth(client):
    assert client.get("/api/recommendations").status_code == 401


def test_price_ceiling_parsing():
    from app.services.catalog import parse_price_ceiling

    assert parse_price_ceiling(None) is None
    assert parse_price_ceiling("1000-3000") == 3000
    assert parse_price_ceiling("3000") == 5000
    assert parse_price_ceiling("1000-lots") == 5000


def test_health(client):
    assert client.get("/api/health").json() == {"status": "OK"}


def test_profile_of_deleted_user_is_401(client, db, register):
    from app.models.user import User

    token = register()["token"]
    db.query(User).delete()
    db.commit()

    response = client.get("/api/user/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
