# tests/conftest.py
# Общие фикстуры: in-memory SQLite, TestClient и фейковая чат-модель.
import os

# Настройки читаются при импорте app.core.config, поэтому окружение задаём заранее
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_MAX_REQUESTS"] = "100000"
os.environ.setdefault("OPENAI_API_KEY", "sk-test")

import pytest
from fastapi.testclient import TestClient
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from app.main import app
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.product import Product
from app.services import assistant


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def chat_model():
    model = FakeListChatModel(responses=["Oval faces suit drops and hoops."])
    app.dependency_overrides[assistant.get_chat_model] = lambda: model
    yield model
    app.dependency_overrides.pop(assistant.get_chat_model, None)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_product(db):
    def _make(**fields):
        data = {
            "name": "Classic Diamond Studs",
            "description": "Elegant studs",
            "category": "earrings",
            "subcategory": "studs",
            "price": 2500.0,
            "images": ["https://example.com/studs.jpg"],
            "in_stock": True,
            "stock_quantity": 10,
            "tags": ["classic", "diamond"],
        }
        data.update(fields)
        product = Product(**data)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product
    return _make


@pytest.fixture
def register(client):
    def _register(email="asha@example.com", password="s3cret", name="Asha"):
        response = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
        assert response.status_code == 201, response.text
        return response.json()
    return _register


@pytest.fixture
def auth_headers(register):
    token = register()["token"]
    return {"Authorization": f"Bearer {token}"}
