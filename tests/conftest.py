import pytest
from fastapi.testclient import TestClient

from product_api.database import ProductStore
from product_api.main import create_app
from product_api.middleware import StaticKeyVerifier


@pytest.fixture
def api_key():
    return "mysecretapikey"


@pytest.fixture
def auth(api_key):
    return {"x-api-key": api_key}


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(store, api_key):
    return create_app(store=store, verifier=StaticKeyVerifier(api_key, "x-api-key"))


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def create(client, auth):
    def _create(**body):
        payload = {"name": "Desk", "price": 150, "category": "office"}
        payload.update(body)
        return client.post("/api/products", json=payload, headers=auth)
    return _create
