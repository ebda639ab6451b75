# tests/test_middleware.py
import logging
import re

from fastapi.testclient import TestClient
from rich.logging import RichHandler

from product_api.database import ProductStore
from product_api.main import create_app
from product_api.middleware import CredentialVerifier, StaticKeyVerifier

DESK = {"name": "Desk", "price": 150, "category": "office"}


def test_mutations_without_key_are_rejected(client, store, auth):
    pid = client.post("/api/products", json=DESK, headers=auth).json()["id"]
    before = client.get("/api/products").json()
    for headers in ({}, {"x-api-key": "wrong"}, {"x-api-key": ""}):
        assert client.post("/api/products", json=DESK, headers=headers).status_code == 401
        assert client.put(f"/api/products/{pid}", json={"name": "x"}, headers=headers).status_code == 401
        r = client.delete(f"/api/products/{pid}", headers=headers)
        assert r.status_code == 401
        assert r.text == "Unauthorized: Invalid or missing API Key."
    assert client.get("/api/products").json() == before


def test_auth_checked_before_route_lookup(client):
    r = client.delete("/api/products/does-not-exist")
    assert r.status_code == 401


def test_reads_need_no_key(client):
    assert client.get("/api/products").status_code == 200
    assert client.get("/api/products/missing").status_code == 404


def test_gate_ignores_paths_outside_root(app, client):
    @app.post("/api/productsx")
    async def sibling():
        return {"ok": True}

    assert client.post("/api/productsx").status_code == 200


class DenyAll(CredentialVerifier):
    def verify(self, request):
        return False


class Exploding(CredentialVerifier):
    def verify(self, request):
        raise RuntimeError("verifier down")


def test_pluggable_verifier(auth):
    client = TestClient(create_app(store=ProductStore(), verifier=DenyAll()))
    assert client.post("/api/products", json=DESK, headers=auth).status_code == 401
    assert client.get("/api/products").status_code == 200


def test_static_key_verifier_header_name():
    client = TestClient(create_app(store=ProductStore(), verifier=StaticKeyVerifier("k", "x-token")))
    assert client.post("/api/products", json=DESK, headers={"x-api-key": "k"}).status_code == 401
    assert client.post("/api/products", json=DESK, headers={"x-token": "k"}).status_code == 201


def test_request_log_line(client, caplog):
    caplog.set_level(logging.INFO, logger="product_api.access")
    client.get("/api/products?sort=asc")
    lines = [r.getMessage() for r in caplog.records if r.name == "product_api.access"]
    assert len(lines) == 1
    assert re.fullmatch(r"\[\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d\.\d{3}Z\] GET /api/products\?sort=asc", lines[0])


def test_rejected_requests_are_still_logged(client, caplog):
    caplog.set_level(logging.INFO, logger="product_api.access")
    client.delete("/api/products/1")
    assert any("DELETE /api/products/1" in r.getMessage() for r in caplog.records)


def test_unhandled_error_is_generic_500(app, client, caplog):
    @app.get("/boom")
    async def boom():
        raise ValueError("secret internals")

    caplog.set_level(logging.ERROR, logger="product_api.errors")
    r = client.get("/boom")
    assert r.status_code == 500
    assert r.text == "Something went wrong on the server!"
    assert "secret" not in r.text
    errors = [rec for rec in caplog.records if rec.name == "product_api.errors"]
    assert errors and errors[0].exc_info is not None


def test_verifier_failure_is_generic_500():
    client = TestClient(create_app(store=ProductStore(), verifier=Exploding()))
    r = client.post("/api/products", json=DESK)
    assert r.status_code == 500
    assert r.text == "Something went wrong on the server!"


def test_create_app_installs_log_handler(app):
    app_logger = logging.getLogger("product_api")
    assert sum(isinstance(h, RichHandler) for h in app_logger.handlers) == 1
    assert logging.getLogger("product_api.access").isEnabledFor(logging.INFO)


def test_cors_headers_on_responses(client):
    r = client.get("/api/products", headers={"Origin": "http://shop.example"})
    assert r.status_code == 200
    assert "access-control-allow-origin" in r.headers


def test_cors_preflight_skips_key_check(client):
    r = client.options(
        "/api/products/1",
        headers={"Origin": "http://shop.example", "Access-Control-Request-Method": "DELETE"},
    )
    assert r.status_code == 200
    assert "DELETE" in r.headers["access-control-allow-methods"]
