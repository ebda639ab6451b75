# tests/test_concurrency.py
import asyncio

import httpx


async def _create(app, auth, name):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.post("/api/products", json={"name": name, "price": 5, "category": "x"}, headers=auth)


async def _create_many(app, auth, n):
    return await asyncio.gather(*(_create(app, auth, f"p{i}") for i in range(n)))


def test_concurrent_creates(app, store, auth):
    results = asyncio.run(_create_many(app, auth, 20))
    assert all(r.status_code == 201 for r in results)
    ids = {r.json()["id"] for r in results}
    assert len(ids) == 20
    assert len(store) == 20
