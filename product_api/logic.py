from typing import List, Optional

from fastapi import HTTPException, Response

from .core import merge_update, missing_required, new_product
from .database import ProductStore
from .models import Product, ProductIn

# This file contains the core logic for the product endpoints.
# None of these coroutines await between reading and writing the store.

NOT_FOUND = "Product not found"


async def list_products_logic(store: ProductStore) -> List[Product]:
    return store.list()


async def get_product_logic(store: ProductStore, product_id: str) -> Product:
    p = store.find(product_id)
    if p is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return p


async def create_product_logic(store: ProductStore, payload: Optional[ProductIn]) -> Product:
    payload = payload or ProductIn()
    if missing_required(payload):
        raise HTTPException(status_code=400, detail="Name, price, and category are required.")
    return store.insert(new_product(payload))


async def update_product_logic(store: ProductStore, product_id: str, payload: Optional[ProductIn]) -> Product:
    idx = store.index_of(product_id)
    if idx is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    updated = merge_update(store.at(idx), payload or ProductIn())
    return store.replace_at(idx, updated)


async def delete_product_logic(store: ProductStore, product_id: str) -> Response:
    if not store.remove(product_id):
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return Response(status_code=204)
