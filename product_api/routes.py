from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from . import config
from .database import ProductStore
from .logic import (
    create_product_logic,
    delete_product_logic,
    get_product_logic,
    list_products_logic,
    update_product_logic,
)
from .models import Product, ProductIn

router = APIRouter(prefix=config.PRODUCTS_ROOT, tags=["Products"])


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


@router.get("", response_model=List[Product])
async def list_products(store: ProductStore = Depends(get_store)):
    return await list_products_logic(store)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await get_product_logic(store, product_id)


@router.post("", response_model=Product, status_code=201)
async def create_product(
    payload: Optional[ProductIn] = Body(None),
    store: ProductStore = Depends(get_store),
):
    return await create_product_logic(store, payload)


@router.put("/{product_id}", response_model=Product)
async def update_product(
    product_id: str,
    payload: Optional[ProductIn] = Body(None),
    store: ProductStore = Depends(get_store),
):
    return await update_product_logic(store, product_id, payload)


@router.delete("/{product_id}", status_code=204, response_class=Response)
async def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    return await delete_product_logic(store, product_id)
