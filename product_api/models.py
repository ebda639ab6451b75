# product_api/models.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Any
    description: Any = ""
    price: Any
    category: Any
    in_stock: bool = Field(True, alias="inStock")


class ProductIn(BaseModel):
    """Request body for create and update.

    Every field is optional and untyped; handlers only check truthiness.
    """

    name: Optional[Any] = None
    description: Optional[Any] = None
    price: Optional[Any] = None
    category: Optional[Any] = None
    in_stock: Optional[Any] = Field(None, alias="inStock")
