# product_api/database.py
from typing import Iterable, List, Optional

from .models import Product

# This file holds the in-memory product store. Nothing here survives a restart.

SAMPLE_PRODUCTS: List[Product] = [
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="Books, electronics",
        in_stock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
]


class ProductStore:
    """Ordered collection of products, kept in insertion order.

    Lookups are linear scans; the collection is expected to stay small.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: List[Product] = list(products or [])

    @classmethod
    def with_samples(cls) -> "ProductStore":
        return cls(p.model_copy() for p in SAMPLE_PRODUCTS)

    def __len__(self) -> int:
        return len(self._products)

    def list(self) -> List[Product]:
        return list(self._products)

    def find(self, product_id: str) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def index_of(self, product_id: str) -> Optional[int]:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        return None

    def at(self, index: int) -> Product:
        return self._products[index]

    def insert(self, product: Product) -> Product:
        self._products.append(product)
        return product

    def replace_at(self, index: int, product: Product) -> Product:
        self._products[index] = product
        return product

    def remove(self, product_id: str) -> bool:
        before = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        return len(self._products) < before
