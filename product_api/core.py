# product_api/core.py
import uuid

from .models import Product, ProductIn

UPDATABLE_FIELDS = ("name", "description", "price", "category")


def missing_required(p: ProductIn) -> bool:
    return not p.name or not p.price or not p.category


def _make_product(product_id: str, p: ProductIn) -> Product:
    return Product(
        id=product_id,
        name=p.name,
        description=p.description or "",
        price=p.price,
        category=p.category,
        in_stock=p.in_stock if isinstance(p.in_stock, bool) else True,
    )


def new_product(p: ProductIn) -> Product:
    return _make_product(str(uuid.uuid4()), p)


def merge_update(existing: Product, p: ProductIn) -> Product:
    """Overlay the truthy fields of ``p`` onto ``existing``.

    Falsy values (0, "", None) count as "not provided", so an update can
    never set price to 0 or clear the description.
    """
    changes = {}
    for field in UPDATABLE_FIELDS:
        value = getattr(p, field)
        if value:
            changes[field] = value
    if isinstance(p.in_stock, bool):
        changes["in_stock"] = p.in_stock
    return existing.model_copy(update=changes)
