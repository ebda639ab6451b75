# sdk/productclient.py
import os
from typing import Any, Dict, Optional

import httpx
import requests
from rich import print

API_KEY_HEADER = "x-api-key"
PRODUCTS_PATH = "/api/products"


def _product_payload(**fields: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for key in ("name", "description", "price", "category"):
        if fields.get(key) is not None:
            payload[key] = fields[key]
    if fields.get("in_stock") is not None:
        payload["inStock"] = fields["in_stock"]
    return payload


class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session=None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    def _url(self, product_id: Optional[str] = None) -> str:
        url = f"{self.base_url}{PRODUCTS_PATH}"
        return f"{url}/{product_id}" if product_id is not None else url

    def request(self, method: str, product_id: Optional[str] = None, **kwargs):
        # no raise_for_status() here; callers inspect 401/404 themselves
        kwargs.setdefault("timeout", self.timeout)
        return self.session.request(method, self._url(product_id), **kwargs)

    def welcome(self) -> str:
        r = self.session.get(f"{self.base_url}/", timeout=self.timeout)
        r.raise_for_status()
        return r.text

    def list_products(self):
        r = self.session.get(self._url(), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(self._url(product_id), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def create_product(self, name: str, price: float, category: str,
                       description: Optional[str] = None, in_stock: Optional[bool] = None):
        payload = _product_payload(name=name, price=price, category=category,
                                   description=description, in_stock=in_stock)
        r = self.session.post(self._url(), json=payload, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def update_product(self, product_id: str, **fields: Any):
        # Falsy values are ignored server-side; a price of 0 will not stick.
        r = self.session.put(self._url(product_id), json=_product_payload(**fields), timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def delete_product(self, product_id: str) -> bool:
        r = self.session.delete(self._url(product_id), timeout=self.timeout)
        if r.status_code == 404:
            return False
        r.raise_for_status()
        return r.status_code == 204

    async def create_product_async(self, name: str, price: float, category: str,
                                   description: Optional[str] = None, in_stock: Optional[bool] = None):
        payload = _product_payload(name=name, price=price, category=category,
                                   description=description, in_stock=in_stock)
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            r = await client.post(self._url(), json=payload, headers=headers)
            r.raise_for_status()
            return r.json()


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y")


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(description="Product API client")
    parser.add_argument("--base-url", default=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.getenv("API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    cp = subparsers.add_parser("create-product", help="Create a new product")
    cp.add_argument("--name", required=True, help="Product name")
    cp.add_argument("--price", type=float, required=True, help="Price")
    cp.add_argument("--category", required=True, help="Product category")
    cp.add_argument("--description", help="Product description")
    cp.add_argument("--in-stock", type=_parse_bool, help="true/false")

    up = subparsers.add_parser("update-product", help="Update fields of a product")
    up.add_argument("--product-id", required=True, help="ID of the product")
    up.add_argument("--name")
    up.add_argument("--price", type=float)
    up.add_argument("--category")
    up.add_argument("--description")
    up.add_argument("--in-stock", type=_parse_bool)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, args.price, args.category, args.description, args.in_stock))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, name=args.name, price=args.price, category=args.category,
                               description=args.description, in_stock=args.in_stock))
    elif args.command == "delete-product":
        deleted = c.delete_product(args.product_id)
        print("[green]deleted[/green]" if deleted else "[yellow]not found[/yellow]")


if __name__ == "__main__":
    main()
