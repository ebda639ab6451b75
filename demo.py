#!/usr/bin/env python
import os

from sdk.productclient import ProductClient


def main():
    base_url = os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000")
    anon = ProductClient(base_url=base_url)
    c = ProductClient(base_url=base_url, api_key=os.getenv("API_KEY", "mysecretapikey"))

    print(c.welcome())

    # -----------------------------
    # Create a product
    # -----------------------------
    print("\nCreating product...")
    desk = c.create_product("Desk", 150, "office")
    print(desk)

    print("\nFetching it back...")
    print(c.get_product(desk["id"]))

    # -----------------------------
    # Delete without a key is refused
    # -----------------------------
    print("\nDeleting without an API key...")
    r = anon.request("DELETE", desk["id"])
    print(r.status_code, r.text)

    print("\nDeleting with the API key...")
    print("deleted:", c.delete_product(desk["id"]))

    print("\nFetching again...")
    r = c.request("GET", desk["id"])
    print(r.status_code, r.text)

    print("\nRemaining products...")
    print(c.list_products())


if __name__ == "__main__":
    main()
