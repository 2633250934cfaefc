# sdk/pyinventory.py
import requests
import httpx
from typing import Optional
from rich import print


class InventoryClient:
    def __init__(self, base_url: str = "http://127.0.0.1:8085", timeout: int = 10, session=None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self._async_transport = async_transport

    # Products
    def add_product(self, id: int, name: str, category: str, quantity: int, price: float, kind: str = "Electronic"):
        r = self.session.post(f"{self.base_url}/products", json={
            "id": id, "name": name, "category": category,
            "quantity": quantity, "price": price, "kind": kind,
        }, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def list_products(self):
        r = self.session.get(f"{self.base_url}/products", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def remove_product(self, product_id: int):
        r = self.session.delete(f"{self.base_url}/products/{product_id}", timeout=self.timeout)
        # 404 means nothing matched the id; hand the body back instead of raising
        if r.status_code == 404:
            return r.json()
        r.raise_for_status()
        return r.json()

    def search_products(self, name: str):
        r = self.session.get(f"{self.base_url}/products/search", params={"name": name}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    async def search_products_async(self, name: str):
        async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout,
                                     transport=self._async_transport) as client:
            r = await client.get("/products/search", params={"name": name})
            r.raise_for_status()
            return r.json()

    # Stats
    def average_price(self):
        r = self.session.get(f"{self.base_url}/stats/average-price", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Persistence
    def save(self):
        r = self.session.post(f"{self.base_url}/inventory/save", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def load(self):
        r = self.session.post(f"{self.base_url}/inventory/load", timeout=self.timeout)
        r.raise_for_status()
        return r.json()


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Inventory API client")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085", help="Inventory API address")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    sp = subparsers.add_parser("search", help="Search for products by exact name (case-insensitive)")
    sp.add_argument("--name", required=True, help="Product name to search")

    ap = subparsers.add_parser("add-product", help="Add a product")
    ap.add_argument("--id", type=int, required=True, help="Product ID")
    ap.add_argument("--name", required=True, help="Product name")
    ap.add_argument("--category", required=True, help="Product category")
    ap.add_argument("--quantity", type=int, required=True, help="Quantity in stock")
    ap.add_argument("--price", type=float, required=True, help="Unit price")

    rp = subparsers.add_parser("remove-product", help="Remove every product with the given ID")
    rp.add_argument("--id", type=int, required=True, help="Product ID")

    subparsers.add_parser("average-price", help="Show the average product price")
    subparsers.add_parser("save", help="Save the inventory to the server's data file")
    subparsers.add_parser("load", help="Load the inventory from the server's data file")

    args = parser.parse_args(argv)
    c = InventoryClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "search":
        print(c.search_products(args.name))
    elif args.command == "add-product":
        print(c.add_product(args.id, args.name, args.category, args.quantity, args.price))
    elif args.command == "remove-product":
        print(c.remove_product(args.id))
    elif args.command == "average-price":
        print(c.average_price())
    elif args.command == "save":
        print(c.save())
    elif args.command == "load":
        print(c.load())


if __name__ == "__main__":
    main()
