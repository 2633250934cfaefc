#!/usr/bin/env python
from sdk.pyinventory import InventoryClient


def main():
    # expects `python -m inventory.main` running with the default settings
    c = InventoryClient(base_url="http://127.0.0.1:8085")

    # -----------------------------
    # Add products
    # -----------------------------
    print("\nAdding products...")
    print(c.add_product(101, "Laptop", "Computers", 5, 54999))
    print(c.add_product(102, "Mouse", "Accessories", 18, 999))
    print(c.add_product(102, "Mouse", "Refurbished", 2, 499))

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Search product
    # -----------------------------
    print("\nSearching for 'laptop'...")
    print(c.search_products("laptop"))
    print("\nSearching for 'Toaster'...")
    print(c.search_products("Toaster"))

    # -----------------------------
    # Stats
    # -----------------------------
    print("\nAverage price...")
    print(c.average_price())

    # -----------------------------
    # Save, remove, load
    # -----------------------------
    print("\nSaving inventory...")
    print(c.save())

    print("\nRemoving every product with ID 102...")
    print(c.remove_product(102))
    print(c.remove_product(102))

    print("\nLoading inventory back...")
    print(c.load())
    print(c.list_products())


if __name__ == "__main__":
    main()
