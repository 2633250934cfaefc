# tests/test_storage.py
import json

import pytest

from inventory import storage
from inventory.database import InventoryStore
from inventory.core import make_product
from inventory.errors import InvalidProductError, StorageFormatError, StorageIOError
from inventory.models import Product

CATALOG = [
    ("Smartphone", "Mobile", 10, 29999), ("Laptop", "Computers", 5, 54999),
    ("Headphones", "Audio", 15, 1999), ("Monitor", "Display", 7, 10999),
    ("Keyboard", "Accessories", 20, 1499), ("Mouse", "Accessories", 18, 999),
    ("Smartwatch", "Wearable", 8, 12999), ("Tablet", "Mobile", 6, 18999),
    ("Webcam", "Accessories", 14, 2599), ("Printer", "Office", 9, 8999),
    ("Speakers", "Audio", 10, 3499), ("Router", "Networking", 12, 1799),
    ("Hard Drive", "Storage", 16, 4299), ("SSD", "Storage", 11, 3599.5),
    ("Flash Drive", "Storage", 25, 799.99), ("Microphone", "Audio", 4, 4999),
    ("Drone", "Gadgets", 3, 49999), ("Camera", "Photography", 5, 15999),
    ("TV", "Home Entertainment", 6, 39999), ("VR Headset", "Gadgets", 2, 69999),
    ("Café Grinder ☕", "Küche", 0, 0.1),
]


def _seeded_store():
    store = InventoryStore()
    for i, (name, category, qty, price) in enumerate(CATALOG, start=1):
        store.add(Product(id=i, name=name, category=category, quantity=qty, price=price))
    # duplicate id on purpose
    store.add(Product(id=3, name="Headphones", category="Audio", quantity=1, price=2099.0))
    return store


def test_save_then_load_round_trips(tmp_path):
    path = tmp_path / "inventory.json"
    original = _seeded_store()
    original.save(path)

    restored = InventoryStore()
    restored.load(path)
    assert len(restored) == len(CATALOG) + 1
    assert restored.list() == original.list()
    for before, after in zip(original.list(), restored.list()):
        assert before.model_dump() == after.model_dump()


def test_saved_file_is_versioned_and_tagged(tmp_path):
    path = tmp_path / "inventory.json"
    _seeded_store().save(path)
    doc = json.loads(path.read_text(encoding="utf-8"))
    assert doc["format"] == "inventory-store"
    assert doc["version"] == 1
    assert doc["products"][0] == {
        "id": 1, "name": "Smartphone", "category": "Mobile",
        "quantity": 10, "price": 29999.0, "kind": "Electronic",
    }


def test_save_leaves_no_temp_files(tmp_path):
    path = tmp_path / "inventory.json"
    store = _seeded_store()
    store.save(path)
    store.save(path)
    assert [p.name for p in tmp_path.iterdir()] == ["inventory.json"]


def test_save_to_unwritable_destination(tmp_path):
    store = _seeded_store()
    with pytest.raises(StorageIOError):
        store.save(tmp_path / "missing-dir" / "inventory.json")


def test_load_missing_file_keeps_contents(tmp_path):
    store = _seeded_store()
    before = store.list()
    with pytest.raises(StorageIOError):
        store.load(tmp_path / "nope.json")
    assert store.list() == before


def test_load_truncated_file_keeps_contents(tmp_path):
    path = tmp_path / "inventory.json"
    _seeded_store().save(path)
    raw = path.read_bytes()
    path.write_bytes(raw[: len(raw) // 2])

    store = InventoryStore()
    store.add(Product(id=99, name="Keep", category="Misc", quantity=1, price=1.0))
    before = store.list()
    with pytest.raises(StorageFormatError):
        store.load(path)
    assert store.list() == before


@pytest.mark.parametrize("payload", [
    b"\x00\x01garbage",
    b"[]",
    b'{"format": "something-else", "version": 1, "products": []}',
    b'{"format": "inventory-store", "version": 2, "products": []}',
    b'{"format": "inventory-store", "version": 1, "products": [{"id": "1"}]}',
    b'{"format": "inventory-store", "version": 1, "products": [], "extra": true}',
    b'{"format": "inventory-store", "version": 1, "products": [{"id": 1, "name": "X", '
    b'"category": "Y", "quantity": 1, "price": 1.0, "kind": "Furniture"}]}',
])
def test_load_rejects_bad_documents(tmp_path, payload):
    path = tmp_path / "inventory.json"
    path.write_bytes(payload)
    store = _seeded_store()
    before = store.list()
    with pytest.raises(StorageFormatError):
        store.load(path)
    assert store.list() == before


def test_decode_empty_inventory():
    raw = storage.encode([])
    assert storage.decode(raw) == []


def test_extreme_finite_prices_round_trip(tmp_path):
    path = tmp_path / "inventory.json"
    store = InventoryStore()
    for pid, price in enumerate([1.7976931348623157e308, 5e-324, -0.0, 0.1 + 0.2]):
        store.add(make_product(id=pid, name=f"P{pid}", category="Edge", quantity=1, price=price))
    store.save(path)

    restored = InventoryStore()
    restored.load(path)
    assert [p.price for p in restored.list()] == [p.price for p in store.list()]


def test_non_finite_price_never_reaches_the_file(tmp_path):
    path = tmp_path / "inventory.json"
    store = InventoryStore()
    store.add(make_product(id=1, name="Ok", category="Misc", quantity=1, price=10.0))
    with pytest.raises(InvalidProductError):
        store.add(make_product(id=2, name="Bad", category="Misc", quantity=1, price=float("inf")))
    store.save(path)
    assert '"price": null' not in path.read_text(encoding="utf-8")

    restored = InventoryStore()
    restored.load(path)
    assert restored.list() == store.list()
