# tests/test_models.py
import pytest
from pydantic import ValidationError

from inventory.core import make_product
from inventory.errors import InvalidProductError, InventoryError
from inventory.models import Product, ProductKind


def test_product_accepts_int_price():
    p = Product(id=1, name="Smartphone", category="Mobile", quantity=10, price=29999)
    assert p.price == 29999.0
    assert p.kind == ProductKind.ELECTRONIC


def test_product_is_immutable():
    p = Product(id=1, name="Tablet", category="Mobile", quantity=6, price=18999.0)
    with pytest.raises(ValidationError):
        p.quantity = 0


@pytest.mark.parametrize("field, value", [
    ("id", "1"),
    ("id", "abc"),
    ("quantity", "ten"),
    ("quantity", 2.5),
    ("quantity", True),
    ("price", "9.99"),
    ("price", None),
    ("price", float("inf")),
    ("price", float("-inf")),
    ("price", float("nan")),
])
def test_make_product_rejects_non_numeric_fields(field, value):
    fields = {"id": 1, "name": "Router", "category": "Networking", "quantity": 12, "price": 1799.0}
    fields[field] = value
    with pytest.raises(InvalidProductError) as exc:
        make_product(**fields)
    assert field in str(exc.value)
    assert isinstance(exc.value, InventoryError)
    assert isinstance(exc.value, ValueError)


def test_make_product_builds_product():
    p = make_product(id=3, name="Headphones", category="Audio", quantity=15, price=1999.0)
    assert p == Product(id=3, name="Headphones", category="Audio", quantity=15, price=1999.0)


def test_quantity_and_price_sign_not_enforced():
    p = make_product(id=4, name="Refund", category="Misc", quantity=-1, price=-5.0)
    assert p.quantity == -1
    assert p.price == -5.0
