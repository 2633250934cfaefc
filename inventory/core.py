# inventory/core.py
from enum import Enum
from typing import List

from pydantic import BaseModel, ValidationError, computed_field

from .errors import InvalidProductError
from .models import Product

# Schemas shared by the store and the shells that drive it.


class ProductIn(Product):
    """Add payload accepted by the HTTP adapter; same fields and checks as Product."""


class RemoveResult(BaseModel):
    product_id: int
    removed_count: int

    @computed_field
    @property
    def removed(self) -> bool:
        return self.removed_count > 0


class SearchStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class SearchResult(BaseModel):
    query: str
    status: SearchStatus
    matches: List[Product] = []

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND


class AveragePrice(BaseModel):
    average_price: float
    count: int


def make_product(**fields) -> Product:
    """
    Build a Product from already-typed field values.
    Wrong types (e.g. "12" for an id) raise InvalidProductError.
    """
    try:
        return Product(**fields)
    except ValidationError as e:
        bad = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise InvalidProductError(f"invalid product fields: {bad or 'unknown'}") from e


def _product_from_payload(p: ProductIn) -> Product:
    return Product.model_validate(p.model_dump())
