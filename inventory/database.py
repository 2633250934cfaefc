# inventory/database.py
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, List, Optional

from . import storage
from .core import RemoveResult, SearchResult, SearchStatus
from .errors import InvalidProductError
from .models import Product

# This file holds the in-memory product sequence and the lock guarding it.

logger = logging.getLogger(__name__)


class InventoryStore:
    """Ordered, in-memory collection of products."""

    def __init__(self):
        self._products: List[Product] = []
        self._lock = threading.RLock()
        self._executor: Optional[ThreadPoolExecutor] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.list())

    def add(self, product: Product) -> None:
        if not isinstance(product, Product):
            raise InvalidProductError(f"expected a Product, got {type(product).__name__}")
        with self._lock:
            if any(p is product for p in self._products):
                product = product.model_copy()
            self._products.append(product)
        logger.debug("added product id=%s name=%r", product.id, product.name)

    def remove(self, product_id: int) -> RemoveResult:
        """Remove every product whose id matches; report how many went."""
        with self._lock:
            kept = [p for p in self._products if p.id != product_id]
            removed = len(self._products) - len(kept)
            if removed:
                self._products = kept
        if removed:
            logger.debug("removed %d product(s) with id=%s", removed, product_id)
        else:
            logger.debug("no product with id=%s", product_id)
        return RemoveResult(product_id=product_id, removed_count=removed)

    def search(self, name: str) -> SearchResult:
        term = name.casefold()
        with self._lock:
            snapshot = list(self._products)
        matches = [p for p in snapshot if p.name.casefold() == term]
        if not matches:
            return SearchResult(query=name, status=SearchStatus.NOT_FOUND)
        return SearchResult(query=name, status=SearchStatus.FOUND, matches=matches)

    def search_async(self, name: str) -> "Future[SearchResult]":
        """
        Run search() on the store's single background worker.
        Block on .result() or attach a callback with add_done_callback().
        """
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="inventory-search")
            executor = self._executor
        return executor.submit(self.search, name)

    def list(self) -> List[Product]:
        with self._lock:
            return list(self._products)

    def average_price(self) -> float:
        with self._lock:
            prices = [p.price for p in self._products]
        if not prices:
            return 0.0
        return sum(prices) / len(prices)

    def save(self, destination: storage.PathLike) -> None:
        with self._lock:
            snapshot = list(self._products)
        storage.write_products(destination, snapshot)

    def load(self, source: storage.PathLike) -> None:
        # decode fully before touching the current contents
        products = storage.read_products(source)
        with self._lock:
            self._products = products
        logger.info("inventory replaced with %d products from %s", len(products), source)

    def close(self) -> None:
        with self._lock:
            executor, self._executor = self._executor, None
        if executor is not None:
            executor.shutdown(wait=True)
