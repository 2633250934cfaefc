# inventory/storage.py
"""
Versioned JSON encoding of a whole product sequence.

A saved file looks like::

    {"format": "inventory-store", "version": 1, "products": [...]}

Writes go to a temporary file next to the destination and are renamed
into place, so a reader never sees a half-written inventory.
"""
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Literal, Sequence, Union

from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError

from .errors import StorageFormatError, StorageIOError
from .models import Product

logger = logging.getLogger(__name__)

FORMAT_TAG = "inventory-store"
FORMAT_VERSION = 1

PathLike = Union[str, os.PathLike]


class InventoryDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    format: Literal["inventory-store"]
    version: StrictInt
    products: List[Product]


def encode(products: Sequence[Product]) -> bytes:
    doc = InventoryDocument(format=FORMAT_TAG, version=FORMAT_VERSION, products=list(products))
    return doc.model_dump_json(indent=2).encode("utf-8")


def decode(raw: bytes, source: PathLike = "<memory>") -> List[Product]:
    try:
        doc = InventoryDocument.model_validate_json(raw)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(part) for part in first["loc"]) or "document"
        raise StorageFormatError(source, f"{loc}: {first['msg']}") from e
    if doc.version != FORMAT_VERSION:
        raise StorageFormatError(source, f"unsupported version {doc.version}")
    return doc.products


def write_products(path: PathLike, products: Sequence[Product]) -> None:
    path = Path(path)
    payload = encode(products)
    tmp_name = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "wb") as fh:
            fh.write(payload)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        logger.error("saving inventory to %s failed: %s", path, e)
        raise StorageIOError(path, e) from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
    logger.info("saved %d products to %s", len(products), path)


def read_products(path: PathLike) -> List[Product]:
    path = Path(path)
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.warning("reading inventory from %s failed: %s", path, e)
        raise StorageIOError(path, e) from e
    products = decode(raw, path)
    logger.info("read %d products from %s", len(products), path)
    return products
