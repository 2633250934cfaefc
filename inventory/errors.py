# inventory/errors.py
from typing import Optional


class InventoryError(Exception):
    """Base class for every recoverable inventory failure."""


class StorageIOError(InventoryError):
    """The save destination or load source could not be accessed."""

    def __init__(self, path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        reason = f": {cause}" if cause else ""
        super().__init__(f"cannot access inventory file {path}{reason}")


class StorageFormatError(InventoryError):
    """The load source does not decode to a supported product sequence."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"invalid inventory file {path}: {reason}")


class InvalidProductError(InventoryError, ValueError):
    """Raised when product fields have the wrong types."""
