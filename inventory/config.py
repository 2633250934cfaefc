"""
Configuration for the inventory store and its shells
"""
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class InventorySettings(BaseSettings):
    """Settings read from INVENTORY_* environment variables or a .env file"""

    model_config = SettingsConfigDict(
        env_prefix="INVENTORY_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Persistence
    data_file: Path = Path("inventory.json")

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    # Local HTTP adapter
    api_host: str = "127.0.0.1"
    api_port: int = 8085


@lru_cache
def get_settings() -> InventorySettings:
    return InventorySettings()
