"""
Storefront configuration loader (storage backend, storage keys, mock auth).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class StorageConfig(BaseModel):
    backend: Literal["memory", "file", "redis"] = "file"
    path: str = "data/local_storage.json"
    redis_url: str = "redis://localhost:6379/0"
    key_prefix: str = "autoparts:"


class StorageKeysConfig(BaseModel):
    user: str = "user"
    products: str = "products"


class AuthConfig(BaseModel):
    """Mock authentication settings; no password is ever verified."""

    latency_seconds: float = Field(default=0.5, ge=0.0, le=30.0)
    admin_email: str = "admin@autoparts.ru"
    admin_password: str = "admin"
    admin_name: str = "Администратор"
    admin_user_id: int = Field(default=1, ge=0)
    regular_user_id: int = Field(default=2, ge=0)


class StorefrontConfig(BaseModel):
    storage: StorageConfig = Field(default_factory=StorageConfig)
    keys: StorageKeysConfig = Field(default_factory=StorageKeysConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)


def load_storefront_config(config_path: Optional[Path] = None) -> StorefrontConfig:
    """
    Load and validate storefront configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to config/storefront_config.yml

    Returns:
        Validated StorefrontConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "storefront_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Storefront config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = StorefrontConfig(**data)
        logger.info("Successfully loaded storefront config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Storefront config validation failed: %s", e)
        raise
