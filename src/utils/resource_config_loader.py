"""
Resource configuration loader (fixture files, upstream URL settings, error labels).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from src.integrations.contracts.reviews import ResourceCategory

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_CONFIG = Path(__file__).parent.parent.parent / "config" / "resources.yml"


class ResourceDefinition(BaseModel):
    fixture: str
    envelope_key: Optional[str] = None
    url_setting: str
    label: str


class ResourceConfig(BaseModel):
    resources: Dict[ResourceCategory, ResourceDefinition]
    sku_field: str = Field(default="skuCode", min_length=1)

    def get(self, category: ResourceCategory) -> ResourceDefinition:
        try:
            return self.resources[category]
        except KeyError:
            raise KeyError(f"No resource definition for '{category.value}'") from None


def load_resource_config(config_path: Optional[Path] = None) -> ResourceConfig:
    if config_path is None:
        config_path = DEFAULT_RESOURCE_CONFIG

    if not config_path.exists():
        raise FileNotFoundError(f"Resource config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ResourceConfig(**data)
        logger.info("Loaded %d resource definitions from %s", len(cfg.resources), config_path)
        return cfg
    except ValidationError as e:
        logger.error("Resource config validation failed: %s", e)
        raise


@lru_cache(maxsize=1)
def default_resource_config() -> ResourceConfig:
    """Resource config from config/resources.yml, parsed once per process."""
    return load_resource_config()
