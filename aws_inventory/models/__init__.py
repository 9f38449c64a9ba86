"""Data models for the aws-inventory tool."""

from .inventory_config import (
    DEFAULT_CONFIG_TEXT,
    FILTER_KINDS,
    RESOURCE_KINDS,
    SUPPORTED_OUTPUT_FORMATS,
    InventoryConfig,
)

__all__ = [
    "InventoryConfig",
    "DEFAULT_CONFIG_TEXT",
    "RESOURCE_KINDS",
    "FILTER_KINDS",
    "SUPPORTED_OUTPUT_FORMATS",
]
