"""Utility modules for the aws-inventory tool."""

from .logging import setup_logging
from .paths import get_user_config_dir

__all__ = [
    "setup_logging",
    "get_user_config_dir",
]
