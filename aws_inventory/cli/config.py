"""Runtime settings for the aws-inventory CLI."""

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PREFIX = "/usr/local"


@dataclass
class Config:
    """Settings read from the environment; CLI options override them."""

    prefix: str = DEFAULT_PREFIX
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    user_config_dir: Optional[str] = None

    @classmethod
    def load(cls) -> 'Config':
        """Load settings from AWS_INVENTORY_* environment variables."""
        return cls(
            prefix=os.environ.get("AWS_INVENTORY_PREFIX") or DEFAULT_PREFIX,
            log_level=os.environ.get("AWS_INVENTORY_LOG_LEVEL") or "WARNING",
            log_file=os.environ.get("AWS_INVENTORY_LOG_FILE") or None,
            user_config_dir=os.environ.get("AWS_INVENTORY_CONFIG_DIR") or None,
        )
