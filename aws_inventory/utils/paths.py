"""Path resolution for per-user aws-inventory files."""

import os
from pathlib import Path
from typing import Optional, Union

CONFIG_DIR_ENV_VAR = "AWS_INVENTORY_CONFIG_DIR"
DEFAULT_CONFIG_DIRNAME = ".aws-inventory"


def get_user_config_dir(custom_path: Optional[Union[str, Path]] = None) -> Path:
    """Get the per-user configuration directory.

    Precedence: parameter > AWS_INVENTORY_CONFIG_DIR > ~/.aws-inventory

    Args:
        custom_path: Optional directory overriding the environment and default

    Returns:
        Absolute path of the configuration directory

    Raises:
        RuntimeError, KeyError: If ``~`` cannot be resolved for the current user
    """
    if custom_path:
        return Path(custom_path).expanduser().resolve()

    env_path = os.environ.get(CONFIG_DIR_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser().resolve()

    return Path.home() / DEFAULT_CONFIG_DIRNAME
