"""Resolution of the per-user configuration location."""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

from ..utils.paths import get_user_config_dir
from .errors import HomeDirectoryUnresolvableError
from .layout import CONFIG_FILENAME

logger = logging.getLogger(__name__)


class UserConfigLocator(Protocol):
    """Anything that can tell where the user's config directory lives."""

    def config_dir(self) -> Path:
        ...


def user_config_file(locator: UserConfigLocator) -> Path:
    """Path of config.yaml inside the locator's directory."""
    return locator.config_dir() / CONFIG_FILENAME


class HomeConfigLocator:
    """Locate the config directory from the environment or the home directory."""

    def __init__(self, custom_dir: Optional[Union[str, Path]] = None):
        self.custom_dir = custom_dir

    def config_dir(self) -> Path:
        try:
            path = get_user_config_dir(self.custom_dir)
        except (RuntimeError, KeyError) as e:
            raise HomeDirectoryUnresolvableError(str(e) or "Could not determine home directory") from e
        logger.debug(f"User config directory: {path}")
        return path


class StaticConfigLocator:
    """Locator that always answers with a fixed directory."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def config_dir(self) -> Path:
        return self.path
