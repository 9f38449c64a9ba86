"""Install and post-install phases for the aws-inventory bundle.

The install phase places the executable, its supporting sources and the man
page under the install prefix, then materializes the system default config.
The post-install phase seeds the user's config from that system default.

Both phases are idempotent: config files are written only when absent, so a
customized system default survives upgrades and a user's config is never
overwritten. Any filesystem failure aborts the phase immediately.
"""

import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..models.inventory_config import DEFAULT_CONFIG_TEXT
from .errors import SmokeTestError, filesystem_errors
from .layout import InstallLayout, SourceBundle
from .locator import HomeConfigLocator, UserConfigLocator, user_config_file

logger = logging.getLogger(__name__)

EXECUTABLE_MODE = 0o755
CONFIG_MODE = 0o644


@dataclass
class ProvisionResult:
    """What a provisioning phase did to the filesystem."""

    placed: List[Path] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    skipped: List[Path] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            'placed': [str(p) for p in self.placed],
            'written': [str(p) for p in self.written],
            'skipped': [str(p) for p in self.skipped],
        }


def _write_atomically(path: Path, data: bytes, mode_source: Optional[Path] = None) -> None:
    """Write data to path so that it either appears complete or not at all.

    The new file gets CONFIG_MODE, or the permission bits of mode_source.
    """
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        if mode_source is not None:
            shutil.copymode(mode_source, tmp_path)
        else:
            tmp_path.chmod(CONFIG_MODE)
        os.replace(tmp_path, path)
    except BaseException:
        if tmp_path.exists():
            tmp_path.unlink()
        raise


class Provisioner:
    """Places the bundle into an install layout and seeds configuration."""

    def __init__(self, layout: InstallLayout, locator: Optional[UserConfigLocator] = None):
        self.layout = layout
        self.locator = locator if locator is not None else HomeConfigLocator()

    def install(self, bundle: SourceBundle) -> ProvisionResult:
        """Run the install phase.

        Args:
            bundle: Unpacked source tree to install from

        Returns:
            ProvisionResult listing placed files and the config outcome

        Raises:
            PermissionDeniedError: If a target location is not writable
            IOFailureError: If any other filesystem operation fails
        """
        result = ProvisionResult()
        logger.info(f"Installing {bundle.root} into {self.layout.prefix}")

        with filesystem_errors():
            result.placed.append(self._install_executable(bundle.executable_path))
            result.placed.append(self._install_assets(bundle.assets_path))
            result.placed.append(self._install_manpage(bundle.manpage_path))

            self.layout.system_config_dir.mkdir(parents=True, exist_ok=True)
            config_file = self.layout.system_config_file
            if config_file.exists():
                logger.info(f"Keeping existing system config: {config_file}")
                result.skipped.append(config_file)
            else:
                _write_atomically(config_file, DEFAULT_CONFIG_TEXT.encode("utf-8"))
                logger.info(f"Wrote default system config: {config_file}")
                result.written.append(config_file)

        return result

    def post_install(self) -> ProvisionResult:
        """Run the post-install phase.

        Returns:
            ProvisionResult with the user config outcome

        Raises:
            HomeDirectoryUnresolvableError: If the user's home cannot be determined
            PermissionDeniedError: If the user config location is not writable
            IOFailureError: If the system config is missing or copying fails
        """
        result = ProvisionResult()
        user_dir = self.locator.config_dir()
        user_file = user_config_file(self.locator)

        with filesystem_errors():
            user_dir.mkdir(parents=True, exist_ok=True)
            if user_file.exists():
                logger.info(f"Keeping existing user config: {user_file}")
                result.skipped.append(user_file)
            else:
                system_file = self.layout.system_config_file
                _write_atomically(user_file, system_file.read_bytes(), mode_source=system_file)
                logger.info(f"Seeded user config from {self.layout.system_config_file}: {user_file}")
                result.written.append(user_file)

        return result

    def _install_executable(self, source: Path) -> Path:
        target = self.layout.bin_dir / self.layout.executable.name
        self.layout.bin_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        target.chmod(EXECUTABLE_MODE)
        logger.info(f"Installed executable: {target}")
        return target

    def _install_assets(self, source: Path) -> Path:
        if not source.is_dir():
            raise FileNotFoundError(f"No such directory: '{source}'")
        target = self.layout.share_dir / source.name
        self.layout.share_dir.mkdir(parents=True, exist_ok=True)
        shutil.copytree(source, target, dirs_exist_ok=True)
        logger.info(f"Installed sources: {target}")
        return target

    def _install_manpage(self, source: Path) -> Path:
        target = self.layout.man1_dir / source.name
        self.layout.man1_dir.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, target)
        logger.info(f"Installed man page: {target}")
        return target


def run_smoke_test(executable: Path) -> subprocess.CompletedProcess:
    """Invoke the installed executable with --version.

    Args:
        executable: Path of the installed aws-inventory

    Returns:
        The completed process (exit status 0)

    Raises:
        SmokeTestError: If the executable cannot be spawned or exits non-zero
    """
    command = [str(executable), "--version"]
    logger.debug(f"Running smoke test: {' '.join(command)}")

    try:
        completed = subprocess.run(command, capture_output=True, text=True)
    except OSError as e:
        raise SmokeTestError(f"Could not run {executable}: {e}") from e

    if completed.returncode != 0:
        detail = completed.stderr.strip() or completed.stdout.strip()
        message = f"{executable} --version exited with status {completed.returncode}"
        raise SmokeTestError(f"{message}: {detail}" if detail else message)

    logger.info(f"Smoke test passed: {completed.stdout.strip()}")
    return completed
