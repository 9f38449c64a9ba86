"""Install prefix and source bundle layouts."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PACKAGE_NAME = "aws-inventory"
CONFIG_FILENAME = "config.yaml"


@dataclass(frozen=True)
class InstallLayout:
    """Locations derived from an install prefix.

    Mirrors a package manager's keg: ``bin``, ``share``, ``share/man/man1``
    and ``etc`` under one prefix.
    """

    prefix: Path

    @classmethod
    def from_prefix(cls, prefix: Union[str, Path]) -> 'InstallLayout':
        return cls(Path(prefix).expanduser().resolve())

    @property
    def bin_dir(self) -> Path:
        return self.prefix / "bin"

    @property
    def share_dir(self) -> Path:
        return self.prefix / "share"

    @property
    def man1_dir(self) -> Path:
        return self.share_dir / "man" / "man1"

    @property
    def etc_dir(self) -> Path:
        return self.prefix / "etc"

    @property
    def system_config_dir(self) -> Path:
        return self.etc_dir / PACKAGE_NAME

    @property
    def system_config_file(self) -> Path:
        return self.system_config_dir / CONFIG_FILENAME

    @property
    def executable(self) -> Path:
        return self.bin_dir / PACKAGE_NAME


@dataclass(frozen=True)
class SourceBundle:
    """Paths of the bundle parts inside an unpacked source tree."""

    root: Path
    executable: str = f"bin/{PACKAGE_NAME}"
    assets: str = "src"
    manpage: str = f"man/{PACKAGE_NAME}.1"

    @property
    def executable_path(self) -> Path:
        return self.root / self.executable

    @property
    def assets_path(self) -> Path:
        return self.root / self.assets

    @property
    def manpage_path(self) -> Path:
        return self.root / self.manpage
