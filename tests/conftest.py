"""Shared test fixtures for aws-inventory tests."""

import pytest
import tempfile
from pathlib import Path
from typing import Dict, Any

from aws_inventory.install.layout import InstallLayout, SourceBundle
from aws_inventory.install.locator import StaticConfigLocator

VERSION_SCRIPT = """#!/bin/sh
echo "aws-inventory 1.0.0"
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def source_bundle(temp_dir) -> SourceBundle:
    """Unpacked source tree with an executable, sources and a man page."""
    root = temp_dir / "aws-inventory-1.0.0"

    (root / "bin").mkdir(parents=True)
    executable = root / "bin" / "aws-inventory"
    executable.write_text(VERSION_SCRIPT)
    executable.chmod(0o644)

    (root / "src" / "lib").mkdir(parents=True)
    (root / "src" / "inventory.sh").write_text("# inventory helpers\n")
    (root / "src" / "lib" / "ec2.sh").write_text("# ec2 listing\n")

    (root / "man").mkdir()
    (root / "man" / "aws-inventory.1").write_text(".TH AWS-INVENTORY 1\n")

    return SourceBundle(root)


@pytest.fixture
def layout(temp_dir) -> InstallLayout:
    """Install layout under a scratch prefix."""
    return InstallLayout.from_prefix(temp_dir / "prefix")


@pytest.fixture
def user_dir(temp_dir) -> Path:
    """Per-user config directory (not created)."""
    return temp_dir / "home" / ".aws-inventory"


@pytest.fixture
def locator(user_dir) -> StaticConfigLocator:
    """Locator stub pointing at the scratch user directory."""
    return StaticConfigLocator(user_dir)


@pytest.fixture
def sample_config_data() -> Dict[str, Any]:
    """Customized configuration document."""
    return {
        "output_format": "table",
        "resources": {"ec2": True, "s3": False, "rds": True, "lambda": False, "vpc": True},
        "filters": {"tags": {"Environment": "production"}},
    }
