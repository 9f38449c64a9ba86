"""Provisioning of the aws-inventory bundle into an install prefix."""

from .dependencies import DECLARED_DEPENDENCIES, Dependency, find_missing_dependencies
from .errors import (
    HomeDirectoryUnresolvableError,
    IOFailureError,
    PermissionDeniedError,
    ProvisionError,
    SmokeTestError,
)
from .layout import InstallLayout, SourceBundle
from .locator import HomeConfigLocator, StaticConfigLocator, UserConfigLocator
from .provisioner import ProvisionResult, Provisioner, run_smoke_test

__all__ = [
    "Provisioner",
    "ProvisionResult",
    "run_smoke_test",
    "InstallLayout",
    "SourceBundle",
    "UserConfigLocator",
    "HomeConfigLocator",
    "StaticConfigLocator",
    "Dependency",
    "DECLARED_DEPENDENCIES",
    "find_missing_dependencies",
    "ProvisionError",
    "PermissionDeniedError",
    "IOFailureError",
    "HomeDirectoryUnresolvableError",
    "SmokeTestError",
]
