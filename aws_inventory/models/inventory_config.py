"""Inventory configuration document model."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

SUPPORTED_OUTPUT_FORMATS = ("json", "yaml", "table")
RESOURCE_KINDS = ("ec2", "s3", "rds", "lambda", "vpc")
FILTER_KINDS = ("tags",)

# Written verbatim to the system config on first install
DEFAULT_CONFIG_TEXT = """\
output_format: "json"
resources:
  ec2: true
  s3: true
  rds: true
  lambda: true
  vpc: true
filters:
  tags: {}
"""


def _default_resources() -> Dict[str, bool]:
    return {kind: True for kind in RESOURCE_KINDS}


def _default_filters() -> Dict[str, Dict[str, Any]]:
    return {kind: {} for kind in FILTER_KINDS}


@dataclass
class InventoryConfig:
    """Settings read by aws-inventory from config.yaml."""

    output_format: str = "json"
    resources: Dict[str, bool] = field(default_factory=_default_resources)
    filters: Dict[str, Dict[str, Any]] = field(default_factory=_default_filters)

    @classmethod
    def default(cls) -> 'InventoryConfig':
        """Build the configuration shipped as the system default."""
        return cls.from_dict(yaml.safe_load(DEFAULT_CONFIG_TEXT))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        return {
            'output_format': self.output_format,
            'resources': dict(self.resources),
            'filters': {kind: dict(value) for kind, value in self.filters.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InventoryConfig':
        """Create configuration from dictionary.

        Missing sections fall back to their defaults. A partial ``resources``
        mapping only overrides the kinds it names.

        Raises:
            ValueError: If the resulting configuration is invalid
        """
        for section in ('resources', 'filters'):
            if not isinstance(data.get(section) or {}, dict):
                raise ValueError(f"Section {section!r} must be a mapping")

        resources = _default_resources()
        resources.update(data.get('resources') or {})

        filters = _default_filters()
        filters.update(data.get('filters') or {})

        config = cls(
            output_format=data.get('output_format', 'json'),
            resources=resources,
            filters=filters,
        )
        config.validate()
        return config

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'InventoryConfig':
        """Load configuration from a YAML file.

        Args:
            path: Path to config.yaml

        Returns:
            Parsed configuration (defaults for an empty file)

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a valid configuration document
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Corrupted config file {path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Corrupted config file {path}: expected a mapping at top level")

        return cls.from_dict(data)

    def validate(self) -> bool:
        """Validate configuration values.

        Returns:
            True if valid, raises ValueError if invalid
        """
        if self.output_format not in SUPPORTED_OUTPUT_FORMATS:
            raise ValueError(
                f"Unsupported output_format: {self.output_format!r}. "
                f"Use one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
            )

        for kind, enabled in self.resources.items():
            if kind not in RESOURCE_KINDS:
                raise ValueError(f"Unknown resource kind: {kind!r}")
            if not isinstance(enabled, bool):
                raise ValueError(f"Resource flag for {kind!r} must be true or false, got {enabled!r}")

        for kind, value in self.filters.items():
            if kind not in FILTER_KINDS:
                raise ValueError(f"Unknown filter kind: {kind!r}")
            if not isinstance(value, dict):
                raise ValueError(f"Filter {kind!r} must be a mapping, got {type(value).__name__}")

        return True

    @property
    def enabled_resources(self) -> List[str]:
        """Resource kinds switched on, in declaration order."""
        return [kind for kind in RESOURCE_KINDS if self.resources.get(kind)]
