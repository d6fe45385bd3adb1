"""Configuration loading for svcguard (.svcguard.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .tree import as_str, as_str_list

CONFIG_FILENAME = ".svcguard.yml"

DEFAULT_WORKFLOW_FILE = ".github/workflows/ci.yml"
DEFAULT_ROOT_MANIFEST = "package.json"
DEFAULT_SCRIPT_PREFIXES: Tuple[str, ...] = ("build:", "test:", "lint:")
DEFAULT_PACKAGE_PATTERN = r"^(services|libs)/[^/]+/package\.json$"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class GuardConfig:
    """Settings shared by every check in a single run."""

    root: Path
    workflow_file: str = DEFAULT_WORKFLOW_FILE
    root_manifest: str = DEFAULT_ROOT_MANIFEST
    required_script_prefixes: Tuple[str, ...] = DEFAULT_SCRIPT_PREFIXES
    package_pattern: re.Pattern[str] = field(
        default_factory=lambda: re.compile(DEFAULT_PACKAGE_PATTERN)
    )

    @property
    def workflow_path(self) -> Path:
        return self.root / self.workflow_file

    @property
    def root_manifest_path(self) -> Path:
        return self.root / self.root_manifest


def load_config(config_path: Path) -> GuardConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GuardConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = GuardConfig(root=root)

    workflow_file = as_str(data.get("workflow_file"))
    if workflow_file:
        config.workflow_file = workflow_file

    root_manifest = as_str(data.get("root_manifest"))
    if root_manifest:
        config.root_manifest = root_manifest

    if "required_script_prefixes" in data:
        config.required_script_prefixes = tuple(
            as_str_list(data.get("required_script_prefixes"))
        )

    pattern = as_str(data.get("package_pattern"))
    if pattern:
        try:
            config.package_pattern = re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid package_pattern {pattern!r}: {exc}") from exc

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


__all__ = ["ConfigError", "GuardConfig", "load_config"]
