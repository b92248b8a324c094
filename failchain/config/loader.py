# failchain/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Dict, Any
import logging

import yaml

from .modules import (
    TraversalConfig,
    RenderConfig,
    OutOfMemoryConfig,
)
from .validator import validate_config, ConfigIssue
from failchain.core.errors import FailChainError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".failchain" / "config.yml"


class FailChainConfig:
    """
    Unified failchain configuration.

    All fields have code defaults - YAML is optional.
    """

    def __init__(
        self,
        traversal: Optional[TraversalConfig] = None,
        render: Optional[RenderConfig] = None,
        oom: Optional[OutOfMemoryConfig] = None,
    ):
        """Initialize with code defaults"""
        self.traversal = traversal or TraversalConfig.default()
        self.render = render or RenderConfig.default()
        self.oom = oom or OutOfMemoryConfig.default()

    @classmethod
    def default(cls) -> "FailChainConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FailChainConfig":
        """
        Build configuration from a parsed mapping.

        Unknown sections and keys are ignored; missing ones keep code defaults.
        """
        config = cls.default()
        if not isinstance(data, dict):
            return config

        if isinstance(data.get("traversal"), dict):
            config.traversal = _merge_section(config.traversal, data["traversal"], TraversalConfig)

        if isinstance(data.get("render"), dict):
            config.render = _merge_section(config.render, data["render"], RenderConfig)

        if isinstance(data.get("oom"), dict):
            config.oom = _merge_section(config.oom, data["oom"], OutOfMemoryConfig)

        return config

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "FailChainConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.failchain/config.yml

        Returns:
            FailChainConfig (code defaults if no YAML found)
        """
        return cls.from_dict(_load_yaml(config_path))

    def validate(self) -> list[ConfigIssue]:
        """
        Validate configuration.

        Returns:
            List of issues (warn/error level)
        """
        return validate_config(self.traversal, self.render, self.oom)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "traversal": self.traversal.to_dict(),
            "render": self.render.to_dict(),
            "oom": self.oom.to_dict(),
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Ignoring unreadable config file %s: %s", path, e)
        return None


def _merge_section(default_instance, yaml_data: Dict[str, Any], config_class):
    """Merge YAML data into default section instance"""
    merged = {**default_instance.to_dict(), **yaml_data}
    return config_class(**{k: v for k, v in merged.items() if k in config_class.__dataclass_fields__})


def load_config(config_path: Optional[Path] = None) -> FailChainConfig:
    """
    Load failchain configuration.

    Args:
        config_path: Optional path to YAML file

    Returns:
        FailChainConfig instance (always has code defaults)

    Note:
        If YAML is not found or invalid, returns code defaults.
    """
    return FailChainConfig.from_yaml(config_path)


# ---- process-wide active configuration ----

_ACTIVE_CONFIG: Optional[FailChainConfig] = None


def get_config() -> FailChainConfig:
    """Return the active configuration, falling back to code defaults."""
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = FailChainConfig.default()
    return _ACTIVE_CONFIG


def set_config(config: Optional[FailChainConfig]) -> None:
    """
    Install the active configuration. Passing None restores code defaults.

    Raises:
        FailChainError: INVALID_CONFIG if the configuration has error-level issues
    """
    global _ACTIVE_CONFIG
    if config is None:
        _ACTIVE_CONFIG = None
        return

    issues = config.validate()
    errors = [i for i in issues if i.level == "error"]
    if errors:
        raise FailChainError.invalid_config(
            "; ".join(f"{i.path}: {i.message}" for i in errors),
            details={"issues": [i.path for i in errors]},
        )
    for issue in issues:
        logger.warning("failchain config: %s", issue)

    _ACTIVE_CONFIG = config


__all__ = [
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
    "DEFAULT_CONFIG_PATH",
]
