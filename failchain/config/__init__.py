# failchain/config/__init__.py
"""
failchain Configuration

Design principles:
1. Code has defaults, YAML is optional input (YAML can be deleted)
2. Sections are frozen dataclasses; replace the config, never edit it
3. The engine reads the active config only when a call does not pass one
"""

from .modules import (
    SectionConfig,
    TraversalConfig,
    RenderConfig,
    OutOfMemoryConfig,
)
from .loader import FailChainConfig, load_config, get_config, set_config
from .validator import validate_config, ConfigIssue

__all__ = [
    # Section configs
    "SectionConfig",
    "TraversalConfig",
    "RenderConfig",
    "OutOfMemoryConfig",

    # Unified config
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",

    # Validator
    "validate_config",
    "ConfigIssue",
]
