# failchain/config/modules/__init__.py
"""
Section Configuration

Configuration for the three engine sections: traversal, render, oom.
"""

from .base import SectionConfig
from .traversal import TraversalConfig
from .render import RenderConfig
from .oom import OutOfMemoryConfig

__all__ = [
    "SectionConfig",
    "TraversalConfig",
    "RenderConfig",
    "OutOfMemoryConfig",
]
