# failchain/config/modules/oom.py
"""
Out-of-Memory Enrichment Configuration

Replacement messages used by enrich_out_of_memory_error.
A message left as None disables handling of that kind of error.
"""

from dataclasses import dataclass
from typing import Optional

from .base import SectionConfig


@dataclass(frozen=True)
class OutOfMemoryConfig(SectionConfig):
    """
    Out-of-memory enrichment configuration.

    metaspace_message: Replacement for metaspace exhaustion messages
    direct_message: Replacement for direct buffer memory exhaustion messages
    heap_space_message: Replacement for heap space exhaustion messages
    """

    metaspace_message: Optional[str] = None
    direct_message: Optional[str] = None
    heap_space_message: Optional[str] = None

    @classmethod
    def default(cls) -> "OutOfMemoryConfig":
        """Default: all kinds disabled"""
        return cls()

    @property
    def enabled(self) -> bool:
        return any(
            m is not None
            for m in (self.metaspace_message, self.direct_message, self.heap_space_message)
        )
