# failchain/core/errors/__init__.py
"""
Error types owned by failchain.

This package defines:
- FailChainError: raised when the engine is misused or cannot do its job
- Canonical error codes
- Wrapper failures stripped by the unwrap helpers

No side effects on import.
"""

from . import codes
from .exceptions import FailChainError
from .wrappers import CompletionError, ExecutionError

__all__ = [
    "codes",
    "FailChainError",
    "CompletionError",
    "ExecutionError",
]
