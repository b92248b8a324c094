# failchain/core/chain/__init__.py
"""
The failure-chain engine.

Operates on any BaseException and the chain reachable through its causes:
- traversal: walking a chain (cycle-safe)
- classify: fatal and out-of-memory classification
- search / unwrap: finding the failure that matters
- enrich / mutation: rewriting messages in place
- merge: collecting suppressed companions
- render: loggable text
- rethrow: propagation-boundary helpers

Calls are synchronous and hold no references once they return.
"""

from .traversal import get_cause, message_of, iter_chain
from .classify import (
    FatalKind,
    OutOfMemoryKind,
    OUT_OF_MEMORY_MARKERS,
    fatal_kind,
    is_fatal_error,
    is_out_of_memory_error,
    is_fatal_or_out_of_memory_error,
    classify_out_of_memory_error,
    is_metaspace_out_of_memory_error,
    is_direct_out_of_memory_error,
    is_heap_space_out_of_memory_error,
)
from .search import (
    ExceptionPredicate,
    find_exception,
    find_exception_matching,
    find_exception_with_message,
)
from .unwrap import strip_exception, strip_completion_exception, strip_execution_exception
from .mutation import set_message
from .enrich import (
    Classifier,
    update_detail_message,
    try_enrich_out_of_memory_error,
    enrich_out_of_memory_error,
)
from .merge import first_or_suppressed, add_suppressed, get_suppressed
from .render import STRINGIFIED_NULL_EXCEPTION, stringify_exception
from .rethrow import (
    rethrow_exception,
    to_exception,
    try_rethrow_exception,
    rethrow,
    rethrow_if_fatal_error,
    rethrow_if_fatal_error_or_oom,
)

__all__ = [
    # Traversal
    "get_cause",
    "message_of",
    "iter_chain",

    # Classification
    "FatalKind",
    "OutOfMemoryKind",
    "OUT_OF_MEMORY_MARKERS",
    "fatal_kind",
    "is_fatal_error",
    "is_out_of_memory_error",
    "is_fatal_or_out_of_memory_error",
    "classify_out_of_memory_error",
    "is_metaspace_out_of_memory_error",
    "is_direct_out_of_memory_error",
    "is_heap_space_out_of_memory_error",

    # Search / unwrap
    "ExceptionPredicate",
    "find_exception",
    "find_exception_matching",
    "find_exception_with_message",
    "strip_exception",
    "strip_completion_exception",
    "strip_execution_exception",

    # Enrichment
    "Classifier",
    "set_message",
    "update_detail_message",
    "try_enrich_out_of_memory_error",
    "enrich_out_of_memory_error",

    # Suppressed
    "first_or_suppressed",
    "add_suppressed",
    "get_suppressed",

    # Rendering
    "STRINGIFIED_NULL_EXCEPTION",
    "stringify_exception",

    # Propagation
    "rethrow_exception",
    "to_exception",
    "try_rethrow_exception",
    "rethrow",
    "rethrow_if_fatal_error",
    "rethrow_if_fatal_error_or_oom",
]
