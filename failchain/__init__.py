# failchain/__init__.py
"""
failchain - uniform handling of failure chains

Decide whether a failure must stop the process, find the real failure behind
wrappers, search cause chains, merge cleanup failures, and make
out-of-memory errors actionable.

Basic usage:

Classify and propagate:
    >>> from failchain import rethrow_if_fatal_error
    >>> try:
    ...     task()
    ... except BaseException as e:
    ...     rethrow_if_fatal_error(e)
    ...     handle_locally(e)

Find the root cause:
    >>> from failchain import strip_completion_exception, find_exception
    >>> cause = strip_completion_exception(error)
    >>> timeout = find_exception(error, TimeoutError)

Best-effort cleanup:
    >>> from failchain import first_or_suppressed
    >>> error = None
    >>> for resource in resources:
    ...     try:
    ...         resource.close()
    ...     except Exception as e:
    ...         error = first_or_suppressed(e, error)

Configuration (optional, YAML at ~/.failchain/config.yml):
    >>> from failchain import load_config, set_config
    >>> set_config(load_config())
"""

__version__ = "0.1.0"

from .core.chain import (
    STRINGIFIED_NULL_EXCEPTION,
    FatalKind,
    OutOfMemoryKind,
    iter_chain,
    get_cause,
    stringify_exception,
    fatal_kind,
    is_fatal_error,
    is_fatal_or_out_of_memory_error,
    classify_out_of_memory_error,
    is_metaspace_out_of_memory_error,
    is_direct_out_of_memory_error,
    is_heap_space_out_of_memory_error,
    try_enrich_out_of_memory_error,
    enrich_out_of_memory_error,
    update_detail_message,
    find_exception,
    find_exception_matching,
    find_exception_with_message,
    strip_exception,
    strip_completion_exception,
    strip_execution_exception,
    first_or_suppressed,
    get_suppressed,
    rethrow_exception,
    to_exception,
    try_rethrow_exception,
    rethrow,
    rethrow_if_fatal_error,
    rethrow_if_fatal_error_or_oom,
)
from .core.errors import FailChainError, CompletionError, ExecutionError
from .config import FailChainConfig, load_config, get_config, set_config

__all__ = [
    # Version
    "__version__",

    # Traversal and rendering
    "STRINGIFIED_NULL_EXCEPTION",
    "iter_chain",
    "get_cause",
    "stringify_exception",

    # Classification
    "FatalKind",
    "OutOfMemoryKind",
    "fatal_kind",
    "is_fatal_error",
    "is_fatal_or_out_of_memory_error",
    "classify_out_of_memory_error",
    "is_metaspace_out_of_memory_error",
    "is_direct_out_of_memory_error",
    "is_heap_space_out_of_memory_error",

    # Enrichment
    "try_enrich_out_of_memory_error",
    "enrich_out_of_memory_error",
    "update_detail_message",

    # Search / unwrap
    "find_exception",
    "find_exception_matching",
    "find_exception_with_message",
    "strip_exception",
    "strip_completion_exception",
    "strip_execution_exception",

    # Suppressed
    "first_or_suppressed",
    "get_suppressed",

    # Propagation
    "rethrow_exception",
    "to_exception",
    "try_rethrow_exception",
    "rethrow",
    "rethrow_if_fatal_error",
    "rethrow_if_fatal_error_or_oom",

    # Errors
    "FailChainError",
    "CompletionError",
    "ExecutionError",

    # Configuration
    "FailChainConfig",
    "load_config",
    "get_config",
    "set_config",
]
