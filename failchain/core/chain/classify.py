# failchain/core/chain/classify.py
"""
Classification of failures as fatal to the runtime or out of memory.

Fatal kinds form a closed set (see FatalKind). They indicate the interpreter
or the current thread of control can no longer be trusted, so the process
should restart instead of recovering locally:

- SystemError: the interpreter detected an internal error
- KeyboardInterrupt: execution was interrupted asynchronously and may have
  stopped anywhere, leaving shared state half-updated
- SystemExit: termination was requested and must not be swallowed

Out-of-memory classification uses an exact ``MemoryError`` type match so that
application-defined subclasses are not mistaken for runtime exhaustion.
The message markers are the diagnostics emitted by JVM runtimes embedded in
the process and are matched case-insensitively.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Type

from .traversal import message_of


class FatalKind(str, Enum):
    """Failure kinds that leave the runtime in an untrustworthy state"""
    INTERNAL_ERROR = "internal_error"
    INTERRUPTED = "interrupted"
    TERMINATED = "terminated"

    @property
    def exception_type(self) -> Type[BaseException]:
        return _FATAL_TYPES[self]


_FATAL_TYPES = {
    FatalKind.INTERNAL_ERROR: SystemError,
    FatalKind.INTERRUPTED: KeyboardInterrupt,
    FatalKind.TERMINATED: SystemExit,
}


class OutOfMemoryKind(str, Enum):
    """Memory region implicated by an out-of-memory error"""
    METASPACE = "metaspace"
    DIRECT_BUFFER = "direct-buffer"
    HEAP_SPACE = "heap-space"
    NONE = "none"


# Checked in this order; the first marker found wins.
OUT_OF_MEMORY_MARKERS: Tuple[Tuple[OutOfMemoryKind, str], ...] = (
    (OutOfMemoryKind.METASPACE, "metaspace"),
    (OutOfMemoryKind.DIRECT_BUFFER, "direct buffer memory"),
    (OutOfMemoryKind.HEAP_SPACE, "java heap space"),
)


def fatal_kind(exc: Optional[BaseException]) -> Optional[FatalKind]:
    """Return the FatalKind of ``exc``, or None if it is not fatal."""
    if exc is None:
        return None
    for kind, exc_type in _FATAL_TYPES.items():
        if isinstance(exc, exc_type):
            return kind
    return None


def is_fatal_error(exc: Optional[BaseException]) -> bool:
    """
    Check whether ``exc`` indicates a state where continued operation can
    only be guaranteed by a clean process restart.
    """
    return fatal_kind(exc) is not None


def is_out_of_memory_error(exc: Optional[BaseException]) -> bool:
    return exc is not None and type(exc) is MemoryError


def is_fatal_or_out_of_memory_error(exc: Optional[BaseException]) -> bool:
    """
    Like is_fatal_error, but also true for a plain MemoryError.

    Memory exhaustion may hit any thread, not the one holding most of the
    memory, so it is usually not recoverable by failing the current task.
    """
    return is_fatal_error(exc) or is_out_of_memory_error(exc)


def classify_out_of_memory_error(exc: Optional[BaseException]) -> OutOfMemoryKind:
    if not is_out_of_memory_error(exc):
        return OutOfMemoryKind.NONE

    message = message_of(exc)
    if message is None:
        return OutOfMemoryKind.NONE

    lowered = message.lower()
    for kind, marker in OUT_OF_MEMORY_MARKERS:
        if marker in lowered:
            return kind
    return OutOfMemoryKind.NONE


def is_metaspace_out_of_memory_error(exc: Optional[BaseException]) -> bool:
    return classify_out_of_memory_error(exc) is OutOfMemoryKind.METASPACE


def is_direct_out_of_memory_error(exc: Optional[BaseException]) -> bool:
    return classify_out_of_memory_error(exc) is OutOfMemoryKind.DIRECT_BUFFER


def is_heap_space_out_of_memory_error(exc: Optional[BaseException]) -> bool:
    return classify_out_of_memory_error(exc) is OutOfMemoryKind.HEAP_SPACE
