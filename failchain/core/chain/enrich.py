# failchain/core/chain/enrich.py
"""
Rewrite messages along a cause chain.
"""

from __future__ import annotations

from typing import Callable, Optional

from failchain.config import FailChainConfig, get_config
from .classify import OutOfMemoryKind, classify_out_of_memory_error
from .mutation import set_message
from .traversal import iter_chain


Classifier = Callable[[BaseException], Optional[str]]


def update_detail_message(
    root: Optional[BaseException],
    classifier: Optional[Classifier],
    *,
    config: Optional[FailChainConfig] = None,
) -> None:
    """
    Apply ``classifier`` to every failure in the cause chain of ``root``.

    A returned string replaces that failure's message; None leaves it as is.
    The walk continues to the cause either way. No-op if ``classifier`` is None.

    Raises:
        FailChainError: MUTATION_DENIED if a message cannot be rewritten
    """
    if classifier is None:
        return

    # Materialize first: rewriting a message must not affect which nodes are visited.
    for node in list(iter_chain(root, config=config)):
        new_message = classifier(node)
        if new_message is not None:
            set_message(node, new_message)


def try_enrich_out_of_memory_error(
    root: Optional[BaseException],
    metaspace_message: Optional[str] = None,
    direct_message: Optional[str] = None,
    heap_space_message: Optional[str] = None,
    *,
    config: Optional[FailChainConfig] = None,
) -> None:
    """
    Replace the messages of out-of-memory errors in the cause chain of ``root``
    with text describing likely causes and remedies.

    Args:
        root: The failure whose cause chain is traversed
        metaspace_message: Used for metaspace errors; None disables this kind
        direct_message: Used for direct buffer memory errors; None disables this kind
        heap_space_message: Used for heap space errors; None disables this kind
    """
    replacements = {
        OutOfMemoryKind.METASPACE: metaspace_message,
        OutOfMemoryKind.DIRECT_BUFFER: direct_message,
        OutOfMemoryKind.HEAP_SPACE: heap_space_message,
    }
    if all(m is None for m in replacements.values()):
        return

    update_detail_message(
        root,
        lambda exc: replacements.get(classify_out_of_memory_error(exc)),
        config=config,
    )


def enrich_out_of_memory_error(
    root: Optional[BaseException],
    *,
    config: Optional[FailChainConfig] = None,
) -> None:
    """try_enrich_out_of_memory_error with the messages from the ``oom`` config section."""
    config = config or get_config()
    try_enrich_out_of_memory_error(
        root,
        config.oom.metaspace_message,
        config.oom.direct_message,
        config.oom.heap_space_message,
        config=config,
    )
