# failchain/core/chain/traversal.py
"""
Cause-chain traversal.

A chain starts at a failure and follows its cause until a failure without
one is reached. The cause of a failure is its explicit ``__cause__``; when
that is unset, the implicit ``__context__`` is used unless the failure was
raised with ``from None`` or context following is disabled in config. This
is the rule the interpreter applies when it prints chained tracebacks.

Walks are iterative and remember every visited node by identity: a chain
that loops back ends at the first repeated node. Concurrent mutation of a
chain from another thread while it is being walked is undefined.
"""

from __future__ import annotations

from typing import Iterator, Optional
import logging

from failchain.config import FailChainConfig, get_config
from failchain.core.errors import FailChainError


logger = logging.getLogger(__name__)


def get_cause(exc: BaseException, *, follow_context: bool = True) -> Optional[BaseException]:
    """Return the failure that caused ``exc``, or None at the end of the chain."""
    cause = exc.__cause__
    if cause is not None:
        return cause
    if follow_context and not exc.__suppress_context__:
        return exc.__context__
    return None


def message_of(exc: BaseException) -> Optional[str]:
    """
    Return the message of ``exc``, or None if it has none.

    An empty ``str(exc)`` counts as no message. Never raises: a broken
    ``__str__`` also counts as no message.
    """
    try:
        text = str(exc)
    except Exception:
        return None
    return text or None


def iter_chain(
    exc: Optional[BaseException],
    *,
    max_depth: Optional[int] = None,
    config: Optional[FailChainConfig] = None,
) -> Iterator[BaseException]:
    """
    Yield ``exc`` and then each failure in its cause chain, in cause order.

    Yields nothing for None. Each node is yielded at most once. ``max_depth``
    caps the number of nodes yielded by this call only; the search, unwrap
    and enrichment helpers always walk whole chains.

    Raises:
        FailChainError: PRECONDITION_FAILED if ``max_depth`` is below 1
    """
    if max_depth is not None and max_depth < 1:
        raise FailChainError.precondition(f"max_depth must be >= 1, got {max_depth}")
    if exc is None:
        return

    traversal = (config or get_config()).traversal
    seen = set()
    depth = 0
    node: Optional[BaseException] = exc

    while node is not None:
        if id(node) in seen:
            logger.debug("Cause chain of %s loops back to %s; stopping", type(exc).__name__, type(node).__name__)
            return
        if max_depth is not None and depth >= max_depth:
            logger.debug("Cause chain of %s truncated at depth %d", type(exc).__name__, depth)
            return

        seen.add(id(node))
        depth += 1
        yield node
        node = get_cause(node, follow_context=traversal.follow_context)
