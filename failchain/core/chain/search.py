# failchain/core/chain/search.py
"""
Search a cause chain.

Every search walks the chain in cause order and returns the first matching
failure, or None when nothing matches or an argument is None.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple, Type, TypeVar, Union

from failchain.config import FailChainConfig
from .traversal import iter_chain, message_of


E = TypeVar("E", bound=BaseException)

ExceptionPredicate = Callable[[BaseException], bool]


def find_exception(
    exc: Optional[BaseException],
    search_type: Optional[Union[Type[E], Tuple[Type[E], ...]]],
    *,
    config: Optional[FailChainConfig] = None,
) -> Optional[E]:
    """Return the first failure in the chain that is an instance of ``search_type``."""
    if exc is None or search_type is None:
        return None

    for node in iter_chain(exc, config=config):
        if isinstance(node, search_type):
            return node
    return None


def find_exception_matching(
    exc: Optional[BaseException],
    predicate: Optional[ExceptionPredicate],
    *,
    config: Optional[FailChainConfig] = None,
) -> Optional[BaseException]:
    """Return the first failure in the chain for which ``predicate`` is true."""
    if exc is None or predicate is None:
        return None

    for node in iter_chain(exc, config=config):
        if predicate(node):
            return node
    return None


def find_exception_with_message(
    exc: Optional[BaseException],
    search_message: Optional[str],
    *,
    config: Optional[FailChainConfig] = None,
) -> Optional[BaseException]:
    """
    Return the first failure whose message contains ``search_message``.

    Matching is a literal, case-sensitive substring test.
    """
    if exc is None or search_message is None:
        return None

    for node in iter_chain(exc, config=config):
        message = message_of(node)
        if message is not None and search_message in message:
            return node
    return None
