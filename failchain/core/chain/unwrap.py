# failchain/core/chain/unwrap.py
"""
Strip wrapper failures to get at the failure that matters.
"""

from __future__ import annotations

from typing import Optional, Tuple, Type, Union

from failchain.config import FailChainConfig
from failchain.core.errors import CompletionError, ExecutionError
from .traversal import iter_chain


def strip_exception(
    exc: BaseException,
    type_to_strip: Union[Type[BaseException], Tuple[Type[BaseException], ...]],
    *,
    config: Optional[FailChainConfig] = None,
) -> BaseException:
    """
    Replace ``exc`` by its cause for as long as it is a ``type_to_strip``
    and has a cause.

    A wrapper without a cause is returned as is; there is nothing past the
    end of the chain to unwrap to.
    """
    result = exc
    for node in iter_chain(exc, config=config):
        result = node
        if not isinstance(node, type_to_strip):
            break
    return result


def strip_completion_exception(exc: BaseException, *, config: Optional[FailChainConfig] = None) -> BaseException:
    """Unpack CompletionError wrappers and return the first failure beneath them."""
    return strip_exception(exc, CompletionError, config=config)


def strip_execution_exception(exc: BaseException, *, config: Optional[FailChainConfig] = None) -> BaseException:
    """Unpack ExecutionError wrappers and return the first failure beneath them."""
    return strip_exception(exc, ExecutionError, config=config)
