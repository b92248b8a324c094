# failchain/core/chain/mutation.py
"""
In-place rewriting of a failure's message.

The failure keeps its identity, its type and its links (cause, context,
traceback, suppressed companions). Only the text it reports changes.

How the message is rewritten:
1. ``args`` becomes ``(new_message,)``, which drives ``str()`` for most types
2. a ``message``, ``msg`` or ``strerror`` attribute holding a str is replaced
   too, for types whose ``__str__`` is built from it
3. instances that reject attribute writes (frozen dataclass exceptions) are
   written with ``object.__setattr__``

If none of this makes ``str(exc)`` show the new text, the type renders its
message some other way and cannot be rewritten. That is reported as
MUTATION_DENIED right away, after the original args and attributes are put
back: silently keeping the old text would hide the diagnostic the caller
asked for, and losing it would destroy the one the failure already had.

Callers must own the failure exclusively while it is rewritten.
"""

from __future__ import annotations

from typing import Any, Dict
import logging

from failchain.core.errors import FailChainError
from .traversal import message_of


logger = logging.getLogger(__name__)

# Attributes some types build str() from instead of args:
# OSError uses strerror, SyntaxError uses msg.
MESSAGE_ATTRS = ("message", "msg", "strerror")


def _force_setattr(obj: Any, name: str, value: Any) -> None:
    try:
        setattr(obj, name, value)
    except AttributeError:
        # frozen instances refuse plain setattr
        object.__setattr__(obj, name, value)


def _snapshot(exc: BaseException) -> Dict[str, Any]:
    state = {"args": exc.args}
    for name in MESSAGE_ATTRS:
        value = getattr(exc, name, None)
        if isinstance(value, str):
            state[name] = value
    return state


def _restore(exc: BaseException, state: Dict[str, Any]) -> None:
    for name, value in state.items():
        try:
            _force_setattr(exc, name, value)
        except (AttributeError, TypeError) as e:
            logger.debug("Could not restore %s.%s: %r", type(exc).__name__, name, e)


def set_message(exc: BaseException, new_message: str) -> None:
    """
    Rewrite the message of ``exc`` in place.

    On failure ``exc`` is put back the way it was before the error is raised.

    Raises:
        FailChainError: MUTATION_DENIED if the new message cannot be applied
    """
    state = _snapshot(exc)
    try:
        _force_setattr(exc, "args", (new_message,))
        for name in state:
            if name != "args":
                _force_setattr(exc, name, new_message)
    except (AttributeError, TypeError) as e:
        _restore(exc, state)
        raise FailChainError.mutation_denied(
            f"Cannot rewrite the message of {type(exc).__name__}: {e}",
            target=exc,
            cause=e,
        ) from e

    rendered = message_of(exc)
    if new_message and (rendered is None or new_message not in rendered):
        _restore(exc, state)
        raise FailChainError.mutation_denied(
            f"{type(exc).__name__} does not render its message from args or a 'message' "
            f"attribute; the rewritten message would not be visible",
            target=exc,
        )

    logger.debug("Rewrote message of %s", type(exc).__name__)
