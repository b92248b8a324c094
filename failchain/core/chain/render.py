# failchain/core/chain/render.py
"""
Render failures as loggable text.
"""

from __future__ import annotations

from typing import List, Optional, Set
import logging
import traceback

from failchain.config import FailChainConfig, get_config
from .merge import get_suppressed
from .traversal import iter_chain


logger = logging.getLogger(__name__)

# The stringified representation of a missing failure.
STRINGIFIED_NULL_EXCEPTION = "(null)"

SUPPRESSED_HEADER = "Suppressed: "


def _qualified_name(exc: object) -> str:
    try:
        cls = type(exc)
        if cls.__module__ in ("builtins", "__main__"):
            return cls.__qualname__
        return f"{cls.__module__}.{cls.__qualname__}"
    except Exception:
        return "<unknown>"


def _format(exc: BaseException) -> str:
    return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))


def _render_suppressed(
    exc: BaseException,
    depth: int,
    seen: Set[int],
    header: str = SUPPRESSED_HEADER,
) -> List[str]:
    indent = "\t" * depth
    out: List[str] = []
    for companion in get_suppressed(exc):
        if id(companion) in seen:
            out.append(f"{indent}{header}[CIRCULAR REFERENCE: {_qualified_name(companion)}]\n")
            continue
        seen.add(id(companion))

        lines = _format(companion).splitlines(keepends=True)
        if lines:
            lines[0] = header + lines[0]
        out.extend(indent + line for line in lines)
        out.extend(_render_suppressed(companion, depth + 1, seen))
    return out


def stringify_exception(
    exc: Optional[BaseException],
    *,
    config: Optional[FailChainConfig] = None,
) -> str:
    """
    Render ``exc`` with its traceback and chained causes, or "(null)" if
    ``exc`` is None.

    Suppressed companions follow the main trace, indented one tab per nesting
    level. Those of ``exc`` itself appear under a "Suppressed: " header, those
    of a failure further down the cause chain under "Suppressed by <type>: ".

    This makes a best effort and never fails: if rendering raises, a one-line
    summary naming the failure's type is returned instead.
    """
    if exc is None:
        return STRINGIFIED_NULL_EXCEPTION

    try:
        include_suppressed = (config or get_config()).render.include_suppressed
        parts = [_format(exc)]
        if include_suppressed:
            chain = list(iter_chain(exc, config=config))
            seen = {id(node) for node in chain}
            for node in chain:
                header = SUPPRESSED_HEADER if node is exc else f"Suppressed by {_qualified_name(node)}: "
                parts.extend(_render_suppressed(node, 1, seen, header))
        return "".join(parts)
    except Exception as e:
        logger.debug("Falling back to summary rendering for %s: %r", _qualified_name(exc), e)
        return f"{_qualified_name(exc)} (error while printing stack trace)"
