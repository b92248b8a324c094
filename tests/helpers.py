# tests/helpers.py
from __future__ import annotations

from typing import List, Optional


def link(*failures: BaseException) -> BaseException:
    """Chain failures by __cause__, first to last; return the first."""
    for failure, cause in zip(failures, failures[1:]):
        failure.__cause__ = cause
    return failures[0]


def causes(root: Optional[BaseException]) -> List[BaseException]:
    nodes = []
    node = root
    while node is not None and len(nodes) < 100:
        nodes.append(node)
        node = node.__cause__
    return nodes
