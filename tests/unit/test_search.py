# tests/unit/test_search.py
from __future__ import annotations

from failchain import find_exception, find_exception_matching, find_exception_with_message

from tests.helpers import link


class ConnectionProblem(OSError):
    pass


def _chain():
    top = RuntimeError("request failed")
    middle = ConnectionProblem("Connection Reset by peer")
    bottom = TimeoutError("read timed out")
    link(top, middle, bottom)
    return top, middle, bottom


def test_find_by_type_returns_first_match():
    top, middle, bottom = _chain()

    assert find_exception(top, OSError) is middle
    assert find_exception(top, TimeoutError) is bottom
    assert find_exception(top, RuntimeError) is top


def test_find_by_type_subclass_and_tuple():
    top, middle, bottom = _chain()

    assert find_exception(top, ConnectionProblem) is middle
    assert find_exception(top, (KeyError, ConnectionProblem)) is middle


def test_find_by_type_no_match():
    top, _, _ = _chain()

    assert find_exception(top, KeyError) is None


def test_find_by_type_none_inputs():
    top, _, _ = _chain()

    assert find_exception(None, ValueError) is None
    assert find_exception(top, None) is None


def test_find_by_predicate_visits_in_cause_order():
    top, middle, bottom = _chain()
    visited = []

    def predicate(exc):
        visited.append(exc)
        return False

    assert find_exception_matching(top, predicate) is None
    assert visited == [top, middle, bottom]


def test_find_by_predicate_first_match():
    top, middle, bottom = _chain()

    assert find_exception_matching(top, lambda e: isinstance(e, OSError)) is middle
    assert find_exception_matching(top, None) is None
    assert find_exception_matching(None, lambda e: True) is None


def test_find_by_message():
    top, middle, bottom = _chain()

    assert find_exception_with_message(top, "Reset") is middle
    assert find_exception_with_message(top, "timed out") is bottom
    assert find_exception_with_message(top, "nothing like this") is None
    assert find_exception_with_message(top, None) is None


def test_find_by_message_is_case_sensitive():
    failure = ConnectionResetError("Connection Reset")

    assert find_exception_with_message(failure, "connection reset") is None
    assert find_exception_with_message(failure, "Connection Reset") is failure


def test_find_by_message_skips_nodes_without_message():
    top = RuntimeError()
    bottom = ValueError("bad value")
    link(top, bottom)

    assert find_exception_with_message(top, "bad") is bottom


def test_search_on_self_cycle_terminates():
    e = RuntimeError("loop")
    e.__cause__ = e

    assert find_exception(e, KeyError) is None
    assert find_exception_with_message(e, "absent") is None
    assert find_exception_matching(e, lambda x: False) is None
