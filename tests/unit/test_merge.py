# tests/unit/test_merge.py
from __future__ import annotations

import pytest

from failchain import FailChainError, first_or_suppressed, get_suppressed
from failchain.core.chain import add_suppressed
from failchain.core.chain.merge import SUPPRESSED_ATTR
from failchain.core.errors import codes


def test_no_previous_returns_new():
    f1 = ValueError("first")

    assert first_or_suppressed(f1, None) is f1
    assert get_suppressed(f1) == ()


def test_previous_collects_new_as_suppressed():
    f1, f2, f3 = ValueError("first"), KeyError("second"), OSError("third")

    result = first_or_suppressed(f2, f1)
    result = first_or_suppressed(f3, result)

    assert result is f1
    assert get_suppressed(f1) == (f2, f3)


def test_same_reference_is_not_suppressed():
    f1 = ValueError("first")

    assert first_or_suppressed(f1, f1) is f1
    assert get_suppressed(f1) == ()


def test_suppressed_is_not_part_of_cause_chain():
    f1, f2 = ValueError("first"), KeyError("second")

    first_or_suppressed(f2, f1)

    assert f1.__cause__ is None


def test_none_new_exception_is_contract_violation():
    with pytest.raises(FailChainError) as excinfo:
        first_or_suppressed(None, ValueError("previous"))

    assert excinfo.value.error_code == codes.PRECONDITION_FAILED


def test_cleanup_loop_keeps_every_failure():
    def close(i):
        raise OSError(f"close {i} failed")

    error = None
    for i in range(3):
        try:
            close(i)
        except OSError as e:
            error = first_or_suppressed(e, error)

    assert str(error) == "close 0 failed"
    assert [str(e) for e in get_suppressed(error)] == ["close 1 failed", "close 2 failed"]


def test_get_suppressed_of_none():
    assert get_suppressed(None) == ()


def test_add_suppressed_self_is_rejected():
    f1 = ValueError("first")

    with pytest.raises(FailChainError):
        add_suppressed(f1, f1)


def test_companions_are_stored_under_a_private_name():
    primary, secondary = ValueError("primary"), KeyError("secondary")

    first_or_suppressed(secondary, primary)

    assert SUPPRESSED_ATTR == "_failchain_suppressed"
    assert vars(primary) == {SUPPRESSED_ATTR: [secondary]}
    assert not any(name.startswith("__") for name in vars(primary))
