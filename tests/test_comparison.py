import numpy as np
import pytest

from percolation.comparison import Comparison


def test_parse_accepts_symbols_and_members():
    assert Comparison.parse(">=") is Comparison.GREATER_THAN_OR_EQUAL
    assert Comparison.parse("==") is Comparison.EQUALS
    assert Comparison.parse(Comparison.LESS_THAN) is Comparison.LESS_THAN


def test_parse_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        Comparison.parse("!=")


def test_apply_on_scalars():
    assert Comparison.GREATER_THAN.apply(2, 1)
    assert not Comparison.LESS_THAN_OR_EQUAL.apply(2, 1)
    assert Comparison.EQUALS.apply(0, 0)


def test_apply_on_arrays_is_elementwise():
    mask = Comparison.GREATER_THAN.apply(np.array([0, 1, 2, 0]), 0)
    assert mask.tolist() == [False, True, True, False]
