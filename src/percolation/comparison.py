"""Comparison operators used to query cell values."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any


class Comparison(Enum):
    """Relation between a cell value and a reference value: ``cell <op> value``."""

    EQUALS = "="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_THAN_OR_EQUAL = ">="
    LESS_THAN_OR_EQUAL = "<="

    @classmethod
    def parse(cls, value: Comparison | str) -> Comparison:
        if isinstance(value, cls):
            return value
        symbol = "=" if value == "==" else value
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown comparison operator: {value!r}") from None

    def apply(self, left: Any, right: Any) -> Any:
        """Evaluate `left <op> right`; element-wise when `left` is an array."""

        return _OPERATORS[self](left, right)


_OPERATORS = {
    Comparison.EQUALS: operator.eq,
    Comparison.GREATER_THAN: operator.gt,
    Comparison.LESS_THAN: operator.lt,
    Comparison.GREATER_THAN_OR_EQUAL: operator.ge,
    Comparison.LESS_THAN_OR_EQUAL: operator.le,
}
