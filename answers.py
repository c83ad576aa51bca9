# Canonical answer values: plain integers and reduced fractions.

from __future__ import annotations

from dataclasses import dataclass
from math import gcd
from typing import Tuple, Union


def simplify(numerator: int, denominator: int) -> Tuple[int, int]:
    """
    Reduce a fraction to lowest terms.
    Zero always becomes 0/1; a negative denominator moves its sign to the numerator.
    """
    if denominator == 0:
        raise ZeroDivisionError("fraction denominator is zero")
    if numerator == 0:
        return 0, 1
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    g = gcd(numerator, denominator)
    return numerator // g, denominator // g


@dataclass(frozen=True)
class IntegerAnswer:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FractionAnswer:
    numerator: int
    denominator: int

    @classmethod
    def reduced(cls, numerator: int, denominator: int) -> "FractionAnswer":
        return cls(*simplify(numerator, denominator))

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


Answer = Union[IntegerAnswer, FractionAnswer]
