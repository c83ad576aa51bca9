# Question generation for the four drill modes.

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar

from sympy import nan, oo, zoo
from sympy.parsing.sympy_parser import parse_expr, standard_transformations

import config
from answers import Answer, FractionAnswer, IntegerAnswer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Mode(str, Enum):
    MULTIPLICATION = "multiplication"
    DIVISION = "division"
    ORDER = "order"
    FRACTIONS = "fractions"


DEFAULT_MODE = Mode.MULTIPLICATION


class GenerationError(RuntimeError):
    pass


@dataclass(frozen=True)
class Question:
    mode: Mode
    display_text: str
    canonical_answer: Answer


# --- Sampling helpers -------------------------------------------------------------


def _randint(rng: random.Random, lo: int, hi: int) -> int:
    # An empty range collapses to its lower bound.
    return rng.randint(lo, max(lo, hi))


def _pick(rng: random.Random, items: List[T]) -> T:
    return items[rng.randint(0, len(items) - 1)]


def regenerate_until(
    draw: Callable[[], T], accept: Callable[[T], bool], cap: Optional[int] = None
) -> T:
    """
    Rejection sampling: call draw() until accept() holds for its result.
    Every redraw starts from scratch, so the accepted value is uniform over the
    accepted region. Raises GenerationError after `cap` failed draws.
    """
    limit = config.REGENERATE_CAP if cap is None else cap
    for _ in range(limit):
        candidate = draw()
        if accept(candidate):
            return candidate
    logger.error("rejection sampling exhausted after %d draws", limit)
    raise GenerationError(f"No acceptable question after {limit} draws.")


# --- Multiplication / division ----------------------------------------------------


def generate_multiplication(rng: random.Random) -> Question:
    n1 = _randint(rng, 2, 12)
    n2 = _randint(rng, 2, 12)
    return Question(Mode.MULTIPLICATION, f"{n1} × {n2}", IntegerAnswer(n1 * n2))


def generate_division(rng: random.Random) -> Question:
    divisor = _randint(rng, 2, 12)
    quotient = _randint(rng, 2, 12)
    dividend = divisor * quotient
    return Question(Mode.DIVISION, f"{dividend} ÷ {divisor}", IntegerAnswer(quotient))


# --- Order of operations ----------------------------------------------------------


def _order_a_plus_b_times_c(rng: random.Random) -> str:
    a = _randint(rng, 1, 20)
    b = _randint(rng, 2, 10)
    c = _randint(rng, 2, 10)
    return f"{a} + {b} * {c}"


def _order_paren_sum_times_c(rng: random.Random) -> str:
    a = _randint(rng, 1, 10)
    b = _randint(rng, 1, 10)
    c = _randint(rng, 2, 8)
    return f"({a} + {b}) * {c}"


def _order_a_times_b_plus_c(rng: random.Random) -> str:
    a = _randint(rng, 2, 12)
    b = _randint(rng, 2, 8)
    c = _randint(rng, 0, 20)
    return f"{a} * {b} + {c}"


def _order_paren_diff_plus_product(rng: random.Random) -> str:
    a = _randint(rng, 5, 20)
    b = _randint(rng, 1, 4)
    c = _randint(rng, 2, 8)
    d = _randint(rng, 1, 6)
    return f"({a} - {b}) + {c} * {d}"


def _order_quotient_plus_c(rng: random.Random) -> str:
    # dividend built as b*q so the division is exact
    b = _randint(rng, 2, 8)
    q = _randint(rng, 1, 8)
    c = _randint(rng, 0, 15)
    return f"{b * q} / {b} + {c}"


ORDER_TEMPLATES: List[Callable[[random.Random], str]] = [
    _order_a_plus_b_times_c,
    _order_paren_sum_times_c,
    _order_a_times_b_plus_c,
    _order_paren_diff_plus_product,
    _order_quotient_plus_c,
]


def evaluate_expression(expr: str) -> Any:
    """Evaluate an internal-form expression ("3 + 4 * 5") to an exact SymPy number."""
    return parse_expr(expr, transformations=standard_transformations, evaluate=True)


def _is_acceptable_order_answer(value: Any) -> bool:
    if value in (oo, -oo, zoo, nan) or getattr(value, "is_finite", None) is not True:
        return False
    if not getattr(value, "is_integer", False):
        return False
    return bool(abs(value) <= config.ORDER_ANSWER_LIMIT)


def to_display(expr: str) -> str:
    return expr.replace("*", "×").replace("/", "÷")


def generate_order(rng: random.Random) -> Question:
    def draw() -> Tuple[str, Any]:
        expr = _pick(rng, ORDER_TEMPLATES)(rng)
        return expr, evaluate_expression(expr)

    expr, value = regenerate_until(draw, lambda pair: _is_acceptable_order_answer(pair[1]))
    return Question(Mode.ORDER, to_display(expr), IntegerAnswer(int(value)))


# --- Fractions --------------------------------------------------------------------

SAME_DENOMINATORS = [2, 3, 4, 5, 6, 8]


def _fraction_same_denominator_sum(rng: random.Random) -> Tuple[str, FractionAnswer]:
    def draw() -> Tuple[int, int, int]:
        denom = _pick(rng, SAME_DENOMINATORS)
        return denom, _randint(rng, 1, denom - 1), _randint(rng, 1, denom - 1)

    denom, n1, n2 = regenerate_until(draw, lambda t: t[1] + t[2] < t[0])
    return f"{n1}/{denom} + {n2}/{denom}", FractionAnswer.reduced(n1 + n2, denom)


def _fraction_same_denominator_difference(rng: random.Random) -> Tuple[str, FractionAnswer]:
    denom = _pick(rng, SAME_DENOMINATORS)
    n1 = _randint(rng, 2, denom - 1)
    n2 = _randint(rng, 1, n1 - 1)
    return f"{n1}/{denom} - {n2}/{denom}", FractionAnswer.reduced(n1 - n2, denom)


def _fraction_halves_plus_fourths(rng: random.Random) -> Tuple[str, FractionAnswer]:
    n1 = _randint(rng, 1, 1)
    n2 = _randint(rng, 1, 3)
    return f"{n1}/2 + {n2}/4", FractionAnswer.reduced(n1 * 2 + n2, 4)


def _fraction_thirds_plus_sixths(rng: random.Random) -> Tuple[str, FractionAnswer]:
    n1 = _randint(rng, 1, 2)
    n2 = _randint(rng, 1, 5)
    return f"{n1}/3 + {n2}/6", FractionAnswer.reduced(n1 * 2 + n2, 6)


def _fraction_fourths_minus_halves(rng: random.Random) -> Tuple[str, FractionAnswer]:
    def draw() -> Tuple[int, int]:
        return _randint(rng, 2, 3), _randint(rng, 1, 1)

    n1, n2 = regenerate_until(draw, lambda p: p[0] >= p[1] * 2)
    return f"{n1}/4 - {n2}/2", FractionAnswer.reduced(n1 - n2 * 2, 4)


FRACTION_TEMPLATES: List[Callable[[random.Random], Tuple[str, FractionAnswer]]] = [
    _fraction_same_denominator_sum,
    _fraction_same_denominator_difference,
    _fraction_halves_plus_fourths,
    _fraction_thirds_plus_sixths,
    _fraction_fourths_minus_halves,
]


def generate_fraction(rng: random.Random) -> Question:
    display, answer = _pick(rng, FRACTION_TEMPLATES)(rng)
    return Question(Mode.FRACTIONS, display, answer)


# --- Public API -------------------------------------------------------------------

GENERATORS: Dict[Mode, Callable[[random.Random], Question]] = {
    Mode.MULTIPLICATION: generate_multiplication,
    Mode.DIVISION: generate_division,
    Mode.ORDER: generate_order,
    Mode.FRACTIONS: generate_fraction,
}


def generate(mode: Mode, rng: Optional[random.Random] = None) -> Question:
    return GENERATORS[Mode(mode)](rng or random.Random())
