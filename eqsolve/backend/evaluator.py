from __future__ import annotations
import logging
from typing import Tuple
from eqsolve.config import EVAL_CONFIG
from eqsolve.errors import DivisionByZero, IntegerOverflow
from eqsolve.frontend.expression import Expression, OpKind, left_spine

logger = logging.getLogger(__name__)

def trunc_div(lhs: int, rhs: int) -> int:
    """Integer division rounding toward zero, e.g. -7 / 2 == -3."""
    if rhs == 0:
        raise DivisionByZero()
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient

op_map = {
    OpKind.ADD: lambda x, y: x + y,
    OpKind.SUB: lambda x, y: x - y,
    OpKind.MUL: lambda x, y: x * y,
    OpKind.DIV: trunc_div,
}

def int_bounds(bits: int) -> Tuple[int, int]:
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1

def apply_overflow(value: int, config: dict) -> int:
    policy = config["overflow"]
    if policy == "unbounded":
        return value

    lower, upper = int_bounds(config["int_bits"])
    if lower <= value <= upper:
        return value

    if policy == "wrap":
        span = 1 << config["int_bits"]
        return (value - lower) % span + lower
    elif policy == "saturate":
        return max(lower, min(upper, value))
    raise IntegerOverflow(value, lower, upper)

def evaluate(expr: Expression, config: dict|None = None) -> int:
    config = config if config is not None else EVAL_CONFIG
    spine, leaf = left_spine(expr)

    result = apply_overflow(leaf.value, config)
    for node in reversed(spine): # Innermost first, so left before right
        rhs = evaluate(node.right, config)
        result = apply_overflow(op_map[node.kind](result, rhs), config)
    return result
