from __future__ import annotations
import logging
from typing import Collection
from eqsolve.errors import EmptyExpression, MalformedOperatorPlacement, MissingOperator
from eqsolve.frontend.expression import BinaryOp, Expression, OpKind
from eqsolve.frontend.tokens import Operand, Operator, Tokens, add_ops, mul_ops

logger = logging.getLogger(__name__)

def reduce_pass(tokens: Tokens, kinds: Collection[OpKind]) -> Tokens:
    """
    Collapses every `operand op operand` window whose operator is in `kinds`
    into a single operand, left to right. Works in place on `tokens`.
    The first and last positions are never operator sites.
    """
    i = 1
    while i < len(tokens) - 1:
        tok = tokens[i]
        if not (isinstance(tok, Operator) and tok.kind in kinds):
            i += 1
            continue

        lhs, rhs = tokens[i-1], tokens[i+1]
        if isinstance(lhs, Operator) or isinstance(rhs, Operator):
            raise MalformedOperatorPlacement(tok.kind, tok.position)

        node = BinaryOp(tok.kind, lhs.expr, rhs.expr)
        # The new operand may be the LHS of the next operator at index i
        tokens[i-1:i+2] = [Operand(node, lhs.position)]
    return tokens

def reduce(tokens: Tokens) -> Expression:
    if not tokens:
        raise EmptyExpression()

    for kinds in (mul_ops, add_ops):
        reduce_pass(tokens, kinds)
        logger.debug("After reducing %s: %s", sorted(k.symbol for k in kinds), tokens)

    # Leading, trailing operators survive both passes
    for tok in tokens:
        if isinstance(tok, Operator):
            raise MalformedOperatorPlacement(tok.kind, tok.position)
    if len(tokens) > 1:
        raise MissingOperator(tokens[1].position)

    assert len(tokens) == 1 and isinstance(tokens[0], Operand), f"Reduction left {tokens}"
    return tokens[0].expr
