from __future__ import annotations
from typing import List, Union
from eqsolve.frontend.expression import Expression, OpKind

class Operand:
    def __init__(self, expr: Expression, position: int) -> None:
        self.expr = expr
        self.position = position

    def __repr__(self) -> str:
        return f'Operand({self.expr}, {self.position})'

    def __eq__(self, other) -> bool:
        return isinstance(other, Operand) and (self.expr, self.position) == (other.expr, other.position)

class Operator:
    def __init__(self, kind: OpKind, position: int) -> None:
        self.kind = kind
        self.position = position

    def __repr__(self) -> str:
        return f'Operator({self.kind.symbol}, {self.position})'

    def __eq__(self, other) -> bool:
        return isinstance(other, Operator) and (self.kind, self.position) == (other.kind, other.position)

Token = Union[Operand, Operator]
Tokens = List[Token]

op_chars = {kind.symbol: kind for kind in OpKind}

# Precedence tiers, in reduction order
mul_ops = frozenset([OpKind.MUL, OpKind.DIV])
add_ops = frozenset([OpKind.ADD, OpKind.SUB])
