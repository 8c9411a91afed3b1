from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple, Union

class OpKind(Enum):
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'

    @property
    def symbol(self) -> str:
        return self.value

# Names used when rendering a tree back into constructor notation
kind_names = {
    OpKind.ADD: 'Add',
    OpKind.SUB: 'Sub',
    OpKind.MUL: 'Mul',
    OpKind.DIV: 'Div',
}

@dataclass(frozen=True, repr=False)
class Number:
    value: int

    def __str__(self) -> str:
        return f'Number({self.value})'

    __repr__ = __str__

def left_spine(expr: Expression) -> Tuple[List[BinaryOp], Number]:
    """
    Follows `.left` down to the leftmost leaf. Returns the operator nodes
    met on the way, outermost first, and that leaf.

    Chains of same-tier operators nest on the left, so walking this side in
    a loop keeps recursion bounded by the depth of the right children.
    """
    spine = []
    while isinstance(expr, BinaryOp):
        spine.append(expr)
        expr = expr.left
    return spine, expr

@dataclass(frozen=True, eq=False, repr=False)
class BinaryOp:
    kind: OpKind
    left: Expression
    right: Expression

    def __str__(self) -> str:
        spine, leaf = left_spine(self)
        parts = [f'{kind_names[node.kind]}(' for node in spine]
        parts.append(str(leaf))
        parts.extend(f', {node.right})' for node in reversed(spine))
        return ''.join(parts)

    __repr__ = __str__

    def __eq__(self, other) -> bool:
        if not isinstance(other, BinaryOp):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            lhs, rhs = pending.pop()
            if isinstance(lhs, BinaryOp) and isinstance(rhs, BinaryOp):
                if lhs.kind != rhs.kind:
                    return False
                pending.append((lhs.right, rhs.right))
                pending.append((lhs.left, rhs.left))
            elif lhs != rhs:
                return False
        return True

    def __hash__(self) -> int:
        return hash(str(self))

Expression = Union[Number, BinaryOp]

def Add(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(OpKind.ADD, left, right)

def Sub(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(OpKind.SUB, left, right)

def Mul(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(OpKind.MUL, left, right)

def Div(left: Expression, right: Expression) -> BinaryOp:
    return BinaryOp(OpKind.DIV, left, right)

def pretty(expr: Expression) -> str:
    """Indented rendering of a tree, one node per line."""
    lines = []
    pending = [(expr, 0)]
    while pending:
        node, level = pending.pop()
        if isinstance(node, Number):
            lines.append("\t" * level + str(node.value) + "\n")
            continue
        lines.append("\t" * level + node.kind.symbol + "\n")
        pending.append((node.right, level + 1))
        pending.append((node.left, level + 1))
    return ''.join(lines)
