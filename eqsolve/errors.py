from __future__ import annotations
from eqsolve.frontend.expression import OpKind

class EqSolveError(Exception):
    pass

class ParseError(EqSolveError):
    def __init__(self, message: str, position: int|None = None) -> None:
        if position is not None:
            message = f'{message} at position {position}'
        super().__init__(message)
        self.position = position

class UnexpectedCharacter(ParseError):
    def __init__(self, char: str, position: int) -> None:
        super().__init__(f'Unexpected character {char!r}', position)
        self.char = char

class EmptyExpression(ParseError):
    def __init__(self) -> None:
        super().__init__('Empty expression')

class MalformedOperatorPlacement(ParseError):
    def __init__(self, kind: OpKind, position: int) -> None:
        super().__init__(f'Operator {kind.symbol!r} is missing an operand', position)
        self.kind = kind

class MissingOperator(ParseError):
    def __init__(self, position: int) -> None:
        super().__init__('Expected an operator between operands', position)

class EvaluationError(EqSolveError, ArithmeticError):
    pass

class DivisionByZero(EvaluationError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__('Division by zero')

class IntegerOverflow(EvaluationError, OverflowError):
    def __init__(self, value: int, lower: int, upper: int) -> None:
        super().__init__(f'{value} is outside of [{lower}, {upper}]')
        self.value = value
        self.lower = lower
        self.upper = upper

class ConfigError(EqSolveError, ValueError):
    pass
