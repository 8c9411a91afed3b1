from eqsolve.frontend.expression import Expression
from eqsolve.frontend.lexer import tokenize
from eqsolve.frontend.reducer import reduce

def parse(src: str) -> Expression:
    return reduce(tokenize(src))
