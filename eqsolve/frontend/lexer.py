from __future__ import annotations
import logging
import re
from eqsolve.errors import UnexpectedCharacter
from eqsolve.frontend.expression import Number
from eqsolve.frontend.tokens import Operand, Operator, Tokens, op_chars

logger = logging.getLogger(__name__)

# Pattern -> token builder, None for skipped text
_token_map = {
    re.compile(r'\s+'): None,
    re.compile(r'[0-9]+'): lambda text, pos: Operand(Number(int(text)), pos),
    re.compile(r'[-+*/]'): lambda text, pos: Operator(op_chars[text], pos),
}

def tokenize(src: str, token_map=_token_map) -> Tokens:
    tokens = []
    pos = 0
    while pos < len(src):
        for pattern, build in token_map.items():
            if (m := pattern.match(src, pos)):
                break
        else:
            raise UnexpectedCharacter(src[pos], pos)
        if build:
            tokens.append(build(m[0], m.start()))
        pos = m.end()

    logger.debug("Tokenized %d characters into %d tokens", len(src), len(tokens))
    return tokens
