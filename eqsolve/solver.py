from __future__ import annotations
import logging
from eqsolve.config import merge_config
from eqsolve.backend.evaluator import evaluate
from eqsolve.frontend.parser import parse

logger = logging.getLogger(__name__)

def solve(src: str, config: dict|None = None) -> int:
    """
    Evaluates an arithmetic expression such as `2 - 2*3 + 5`.

    `config` overrides keys of `eqsolve.config.EVAL_CONFIG`. Errors from the
    tokenizer, the reducer and the evaluator propagate unchanged; they all
    derive from `eqsolve.errors.EqSolveError`.
    """
    config = merge_config(config)
    logger.debug("Solving %r", src)
    tree = parse(src)
    result = evaluate(tree, config)
    logger.debug("%s = %d", tree, result)
    return result
