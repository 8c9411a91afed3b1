"""Evaluation settings."""
from __future__ import annotations
import logging
from eqsolve.errors import ConfigError

logger = logging.getLogger(__name__)

overflow_policies = ('error', 'wrap', 'saturate', 'unbounded')

# Integer domain used by the evaluator
EVAL_CONFIG = {
    "int_bits": 32,  # signed width, ignored when overflow is "unbounded"
    "overflow": "error",  # error | wrap | saturate | unbounded
}

def validate_config(config: dict) -> dict:
    """Check a config dict, raising ConfigError on the first bad setting."""
    unknown = set(config) - set(EVAL_CONFIG)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
    bits = config.get("int_bits")
    if isinstance(bits, bool) or not isinstance(bits, int) or bits < 1:
        raise ConfigError(f"int_bits must be a positive integer, got {bits!r}")
    if config.get("overflow") not in overflow_policies:
        raise ConfigError(f"Unknown overflow policy {config.get('overflow')!r}, "
                          f"expected one of {', '.join(overflow_policies)}")
    logger.debug("Configuration validated: %s", config)
    return config

def merge_config(overrides: dict|None = None) -> dict:
    config = dict(EVAL_CONFIG)
    config.update(overrides or {})
    return validate_config(config)
