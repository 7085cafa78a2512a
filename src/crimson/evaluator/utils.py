# src/crimson/evaluator/utils.py
import logging

from ..config import config
from ..object import VoidValue

logger = logging.getLogger("crimson.evaluator")

# Summary counters for lightweight summary logging
EVAL_SUMMARY = {
    'statements_executed': 0,
    'blocks_executed': 0,
    'blocks_skipped': 0,
    'builtin_calls': 0,
}

EMPTY = VoidValue("")


def debug_log(message, data=None, level='debug'):
    """Conditional debug logging that respects the interpreter config."""
    if not config.should_log(level):
        return
    if data is not None:
        logger.debug("%s: %s", message, data)
    else:
        logger.debug("%s", message)


def reset_summary():
    for key in EVAL_SUMMARY:
        EVAL_SUMMARY[key] = 0


def strip_quotes(text):
    """Remove one pair of surrounding double quotes, if present."""
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text
