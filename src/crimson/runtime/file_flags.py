# runtime/file_flags.py
"""Inline run flags written as a comment near the top of a ``.crm`` file.

    // @crimson: debug=true
    // @crimson: {"debug": true}

Only the first 25 lines are searched. Later directives override earlier keys.
"""
import json
import logging
import re

SCAN_LINES = 25

_DIRECTIVE = re.compile(r"^\s*(?://|#)?\s*@crimson\b\s*:?\s*(?P<body>.*?)\s*$", re.IGNORECASE)
_SEPARATOR = re.compile(r"[;,]")
_WORDS = {
    "true": True, "yes": True, "on": True,
    "false": False, "no": False, "off": False,
}

logger = logging.getLogger("crimson.runtime.file_flags")


def parse_file_flags(source):
    """Collect the flags of every directive in the scan window into one dict."""
    flags = {}
    for number, line in enumerate(source.splitlines()[:SCAN_LINES], start=1):
        match = _DIRECTIVE.match(line)
        if match is None:
            continue
        body = match.group("body")
        if body.startswith("{"):
            flags.update(_json_flags(body, number))
        else:
            flags.update(_pair_flags(body))
    return flags


def _json_flags(body, number):
    try:
        parsed = json.loads(body)
    except json.JSONDecodeError as exc:
        logger.debug("line %d: ignoring malformed flag object: %s", number, exc)
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _pair_flags(body):
    pairs = (part.partition("=") for part in _SEPARATOR.split(body))
    return {key.strip(): coerce_flag(raw.strip()) for key, eq, raw in pairs if eq and key.strip()}


def coerce_flag(raw):
    """``true``/``off``-style words become bools, numerals become numbers, quotes are dropped."""
    word = _WORDS.get(raw.lower())
    if word is not None:
        return word
    for convert in (int, float):
        try:
            return convert(raw)
        except ValueError:
            continue
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "'\"":
        return raw[1:-1]
    return raw
