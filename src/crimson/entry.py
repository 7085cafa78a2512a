# entry.py
"""
Entry block resolution.

Only the body of ``void main()`` / ``int main()`` is ever executed. Before
anything runs, the token sequence is checked so that:

1. an entry block exists,
2. its braces balance,
3. no built-in is called outside it.
"""
import logging
from dataclasses import dataclass

from .crimson_token import KEYWORD, IDENT, ENTRY_KEYWORDS, ENTRY_NAME, BUILTINS
from .error_reporter import (
    get_error_reporter, NoEntryError, UnclosedEntryError, BuiltinOutsideEntryError,
)

logger = logging.getLogger("crimson.entry")


@dataclass(frozen=True)
class EntryBounds:
    start: int
    end: int

    def __contains__(self, index):
        return self.start <= index <= self.end


def find_entry_start(tokens, filename="<stdin>"):
    for i, token in enumerate(tokens[:-1]):
        if token.kind == KEYWORD and token.text in ENTRY_KEYWORDS and tokens[i + 1].text == ENTRY_NAME:
            return i
    raise get_error_reporter().report_error(
        NoEntryError,
        "No main function found. Code must be inside void main() or int main() to execute.",
        filename=filename,
        suggestion="Wrap your program in: void main() { ... }",
    )


def find_entry_end(tokens, start, filename="<stdin>"):
    depth = 0
    in_entry = False
    for i in range(start, len(tokens)):
        text = tokens[i].text
        if not in_entry:
            if text == ENTRY_NAME and i + 1 < len(tokens) and tokens[i + 1].text == "(":
                in_entry = True
            continue
        if text == "{":
            depth += 1
        elif text == "}":
            depth -= 1
            if depth == 0:
                return i

    head = tokens[start]
    raise get_error_reporter().report_error(
        UnclosedEntryError,
        "Main function not properly closed with }",
        line=head.line,
        column=head.column,
        filename=filename,
        suggestion="Add the missing closing brace '}'.",
    )


def check_builtins_inside(tokens, bounds, filename="<stdin>"):
    for i, token in enumerate(tokens):
        if i in bounds:
            continue
        if token.kind == IDENT and token.text in BUILTINS:
            raise get_error_reporter().report_error(
                BuiltinOutsideEntryError,
                f"Line {token.line}: Code outside main function is not allowed. "
                "All executable code must be inside main().",
                line=token.line,
                column=token.column,
                filename=filename,
                suggestion=f"Move the call to '{token.text}' into main().",
            )


def resolve_entry(tokens, filename="<stdin>"):
    """Locate and validate the entry block, returning its token bounds."""
    start = find_entry_start(tokens, filename)
    end = find_entry_end(tokens, start, filename)
    bounds = EntryBounds(start, end)
    check_builtins_inside(tokens, bounds, filename)
    logger.debug("entry block spans tokens %d..%d (lines %d-%d)",
                 start, end, tokens[start].line, tokens[end].line)
    return bounds
