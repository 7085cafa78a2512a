# src/crimson/evaluator/statements.py
import re

import click

from ..crimson_token import (
    IDENT, KEYWORD, COMMENT, DELIMITER, TYPE_KEYWORDS, INCLUDE_DIRECTIVE,
)
from ..object import FunctionEntry, make_value, zero_value
from .utils import debug_log, EVAL_SUMMARY

_BRACKETED_NAME = re.compile(r"<([^>]*)>")


class StatementEvaluatorMixin:
    """Statement dispatch, declarations, conditionals and block scanning.

    Every handler starts with the cursor on the statement's first token and
    leaves it on the first token after the statement.
    """

    def execute_statement(self, cursor, env):
        token = cursor.current
        EVAL_SUMMARY['statements_executed'] += 1

        if token.kind == COMMENT:
            cursor.advance()
        elif token.kind == KEYWORD and token.text.startswith(INCLUDE_DIRECTIVE):
            self.execute_include(cursor, env)
        elif token.kind == KEYWORD and token.text in TYPE_KEYWORDS:
            self.execute_declaration(cursor, env)
        elif token.kind == KEYWORD and token.text == "void":
            self.execute_function_declaration(cursor, env)
        elif token.kind == KEYWORD and token.text == "if":
            self.execute_if(cursor, env)
        elif token.kind == IDENT:
            self.execute_call_statement(cursor, env)
        else:
            cursor.advance()

    # ---- Imports ------------------------------------------------------------------

    def execute_include(self, cursor, env):
        directive = cursor.advance()
        match = _BRACKETED_NAME.search(directive.text)
        if match:
            library = match.group(1).strip()
        elif cursor.check("<"):
            cursor.advance()
            parts = []
            while not cursor.exhausted() and not cursor.check(">") and not cursor.check_kind(DELIMITER):
                parts.append(cursor.advance().text)
            cursor.accept(">")
            library = "".join(parts)
        else:
            debug_log("include without a library name", directive.text)
            return
        click.echo(f"Including library: {library}")

    # ---- Declarations -------------------------------------------------------------

    def execute_declaration(self, cursor, env):
        type_token = cursor.advance()
        if not cursor.check_kind(IDENT):
            debug_log(f"line {type_token.line}: '{type_token.text}' not followed by a name",
                      cursor.current.text)
            return

        name = cursor.advance().text
        if cursor.accept("="):
            value = make_value(type_token.text, self.eval_expression(cursor, env).text)
        else:
            value = zero_value(type_token.text)
        env.set(name, value)
        debug_log("declared", f"{name}: {value.type()} = {value.inspect()!r}")

        cursor.accept(";")

    def execute_function_declaration(self, cursor, env):
        cursor.advance()
        if not cursor.check_kind(IDENT):
            return
        name = cursor.advance().text

        if not cursor.accept("("):
            return
        parameters = []
        while not cursor.exhausted() and not cursor.check(")"):
            token = cursor.advance()
            if token.kind == IDENT:
                parameters.append(token.text)
        cursor.accept(")")

        if not cursor.accept("{"):
            debug_log("function declared without a body", name)
            return
        body = []
        depth = 1
        while not cursor.exhausted():
            token = cursor.current
            if token.text == "{":
                depth += 1
            elif token.text == "}":
                depth -= 1
                if depth == 0:
                    break
            body.append(token)
            cursor.advance()
        cursor.accept("}")

        entry = env.define_function(FunctionEntry(name, parameters, body))
        debug_log("declared function", entry.inspect())

    # ---- Conditionals -------------------------------------------------------------

    def _enter_branch(self, cursor, env, run):
        """Execute or skip the block after ``{``; returns whether it ran."""
        if run:
            self.execute_block(cursor, env)
        else:
            self.skip_block(cursor)
        return run

    def execute_if(self, cursor, env):
        cursor.advance()
        if not cursor.accept("("):
            return
        condition = self.eval_condition(cursor, env)
        if not cursor.accept(")") or not cursor.accept("{"):
            return

        claimed = self._enter_branch(cursor, env, condition)

        while cursor.check("else", KEYWORD):
            cursor.advance()
            if cursor.check("if"):
                cursor.advance()
                if not cursor.accept("("):
                    continue
                condition = self.eval_condition(cursor, env)
                if cursor.accept(")") and cursor.accept("{"):
                    if self._enter_branch(cursor, env, not claimed and condition):
                        claimed = True
            elif cursor.accept("{"):
                self._enter_branch(cursor, env, not claimed)
                break

    # ---- Block scanning -----------------------------------------------------------

    def execute_block(self, cursor, env):
        """Run statements up to the ``}`` matching an already consumed ``{``."""
        EVAL_SUMMARY['blocks_executed'] += 1
        depth = 1
        while not cursor.exhausted():
            text = cursor.current.text
            if text == "{":
                depth += 1
            elif text == "}":
                depth -= 1
                if depth == 0:
                    break
            self.execute_statement(cursor, env)
        cursor.accept("}")

    def skip_block(self, cursor):
        EVAL_SUMMARY['blocks_skipped'] += 1
        depth = 1
        while not cursor.exhausted() and depth > 0:
            text = cursor.advance().text
            if text == "{":
                depth += 1
            elif text == "}":
                depth -= 1
