# src/crimson/evaluator/functions.py
import sys
import time

import click

from ..crimson_token import STRING, NUMBER, IDENT, KEYWORD, BOOLEAN_LITERALS
from ..error_reporter import get_error_reporter, NumericConversionError
from ..object import parse_int_prefix
from .utils import debug_log, strip_quotes, EVAL_SUMMARY


class FunctionEvaluatorMixin:
    """Handles call statements and defines the built-in functions."""

    def __init__(self):
        self.builtins = {}
        self._register_core_builtins()

    def execute_call_statement(self, cursor, env):
        name_token = cursor.advance()
        if not cursor.accept("("):
            return

        args = self.collect_arguments(cursor, env)
        cursor.accept(")")
        self.apply_function(name_token, args, env)
        cursor.accept(";")

    def collect_arguments(self, cursor, env):
        """Argument texts up to the closing ``)``; separators and other tokens are dropped."""
        args = []
        while not cursor.exhausted() and not cursor.check(")"):
            token = cursor.advance()
            if token.kind in (STRING, NUMBER):
                args.append(token.text)
            elif token.kind == KEYWORD and token.text in BOOLEAN_LITERALS:
                args.append(token.text)
            elif token.kind == IDENT:
                args.append(env.resolve_text(token.text))
        return args

    def apply_function(self, name_token, args, env):
        name = name_token.text
        debug_log("call", f"{name}({', '.join(args)})")

        builtin = self.builtins.get(name)
        if builtin is not None:
            EVAL_SUMMARY['builtin_calls'] += 1
            if args:
                builtin(name_token, *args)
            return

        if env.has_function(name):
            # Declared bodies are recorded but not interpreted
            click.echo(f"Executing function: {name}")
            return

        debug_log("call to unknown function ignored", name)

    def _register_core_builtins(self):
        def _crym(token, message, *rest):
            click.echo(strip_quotes(message))

        def _inp(token, prompt, *rest):
            click.echo(strip_quotes(prompt), nl=False)
            line = sys.stdin.readline()
            debug_log("inp read", repr(line.rstrip("\n")))

        def _sleep(token, seconds, *rest):
            try:
                count = parse_int_prefix(seconds)
            except NumericConversionError as exc:
                raise get_error_reporter().report_error(
                    NumericConversionError,
                    f"Sleep() expects a whole number of seconds, got '{seconds}'",
                    line=token.line,
                    column=token.column,
                    filename=self.filename,
                    suggestion="Pass an unquoted integer, e.g. Sleep(2);",
                ) from exc
            if count > 0:
                time.sleep(count)

        self.builtins = {
            "crym": _crym,
            "inp": _inp,
            "Sleep": _sleep,
        }
