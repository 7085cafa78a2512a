# src/crimson/evaluator/core.py
from ..crimson_token import EOF
from ..cursor import TokenCursor
from ..entry import resolve_entry
from ..environment import Environment
from .utils import debug_log, reset_summary, EVAL_SUMMARY
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Executor(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    """Parses and runs a token sequence in a single pass, without a syntax tree."""

    def __init__(self, filename="<stdin>"):
        FunctionEvaluatorMixin.__init__(self)
        self.filename = filename

    def execute(self, tokens, env=None, bounds=None):
        """Run the entry block of ``tokens`` and return the resulting environment.

        Structural errors are raised before any statement runs; runtime
        faults propagate from the statement that caused them.
        """
        env = env if env is not None else Environment()
        bounds = bounds or resolve_entry(tokens, self.filename)
        reset_summary()

        cursor = TokenCursor(tokens)
        cursor.reset(bounds.start)
        while (not cursor.exhausted() and cursor.position <= bounds.end
               and cursor.current.kind != EOF):
            self.execute_statement(cursor, env)

        debug_log("execution finished", dict(EVAL_SUMMARY))
        return env


def execute(tokens, filename="<stdin>", env=None):
    return Executor(filename).execute(tokens, env)
