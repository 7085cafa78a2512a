# src/crimson/evaluator/expressions.py
from ..crimson_token import STRING, NUMBER, IDENT, KEYWORD, OPERATOR, BOOLEAN_LITERALS
from ..error_reporter import get_error_reporter, NumericConversionError
from ..object import (
    Object, IntValue, FloatValue, BoolValue, StringValue, FALSY_TEXTS, parse_float_prefix,
)
from .utils import debug_log, EMPTY

_ORDERING_OPS = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
}


def _text(value):
    return value.text if isinstance(value, Object) else value


def _number(value):
    if isinstance(value, Object):
        return value.to_number()
    return parse_float_prefix(value)


def is_truthy(value):
    """``"true"`` is true; ``"false"``, ``"0"`` and ``""`` are false; anything else is true."""
    if isinstance(value, Object):
        return value.truthy()
    return value not in FALSY_TEXTS


class ExpressionEvaluatorMixin:
    """Single-operand expressions and binary conditions."""

    def eval_expression(self, cursor, env):
        """Consume one operand token and return its value.

        Anything that is not an operand is left in place and yields an empty
        value.
        """
        if cursor.exhausted():
            return EMPTY
        token = cursor.current

        if token.kind == STRING:
            cursor.advance()
            return StringValue(token.text)
        if token.kind == NUMBER:
            cursor.advance()
            return FloatValue(token.text) if "." in token.text else IntValue(token.text)
        if token.kind == KEYWORD and token.text in BOOLEAN_LITERALS:
            cursor.advance()
            return BoolValue(token.text)
        if token.kind == IDENT:
            cursor.advance()
            value = env.get(token.text)
            if value is None:
                debug_log("unbound identifier used as literal", token.text)
                return StringValue(token.text)
            return value

        return EMPTY

    def eval_condition(self, cursor, env):
        if cursor.exhausted():
            return False

        left = self.eval_expression(cursor, env)
        if cursor.exhausted():
            return False

        if not cursor.check_kind(OPERATOR):
            return is_truthy(left)

        op_token = cursor.advance()
        right = self.eval_expression(cursor, env)
        return self.eval_comparison(left, op_token.text, right, op_token)

    def eval_comparison(self, left, op, right, token=None):
        if op == "==":
            return _text(left) == _text(right)
        if op == "!=":
            return _text(left) != _text(right)

        compare = _ORDERING_OPS.get(op)
        if compare is None:
            debug_log("unsupported comparison operator", op)
            return False

        try:
            return compare(_number(left), _number(right))
        except NumericConversionError as exc:
            raise get_error_reporter().report_error(
                NumericConversionError,
                f"{exc.message} in comparison '{_text(left)} {op} {_text(right)}'",
                line=token.line if token else None,
                column=token.column if token else None,
                filename=self.filename,
                suggestion="Ordering comparisons (<, >, <=, >=) need numeric operands.",
            ) from exc
