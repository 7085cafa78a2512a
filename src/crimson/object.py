# object.py
import re

from .error_reporter import NumericConversionError

# Leading-numeric prefixes, matching what C's strtod / stoi accept
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

# 32-bit signed range, as C stoi enforces
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

FALSY_TEXTS = frozenset({"false", "0", ""})


def parse_float_prefix(text):
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise NumericConversionError(f"Cannot convert '{text}' to a number")
    return float(match.group(0))


def parse_int_prefix(text):
    match = _INT_PREFIX.match(text)
    if match is None:
        raise NumericConversionError(f"Cannot convert '{text}' to an integer")
    value = int(match.group(0))
    if not INT_MIN <= value <= INT_MAX:
        raise NumericConversionError(f"Integer '{text}' is out of range")
    return value


class Object:
    """A runtime value. ``text`` is the raw source text it was bound from."""

    type_name = "VOID"

    def __init__(self, text=""):
        self.text = text

    def type(self):
        return self.type_name

    def inspect(self):
        return self.text

    def truthy(self):
        return self.text not in FALSY_TEXTS

    def to_number(self):
        return parse_float_prefix(self.text)

    def __eq__(self, other):
        return isinstance(other, Object) and other.type() == self.type() and other.text == self.text

    def __hash__(self):
        return hash((self.type(), self.text))

    def __repr__(self):
        return f"{type(self).__name__}({self.text!r})"


class IntValue(Object):
    type_name = "INT"

    def __init__(self, text="0"):
        super().__init__(text)
        self._number = None

    def to_number(self):
        if self._number is None:
            self._number = parse_float_prefix(self.text)
        return self._number


class FloatValue(IntValue):
    type_name = "FLOAT"

    def __init__(self, text="0.0"):
        super().__init__(text)


class BoolValue(Object):
    type_name = "BOOL"

    def __init__(self, text="false"):
        super().__init__(text)


class StringValue(Object):
    type_name = "STRING"

    def __init__(self, text=""):
        super().__init__(text)


class VoidValue(Object):
    type_name = "VOID"


TYPE_CLASSES = {
    "int": IntValue,
    "float": FloatValue,
    "bool": BoolValue,
    "string": StringValue,
    "void": VoidValue,
}


def make_value(type_keyword, text):
    return TYPE_CLASSES.get(type_keyword, VoidValue)(text)


def zero_value(type_keyword):
    """Value a declaration without an initializer binds."""
    return TYPE_CLASSES.get(type_keyword, VoidValue)()


class FunctionEntry(Object):
    type_name = "FUNCTION"

    def __init__(self, name, parameters, body, return_type="void"):
        super().__init__(name)
        self.name = name
        self.parameters = tuple(parameters)
        self.body = tuple(body)
        self.return_type = return_type

    def inspect(self):
        params = ", ".join(self.parameters)
        return f"{self.return_type} {self.name}({params}) {{ {len(self.body)} tokens }}"

    def __eq__(self, other):
        return (isinstance(other, FunctionEntry) and other.name == self.name
                and other.parameters == self.parameters and other.body == self.body)

    def __hash__(self):
        return hash((self.name, self.parameters))
