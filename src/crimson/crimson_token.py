# crimson_token.py
from dataclasses import dataclass

# Token kinds
IDENT = "IDENTIFIER"
NUMBER = "NUMBER"
STRING = "STRING"
KEYWORD = "KEYWORD"
OPERATOR = "OPERATOR"
DELIMITER = "DELIMITER"
COMMENT = "COMMENT"
EOF = "EOF"

KEYWORDS = frozenset({
    "int", "float", "bool", "string", "void",
    "if", "else", "switch", "main", "include",
    "true", "false",
})

# Declaration keywords that introduce a typed variable
TYPE_KEYWORDS = frozenset({"int", "float", "bool", "string"})

# Keywords that may start the entry block
ENTRY_KEYWORDS = frozenset({"void", "int"})
ENTRY_NAME = "main"

BOOLEAN_LITERALS = frozenset({"true", "false"})

BUILTINS = frozenset({"crym", "inp", "Sleep"})

OPERATOR_CHARS = frozenset("+-*/=!<>&|")
TWO_CHAR_OPERATORS = frozenset({"==", "!=", "<=", ">=", "&&", "||"})
DELIMITER_CHARS = frozenset("(){};,")

INCLUDE_DIRECTIVE = "#include"


@dataclass(frozen=True)
class Token:
    kind: str
    text: str
    line: int = 0
    column: int = 0

    def __repr__(self):
        return f"Token({self.kind}, {self.text!r}, line={self.line}, col={self.column})"
