# lexer.py
import logging

from .crimson_token import (
    Token, IDENT, NUMBER, STRING, KEYWORD, OPERATOR, DELIMITER, COMMENT, EOF,
    KEYWORDS, OPERATOR_CHARS, TWO_CHAR_OPERATORS, DELIMITER_CHARS,
)

logger = logging.getLogger("crimson.lexer")


class Lexer:
    """Line-oriented tokenizer.

    Every construct ends at the end of its line: there are no block comments
    and no multi-line strings. Characters that start no token are skipped.
    """

    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.tokens = []
        self.line = ""
        self.line_number = 1
        self.pos = 0

    def tokenize(self):
        self.tokens = []
        self.line_number = 1
        for line in self._split_lines(self.input):
            self.line = line
            self.pos = 0
            self._tokenize_line()
            self.line_number += 1

        self.tokens.append(Token(EOF, "", self.line_number, 0))
        logger.debug("%s: %d tokens over %d lines",
                     self.filename, len(self.tokens), self.line_number - 1)
        return self.tokens

    @staticmethod
    def _split_lines(source):
        lines = source.split("\n")
        # A trailing newline terminates the last line rather than opening a new one
        if lines and lines[-1] == "":
            lines.pop()
        return lines

    def _tokenize_line(self):
        line = self.line
        while self.pos < len(line):
            self.skip_whitespace()
            if self.pos >= len(line):
                break

            ch = line[self.pos]
            start = self.pos

            if ch == '/' and self.peek_char() == '/':
                self._emit(COMMENT, line[start:], start)
                break

            if ch == '#':
                self._emit(KEYWORD, line[start:], start)
                self.pos = len(line)
                continue

            if ch == '"':
                self._emit(STRING, self.read_string(), start)
                continue

            if self.is_digit(ch) or ch == '.':
                self._emit(NUMBER, self.read_number(), start)
                continue

            if self.is_letter(ch):
                word = self.read_identifier()
                self._emit(KEYWORD if word in KEYWORDS else IDENT, word, start)
                continue

            if ch in OPERATOR_CHARS:
                self._emit(OPERATOR, self.read_operator(), start)
                continue

            if ch in DELIMITER_CHARS:
                self._emit(DELIMITER, ch, start)
                self.pos += 1
                continue

            logger.debug("%s:%d:%d: skipping character %r",
                         self.filename, self.line_number, start, ch)
            self.pos += 1

    def _emit(self, kind, text, column):
        self.tokens.append(Token(kind, text, self.line_number, column))

    def peek_char(self):
        if self.pos + 1 >= len(self.line):
            return ""
        return self.line[self.pos + 1]

    def skip_whitespace(self):
        while self.pos < len(self.line) and self.line[self.pos].isspace():
            self.pos += 1

    def read_string(self):
        """Read a quoted string, quotes included. Escapes are skipped, not decoded."""
        line = self.line
        start = self.pos
        self.pos += 1
        while self.pos < len(line) and line[self.pos] != '"':
            if line[self.pos] == '\\' and self.pos + 1 < len(line):
                self.pos += 2
            else:
                self.pos += 1
        if self.pos < len(line):
            self.pos += 1
        return line[start:self.pos]

    def read_number(self):
        start = self.pos
        while self.pos < len(self.line) and (self.is_digit(self.line[self.pos]) or self.line[self.pos] == '.'):
            self.pos += 1
        return self.line[start:self.pos]

    def read_identifier(self):
        start = self.pos
        while self.pos < len(self.line) and (self.is_letter(self.line[self.pos]) or self.is_digit(self.line[self.pos])):
            self.pos += 1
        return self.line[start:self.pos]

    def read_operator(self):
        pair = self.line[self.pos:self.pos + 2]
        if pair in TWO_CHAR_OPERATORS:
            self.pos += 2
            return pair
        self.pos += 1
        return pair[0]

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'


def tokenize(source_code, filename="<stdin>"):
    return Lexer(source_code, filename).tokenize()
