# cursor.py
from .crimson_token import Token, EOF


class TokenCursor:
    """Read position over a token sequence.

    One cursor is shared by every statement handler of a run and passed to
    each of them explicitly. Reading past the end yields the EOF token.
    """

    def __init__(self, tokens, position=0):
        self.tokens = tokens
        self.position = position
        self._eof = tokens[-1] if tokens and tokens[-1].kind == EOF else Token(EOF, "")

    def exhausted(self):
        return self.position >= len(self.tokens)

    @property
    def current(self):
        if self.position >= len(self.tokens):
            return self._eof
        return self.tokens[self.position]

    def advance(self):
        token = self.current
        self.position += 1
        return token

    def check(self, text, kind=None):
        if self.exhausted():
            return False
        token = self.tokens[self.position]
        return token.text == text and (kind is None or token.kind == kind)

    def check_kind(self, kind):
        return not self.exhausted() and self.tokens[self.position].kind == kind

    def accept(self, text):
        """Consume the current token if its text is ``text``."""
        if self.check(text):
            self.position += 1
            return True
        return False

    def reset(self, position):
        self.position = position

    def __repr__(self):
        return f"TokenCursor(position={self.position}, current={self.current!r})"
