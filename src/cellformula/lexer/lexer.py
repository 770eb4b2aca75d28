"""Formula tokenizer: hand-written single-pass lexer for cell formulas.

Design decisions:
- Pull model: the parser calls ``next()`` and gets exactly one token back.
- ``next()`` never raises. Bad input becomes an ERROR token and the cursor
  always moves forward by at least one character.
- The operator alphabet is injected at construction, not hard-coded.
- ``-`` followed by a digit signs a number; any other ``-`` starts an
  identifier, even when ``-`` is in the operator alphabet.
- A CELL is any run starting with an uppercase letter; the address shape
  (letters then digits) is left to the parser.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from cellformula.lexer.buffer import LexemeBuffer
from cellformula.lexer.chars import (
    is_alnum,
    is_alpha,
    is_digit,
    is_operator,
    is_upper_alpha,
    is_whitespace,
)
from cellformula.lexer.tokens import DEFAULT_OPERATORS, ErrorKind, Token, TokenKind


class LexerError(Exception):
    """Raised by strict tokenization on the first ERROR token."""

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        kind: ErrorKind | None = None,
        source_name: str = "<formula>",
    ):
        self.message = message
        self.line = line
        self.column = column
        self.kind = kind
        self.source_name = source_name
        super().__init__(f"{source_name}:{line}:{column}: {message}")


class Tokenizer:
    """Tokenizes one formula string into a stream of `Token` objects.

    Usage::

        tokenizer = Tokenizer("(+ A1 2.5)")
        while (token := tokenizer.next()).kind is not TokenKind.EOF:
            ...

    An instance is not restartable; tokenize a new string with a new
    instance. Instances share no state and are not safe for concurrent
    use by several callers.
    """

    def __init__(
        self,
        source: str,
        operators: Iterable[str] = DEFAULT_OPERATORS,
        source_name: str = "<formula>",
    ) -> None:
        self.source = str(source)
        self.operators = self._check_operators(operators)
        self.source_name = source_name
        self.pos = 0
        self._lexeme = LexemeBuffer()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next(self) -> Token:
        """Consume and return the next token.

        Once EOF has been returned, every further call returns EOF again.
        """
        self._lexeme.clear()
        self._skip_whitespace()

        if self.at_end():
            return Token(TokenKind.EOF, position=self.pos)

        start = self.pos
        ch = self._peek()

        if is_digit(ch):
            return self._scan_number(start)

        if ch == "-":
            if is_digit(self._peek_ahead(1)):
                self._lexeme.append(self._advance())
                return self._scan_number(start)
            return self._scan_identifier(start)

        if ch == "(":
            self._advance()
            return Token(TokenKind.LPAREN, position=start)

        if ch == ")":
            self._advance()
            return Token(TokenKind.RPAREN, position=start)

        if is_operator(ch, self.operators) and self._operator_boundary(self._peek_ahead(1)):
            self._lexeme.append(self._advance())
            return self._make_token(TokenKind.OPERATOR, start)

        if is_alpha(ch):
            return self._scan_identifier(start)

        self._advance()
        self._lexeme.append(f"unknown character: {ch}")
        return self._make_token(TokenKind.ERROR, start, ErrorKind.UNKNOWN_CHARACTER)

    def at_end(self) -> bool:
        """True once the cursor has reached the end of the input."""
        return self.pos >= len(self.source)

    def tokenize(self, strict: bool = False) -> list[Token]:
        """Drain the tokenizer and return every token, ending with EOF.

        With ``strict`` the first ERROR token is raised as `LexerError`.
        """
        tokens: list[Token] = []
        while True:
            token = self.next()
            if strict and token.is_error:
                raise self.error_for(token)
            tokens.append(token)
            if token.kind is TokenKind.EOF:
                return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before EOF."""
        while True:
            token = self.next()
            if token.kind is TokenKind.EOF:
                return
            yield token

    def location(self, position: int) -> tuple[int, int]:
        """Return the 1-based (line, column) of a source offset."""
        position = max(0, min(position, len(self.source)))
        line = self.source.count("\n", 0, position) + 1
        line_start = self.source.rfind("\n", 0, position) + 1
        return line, position - line_start + 1

    def error_for(self, token: Token) -> LexerError:
        """Build a `LexerError` describing an ERROR token."""
        line, column = self.location(token.position)
        return LexerError(token.text, line, column, token.error, self.source_name)

    # ------------------------------------------------------------------
    # Token scanning
    # ------------------------------------------------------------------

    def _scan_number(self, start: int) -> Token:
        """Scan digits with an optional fraction; a sign is already buffered."""
        self._append_digits()

        if not self.at_end() and self._peek() == ".":
            if is_digit(self._peek_ahead(1)):
                self._lexeme.append(self._advance())
                self._append_digits()
            else:
                number = self._lexeme.as_text()
                self._advance()  # consume the dot
                following = self._peek_ahead(0)
                got = repr(following) if following is not None else "end of input"
                self._lexeme.clear()
                self._lexeme.append(
                    f"malformed number {number}.: expected digit after '.' but got {got}"
                )
                return self._make_token(TokenKind.ERROR, start, ErrorKind.MALFORMED_NUMBER)

        return self._make_token(TokenKind.NUMBER, start)

    def _scan_identifier(self, start: int) -> Token:
        """Scan an identifier or cell reference; the first character fixes the kind."""
        kind = TokenKind.CELL if is_upper_alpha(self._peek()) else TokenKind.IDENTIFIER
        self._lexeme.append(self._advance())

        while not self.at_end() and is_alnum(self._peek()):
            self._lexeme.append(self._advance())

        return self._make_token(kind, start)

    def _append_digits(self) -> None:
        while not self.at_end() and is_digit(self._peek()):
            self._lexeme.append(self._advance())

    def _operator_boundary(self, ch: str | None) -> bool:
        """An operator must be followed by whitespace, a letter, a digit or end of input."""
        return ch is None or is_whitespace(ch) or is_alpha(ch) or is_digit(ch)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _peek(self) -> str:
        """Return the current character without consuming it."""
        return self.source[self.pos]

    def _peek_ahead(self, offset: int) -> str | None:
        """Return a character at an offset ahead, or None if past end."""
        idx = self.pos + offset
        if idx >= len(self.source):
            return None
        return self.source[idx]

    def _advance(self) -> str:
        """Consume and return the current character."""
        ch = self.source[self.pos]
        self.pos += 1
        return ch

    def _skip_whitespace(self) -> None:
        while not self.at_end() and is_whitespace(self._peek()):
            self._advance()

    def _make_token(self, kind: TokenKind, start: int, error: ErrorKind | None = None) -> Token:
        return Token(kind, self._lexeme.as_text(), start, error)

    @staticmethod
    def _check_operators(operators: Iterable[str]) -> frozenset[str]:
        alphabet = frozenset(operators)
        for op in alphabet:
            if not isinstance(op, str) or len(op) != 1:
                raise ValueError(f"Operators must be single characters, got {op!r}")
            if op in "()" or is_whitespace(op) or is_alnum(op):
                raise ValueError(f"Character {op!r} cannot be used as an operator")
        return alphabet


def tokenize(
    source: str,
    operators: Iterable[str] = DEFAULT_OPERATORS,
    strict: bool = False,
) -> list[Token]:
    """Tokenize a whole formula string, ending with an EOF token."""
    return Tokenizer(source, operators).tokenize(strict=strict)
