"""Token kinds and the Token dataclass for the formula tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Every distinct token the formula tokenizer can produce."""

    EOF = auto()
    LPAREN = auto()
    RPAREN = auto()
    OPERATOR = auto()       # single character from the operator alphabet
    NUMBER = auto()         # 42, -5, 123.45
    IDENTIFIER = auto()     # sum, x1, -x
    CELL = auto()           # A1, B2 (uppercase first letter)
    ERROR = auto()


class ErrorKind(Enum):
    """Why an ERROR token was produced."""

    UNKNOWN_CHARACTER = auto()
    MALFORMED_NUMBER = auto()


# Operator alphabet used when the caller does not configure one
DEFAULT_OPERATORS: frozenset[str] = frozenset("+-*/=<>")

# Kinds that never carry lexeme text
TEXTLESS_KINDS = frozenset({TokenKind.EOF, TokenKind.LPAREN, TokenKind.RPAREN})


@dataclass(frozen=True, slots=True)
class Token:
    """A single token produced by the tokenizer.

    ``text`` is an independent copy of the lexeme (or the error
    description for ERROR tokens) and stays valid after further calls
    to ``Tokenizer.next()``. ``position`` is the offset into the source
    where the lexeme starts.
    """

    kind: TokenKind
    text: str = ""
    position: int = 0
    error: ErrorKind | None = None

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def __repr__(self) -> str:
        if self.kind in TEXTLESS_KINDS:
            return f"Token({self.kind.name}, @{self.position})"
        return f"Token({self.kind.name}, {self.text!r}, @{self.position})"
