"""cellformula lexer: pull-based tokenizer for spreadsheet cell formulas."""

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
from cellformula.lexer.lexer import LexerError, Tokenizer, tokenize

__all__ = [
    "DEFAULT_OPERATORS",
    "ErrorKind",
    "LexemeBuffer",
    "LexerError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "is_alnum",
    "is_alpha",
    "is_digit",
    "is_operator",
    "is_upper_alpha",
    "is_whitespace",
    "tokenize",
]
