"""cellformula: lexical analysis for spreadsheet cell formulas."""

from cellformula.lexer import (
    DEFAULT_OPERATORS,
    ErrorKind,
    LexerError,
    Token,
    TokenKind,
    Tokenizer,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_OPERATORS",
    "ErrorKind",
    "LexerError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "tokenize",
    "__version__",
]
