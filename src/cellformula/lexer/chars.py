"""Character classifiers used by the formula tokenizer.

Every predicate is total: anything that is not a single-character string
(``None`` for "past the end of input", ``""``, longer strings, non-strings)
classifies as ``False``. Only ASCII letters and digits are recognised.
"""

from __future__ import annotations

from collections.abc import Container

WHITESPACE = frozenset(" \t\n\r")


def _is_char(ch: object) -> bool:
    return isinstance(ch, str) and len(ch) == 1


def is_digit(ch: object) -> bool:
    return _is_char(ch) and "0" <= ch <= "9"


def is_alpha(ch: object) -> bool:
    return _is_char(ch) and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_upper_alpha(ch: object) -> bool:
    return _is_char(ch) and "A" <= ch <= "Z"


def is_alnum(ch: object) -> bool:
    """Identifier continuation: an ASCII letter or digit."""
    return is_alpha(ch) or is_digit(ch)


def is_whitespace(ch: object) -> bool:
    return _is_char(ch) and ch in WHITESPACE


def is_operator(ch: object, alphabet: Container[str]) -> bool:
    """Return True if *ch* belongs to the configured operator alphabet."""
    return _is_char(ch) and ch in alphabet
