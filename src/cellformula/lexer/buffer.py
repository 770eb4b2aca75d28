"""Growable text buffer holding the lexeme of the token being built."""

from __future__ import annotations


class LexemeBuffer:
    """Clearable, appendable text accumulator.

    The tokenizer owns one buffer and clears it at the start of every
    ``next()`` call; tokens receive a copy via ``as_text()``.
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def clear(self) -> None:
        self._parts.clear()

    def append(self, text: str) -> LexemeBuffer:
        """Append a single character or a longer run of text."""
        if text:
            self._parts.append(text)
        return self

    def as_text(self) -> str:
        return "".join(self._parts)

    def __len__(self) -> int:
        return sum(len(part) for part in self._parts)

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"LexemeBuffer({self.as_text()!r})"
