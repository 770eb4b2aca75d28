"""cellformula command-line entry point (debugging aid).

Usage:
    cellformula tokenize <formula> [--operators CHARS]   Display the token stream
    cellformula check <formula> [--operators CHARS]      Fail on the first lexical error
"""

from __future__ import annotations

import sys

from cellformula.lexer.lexer import LexerError, Tokenizer
from cellformula.lexer.tokens import DEFAULT_OPERATORS


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]

    if len(args) < 1:
        print(__doc__.strip())
        return 1

    command = args[0]

    if command in ("--help", "-h"):
        print(__doc__.strip())
        return 0

    if command == "--version":
        from cellformula import __version__
        print(f"cellformula {__version__}")
        return 0

    rest = args[1:]
    operators: frozenset[str] | str = DEFAULT_OPERATORS
    if "--operators" in rest:
        idx = rest.index("--operators")
        if idx + 1 >= len(rest):
            print("Error: --operators requires a value")
            return 1
        operators = rest[idx + 1]
        rest = rest[:idx] + rest[idx + 2:]

    if len(rest) != 1:
        print(f"Error: command '{command}' requires a formula argument")
        return 1

    try:
        tokenizer = Tokenizer(rest[0], operators)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if command == "tokenize":
        return _cmd_tokenize(tokenizer)
    elif command == "check":
        return _cmd_check(tokenizer)
    else:
        print(f"Error: unknown command '{command}'")
        print(__doc__.strip())
        return 1


def _cmd_tokenize(tokenizer: Tokenizer) -> int:
    """Display the token stream, including ERROR tokens and the final EOF."""
    for tok in tokenizer.tokenize():
        print(tok)
    return 0


def _cmd_check(tokenizer: Tokenizer) -> int:
    """Strict tokenization: report the first lexical error."""
    try:
        tokens = tokenizer.tokenize(strict=True)
    except LexerError as e:
        print(f"FAIL: {e}")
        return 1

    print(f"OK ({len(tokens) - 1} token(s))")
    return 0


if __name__ == "__main__":
    sys.exit(main())
