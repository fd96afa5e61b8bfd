"""Print the tokens of a calculator statement, one per line."""

import argparse

from .lexer import Lexer, LexerError


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Tokenize calculator input")
    parser.add_argument("text", help="Statement(s) to tokenize")
    args = parser.parse_args(argv)

    try:
        tokens = Lexer(args.text).scan()
    except LexerError as e:
        print(f"lexer error: {e}")
        return 1

    for t in tokens:
        print(f"{t.kind.name}\t{t.lexeme!r}\t(line {t.line}, col {t.col})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
