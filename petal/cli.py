"""Command that lexes a few sample inputs and prints the results."""

from __future__ import annotations

import argparse

from petal.lexer import Petal
from petal.presets import configure_brainfuck, configure_json, configure_math


def _run(petal: Petal) -> Petal:
    petal.parse()
    petal.inspect()
    return petal


def brainfuck_example() -> Petal:
    """Lex a short Brainfuck program and print its tokens."""
    return _run(configure_brainfuck(Petal("--+[<>.,]")))


def math_example() -> Petal:
    """Lex an arithmetic expression and print its tokens."""
    return _run(configure_math(Petal("2 + 2.2 * 4^2 / 1.5")))


def c_like_example() -> Petal:
    """Lex a tiny C-like function and print its tokens."""
    petal = Petal("int main() { return 0; }")
    petal.with_identifiers()
    petal.with_integers()
    petal.skip_whitespace()
    petal.with_keywords("int", "main", "return")
    petal.with_symbols("(", ")", "{", "}", ";")
    return _run(petal)


def json_example() -> Petal:
    """Lex a small JSON object and print its tokens."""
    return _run(
        configure_json(Petal('{"name": "John", "age": 30, "isStudent": false}'))
    )


_EXAMPLES = {
    "brainfuck": brainfuck_example,
    "math": math_example,
    "c": c_like_example,
    "json": json_example,
}


def main(argv: list[str] | None = None) -> int:
    """Run one example, the C-like one by default."""
    parser = argparse.ArgumentParser(prog="petal", description=__doc__)
    parser.add_argument("example", nargs="?", default="c", choices=sorted(_EXAMPLES))
    args = parser.parse_args(argv)
    _EXAMPLES[args.example]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())