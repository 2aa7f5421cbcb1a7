"""Ready-made lexer configurations for a few small languages."""

from __future__ import annotations

from petal.lexer import Petal


def configure_json(petal: Petal) -> Petal:
    """Set up the lexer for JSON text."""
    petal.with_identifiers()
    petal.with_strings()
    petal.with_floats()
    petal.with_whitespace()
    petal.with_symbols("{", "}", ",", "[", "]", ":")
    petal.with_keywords("true", "false", "null")
    return petal


def configure_brainfuck(petal: Petal) -> Petal:
    """Set up the lexer for Brainfuck, dropping everything else."""
    petal.skip_whitespace()
    petal.skip_unrecognized()
    petal.with_symbols("+", "-", "<", ">", ".", ",", "[", "]")
    return petal


def configure_math(petal: Petal) -> Petal:
    """Set up the lexer for arithmetic expressions."""
    petal.with_floats()
    petal.skip_whitespace()
    petal.with_symbols("+", "-", "*", "/", "%", "^", "(", ")")
    return petal