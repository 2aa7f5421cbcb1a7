"""A small configurable lexer, with presets for JSON, arithmetic and Brainfuck and a sample command."""

__version__ = "0.1.0"
__all__ = ["lexer", "presets", "cli"]