"""Configurable lexer that splits source text into typed tokens."""

from __future__ import annotations

import enum
import string
from dataclasses import dataclass
from pathlib import Path

_DIGITS = frozenset(string.digits)
_ALPHA = frozenset(string.ascii_letters)
_ALNUM = _ALPHA | _DIGITS
_SPACE = frozenset(" \t\n\v\f\r")


class TokenType(enum.Enum):
    """Kinds of token the lexer produces; the value is the display name."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    WHITESPACE = "whitespace"
    INTEGER = "integer"
    FLOAT = "float"
    SYMBOL = "symbol"
    STRING = "string"
    UNRECOGNIZED = "unrecognized lexeme"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    """A lexeme together with its token type."""

    lexeme: str
    type: TokenType


class Petal:
    """A lexer whose accepted token classes are switched on one by one."""

    def __init__(self, source: str) -> None:
        # Text after a NUL character is never scanned.
        self.source = source.split("\0", 1)[0]
        self.has_identifiers = False
        self.has_floats = False
        self.has_integers = False
        self.has_whitespace = False
        self.has_strings = False
        self.skips_whitespace = False
        self.skips_unrecognized = False
        self.tokens: list[Token] = []
        self._keywords: list[str] = []
        self._symbols: list[str] = []
        self._pos = 0

    @classmethod
    def from_string(cls, source: str) -> Petal:
        """Create a lexer over the given text."""
        return cls(source)

    @classmethod
    def from_file(cls, path: str | Path) -> Petal:
        """Create a lexer over the contents of a file."""
        with open(path, encoding="utf-8", newline="") as handle:
            return cls(handle.read())

    def with_keywords(self, *args: str) -> Petal:
        """Mark these words as keywords when read as identifiers."""
        self._keywords.extend(args)
        return self

    def with_symbols(self, *args: str) -> Petal:
        """Recognise these strings as symbols; the longest match wins."""
        self._symbols.extend(args)
        return self

    def with_identifiers(self) -> Petal:
        self.has_identifiers = True
        return self

    def with_whitespace(self) -> Petal:
        self.has_whitespace = True
        return self

    def with_integers(self) -> Petal:
        self.has_integers = True
        return self

    def with_floats(self) -> Petal:
        """Accept floats, which implies integers."""
        self.with_integers()
        self.has_floats = True
        return self

    def with_strings(self) -> Petal:
        self.has_strings = True
        return self

    def skip_whitespace(self) -> Petal:
        """Recognise whitespace but leave it out of the token list."""
        self.with_whitespace()
        self.skips_whitespace = True
        return self

    def skip_unrecognized(self) -> Petal:
        """Leave unrecognised characters out of the token list."""
        self.skips_unrecognized = True
        return self

    def parse(self) -> list[Token]:
        """Scan the rest of the source, appending to and returning the tokens."""
        while self._pos < len(self.source):
            token = self._next_token()
            skipped = (
                token.type is TokenType.WHITESPACE and self.skips_whitespace
            ) or (token.type is TokenType.UNRECOGNIZED and self.skips_unrecognized)
            if not skipped:
                self.tokens.append(token)
            self._pos += 1
        return self.tokens

    def inspect(self) -> None:
        """Print a numbered table of the tokens."""
        lines = ["", "  petal inspect results:", "-" * 40]
        width = len(str(len(self.tokens) - 1)) if self.tokens else 0
        for index, token in enumerate(self.tokens):
            lines.append(f"{index:<{width}} | '{token.lexeme}': {token.type.value}")
        print("\n".join(lines))

    def _next_token(self) -> Token:
        ch = self.source[self._pos]
        if ch in _ALPHA and self.has_identifiers:
            return self._read_identifier()
        if ch in _DIGITS and self.has_integers:
            return self._read_number()
        if ch in _SPACE and self.has_whitespace:
            return Token(ch, TokenType.WHITESPACE)
        if ch == '"' and self.has_strings:
            return self._read_string()
        return self._read_symbol()

    def _read_identifier(self) -> Token:
        src = self.source
        start = self._pos
        while self._pos < len(src) and src[self._pos] in _ALNUM:
            self._pos += 1
        lexeme = src[start:self._pos]
        self._pos -= 1
        kind = TokenType.KEYWORD if lexeme in self._keywords else TokenType.IDENTIFIER
        return Token(lexeme, kind)

    def _read_number(self) -> Token:
        src = self.source
        start = self._pos
        kind = TokenType.INTEGER
        while self._pos < len(src):
            ch = src[self._pos]
            if ch == "." and self.has_floats:
                kind = TokenType.FLOAT
            elif ch not in _ALNUM:
                break
            self._pos += 1
        lexeme = src[start:self._pos]
        self._pos -= 1
        return Token(lexeme, kind)

    def _read_string(self) -> Token:
        src = self.source
        quote = src[self._pos]
        self._pos += 1
        start = self._pos
        while self._pos < len(src) and src[self._pos] != quote:
            if src[self._pos] == "\\":
                self._pos += 1
            self._pos += 1
        body = src[start:self._pos]
        # A trailing backslash runs past the end and swallows the closing quote.
        closing = quote if self._pos <= len(src) else ""
        return Token(quote + body + closing, TokenType.STRING)

    def _read_symbol(self) -> Token:
        src = self.source
        best = ""
        for symbol in self._symbols:
            if len(symbol) > len(best) and src.startswith(symbol, self._pos):
                best = symbol
        if best:
            self._pos += len(best) - 1
            return Token(best, TokenType.SYMBOL)
        return Token(src[self._pos], TokenType.UNRECOGNIZED)