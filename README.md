# petal

A small, configurable lexer. You give it a source string and switch on the
kinds of tokens you care about. You can also register keywords and symbols.
It then splits the text into a flat list of tokens.

## Installation

```
pip install .
```

## Usage

```python
from petal.lexer import Petal, TokenType

petal = Petal.from_string("int main() { return 0; }")
petal.with_identifiers()
petal.with_integers()
petal.skip_whitespace()
petal.with_keywords("int", "main", "return")
petal.with_symbols("(", ")", "{", "}", ";")

tokens = petal.parse()
for token in tokens:
    print(token.lexeme, token.type)

petal.inspect()
```

- `Petal(source)` and `Petal.from_string(source)` create a lexer over a string.
- `Petal.from_file(path)` reads the source from a UTF-8 file.
- Any text after a NUL character is never scanned.
- Every configuration method returns the lexer, so the calls can be chained:
  `Petal("1 + 2").with_integers().skip_whitespace().with_symbols("+").parse()`.
- `parse()` scans the source and appends each result to `petal.tokens`. It also
  returns that list.
- `inspect()` prints a numbered table of the tokens. Each row has the form
  `0 | 'int': keyword`.

A `Token` is a frozen dataclass with two fields, `lexeme` (a string) and `type`.
The `type` is a `TokenType`. The members of `TokenType` are `KEYWORD`,
`IDENTIFIER`, `WHITESPACE`, `INTEGER`, `FLOAT`, `SYMBOL`, `STRING` and
`UNRECOGNIZED`.

### Token classes

Each class is off until you switch it on:

- `with_identifiers()`: a word is an ASCII letter followed by ASCII letters or
  digits. A word that is a registered keyword is tagged `KEYWORD`. Any other
  word is tagged `IDENTIFIER`.
- `with_integers()`: a number starts at a digit and runs on through ASCII
  letters and digits.
- `with_floats()`: numbers may also contain `.`, and any number that contains a
  dot is tagged `FLOAT`. This method also switches on integers.
- `with_strings()`: double-quoted strings, quotes included in the lexeme. A
  backslash escapes the character after it.
- `with_whitespace()`: each whitespace character becomes its own token.
- `skip_whitespace()`: whitespace is recognised but left out of the tokens.
- `skip_unrecognized()`: characters that match nothing are left out.

`with_keywords(...)` registers keywords. `with_symbols(...)` registers symbols.
When several symbols match at the same point, the longest one is used. A
character that matches nothing becomes an `UNRECOGNIZED` token, unless you have
called `skip_unrecognized()`.

### Presets

The module `petal.presets` has three functions: `configure_json`,
`configure_math` and `configure_brainfuck`. Each one configures a lexer for
that language and returns it.

```python
from petal.lexer import Petal
from petal.presets import configure_json

petal = configure_json(Petal.from_string('{"name": "John", "age": 30}'))
petal.parse()
petal.inspect()
```

## Command line

```
petal
petal math
```

The command lexes a built-in sample and prints the token table. The optional
argument chooses the sample. It is one of `c` (a C-like snippet, the default),
`math`, `json` or `brainfuck`. The same samples can be run from Python through
the functions `c_like_example`, `math_example`, `json_example` and
`brainfuck_example` in `petal.cli`.

## What it does not do

petal only produces a flat list of tokens. It does not:

- build a syntax tree or check grammar;
- record line or column positions;
- report errors. Unknown input becomes `UNRECOGNIZED` tokens.

The command only runs the built-in samples. It does not lex files or text you
supply.