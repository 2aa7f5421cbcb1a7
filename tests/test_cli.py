import pytest

from petal.cli import brainfuck_example, c_like_example, json_example, main, math_example
from petal.lexer import TokenType


def test_main_default_runs_c_example(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "petal inspect results:" in out
    assert "| 'return': keyword" in out
    assert "| '0': integer" in out


def test_main_math(capsys):
    assert main(["math"]) == 0
    assert "| '2.2': float" in capsys.readouterr().out


def test_main_rejects_unknown_example():
    with pytest.raises(SystemExit):
        main(["cobol"])


def test_c_like_example_tokens(capsys):
    petal = c_like_example()
    assert [t.lexeme for t in petal.tokens] == [
        "int", "main", "(", ")", "{", "return", "0", ";", "}",
    ]
    assert capsys.readouterr().out.count("\n") == 3 + len(petal.tokens)


def test_brainfuck_example(capsys):
    petal = brainfuck_example()
    assert "".join(t.lexeme for t in petal.tokens) == "--+[<>.,]"
    assert "| '[': symbol" in capsys.readouterr().out


def test_math_example(capsys):
    petal = math_example()
    assert [t.type for t in petal.tokens].count(TokenType.FLOAT) == 2
    assert "| '^': symbol" in capsys.readouterr().out


def test_json_example(capsys):
    petal = json_example()
    assert petal.tokens[-2].lexeme == "false"
    assert petal.tokens[-2].type is TokenType.KEYWORD
    assert "| '\"John\"': string" in capsys.readouterr().out