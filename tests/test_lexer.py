import pytest

from rpncalc.lexer import tokenize, format_tokens, Token, Number, Operator, LPAREN, RPAREN


def test_empty():
    assert tokenize("") == []


def test_simple():
    tokens = tokenize("2 + 2")

    assert tokens == [Number(2), Operator('+'), Number(2)]


def test_no_spaces():
    tokens = tokenize("(1.5*3)^2")

    assert tokens == [
        LPAREN, Number(1.5), Operator('*'), Number(3), RPAREN, Operator('^'), Number(2),
    ]


def test_all_operators():
    tokens = tokenize("+-*/^")

    assert [t.value for t in tokens] == ['+', '-', '*', '/', '^']
    assert all(t.type == 'operator' for t in tokens)


def test_whitespace():
    assert tokenize(" \t12\t ") == [Number(12)]


def test_newline_is_not_whitespace(capsys):
    # only space and tab are skipped, callers strip line endings
    tokens = tokenize("12\r\n")

    assert tokens == [Number(12)]
    assert capsys.readouterr().err == "Invalid character: \r\nInvalid character: \n\n"


def test_decimal_forms():
    assert tokenize(".5") == [Number(0.5)]
    assert tokenize("3.") == [Number(3.0)]
    assert tokenize("007") == [Number(7)]


def test_invalid_number(capsys):
    tokens = tokenize("1.2.3 + 4")

    assert tokens == [Operator('+'), Number(4)]
    assert capsys.readouterr().err == "Invalid number: 1.2.3\n"


def test_lone_dot(capsys):
    assert tokenize(".") == []
    assert "Invalid number: ." in capsys.readouterr().err


def test_number_overflow(capsys):
    assert tokenize("9" * 400) == []
    assert "Invalid number" in capsys.readouterr().err


def test_invalid_character(capsys):
    tokens = tokenize("2 $ 3")

    assert tokens == [Number(2), Number(3)]
    assert capsys.readouterr().err == "Invalid character: $\n"


def test_letters_are_skipped(capsys):
    tokens = tokenize("2x+1")

    assert tokens == [Number(2), Operator('+'), Number(1)]
    assert "Invalid character: x" in capsys.readouterr().err


def test_token_equality():
    assert Token('number', 2.0) == Number(2)
    assert Number(2) != Number(3)
    assert Operator('+') != Operator('-')
    assert LPAREN != RPAREN
    assert hash(Number(1)) == hash(Token('number', 1.0))


def test_token_is_immutable():
    t = Number(1)

    with pytest.raises(AttributeError):
        t.value = 2.0


def test_repr():
    assert repr(Number(2)) == "Token('number', 2.0)"
    assert repr(Operator('^')) == "Token('operator', '^')"
    assert repr(LPAREN) == "Token('(')"


def test_format_tokens():
    tokens = tokenize("(2 + 0.25) * 3")

    assert format_tokens(tokens) == "( 2.0 + 0.25 ) * 3.0"


@pytest.mark.parametrize("code", [
    "2 + 2",
    "(1 + 2) * 3 / 4 ^ 5",
    "0.1 * 100000000000000000000000",
    "0.0000001 - .5",
    "((((7))))",
])
def test_format_roundtrip(code):
    tokens = tokenize(code)

    assert tokenize(format_tokens(tokens)) == tokens
