"""Tests for the lexer."""

import pytest

from sdbexpr.config import EvaluatorConfig
from sdbexpr.errors import CapacityError, LexError
from sdbexpr.token import TokenType
from sdbexpr.tokenize import dump_tokens, tokenize


def kinds(tokens):
    return [token.kind for token in tokens]


def test_tokenize_expression():
    tokens = tokenize("1 + 2 * (3 - 4)")
    assert kinds(tokens) == [
        TokenType.Integer,
        TokenType.Plus,
        TokenType.Integer,
        TokenType.Mul,
        TokenType.LeftParen,
        TokenType.Integer,
        TokenType.Minus,
        TokenType.Integer,
        TokenType.RightParen,
    ]
    assert [token.location for token in tokens] == [0, 2, 4, 6, 8, 9, 11, 13, 14]


def test_integer_text_is_kept_verbatim():
    tokens = tokenize("007 == 7")
    assert tokens[0].expression == "007"
    assert tokens[1].kind == TokenType.Equal
    assert tokens[2].expression == "7"


def test_whitespace_only_gives_no_tokens():
    assert tokenize("    ") == []
    assert tokenize("") == []


def test_no_rule_matched():
    with pytest.raises(LexError) as excinfo:
        tokenize("1 $ 2")
    assert excinfo.value.position == 2
    assert excinfo.value.diagnostic() == "1 $ 2\n  ^ no match at position 2\n"


def test_tab_is_not_whitespace():
    with pytest.raises(LexError) as excinfo:
        tokenize("1\t+2")
    assert excinfo.value.position == 1


def test_single_equals_sign_is_rejected():
    with pytest.raises(LexError) as excinfo:
        tokenize("1 = 2")
    assert excinfo.value.position == 2


def test_calls_do_not_share_state():
    tokenize("1+2+3+4")
    assert kinds(tokenize("5")) == [TokenType.Integer]


def test_token_capacity():
    config = EvaluatorConfig.reference()
    assert len(tokenize("+".join(["1"] * 16), config)) == 31
    with pytest.raises(CapacityError) as excinfo:
        tokenize("+".join(["1"] * 17), config)
    assert excinfo.value.limit == 32


def test_literal_capacity():
    config = EvaluatorConfig.reference()
    assert tokenize("9" * 31, config)[0].expression == "9" * 31
    with pytest.raises(CapacityError):
        tokenize("9" * 32, config)


def test_no_capacity_by_default():
    assert len(tokenize("+".join(["1"] * 200))) == 399


def test_dump_tokens():
    tokens = tokenize(" ( 1 + 22 ) *3 == 4")
    assert dump_tokens(tokens) == "(1+22)*3==4"
    assert dump_tokens(tokens, 1, 3) == "1+22"
