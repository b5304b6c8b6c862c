"""
Tests for the tokenizer shared by indexing and search
"""
import pytest

from DocSeeker.preprocessing.tokenizer import ASCII_WHITESPACE, Lexer, tokenize


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.0", ["1.0"]),
        ("glClear", ["GLCLEAR"]),
        ("hello world", ["HELLO", "WORLD"]),
        ("(glClear)", ["(", "GLCLEAR", ")"]),
        ("a+b", ["A", "+", "B"]),
        ("x1 1x", ["X1", "1", "X"]),
        ("v1.2.3", ["V1", ".", "2.3"]),
        ("3,4.", ["3,4."]),
        ("GL_COLOR_BUFFER_BIT", ["GL", "_", "COLOR", "_", "BUFFER", "_", "BIT"]),
        ("straße", ["STRAßE"]),
        ("\u00a0", ["\u00a0"]),
        ("", []),
        ("  \t\r\n\x0c ", []),
    ],
)
def test_tokenize(text, expected):
    assert tokenize(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "void glClear(GLbitfield mask);",
        "Version 4.6, released 2017-07-31.",
        "  mixed\tWHITE\nspace ",
        "ünïcödé 12€ 3,4. ...!!",
        "a1b2c3 4d5e6",
    ],
)
def test_tokens_cover_all_non_whitespace(text):
    """Tokens are never empty and together consume every non-whitespace character in order."""
    tokens = tokenize(text)
    assert all(tokens)

    stripped = "".join(c for c in text if c not in ASCII_WHITESPACE)
    assert "".join(tokens).upper() == stripped.upper()


def test_lexer_is_single_pass():
    lexer = Lexer("foo bar")
    assert iter(lexer) is lexer
    assert list(lexer) == ["FOO", "BAR"]
    assert list(lexer) == []
    assert lexer.next_token() is None


def test_next_token_returns_none_at_end():
    lexer = Lexer("  42  ")
    assert lexer.next_token() == "42"
    assert lexer.next_token() is None
