import pytest
from hypothesis import given, strategies as st

from polish.errors import PolishSyntaxError
from polish.reader.tokenizer import TokenKind, tokenize
from polish.types.span import Span
from polish.types.value import MAX_NUMBER


def _kinds(source):
    return [(t.kind, t.value) for t in tokenize(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [(TokenKind.NAME, "a")]),
        ("\\fac n -> n", [(TokenKind.DECL, "fac"), (TokenKind.NAME, "n"), (TokenKind.ARROW, "->"), (TokenKind.NAME, "n")]),
        ("- 5 3", [(TokenKind.NAME, "-"), (TokenKind.NUM, 5), (TokenKind.NUM, 3)]),
        ("+ + + 3 4 5 4", [(TokenKind.NAME, "+")] * 3 + [(TokenKind.NUM, n) for n in (3, 4, 5, 4)]),
        ('"hello world"', [(TokenKind.TEXT, "hello world")]),
        ('"a\\nb\\t\\"c\\"\\\\"', [(TokenKind.TEXT, 'a\nb\t"c"\\')]),
        ("# comment\n a b", [(TokenKind.NAME, "a"), (TokenKind.NAME, "b")]),
        ("a # trailing comment", [(TokenKind.NAME, "a")]),
        ("\t\r\n", []),
        ("", []),
    ]
)
def test_tokenize_basic(source, expected):
    assert _kinds(source) == expected


def test_spans_are_source_offsets():
    tokens = tokenize("\\f x -> + x 10")
    assert [t.span for t in tokens] == [
        Span(1, 2),   # declaration span excludes the backslash
        Span(3, 4),
        Span(5, 7),
        Span(8, 9),
        Span(10, 11),
        Span(12, 14),
    ]


def test_text_span_covers_quotes():
    (tok,) = tokenize('  "hi"')
    assert tok.span == Span(2, 6)


@pytest.mark.parametrize(
    "source,message,span",
    [
        ("12ab", "invalid number literal", Span(0, 4)),
        (str(MAX_NUMBER + 1), "invalid number literal", Span(0, 20)),
        ('x "abc', "unterminated text literal", Span(2, 6)),
        ('"a\\qb"', "unknown escape sequence \\q", Span(2, 4)),
        ("\\ -> 1", "expected declaration name after '\\'", Span(0, 1)),
    ]
)
def test_tokenize_errors_are_spanned(source, message, span):
    with pytest.raises(PolishSyntaxError) as exc:
        tokenize(source)
    assert exc.value.message == message
    assert exc.value.span == span


def test_token_kind_display_names():
    assert str(TokenKind.ARROW) == "<arrow>"
    assert str(TokenKind.DECL) == "declaration"
    assert str(TokenKind.NUM) == "number"


@given(st.integers(min_value=0, max_value=MAX_NUMBER))
def test_every_u64_literal_round_trips(n):
    (tok,) = tokenize(str(n))
    assert tok.kind is TokenKind.NUM
    assert tok.value == n


@given(st.lists(st.from_regex(r"[a-z+*<>=%/]{1,6}", fullmatch=True), max_size=8))
def test_words_become_names(words):
    source = "  ".join(words)
    tokens = tokenize(source)
    assert [t.value for t in tokens] == words
    assert all(t.kind is TokenKind.NAME for t in tokens)
    assert all(source[t.span.start:t.span.end] == t.value for t in tokens)


def test_spans_count_characters_not_bytes():
    source = '"héllo" name'
    text, name = tokenize(source)
    assert text.span == Span(0, 7)
    assert name.span == Span(8, 12)
    assert source[name.span.start:name.span.end] == "name"
