import pytest

from wordsearch.query import (
    AndNode,
    FalseNode,
    NotNode,
    OrNode,
    QuerySyntaxError,
    TermNode,
    parse_logic_expr,
    tokenize_query,
)


def test_tokenize_lowercases_and_splits_operators():
    assert tokenize_query("Hello & (World)") == ["hello", "&", "(", "world", ")"]


def test_tokenize_keeps_inner_apostrophe():
    assert tokenize_query("don't|x") == ["don't", "|", "x"]


def test_tokenize_cyrillic_terms():
    assert tokenize_query("Слово & ще") == ["слово", "&", "ще"]


@pytest.mark.parametrize("text", ["a1", "'a", "a - b", "a,b"])
def test_tokenize_rejects_invalid_characters(text):
    with pytest.raises(QuerySyntaxError, match="Encountered invalid character"):
        tokenize_query(text)


def test_empty_query_is_false():
    assert parse_logic_expr("") == FalseNode()
    assert parse_logic_expr("   ") == FalseNode()


def test_single_term():
    assert parse_logic_expr(" Word ") == TermNode("word")


def test_and_binds_tighter_than_or():
    assert parse_logic_expr("a & b | c") == OrNode(AndNode(TermNode("a"), TermNode("b")), TermNode("c"))
    assert parse_logic_expr("a | b & c") == OrNode(TermNode("a"), AndNode(TermNode("b"), TermNode("c")))


def test_not_binds_tightest():
    assert parse_logic_expr("!a & b") == AndNode(NotNode(TermNode("a")), TermNode("b"))


def test_brackets_override_precedence():
    expected = AndNode(OrNode(TermNode("a"), TermNode("b")), TermNode("c"))
    assert parse_logic_expr("(a | b) & c") == expected


def test_not_of_bracketed_expression():
    assert parse_logic_expr("!(a | b)") == NotNode(OrNode(TermNode("a"), TermNode("b")))


def test_operators_are_left_associative():
    expected = AndNode(AndNode(TermNode("a"), TermNode("b")), TermNode("c"))
    assert parse_logic_expr("a & b & c") == expected


def test_extra_closing_bracket_is_tolerated():
    assert parse_logic_expr("a)") == TermNode("a")


def test_adjacent_terms_keep_the_last():
    assert parse_logic_expr("a b") == TermNode("b")


@pytest.mark.parametrize("text", ["a &", "| b", "!", "!!a"])
def test_missing_argument(text):
    with pytest.raises(QuerySyntaxError, match="Missing argument"):
        parse_logic_expr(text)


def test_unclosed_bracket():
    with pytest.raises(QuerySyntaxError, match="Unexpected operator"):
        parse_logic_expr("(a")


def test_invalid_character_fails_parse():
    with pytest.raises(QuerySyntaxError):
        parse_logic_expr("a & 5")