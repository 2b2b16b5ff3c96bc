import json

import pytest

from wordsearch.index import InvertedIndex, TermMatrix, feed_tokens
from wordsearch.query import LogicNode, parse_logic_expr
from wordsearch.tokenizer import lex

TEXTS = [
    "The cat sat on the mat.",
    "The dog barked.",
    "A cat and a dog met.",
    "Nothing here but birds",
]


def build(index_type, texts=TEXTS, first_id=0):
    index = index_type()
    for offset, text in enumerate(texts):
        tokens, _ = lex(text)
        feed_tokens(tokens, first_id + offset, index)
    return index


QUERIES = [
    "cat",
    "cat & dog",
    "cat | dog",
    "!cat",
    "!(cat | dog)",
    "the & !dog",
    "missing",
    "missing | birds",
    "",
]


def test_term_query_finds_documents():
    index = build(InvertedIndex)
    assert index.query(parse_logic_expr("cat")) == {0, 2}
    assert index.query(parse_logic_expr("Dog")) == {1, 2}


def test_and_or_not():
    index = build(InvertedIndex)
    assert index.query(parse_logic_expr("cat & dog")) == {2}
    assert index.query(parse_logic_expr("cat | dog")) == {0, 1, 2}
    assert index.query(parse_logic_expr("!cat")) == {1, 3}


def test_empty_query_matches_nothing():
    index = build(InvertedIndex)
    assert index.query(parse_logic_expr("")) == set()


def test_word_counts_follow_tokens():
    index = build(InvertedIndex)
    all_tokens = [token for text in TEXTS for token in lex(text)[0]]
    assert index.total_word_count() == len(all_tokens)
    assert index.unique_word_count() == len({token.term for token in all_tokens})


def test_term_positions_are_word_ordinals():
    index = build(InvertedIndex)
    tokens, _ = lex(TEXTS[0])
    expected = [token.index for token in tokens if token.term == "the"]
    assert index.term_positions("the").positions(0) == expected


def test_term_positions_returns_copy():
    index = build(InvertedIndex)
    positions = index.term_positions("cat")
    positions.add_position(3, 0)
    assert index.query(parse_logic_expr("cat")) == {0, 2}
    assert index.term_positions("unknown").documents() == frozenset()


def test_documents_lists_every_indexed_document():
    index = build(InvertedIndex)
    assert index.documents() == set(range(len(TEXTS)))


def test_merge_equals_single_build():
    whole = build(InvertedIndex)
    left = build(InvertedIndex, TEXTS[:2])
    right = build(InvertedIndex, TEXTS[2:], first_id=2)
    left.merge(right)
    assert json.loads(left.to_json()) == json.loads(whole.to_json())
    assert left.documents() == whole.documents()


def test_to_json_layout():
    index = InvertedIndex()
    index.add_term("cat", 0, 3)
    data = json.loads(index.to_json())
    assert data == {"documents": {"0": []}, "index": {"cat": {"0": [3]}}}


def test_unsupported_node_raises():
    with pytest.raises(TypeError):
        InvertedIndex().query(LogicNode())
    with pytest.raises(TypeError):
        TermMatrix().query(LogicNode())


@pytest.mark.parametrize("text", QUERIES)
def test_matrix_agrees_with_inverted_index(text):
    node = parse_logic_expr(text)
    assert build(TermMatrix).query(node) == build(InvertedIndex).query(node)


def test_matrix_term_query_masks():
    matrix = build(TermMatrix)
    assert matrix.term_query("cat") == (1 << 0) | (1 << 2)
    assert matrix.term_query("unknown") == 0
    assert matrix.col_count == len(TEXTS)


def test_matrix_not_stays_within_columns():
    matrix = build(TermMatrix)
    mask = matrix.query_mask(parse_logic_expr("!cat"))
    assert mask >> matrix.col_count == 0
    assert mask | matrix.term_query("cat") == (1 << matrix.col_count) - 1


@pytest.mark.parametrize("text", QUERIES)
def test_matrix_merge_equals_single_build(text):
    whole = build(TermMatrix)
    left = build(TermMatrix, TEXTS[:1])
    right = build(TermMatrix, TEXTS[1:], first_id=1)
    left.merge(right)
    node = parse_logic_expr(text)
    assert left.query(node) == whole.query(node)
    assert left.col_count == whole.col_count


def test_feed_tokens_adds_each_token():
    index = InvertedIndex()
    tokens, _ = lex("one two one")
    feed_tokens(tokens, 5, index)
    assert index.term_positions("one").to_dict() == {5: [0, 2]}
    assert index.total_word_count() == len(tokens)