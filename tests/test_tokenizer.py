import pytest

from wordsearch.tokenizer import LexerStats, Token, lex


def test_words_are_lowercased():
    text = "Hello WORLD Again"
    tokens, _ = lex(text)
    assert [t.term for t in tokens] == [w.lower() for w in text.split()]


def test_cyrillic_words_are_lowercased():
    text = "Привіт СВІТ"
    tokens, _ = lex(text)
    assert [t.term for t in tokens] == text.lower().split()


def test_apostrophe_only_continues_a_started_word():
    tokens, _ = lex("'tis don't")
    assert [t.term for t in tokens] == ["tis", "don't"]


def test_trailing_apostrophe_stays_in_word():
    tokens, _ = lex("rock' roll")
    assert tokens[0].term == "rock'"


@pytest.mark.parametrize("text", ["", "abc", "one, two\nthree", "!!\n\n??", "м'ясо і хліб"])
def test_every_character_is_read(text):
    _, stats = lex(text)
    assert stats.characters_read == len(text)


@pytest.mark.parametrize("text", ["", "a", "a\nb", "\n\n\n", "x\ny\nz\n"])
def test_lines_counted_from_one(text):
    _, stats = lex(text)
    assert stats.lines == text.count("\n") + 1


def test_non_letters_are_all_ignored():
    text = "123 !? 456"
    tokens, stats = lex(text)
    assert tokens == []
    assert stats.characters_ignored == stats.characters_read


def test_ignored_plus_letters_is_total():
    text = "alpha beta, gamma"
    tokens, stats = lex(text)
    letters = sum(len(t.term) for t in tokens)
    assert letters + stats.characters_ignored == stats.characters_read


def test_token_indices_are_sequential():
    tokens, _ = lex("a bb ccc dddd eeeee")
    assert [t.index for t in tokens] == list(range(len(tokens)))


def test_token_offsets_point_at_words():
    text = "  Some words, here and THERE"
    tokens, _ = lex(text)
    for token in tokens:
        assert text[token.offset:token.offset + len(token.term)].lower() == token.term


def test_token_is_immutable():
    tokens, _ = lex("word")
    token = tokens[0]
    with pytest.raises(AttributeError):
        token.term = "other"
    assert token.term == "word"


def test_stats_merge_adds_counters():
    first = LexerStats(characters_read=10, characters_ignored=2, lines=1)
    second = LexerStats(characters_read=7, characters_ignored=3, lines=4)
    first.merge(second)
    assert first.characters_read == 10 + 7
    assert first.characters_ignored == 2 + 3
    assert first.lines == 1 + 4


def test_merging_lex_stats_of_parts():
    _, a = lex("one two")
    _, b = lex("three\nfour")
    a.merge(b)
    assert a.characters_read == len("one two") + len("three\nfour")