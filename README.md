# wordsearch

wordsearch builds word dictionaries and search indexes over a folder of
UTF-8 text files. You can then run boolean queries against the indexes.

## Installation

    pip install .

To install the test dependencies and run the tests:

    pip install ".[test]"
    pytest

## Words

A word is a run of letters. After a word has started, an apostrophe
continues it. Every other character separates words. Words are
lower-cased.

`wordsearch.tokenizer.lex(text)` returns a list of `Token`s and a
`LexerStats`. Each `Token` holds the term, its ordinal among the words and
its character offset. `LexerStats` holds the characters read, the
characters ignored and the lines, counting from one.

## Word dictionary

    wordsearch-dict [FOLDER]

The command reads every regular file directly inside `FOLDER`. The default
folder is `data/shakespeare`. The files are processed in parallel, and
empty files are skipped.

It counts how often each word occurs, then prints:

- the number of distinct words
- the total number of words
- how many lines and characters it read
- how many characters it ignored

It writes the dictionary to two files:

- `data/dictionary.json`: a pretty-printed JSON object that maps each word to its count
- `data/dictionary.txt`: one `word=count` line per word

It then reads both files back and prints their counts.

From Python:

    from wordsearch.dictionary import add_file_to_dict
    from wordsearch.storage import JsonDictionaryStorage, KeyValDictionaryStorage

    result = add_file_to_dict("notes.txt")   # None for an empty file
    if result is not None:
        dictionary, stats = result
        print(dictionary.unique_word_count(), dictionary.total_word_count())
        JsonDictionaryStorage().write("notes.json", dictionary)
        again = KeyValDictionaryStorage().read("notes.txt.kv")

`add_file_to_dict` raises `UnicodeDecodeError` for a file that is not UTF-8.

`KeyValDictionaryStorage.read` raises `ValueError` for a malformed line.
`JsonDictionaryStorage.read` raises `ValueError` for data that is not an
object of non-negative integer counts.

## Boolean search

    wordsearch [FOLDER] [FILE_LIMIT]

The command loads the regular files directly inside `FOLDER`, in name
order. The default folder is `data/shakespeare`. If you give `FILE_LIMIT`,
it tries at most that many files. Files that cannot be read or are not
UTF-8 are reported and skipped.

It builds these indexes in parallel:

- a positional inverted index (`InvertedIndex`)
- a term–document bit matrix (`TermMatrix`)
- a two-word index (`TwoWordIndex`)
- a document-level index (`DocumentIndex`)

It prints timing, size and word statistics, and writes three files:

- `data/index.json`: the positional index, as JSON
- `data/two_word_index.json`: the word pairs, as JSON
- `data/index.txt`: the document-level index, one `term:id,id,...` line per term

It then reads queries from standard input:

- `q`, or the end of input, quits.
- `s` switches between the positional index and the two-word index.

With the positional index, each query also prints whether the
document-level index and the matrix agree. Matches are listed in order of
document id.

Query language:

| Syntax    | Meaning                                    |
|-----------|--------------------------------------------|
| `word`    | documents that contain the word            |
| `a & b`   | both                                       |
| `a \| b`  | either                                     |
| `!a`      | indexed documents that do not contain `a`  |
| `( ... )` | grouping                                   |

`!` binds tightest, then `&`, then `|`. An empty query matches nothing.

From Python:

    from wordsearch.corpus import Corpus
    from wordsearch.indexing import build_indexes
    from wordsearch.query import parse_logic_expr

    corpus = Corpus.from_directory("texts", None)
    indexes = build_indexes(corpus, 4)          # None for an empty corpus
    node = parse_logic_expr("romeo & !juliet")
    print(sorted(indexes.inverted.query(node)))

`parse_logic_expr` raises `QuerySyntaxError`, a `ValueError`, when it
cannot read a query.

`TwoWordIndex.phrase_documents(first, second)` returns the documents in
which `second` directly follows `first`.

`DocumentIndex.save(stream)` writes the `term:id,...` format.
`DocumentIndex.load(stream)` reads it back and raises `IndexFormatError`
on a malformed line.

## Limits

- The query language has no phrase or proximity operator. The two-word
  index answers only queries made of phrases, so it rejects every query
  that contains a word and prints "Only 2 word queries are supported."
  Its pairs can still be looked up from Python with `phrase_documents`.
- `TermPositions.close_union` can find words near each other, but no
  query syntax uses it.
- The search command always builds its indexes from the files. It writes
  the index files but never loads them back.