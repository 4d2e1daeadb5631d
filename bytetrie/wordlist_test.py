from bytetrie.trie import assert_invariants
from bytetrie.wordlist import make_trie, parse_line, read_wordlist


def test_parse_line():
    assert parse_line("cat\n") == ("cat", None)
    assert parse_line("cat\tfeline\r\n") == ("cat", "feline")
    assert parse_line("cat\t\n") == ("cat", "")
    assert parse_line("a\tb\tc") == ("a", "b\tc")
    assert parse_line("\n") is None
    assert parse_line("") is None


def test_read_wordlist():
    assert list(read_wordlist("testdata/values.tsv")) == [
        ("cat", "feline"),
        ("car", "vehicle"),
        ("card", ""),
        ("care", None),
        ("car", "duplicate"),
    ]


def test_make_trie():
    t = make_trie("testdata/words.txt")
    assert t.size() == 8
    assert t.keys() == [
        "agriculture",
        "car",
        "card",
        "cat",
        "culture",
        "sea",
        "tea",
        "teapot",
    ]
    assert_invariants(t)


def test_make_trie_keeps_first_value():
    t = make_trie("testdata/values.tsv", progress=True)
    assert t.items() == [
        ("car", "vehicle"),
        ("card", ""),
        ("care", None),
        ("cat", "feline"),
    ]
