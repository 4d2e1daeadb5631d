"""Load word lists into a Trie.

A word list has one key per line. Anything after the first tab is the value
for that key; lines without a tab get None.
"""

from typing import Iterator

from tqdm import tqdm

from bytetrie.trie import Trie


def parse_line(line: str) -> tuple[str, str | None] | None:
    line = line.rstrip("\r\n")
    if not line:
        return None
    key, tab, value = line.partition("\t")
    return key, (value if tab else None)


def read_wordlist(dict_input: str) -> Iterator[tuple[str, str | None]]:
    # latin-1 so that every byte of the file is a valid key byte.
    with open(dict_input, encoding="latin-1") as f:
        for line in f:
            entry = parse_line(line)
            if entry is not None:
                yield entry


def make_trie(dict_input: str, progress=False) -> Trie[str | None]:
    """Duplicate keys keep the value from their first line."""
    t = Trie[str | None]()
    entries = read_wordlist(dict_input)
    if progress:
        entries = tqdm(entries, desc=dict_input, unit=" words", smoothing=0)
    for key, value in entries:
        if key and not t.contains(key):
            t.define(key, value)
    return t
