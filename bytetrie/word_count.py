#!/usr/bin/env python
"""Count the words in some files (or stdin) and print the tallies in order."""

import argparse
import fileinput
import re
from typing import Iterable

from bytetrie.dictionary import Dictionary
from bytetrie.trie import Trie

# Only ASCII whitespace separates words; \x85, \xa0 and \x1c-\x1f are word bytes.
WORD_RE = re.compile(r"[^ \t\n\r\f\v]+")


def count_words(lines: Iterable[str], counts: Dictionary[str, int]):
    for line in lines:
        for word in WORD_RE.findall(line):
            if counts.contains(word):
                counts.modify(word, lambda n: n + 1)
            else:
                counts.define(word, 1)
    return counts


def main(argv=None):
    parser = argparse.ArgumentParser(description="Count words")
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing text, or stdin"
    )
    parser.add_argument(
        "--min_count",
        type=int,
        default=1,
        help="Only print words that appear at least this many times.",
    )
    args = parser.parse_args(argv)

    counts = Trie[int]()
    with fileinput.input(files=args.files, encoding="latin-1") as lines:
        count_words(lines, counts)

    for word, n in counts.items():
        if n >= args.min_count:
            print(f"{word}\t{n}")


if __name__ == "__main__":
    main()
