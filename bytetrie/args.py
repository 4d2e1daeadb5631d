"""Standard command-line arguments shared across many tools."""

import argparse

from bytetrie.trie import Trie
from bytetrie.wordlist import make_trie


def add_standard_args(parser: argparse.ArgumentParser):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="testdata/words.txt",
        help="Path to word list with one key per line, optionally followed by "
        "a tab and a value.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while loading the word list.",
    )


def get_trie_from_args(args: argparse.Namespace) -> Trie[str | None]:
    t = make_trie(args.dictionary, progress=args.progress)
    assert t
    return t
