#!/usr/bin/env python
"""Print the keys in a word list in byte order, optionally with their values."""

import argparse
import sys

from bytetrie.args import add_standard_args, get_trie_from_args


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Trie dump",
        description="Load a word list into a trie and print it back in order.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--values",
        action="store_true",
        help="Print each key's value after a tab.",
    )
    parser.add_argument(
        "--delete",
        type=str,
        nargs="*",
        default=[],
        help="Keys to delete before printing.",
    )
    args = parser.parse_args(argv)
    t = get_trie_from_args(args)

    for key in args.delete:
        if not t.contains(key):
            sys.stderr.write(f"not in trie: {key}\n")
            continue
        t.delete(key)

    if args.values:
        for key, value in t.items():
            print(f"{key}\t{'' if value is None else value}")
    else:
        for key in t.keys():
            print(key)
    sys.stderr.write(f"{t.size()} keys, {t.num_nodes()} nodes\n")


if __name__ == "__main__":
    main()
