#!/usr/bin/env python
"""I/O-free performance test.

Rates for each phase go to stderr:

$ python -m bytetrie.perf --random_seed 808813 200000
"""

import argparse
import random
import sys
import time

from tqdm import tqdm

from bytetrie.trie import Trie, assert_invariants

A_TO_Z = "abcdefghijklmnopqrstuvwxyz"


def random_key(length: int, alphabet: str = A_TO_Z) -> str:
    return "".join(random.choice(alphabet) for _ in range(length))


def random_keys(n: int, max_length: int, alphabet: str = A_TO_Z) -> list[str]:
    """n distinct keys with lengths in [1, max_length]."""
    assert n <= sum(len(alphabet) ** i for i in range(1, max_length + 1))
    seen = set[str]()
    out = []
    while len(out) < n:
        key = random_key(random.randint(1, max_length), alphabet)
        if key in seen:
            continue
        seen.add(key)
        out.append(key)
    return out


def timed(label: str, n: int, start_s: float):
    elapsed_s = time.time() - start_s
    rate = n / elapsed_s if elapsed_s else float("inf")
    sys.stderr.write(f"{label}: {n} keys in {elapsed_s:.2f}s = {rate:.2f} keys/s\n")


def run(keys: list[str], progress=False) -> Trie[int]:
    t = Trie[int]()
    n = len(keys)

    start_s = time.time()
    for i, key in enumerate(tqdm(keys, disable=not progress, desc="define")):
        t.define(key, i)
    timed("define", n, start_s)
    assert t.size() == n

    start_s = time.time()
    for key in tqdm(keys, disable=not progress, desc="contains"):
        assert t.contains(key)
    timed("contains", n, start_s)

    start_s = time.time()
    listed = t.keys()
    timed("keys", len(listed), start_s)
    assert listed == sorted(keys, key=lambda k: k.encode("latin-1"))

    # Delete half of them, in a different order than they went in.
    doomed = keys[::2]
    random.shuffle(doomed)
    start_s = time.time()
    for key in tqdm(doomed, disable=not progress, desc="delete"):
        t.delete(key)
    timed("delete", len(doomed), start_s)

    assert_invariants(t)
    return t


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="Trie perf test",
        description="Measure the speed of trie operations, free from I/O.",
    )
    parser.add_argument(
        "--random_seed",
        help="Explicitly set the random seed.",
        type=int,
        default=-1,
    )
    parser.add_argument(
        "--max_length",
        type=int,
        default=10,
        help="Longest key to generate.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show progress bars for each phase.",
    )
    parser.add_argument(
        "num_keys",
        type=int,
        help="Number of keys to insert",
        default=100_000,
        nargs="?",
    )
    args = parser.parse_args(argv)
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    keys = random_keys(args.num_keys, args.max_length)
    t = run(keys, progress=args.progress)
    sys.stderr.write(f"{t.size()} keys left, {t.num_nodes()} nodes\n")


if __name__ == "__main__":
    main()
