#!/usr/bin/env python
"""Output DOT for graph visualization of a trie.

$ python -m bytetrie.make_dot --dictionary testdata/words.txt | dot -Tpng > trie.png
"""

import argparse

from bytetrie.args import add_standard_args, get_trie_from_args
from bytetrie.trie import Trie, TrieNode


def edge_label(c: int) -> str:
    ch = chr(c)
    if ch == '"' or ch == "\\":
        return "\\" + ch
    if 0x20 <= c < 0x7F:
        return ch
    return f"\\\\x{c:02x}"


def node_label(node: TrieNode) -> str:
    if not node.has_value():
        return ""
    return str(node.value).replace("\\", "\\\\").replace('"', '\\"')


def to_dot(trie: Trie) -> str:
    dot = "\n".join(to_dot_lines(trie.root(), "r"))
    return f"""digraph {{
rankdir=LR;
node [shape="circle" fontname="Helvetica"];
{dot}
}}
"""


def to_dot_lines(root: TrieNode, root_id: str) -> list[str]:
    """DOT for each node and its out-edges, pre-order."""
    dot = []
    stack = [(root_id, root)]
    while stack:
        me, node = stack.pop()
        attrs = ' style="filled" fillcolor="LightSkyBlue"' if node.has_value() else ""
        dot.append(f'{me} [label="{node_label(node)}"{attrs}];')
        children = [
            (c, f"{me}_{c}", child)
            for c, child in enumerate(node.children)
            if child is not None
        ]
        for c, child_id, _ in children:
            dot.append(f'{me} -> {child_id} [label="{edge_label(c)}"];')
        stack.extend((child_id, child) for _, child_id, child in reversed(children))
    return dot


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="DOT renderer",
        description="Visualize the nodes of a trie.",
    )
    add_standard_args(parser)
    args = parser.parse_args(argv)
    t = get_trie_from_args(args)
    print(to_dot(t), end="")


if __name__ == "__main__":
    main()
