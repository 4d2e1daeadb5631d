from inline_snapshot import snapshot

from bytetrie.make_dot import edge_label, main, to_dot
from bytetrie.trie import Trie


def test_edge_label():
    assert edge_label(ord("a")) == "a"
    assert edge_label(ord('"')) == '\\"'
    assert edge_label(ord("\\")) == "\\\\"
    assert edge_label(0) == "\\\\x00"
    assert edge_label(0xFF) == "\\\\xff"


def test_to_dot():
    t = Trie.create_from_items([("to", 1), ("tea", 2), ("t\n", None)])
    assert to_dot(t).splitlines() == snapshot(
        [
            "digraph {",
            "rankdir=LR;",
            'node [shape="circle" fontname="Helvetica"];',
            'r [label=""];',
            'r -> r_116 [label="t"];',
            'r_116 [label=""];',
            'r_116 -> r_116_10 [label="\\\\x0a"];',
            'r_116 -> r_116_101 [label="e"];',
            'r_116 -> r_116_111 [label="o"];',
            'r_116_10 [label="None" style="filled" fillcolor="LightSkyBlue"];',
            'r_116_101 [label=""];',
            'r_116_101 -> r_116_101_97 [label="a"];',
            'r_116_101_97 [label="2" style="filled" fillcolor="LightSkyBlue"];',
            'r_116_111 [label="1" style="filled" fillcolor="LightSkyBlue"];',
            "}",
        ]
    )


def test_to_dot_empty():
    assert to_dot(Trie()) == snapshot(
        """\
digraph {
rankdir=LR;
node [shape="circle" fontname="Helvetica"];
r [label=""];
}
"""
    )


def test_main(capsys):
    main(["--dictionary", "testdata/values.tsv"])
    out = capsys.readouterr().out
    assert out.startswith("digraph {\n")
    assert out.endswith("}\n")
    assert 'label="vehicle"' in out
    assert 'label="feline"' in out
    assert 'label="duplicate"' not in out


def test_to_dot_long_key():
    t = Trie.create_from_items([("x" * 3000, 1)])
    lines = to_dot(t).splitlines()
    # One line per node and one per edge, plus the header and closing brace.
    assert len(lines) == 3 + 3001 + 3000 + 1
    assert lines[-2].endswith('[label="1" style="filled" fillcolor="LightSkyBlue"];')
