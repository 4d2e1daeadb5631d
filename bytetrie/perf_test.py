import random

from bytetrie.perf import main, random_keys, run


def test_random_keys():
    random.seed(1)
    keys = random_keys(14, 3, "ab")
    assert len(set(keys)) == 14
    assert all(1 <= len(k) <= 3 for k in keys)


def test_run():
    random.seed(808813)
    keys = random_keys(500, 6)
    t = run(keys)
    assert t.size() == 250
    assert t.keys() == sorted(keys[1::2])


def test_main(capsys):
    main(["--random_seed", "1", "--max_length", "4", "200"])
    err = capsys.readouterr().err
    lines = err.splitlines()
    assert [line.split(":")[0] for line in lines[:-1]] == [
        "define",
        "contains",
        "keys",
        "delete",
    ]
    assert lines[-1].startswith("100 keys left, ")
