from typing import Callable, Protocol


class Dictionary[K, V](Protocol):
    """What callers of a Trie may rely on.

    get, modify and delete require the key to be present, define requires it
    to be absent. Check with contains first.
    """

    def contains(self, key: K) -> bool: ...

    def define(self, key: K, value: V) -> None: ...

    def get(self, key: K) -> V: ...

    def modify(self, key: K, f: Callable[[V], V]) -> None: ...

    def delete(self, key: K) -> None: ...

    def size(self) -> int: ...

    def keys(self) -> list[K]: ...

    def values(self) -> list[V]: ...
