from typing import Callable, Iterable, Iterator, Self

ALPHABET_SIZE = 256


class MissingKeyError(KeyError):
    """get/modify/delete on a key that isn't in the trie."""


class DuplicateKeyError(KeyError):
    """define on a key that's already in the trie."""


class InvalidKeyError(ValueError):
    """A str key with a character that doesn't fit in one byte."""


class _Undefined:
    def __repr__(self):
        return "UNDEFINED"


# Marks a structural node. None is a perfectly good value, so it can't be this.
UNDEFINED = _Undefined()


def to_bytes(key: str | bytes) -> bytes:
    if isinstance(key, bytes):
        return key
    if not isinstance(key, str):
        raise TypeError(f"key must be str or bytes, got {type(key).__name__}")
    try:
        return key.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidKeyError(f"{key!r} has a character above U+00FF") from e


def from_bytes(key: bytes) -> str:
    return key.decode("latin-1")


class TrieNode:
    children: list[Self | None]

    __slots__ = ("value", "children")

    def __init__(self):
        self.value = UNDEFINED
        self.children = [None] * ALPHABET_SIZE

    def has_value(self):
        return self.value is not UNDEFINED

    def descend(self, i: int):
        return self.children[i]

    def has_children(self):
        for child in self.children:
            if child is not None:
                return True
        return False


class Trie[V]:
    """Dictionary from byte strings to values, enumerated in byte order.

    Every node other than the root holds a value or leads to one; delete
    prunes whatever it leaves behind.
    """

    _root: TrieNode
    _size: int

    def __init__(self):
        self._root = TrieNode()
        self._size = 0

    def contains(self, key: str | bytes) -> bool:
        k = to_bytes(key)
        if not k:
            return False
        node = self._find_node(k)
        return node is not None and node.has_value()

    def define(self, key: str | bytes, value: V) -> None:
        k = to_bytes(key)
        if not k:
            return
        node = self._root
        for c in k:
            child = node.descend(c)
            if child is None:
                child = TrieNode()
                node.children[c] = child
            node = child
        # A node with a value was already there, so nothing was created.
        if node.has_value():
            raise DuplicateKeyError(key)
        node.value = value
        self._size += 1

    def get(self, key: str | bytes) -> V:
        return self._find_defined(key).value

    def modify(self, key: str | bytes, f: Callable[[V], V]) -> None:
        node = self._find_defined(key)
        node.value = f(node.value)

    def delete(self, key: str | bytes) -> None:
        k = to_bytes(key)
        if not k:
            return
        # Checking first means a miss never touches the tree.
        if not self.contains(k):
            raise MissingKeyError(key)
        self._delete(k)
        self._size -= 1

    def _delete(self, key: bytes):
        path: list[tuple[TrieNode, int]] = []
        node = self._root
        for c in key:
            path.append((node, c))
            node = node.children[c]
        node.value = UNDEFINED
        # Unwind, dropping each node left with neither a value nor children.
        while path and not node.has_value() and not node.has_children():
            parent, c = path.pop()
            parent.children[c] = None
            node = parent

    def size(self) -> int:
        return self._size

    def keys(self) -> list[str]:
        return [k for k, _ in self._walk()]

    def values(self) -> list[V]:
        return [v for _, v in self._walk()]

    def items(self) -> list[tuple[str, V]]:
        return list(self._walk())

    def num_nodes(self) -> int:
        return sum(1 for _ in iter_nodes(self._root))

    def num_leaves(self) -> int:
        if not self._root.has_children():
            return 0
        return sum(1 for n in iter_nodes(self._root) if not n.has_children())

    def root(self) -> TrieNode:
        return self._root

    def _walk(self) -> Iterator[tuple[str, V]]:
        """Pre-order, children in ascending byte order."""
        prefix = bytearray()
        stack = [iter(enumerate(self._root.children))]
        while stack:
            for i, child in stack[-1]:
                if child is None:
                    continue
                prefix.append(i)
                if child.has_value():
                    yield from_bytes(bytes(prefix)), child.value
                stack.append(iter(enumerate(child.children)))
                break
            else:
                stack.pop()
                if prefix:
                    prefix.pop()

    def _find_node(self, key: bytes) -> TrieNode | None:
        node = self._root
        for c in key:
            node = node.descend(c)
            if node is None:
                return None
        return node

    def _find_defined(self, key: str | bytes) -> TrieNode:
        k = to_bytes(key)
        node = self._find_node(k)
        if not k or node is None or not node.has_value():
            raise MissingKeyError(key)
        return node

    @staticmethod
    def create_from_items[T](items: Iterable[tuple[str | bytes, T]]) -> "Trie[T]":
        trie = Trie[T]()
        for key, value in items:
            trie.define(key, value)
        return trie


def iter_nodes(root: TrieNode) -> Iterator[TrieNode]:
    """Every node under root (root included), in no particular order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(c for c in node.children if c is not None)


def iter_prefixes(root: TrieNode, prefix=b"") -> Iterator[tuple[bytes, TrieNode]]:
    stack = [(prefix, root)]
    while stack:
        prefix, node = stack.pop()
        yield prefix, node
        for i, child in enumerate(node.children):
            if child is not None:
                stack.append((prefix + bytes([i]), child))


def assert_invariants(trie: Trie):
    """Check that the trie has no dead branches and that its size is right.

    Raises AssertionError with a short description of the first problem found.
    """
    root = trie.root()
    assert not root.has_value(), "root should never hold a value"
    num_values = 0
    leaves = 0
    value_leaves = 0
    for node in iter_nodes(root):
        assert len(node.children) == ALPHABET_SIZE
        if node.has_value():
            num_values += 1
        if node is root:
            continue
        assert node.has_value() or node.has_children(), "dead branch"
        if not node.has_children():
            leaves += 1
            if node.has_value():
                value_leaves += 1
    assert trie.size() == num_values, f"{trie.size()=} != {num_values=}"
    # Same thing, counted differently: every leaf holds a value.
    assert leaves == value_leaves, f"{leaves=} != {value_leaves=}"


def make_lookup_table(t: Trie | TrieNode, prefix=b"") -> dict[TrieNode, str]:
    """Construct a TrieNode -> key table for debugging."""
    node = t.root() if isinstance(t, Trie) else t
    return {n: from_bytes(p) for p, n in iter_prefixes(node, prefix)}


def reverse_lookup(t: Trie, node: TrieNode) -> str | None:
    for prefix, n in iter_prefixes(t.root()):
        if n is node:
            return from_bytes(prefix)
    return None
