'''Arena storage for the nodes of a compressed suffix trie.

Nodes are kept in a single growable list and refer to each other by their
integer position in that list (a "handle"). Parent pointers and suffix links
are therefore plain integers, so the cyclic node graph has no ownership
problems and the whole trie is released together with its store.

Classes:
    TrieNode: One node of the trie (the edge leading into it plus its children).
    NodeStore: The arena owning every node of one trie.
'''
from typing import Iterator, List, Optional

from ..alphabet import ALPHABET_SIZE

ROOT = 0  # handle of the root node in every store


class TrieNode:
    """A node of the compressed suffix trie.

    A node stands for the edge that leads into it, labelled by the text slice
    `text[start:end]`, together with the subtree below it. The root has
    `start == end == 0` and no parent.

    Attributes:
        start (int): Start index (inclusive) of the edge label in the text.
        end (int): End index (exclusive) of the edge label in the text. Leaves
                   always end at the length of the text.
        parent (int | None): Handle of the parent node, None for the root.
        children (list[int | None]): One slot per alphabet letter, holding the
                   handle of the child whose edge starts with that letter.
        suffix_link (int | None): Construction-time link from an internal node
                   labelled cX to the node labelled X.
    """
    __slots__ = ('start', 'end', 'parent', 'children', 'suffix_link')

    def __init__(self, start: int, end: int, parent: Optional[int]):
        self.start = start
        self.end = end
        self.parent = parent
        self.children: List[Optional[int]] = [None] * ALPHABET_SIZE
        self.suffix_link: Optional[int] = None

    @property
    def length(self) -> int:
        """int: Number of characters on the edge leading into this node."""
        return self.end - self.start

    def is_leaf(self) -> bool:
        return all(child is None for child in self.children)

    def child_count(self) -> int:
        return sum(child is not None for child in self.children)

    def __repr__(self) -> str:
        return f"TrieNode(start={self.start}, end={self.end}, parent={self.parent})"


class NodeStore:
    """Owns all nodes of one trie and hands out stable integer handles.

    The store is created holding only the root. Nodes are never removed;
    edge splits change existing nodes in place and allocate one new node.
    """

    def __init__(self):
        self._nodes: List[TrieNode] = [TrieNode(0, 0, None)]

    def allocate(self, start: int, end: int, parent: Optional[int]) -> int:
        """Creates a node for the edge `text[start:end]` and returns its handle."""
        self._nodes.append(TrieNode(start, end, parent))
        return len(self._nodes) - 1

    def __getitem__(self, handle: int) -> TrieNode:
        return self._nodes[handle]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TrieNode]:
        return iter(self._nodes)

    @property
    def root(self) -> TrieNode:
        return self._nodes[ROOT]

    def children_of(self, handle: int) -> Iterator[int]:
        """Yields the handles of the children of `handle` in alphabet order."""
        for child in self._nodes[handle].children:
            if child is not None:
                yield child
