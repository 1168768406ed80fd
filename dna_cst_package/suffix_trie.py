'''Compressed suffix trie over a DNA sequence read from a file.

This module provides the `CompressedSuffixTrie` class, the public face of the
package's trie backends in `python_backend`. It ties together:
- Loading the sequence file (tokens separated by whitespace are concatenated).
- Encoding the text into alphabet indices and building the trie, by default
  with Ukkonen's linear-time algorithm.
- Searching the finished trie for patterns in time proportional to the
  pattern length.

Input problems never raise: a missing, empty or non-DNA input is logged and
yields a trie over the empty text, in which every non-empty search fails.

Typical usage:

    trie = CompressedSuffixTrie("sequence.txt")
    position = trie.find_string("ACGT")  # -1 if absent
'''
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from loguru import logger

from .alphabet import AlphabetError, LETTERS, encode, letter_index
from .python_backend.naive_trie import build_naive
from .python_backend.node_store import NodeStore, ROOT
from .python_backend.ukkonen import build_ukkonen
from .text_loader import load_text

_BUILDERS: Dict[str, Callable[..., NodeStore]] = {
    'ukkonen': build_ukkonen,
    'naive': build_naive,
}


class CompressedSuffixTrie:
    '''A compressed suffix trie for substring search in a DNA sequence.

    Every node's edge is stored as a pair of indices into the text, children
    are kept in four slots keyed by the letters A, C, G, T, and the trie is
    read-only once the constructor returns, so it can be shared freely between
    readers.

    Attributes:
        builder (str): Name of the construction algorithm used ('ukkonen' or 'naive').
    '''
    def __init__(self, path: str, builder: str = 'ukkonen'):
        """Loads the sequence in `path` and builds its trie.

        Args:
            path: Path of a text file holding the DNA sequence. Whitespace in the
                  file is ignored.
            builder: 'ukkonen' (default, linear time) or 'naive' (quadratic
                     reference implementation).

        Raises:
            ValueError: If `builder` is not a known construction algorithm.
        """
        build = self._select_builder(builder)
        text = load_text(path)
        if text is None:
            text = ""
        elif not text:
            logger.info(f"{path} contains no sequence; the trie holds only the root.")
        self.builder = builder
        self._build(text, build)

    @classmethod
    def from_text(cls, text: str, builder: str = 'ukkonen') -> 'CompressedSuffixTrie':
        """Builds a trie directly from an in-memory sequence.

        Args:
            text: The DNA sequence. Unlike file input, whitespace is not removed.
            builder: 'ukkonen' or 'naive', as for the constructor.

        Returns:
            The finished trie.
        """
        build = cls._select_builder(builder)
        trie = cls.__new__(cls)
        trie.builder = builder
        trie._build(text, build)
        return trie

    @staticmethod
    def _select_builder(builder: str) -> Callable[..., NodeStore]:
        try:
            return _BUILDERS[builder]
        except KeyError:
            raise ValueError(
                f"Unknown builder: {builder}. Choose one of {', '.join(sorted(_BUILDERS))}."
            ) from None

    def _build(self, text: str, build: Callable[..., NodeStore]) -> None:
        try:
            codes = encode(text)
        except AlphabetError as e:
            logger.error(f"Cannot build a DNA trie: {e} The trie holds only the root.")
            text = ""
            codes = encode(text)
        self._text = text
        self._store = build(codes)
        logger.debug(
            f"Built {self.builder} trie over {len(text)} characters with {len(self._store)} nodes"
        )

    def find_string(self, pattern: str) -> int:
        """Finds an occurrence of `pattern` in the text.

        The trie is walked from the root, comparing the pattern against one
        edge label at a time. Since each node has at most one child per
        letter, there is never more than one edge to try.

        When the pattern occurs several times the returned position is the one
        recorded on the edge where the walk ends: that edge's start index minus
        the number of pattern characters matched above it.

        Args:
            pattern: The string to search for.

        Returns:
            An index `i` with `text[i:i + len(pattern)] == pattern`, or -1 if
            the pattern does not occur. The empty pattern is found at 0. A
            pattern containing a character outside A, C, G, T is never found.

        Raises:
            TypeError: If `pattern` is not a string.
        """
        if not isinstance(pattern, str):
            raise TypeError("Pattern must be a string.")
        if not pattern:
            return 0

        text = self._text
        store = self._store
        node = ROOT
        j = 0  # number of pattern characters matched so far
        m = len(pattern)
        while True:
            slot = letter_index(pattern[j])
            if slot < 0:
                return -1
            child = store[node].children[slot]
            if child is None:
                return -1

            edge = store[child]
            k = min(edge.length, m - j)
            if pattern[j:j + k] != text[edge.start:edge.start + k]:
                return -1
            if j + k == m:
                return edge.start - j

            j += edge.length
            node = child

    def __contains__(self, pattern: str) -> bool:
        return self.find_string(pattern) != -1

    @property
    def text(self) -> str:
        """str: The sequence the trie was built from ("" after an input failure)."""
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    @property
    def node_count(self) -> int:
        """int: Number of nodes in the trie, root included."""
        return len(self._store)

    def iter_edges(self) -> Iterator[Tuple[int, str]]:
        """Yields `(depth, label)` for every edge in depth-first, alphabet order.

        `depth` is the length of the string spelled from the root down to the
        top of the edge.
        """
        stack = [(child, 0) for child in reversed(list(self._store.children_of(ROOT)))]
        while stack:
            handle, depth = stack.pop()
            node = self._store[handle]
            yield depth, self._text[node.start:node.end]
            below = depth + node.length
            stack.extend((child, below) for child in reversed(list(self._store.children_of(handle))))

    def check_invariants(self) -> List[str]:
        """Checks the structural invariants of the finished trie.

        Returns:
            A list of human-readable violations; empty if the trie is well formed.
        """
        problems = []
        store = self._store
        n = len(self._text)
        if store.root.parent is not None:
            problems.append("root has a parent")

        for handle in range(len(store)):
            node = store[handle]
            count = node.child_count()
            if handle != ROOT:
                if node.length <= 0:
                    problems.append(f"node {handle} has an empty edge label")
                if count == 0 and node.end != n:
                    problems.append(f"leaf {handle} ends at {node.end}, not {n}")
                if count == 1:
                    problems.append(f"internal node {handle} has a single child")
            for slot, child in enumerate(node.children):
                if child is None:
                    continue
                if store[child].parent != handle:
                    problems.append(f"node {child} does not point back to parent {handle}")
                first = self._text[store[child].start:store[child].start + 1]
                if first != LETTERS[slot]:
                    problems.append(
                        f"node {child} starts with {first!r} but hangs in slot {LETTERS[slot]!r}"
                    )
        return problems

    def display(self, handle: Optional[int] = None, prefix: str = "") -> None:
        """Prints a text representation of the trie structure for debugging.

        Args:
            handle: The node to start displaying from. Defaults to the root.
            prefix: Prefix string for child branches.
        """
        if handle is None:
            handle = ROOT
            print(f"Compressed Suffix Trie (Root) over {len(self._text)} characters:")

        # Pending (handle, prefix, is_last) entries, popped in depth-first alphabet order.
        stack = []

        def push_children(parent: int, parent_prefix: str) -> None:
            children = list(self._store.children_of(parent))
            for i in range(len(children) - 1, -1, -1):
                stack.append((children[i], parent_prefix, i == len(children) - 1))

        push_children(handle, prefix)
        while stack:
            child, child_prefix, is_last_child = stack.pop()
            connector = "└── " if is_last_child else "├── "
            node = self._store[child]
            print(f"{child_prefix}{connector}'{self._text[node.start:node.end]}' [{node.start}:{node.end}]")
            push_children(child, child_prefix + ("    " if is_last_child else "│   "))

    def __repr__(self) -> str:
        return f"CompressedSuffixTrie(length={len(self._text)}, nodes={len(self._store)}, builder={self.builder!r})"


# Example usage:
if __name__ == '__main__':
    trie = CompressedSuffixTrie.from_text("ACACAG")
    trie.display()
    for p in ["CAG", "ACA", "GA", "", "ACACAGT"]:
        print(f"Pattern '{p}': {trie.find_string(p)}")
