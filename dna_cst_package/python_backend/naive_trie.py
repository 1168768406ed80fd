'''Reference O(n^2) construction of the compressed suffix trie.

Each suffix is inserted in turn, longest first, by walking down from the root
until the first mismatch. If the walk stops at the end of an edge a new leaf
is added; if it stops inside an edge the edge is split. A suffix that runs out
before a mismatch is already present implicitly and adds nothing.

The result is the same tree as `ukkonen.build_ukkonen` produces (edge labels
agree, though the text positions recorded for internal edges may differ). It
is kept as a simple, obviously-correct oracle for testing and benchmarking and
is not meant for long texts.
'''
from typing import Optional, Sequence

from .node_store import NodeStore, ROOT


def build_naive(codes: Sequence[int], store: Optional[NodeStore] = None) -> NodeStore:
    """Builds the compressed suffix trie by inserting every suffix from the root.

    Args:
        codes: The text as alphabet indices.
        store: An empty `NodeStore` to fill. A new one is created if omitted.

    Returns:
        The populated `NodeStore`.
    """
    if store is None:
        store = NodeStore()
    if hasattr(codes, 'tolist'):
        codes = codes.tolist()

    n = len(codes)
    for suffix_start in range(n):
        node = ROOT
        edge_pos = store[node].start  # position in the text of the next edge character
        j = suffix_start

        while j < n:
            current = store[node]
            if edge_pos >= current.end:
                # At the end of this edge: follow the child for codes[j] or add a leaf.
                child = current.children[codes[j]]
                if child is None:
                    current.children[codes[j]] = store.allocate(j, n, node)
                    break
                node = child
                edge_pos = store[child].start
            elif codes[j] == codes[edge_pos]:
                j += 1
                edge_pos += 1
            else:
                # Mismatch inside the edge: the matched part becomes a new internal node.
                parent = current.parent
                middle = store.allocate(current.start, edge_pos, parent)
                store[parent].children[codes[current.start]] = middle
                store[middle].children[codes[j]] = store.allocate(j, n, middle)
                store[middle].children[codes[edge_pos]] = node
                current.parent = middle
                current.start = edge_pos
                break

    return store
