'''Linear-time construction of a compressed suffix trie using Ukkonen's algorithm.

The text is consumed one character at a time. After character `i` has been
processed the trie holds every suffix of `text[:i + 1]`, either ending at a
leaf or implicitly inside an edge. No terminator character is appended, so
suffixes that also occur earlier in the text stay implicit.

The classic active point (active node, active edge, active length) is kept in
a collapsed form: `active_node` plus `remainder`, the number of suffixes still
waiting to be made explicit. While the loop works on a suffix, the first
character of the active edge is `codes[i - (remainder - 1)]` and the active
length is `remainder - 1`, so neither needs to be stored separately.

Every leaf is created with `end = n` rather than sharing a running "global
end". The builder never hands out an intermediate trie, so leaves that point
past the current position are never observed.
'''
from typing import Optional, Sequence

from .node_store import NodeStore, ROOT


def build_ukkonen(codes: Sequence[int], store: Optional[NodeStore] = None) -> NodeStore:
    """Builds the compressed suffix trie of an encoded text.

    Args:
        codes: The text as alphabet indices (see `alphabet.encode`). A numpy
               array is accepted and converted to a list for fast indexing.
        store: An empty `NodeStore` to fill. A new one is created if omitted.

    Returns:
        The populated `NodeStore`. For an empty text it contains only the root.
    """
    if store is None:
        store = NodeStore()
    if hasattr(codes, 'tolist'):
        codes = codes.tolist()

    n = len(codes)
    active_node = ROOT
    remainder = 0

    for i in range(n):
        remainder += 1
        prev_split: Optional[int] = None  # internal node still waiting for its suffix link

        while remainder > 0:
            # Walk down while the active length covers the whole child edge.
            offset = remainder - 1
            child = store[active_node].children[codes[i - offset]]
            while child is not None and offset >= store[child].length:
                offset -= store[child].length
                active_node = child
                child = store[active_node].children[codes[i - offset]]
            remainder = offset + 1

            if child is None:
                # Rule 2, no edge for this character: hang a new leaf off the active node.
                store[active_node].children[codes[i]] = store.allocate(i, n, active_node)
                if prev_split is not None:
                    store[prev_split].suffix_link = active_node
                prev_split = None
            else:
                child_node = store[child]
                split_at = child_node.start + offset
                if codes[split_at] == codes[i]:
                    # Rule 3, the suffix is already on this edge; the phase ends here.
                    if prev_split is not None:
                        store[prev_split].suffix_link = active_node
                    break

                # Split the edge: a new internal node takes the matched part of the
                # label, the old child keeps the rest and a new leaf takes codes[i:].
                middle = store.allocate(child_node.start, split_at, active_node)
                middle_node = store[middle]
                middle_node.children[codes[i]] = store.allocate(i, n, middle)
                middle_node.children[codes[split_at]] = child
                child_node.start = split_at
                child_node.parent = middle
                store[active_node].children[codes[i - offset]] = middle
                if prev_split is not None:
                    store[prev_split].suffix_link = middle
                prev_split = middle

            if active_node == ROOT:
                remainder -= 1
            else:
                link = store[active_node].suffix_link
                active_node = ROOT if link is None else link

    return store
