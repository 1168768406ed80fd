'''Pure Python trie construction backends: the node arena, Ukkonen's builder and the naive reference builder.'''

from .node_store import NodeStore, TrieNode, ROOT
from .ukkonen import build_ukkonen
from .naive_trie import build_naive

__all__ = ['NodeStore', 'TrieNode', 'ROOT', 'build_ukkonen', 'build_naive']
