'''Initialize the dna_cst_package, exposing the compressed suffix trie and the LCS similarity analyser.'''

from .alphabet import AlphabetError, LETTERS
from .lcs_analyser import (
    lcs_length, lcs_similarities, lcs_table, lcs_witness,
    similarity, similarity_analyser
)
from .suffix_trie import CompressedSuffixTrie
from .text_loader import load_text

__all__ = [
    'CompressedSuffixTrie',
    'similarity_analyser', 'similarity', 'lcs_similarities',
    'lcs_table', 'lcs_witness', 'lcs_length',
    'load_text',
    'AlphabetError', 'LETTERS'
]
