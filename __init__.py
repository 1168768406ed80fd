from .dna_cst_package import (
    CompressedSuffixTrie,
    similarity_analyser, similarity, lcs_similarities,
    load_text
)

__all__ = [
    'CompressedSuffixTrie',
    'similarity_analyser', 'similarity', 'lcs_similarities',
    'load_text'
]
