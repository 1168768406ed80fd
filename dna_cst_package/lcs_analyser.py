'''Longest common subsequence (LCS) similarity between DNA sequences.

The similarity of two sequences X and Y is the length of their longest common
subsequence divided by the length of the longer sequence, a ratio in [0, 1].

The dynamic programming table D has D[i][j] equal to the LCS length of
X[:i] and Y[:j]. It is filled one row at a time with numpy: since entries
grow by at most one per step, a whole row is the running maximum of a
candidate row built from the row above, which avoids a Python-level inner
loop. One witness subsequence is then recovered by walking the table back
from the bottom-right corner.

Functions:
    lcs_table: The full DP table as a numpy array.
    lcs_witness: One longest common subsequence, with a fixed tie-break.
    lcs_length: The LCS length only.
    similarity: The normalised similarity ratio of two strings.
    similarity_analyser: File-based entry point; also writes the witness.
    lcs_similarities: Similarity ratios for a batch of string pairs.
'''
from typing import List, Optional

import numpy as np
from loguru import logger

from .result_writer import write_witness
from .text_loader import load_text


def _ordinals(s: str) -> np.ndarray:
    return np.fromiter(map(ord, s), dtype=np.int32, count=len(s))


def lcs_table(x: str, y: str) -> np.ndarray:
    """Builds the LCS length table for `x` and `y`.

    Args:
        x: The first sequence.
        y: The second sequence.

    Returns:
        An int32 array of shape (len(x) + 1, len(y) + 1) where entry [i, j]
        is the LCS length of x[:i] and y[:j]. Row 0 and column 0 are zero.
    """
    xs = _ordinals(x)
    ys = _ordinals(y)
    table = np.zeros((len(x) + 1, len(y) + 1), dtype=np.int32)
    for i in range(len(x)):
        previous = table[i]
        # A match extends the diagonal; otherwise take the value from above.
        candidate = np.where(ys == xs[i], previous[:-1] + 1, previous[1:])
        # Carrying the maximum along the row covers the value from the left.
        table[i + 1, 1:] = np.maximum.accumulate(candidate)
    return table


def lcs_witness(x: str, y: str, table: Optional[np.ndarray] = None) -> str:
    """Recovers one longest common subsequence of `x` and `y`.

    The walk starts at the last characters of both sequences. Equal characters
    are taken and both positions move back. Otherwise the walk moves up (drops
    a character of `x`) only when that keeps a strictly longer LCS than moving
    left; ties move left (drop a character of `y`). This makes the witness
    deterministic for given inputs.

    Args:
        x: The first sequence.
        y: The second sequence.
        table: The table from `lcs_table(x, y)`, computed if omitted.

    Returns:
        The witness subsequence ("" if there is no common character).
    """
    if table is None:
        table = lcs_table(x, y)
    i = len(x) - 1
    j = len(y) - 1
    reversed_chars: List[str] = []
    while i >= 0 and j >= 0:
        if x[i] == y[j]:
            reversed_chars.append(x[i])
            i -= 1
            j -= 1
        elif table[i, j + 1] > table[i + 1, j]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(reversed_chars))


def lcs_length(x: str, y: str) -> int:
    return int(lcs_table(x, y)[-1, -1])


def similarity(x: str, y: str) -> float:
    """LCS length of `x` and `y` over the longer length; 0.0 if either is empty."""
    if not x or not y:
        return 0.0
    return lcs_length(x, y) / max(len(x), len(y))


def similarity_analyser(f1: str, f2: str, f3: str) -> float:
    """Computes the similarity of the DNA sequences stored in two files.

    Both files are read with `load_text`, so whitespace inside them is
    ignored. One longest common subsequence is written to `f3` (replacing any
    existing file) followed by a newline.

    Args:
        f1: Path of the first sequence file.
        f2: Path of the second sequence file.
        f3: Path of the file that receives the LCS witness.

    Returns:
        The LCS length divided by the length of the longer sequence. Returns
        0.0 (and writes nothing) if either input is missing or empty. A failed
        write to `f3` is logged and does not change the returned value.
    """
    x = load_text(f1)
    y = load_text(f2)
    if not x or not y:
        logger.warning("At least one of the input files is missing or empty.")
        return 0.0

    table = lcs_table(x, y)
    witness = lcs_witness(x, y, table)
    write_witness(f3, witness)

    length = int(table[-1, -1])
    logger.info(f"LCS of {f1} ({len(x)}) and {f2} ({len(y)}) has length {length}")
    return length / max(len(x), len(y))


def lcs_similarities(x_strings: List[str], y_strings: List[str]) -> np.ndarray:
    '''Calculates the LCS similarity for pairs of in-memory sequences.

    Args:
        x_strings: A list of first sequences.
        y_strings: A list of second sequences, paired with `x_strings` by position.

    Returns:
        A numpy float64 array whose i-th entry is `similarity(x_strings[i], y_strings[i])`.

    Raises:
        ValueError: If the two lists have different lengths.
    '''
    if len(x_strings) != len(y_strings):
        raise ValueError("x_strings and y_strings must have the same length")
    if not x_strings:
        return np.array([])
    return np.array([similarity(x, y) for x, y in zip(x_strings, y_strings)], dtype=np.float64)
