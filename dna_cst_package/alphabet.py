'''The fixed DNA alphabet and its integer encoding.

Every character of a text is mapped to its position in `LETTERS` so that trie
nodes can keep their children in a fixed array of four slots. The mapping is
done with a 256-entry numpy lookup table, which turns a whole text into an
array of child-slot indices in one vectorised step.
'''
import numpy as np

LETTERS = "ACGT"  # the permitted DNA characters, in child-slot order
ALPHABET_SIZE = len(LETTERS)

# Byte value -> alphabet index, -1 for anything outside the alphabet.
_LOOKUP = np.full(256, -1, dtype=np.int8)
for _index, _letter in enumerate(LETTERS):
    _LOOKUP[ord(_letter)] = _index


class AlphabetError(ValueError):
    """Raised when a text contains a character outside the DNA alphabet."""


def encode(text: str) -> np.ndarray:
    """Encodes a DNA text as an array of alphabet indices.

    Args:
        text: The text to encode. Must consist of the characters A, C, G, T.

    Returns:
        A numpy int8 array of the same length as `text` with values in [0, 4).

    Raises:
        AlphabetError: If `text` contains a character outside the alphabet.
    """
    try:
        raw = np.frombuffer(text.encode('ascii'), dtype=np.uint8)
    except UnicodeEncodeError as e:
        raise AlphabetError(f"Text contains a non-ASCII character at index {e.start}.") from e

    codes = _LOOKUP[raw]
    bad = np.flatnonzero(codes < 0)
    if bad.size:
        position = int(bad[0])
        raise AlphabetError(
            f"Character {text[position]!r} at index {position} is not one of {LETTERS}."
        )
    return codes


def letter_index(ch: str) -> int:
    """Returns the alphabet index of a single character, or -1 if it is not DNA."""
    return LETTERS.find(ch) if len(ch) == 1 else -1


def is_dna(text: str) -> bool:
    try:
        encode(text)
    except AlphabetError:
        return False
    return True
