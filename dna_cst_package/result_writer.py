'''Writes an LCS witness to a result file.'''
import os

from loguru import logger


def write_witness(path: str, witness: str) -> bool:
    """Overwrites `path` with `witness` followed by a single newline.

    Failures are logged rather than raised, so a caller that only needs the
    similarity score is not interrupted by an unwritable output path.

    Args:
        path: Destination file. An existing file is replaced.
        witness: The subsequence to write (may be empty).

    Returns:
        True if the file was written, False otherwise.
    """
    if os.path.exists(path):
        logger.debug(f"Overwriting existing file {path}")
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(witness + "\n")
    except OSError as e:
        logger.error(f"Could not write result to {path}: {e}")
        return False
    return True
