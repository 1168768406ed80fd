'''Reads DNA sequence files into a single string.'''
from typing import Optional

from loguru import logger


def load_text(path: str) -> Optional[str]:
    """Reads a file and concatenates its whitespace-separated tokens.

    Spaces, tabs and newlines only separate tokens; they are dropped and the
    tokens are joined in file order with no separator. The alphabet is not
    checked here.

    Args:
        path: Path of the file to read.

    Returns:
        The concatenated tokens, "" if the file holds only whitespace, or None
        if the file does not exist or cannot be read.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            tokens = [token for line in f for token in line.split()]
    except FileNotFoundError:
        logger.warning(f"{path} does not exist.")
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not read {path}: {e}")
        return None
    return "".join(tokens)
