"""Diagnostic output for dna_cst_package.

Library modules log through loguru's shared `logger` and never configure it.
Scripts (the benchmark, the stress test) call `setup_logger` once so that
missing-file, empty-input and alphabet diagnostics reach stderr at the level
they ask for.
"""

import sys
from typing import Optional, TextIO

from loguru import logger

# Plain messages for normal runs; trie build summaries at DEBUG need their origin.
_PLAIN_FORMAT = "<level>{level}</level>: {message}"
_TRACE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> "
    "<cyan>{module}.{function}:{line}</cyan> {message}"
)


def setup_logger(verbose: bool = False, debug: bool = False, sink: Optional[TextIO] = None) -> int:
    """Route package diagnostics to a single stream.

    Any handlers already attached to the loguru logger (including its default
    one) are replaced.

    Args:
        verbose: Also show INFO messages, such as empty input files and LCS summaries.
        debug: Show DEBUG messages with timestamps and source locations; implies verbose.
        sink: Stream to write to. Defaults to the current `sys.stderr`.

    Returns:
        The loguru handler id, so the caller can detach it again.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO" if verbose else "WARNING"
    return logger.add(
        sys.stderr if sink is None else sink,
        level=level,
        format=_TRACE_FORMAT if debug else _PLAIN_FORMAT,
        colorize=None,  # colour only when the stream is a terminal
    )
