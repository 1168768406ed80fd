"""Shared fixtures for the dna_cst_package tests."""

import os
import sys

import pytest
from loguru import logger

# Add the project root to sys.path to allow importing dna_cst_package without installing it
_project_root_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if _project_root_dir not in sys.path:
    sys.path.insert(0, _project_root_dir)


@pytest.fixture
def log_messages():
    """Collects the text of every loguru message emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_sequence(tmp_path):
    """Returns a helper that writes a sequence file and gives back its path as a string."""
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return _write
