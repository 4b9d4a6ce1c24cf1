"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def text_file(tmp_path):
    """Create a small UTF-8 text file."""
    path = tmp_path / "notes.txt"
    path.write_bytes(b"hello file")
    return path


@pytest.fixture
def binary_file(tmp_path):
    """Create a binary file larger than one read chunk."""
    path = tmp_path / "blob.png"
    path.write_bytes(bytes(range(256)) * 10)
    return path
