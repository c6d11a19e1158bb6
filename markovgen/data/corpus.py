"""Corpus loading utilities."""

from pathlib import Path
from typing import Iterator, Union


DEFAULT_CHUNK_SIZE = 64 * 1024


def read_chars(
    path: Union[str, Path],
    chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[str]:
    """Yield the characters of a UTF-8 text file in order.

    Args:
        path: Corpus file
        chunk_size: Number of characters read from disk at a time
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be positive")
    with open(path, 'r', encoding='utf-8', newline='') as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            yield from chunk


def read_text(path: Union[str, Path]) -> str:
    """Read a whole corpus file into memory."""
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()
