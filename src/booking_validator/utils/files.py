"""File reading capability passed to components that load files.

Components take a ``reader`` argument instead of opening files directly so
tests can substitute an in-memory fake.
"""

from pathlib import Path
from typing import Callable

FileReader = Callable[[str], bytes]


def read_file(path: str) -> bytes:
    """Read a file from the local filesystem."""
    return Path(path).read_bytes()
