"""Reading whole text files."""

from __future__ import annotations

import os


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole content of a text file.

    Raises OSError (for example FileNotFoundError) when the file cannot be opened.
    """
    with open(path, "r") as handle:
        return handle.read()