"""File Lister: enumerate the entries of the input directory."""

from __future__ import annotations

from pathlib import Path


def list_files(directory: str | Path) -> list[str]:
    """Return the names of the entries directly inside ``directory``.

    Names are sorted so that repeated runs see the same order.  Nothing is
    filtered out and subdirectories are not descended into.

    Raises FileNotFoundError if the directory does not exist.
    """
    path = Path(directory)
    if not path.is_dir():
        raise FileNotFoundError(f"Stylesheet directory not found: {path}")
    return sorted(entry.name for entry in path.iterdir())
