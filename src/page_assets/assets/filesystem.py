"""Directory traversal and file resolution primitives."""

import os
from collections.abc import Iterator, Sequence
from pathlib import Path


def list_directory(directory: Path) -> list[Path]:
    """List the regular files directly inside a directory, sorted by name."""
    return sorted(p for p in directory.iterdir() if p.is_file())


def walk(directory: Path) -> Iterator[Path]:
    """Yield every regular file below a directory, depth-first, in sorted order."""
    for root, dirs, files in os.walk(directory):
        dirs.sort()
        for name in sorted(files):
            yield Path(root) / name


def resolve_file(reference_path: str, roots: Sequence[Path]) -> Path | None:
    """Find a referenced file by probing each root in order.

    Args:
        reference_path: Relative, forward-slash file path
        roots: Directories to probe, highest priority first

    Returns:
        The first existing regular file, or None if no root holds it
    """
    for root in roots:
        candidate = Path(os.path.normpath(root / reference_path))
        if candidate.is_file():
            return candidate
    return None
