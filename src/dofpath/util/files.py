"""File writing helpers."""

from __future__ import annotations

from pathlib import Path


def write_to_file(text: str, path: str | Path, *, append: bool = False) -> Path:
    """Write ``text`` to ``path``, overwriting unless ``append`` is set.

    The file is created when missing. I/O errors propagate once the handle is
    closed.
    """
    dest = Path(path)
    with dest.open("a" if append else "w", encoding="utf-8") as handle:
        handle.write(text)
    return dest


__all__ = ["write_to_file"]
