"""Entry class representing a single file system item."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Self


HIDDEN_MARKER = "."


def canonical_path(path: Path | str) -> str:
    """Return the canonical key used for a path.

    The path is made absolute and normalised, but symlinks are not
    resolved so the key stays stable for paths that no longer exist.
    """
    return os.path.normpath(os.path.abspath(os.fspath(path)))


@dataclass(frozen=True)
class Entry:
    """One file or directory returned by a directory listing.

    Attributes:
        name: Base name of the file/directory
        is_directory: Whether the entry is a directory
        path: Absolute path to the file/directory
    """

    name: str
    is_directory: bool
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> Self:
        """Create an Entry from a filesystem path.

        Args:
            path: Path to the file/directory

        Returns:
            A new Entry; unreadable paths are reported as files
        """
        try:
            is_directory = path.is_dir()
        except OSError:
            is_directory = False

        return cls(
            name=path.name,
            is_directory=is_directory,
            path=Path(canonical_path(path)),
        )

    @property
    def key(self) -> str:
        """Canonical path string used for expansion lookups."""
        return canonical_path(self.path)

    def is_hidden(self, marker: str = HIDDEN_MARKER) -> bool:
        """Check if the entry name starts with the hidden-file marker."""
        return self.name.startswith(marker)

    def __repr__(self) -> str:
        """String representation of the entry."""
        kind = "dir" if self.is_directory else "file"
        return f"Entry({kind}, {self.name})"
