"""Model layer for fsmap.

This module contains the file system entries, the directory provider
and the per-path expansion state shared by one viewing session.
"""

from fsmap.model.entry import Entry, HIDDEN_MARKER, canonical_path
from fsmap.model.expansion import ExpansionSnapshot, ExpansionState
from fsmap.model.provider import FileSystemProvider, HierarchyProvider

__all__ = [
    "Entry",
    "HIDDEN_MARKER",
    "canonical_path",
    "ExpansionSnapshot",
    "ExpansionState",
    "FileSystemProvider",
    "HierarchyProvider",
]
