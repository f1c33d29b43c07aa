"""Per-path expansion flags for directory nodes."""

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from fsmap.model.entry import canonical_path


class ExpansionState:
    """Mapping from canonical path to an "expanded" flag.

    A path that was never toggled is collapsed. The state is owned by
    one viewing session and is only changed by explicit toggles; it is
    never cleared as a side effect of layout.
    """

    def __init__(self, expanded: Mapping[str, bool] | None = None) -> None:
        self._flags: dict[str, bool] = {}
        if expanded:
            for path, flag in expanded.items():
                self._flags[canonical_path(path)] = bool(flag)

    def toggle(self, path: Path | str) -> bool:
        """Flip the flag for a path.

        Args:
            path: Path to toggle (not required to be a directory)

        Returns:
            The new flag value
        """
        key = canonical_path(path)
        value = not self._flags.get(key, False)
        self._flags[key] = value
        return value

    def is_expanded(self, path: Path | str) -> bool:
        """Check whether a path is expanded (False when never toggled)."""
        return self._flags.get(canonical_path(path), False)

    def expand(self, path: Path | str) -> None:
        self._flags[canonical_path(path)] = True

    def collapse(self, path: Path | str) -> None:
        self._flags[canonical_path(path)] = False

    def expanded_paths(self) -> list[str]:
        """Get all paths currently marked expanded."""
        return [path for path, flag in self._flags.items() if flag]

    def snapshot(self) -> "ExpansionSnapshot":
        """Take an immutable copy for a layout pass to read."""
        return ExpansionSnapshot(dict(self._flags))

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        return canonical_path(path) in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[str]:
        return iter(self._flags)

    def __repr__(self) -> str:
        return f"ExpansionState(expanded={len(self.expanded_paths())}, tracked={len(self._flags)})"


class ExpansionSnapshot:
    """Read-only view of an ExpansionState taken at one point in time."""

    def __init__(self, flags: dict[str, bool]) -> None:
        self._flags = MappingProxyType(flags)

    def is_expanded(self, path: Path | str) -> bool:
        return self._flags.get(canonical_path(path), False)

    def __len__(self) -> int:
        return len(self._flags)
