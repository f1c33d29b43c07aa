"""Viewing session state shared between click handlers and layout passes."""

import logging
from dataclasses import dataclass
from pathlib import Path

from fsmap.model.entry import canonical_path
from fsmap.model.expansion import ExpansionSnapshot, ExpansionState


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassTicket:
    """Everything a layout pass needs, fixed at the moment it is issued.

    Attributes:
        generation: Sequence number of the pass within the session
        root: Directory the pass lays out
        expansion: Frozen expansion flags the pass reads
    """

    generation: int
    root: Path
    expansion: ExpansionSnapshot


class LayoutSession:
    """Owns the expansion state of one tree view and orders its layout passes.

    Passes are never cancelled. Every issued pass gets a generation
    number, and only the result of the most recently issued pass is
    accepted for painting, so a slow older pass that finishes last
    cannot replace a newer picture.
    """

    def __init__(self, root: Path, expansion: ExpansionState | None = None) -> None:
        self._root = Path(root)
        self._expansion = expansion if expansion is not None else ExpansionState()
        self._generation = 0
        self._painted_generation = 0

    @property
    def root(self) -> Path:
        return self._root

    @property
    def expansion(self) -> ExpansionState:
        return self._expansion

    @property
    def generation(self) -> int:
        """Generation of the most recently issued pass."""
        return self._generation

    @property
    def painted_generation(self) -> int:
        """Generation of the last accepted pass (0 before any)."""
        return self._painted_generation

    def set_root(self, root: Path) -> None:
        """Switch the session to a new root directory.

        The expansion state is kept, so returning to a directory shows
        it the way it was left.
        """
        self._root = Path(root)

    def toggle(self, path: Path | str) -> bool:
        """Flip a directory's expansion flag before the next pass is issued."""
        expanded = self._expansion.toggle(path)
        logger.debug(f"{'Expanded' if expanded else 'Collapsed'} {canonical_path(path)}")
        return expanded

    def issue(self) -> PassTicket:
        """Start a new layout pass."""
        self._generation += 1
        return PassTicket(
            generation=self._generation,
            root=self._root,
            expansion=self._expansion.snapshot(),
        )

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    def accept(self, generation: int) -> bool:
        """Decide whether a finished pass may be painted.

        Args:
            generation: Generation of the finished pass

        Returns:
            True if this is the newest issued pass and should be painted
        """
        if not self.is_current(generation):
            logger.debug(f"Dropping stale layout pass {generation} (current {self._generation})")
            return False
        self._painted_generation = generation
        return True
