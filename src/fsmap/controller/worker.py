"""Background layout passes using QThread."""

import logging

from PyQt6.QtCore import QThread, pyqtSignal

from fsmap.controller.session import PassTicket
from fsmap.layout.engine import LayoutEngine


logger = logging.getLogger(__name__)


class LayoutWorker(QThread):
    """Worker thread that runs one layout pass off the GUI thread."""

    # Signals
    finished_layout = pyqtSignal(int, object)  # Emits (generation, LayoutResult)
    error = pyqtSignal(int, str)  # Emits (generation, message)

    def __init__(
        self,
        engine: LayoutEngine,
        ticket: PassTicket,
        origin: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        """Initialize the layout worker.

        Args:
            engine: Engine that performs the pass
            ticket: Root, generation and frozen expansion flags for the pass
            origin: Canvas position of the root anchor
        """
        super().__init__()
        self.engine = engine
        self.ticket = ticket
        self.origin = origin

    def run(self) -> None:
        """Run the layout pass."""
        try:
            result = self.engine.layout(
                self.ticket.root,
                self.origin[0],
                self.origin[1],
                expansion=self.ticket.expansion,
            )
        except Exception as e:
            logger.exception(f"Layout pass {self.ticket.generation} failed")
            self.error.emit(self.ticket.generation, f"Layout failed: {e}")
            return

        self.finished_layout.emit(self.ticket.generation, result)
