"""Main controller for the application.

Coordinates between the Model, Layout and View layers: clicks on the
canvas toggle expansion or launch files, and every structural change
triggers a fresh layout pass from the root.
"""

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from fsmap.controller.launcher import open_file
from fsmap.controller.session import LayoutSession
from fsmap.controller.worker import LayoutWorker
from fsmap.errors import LaunchError
from fsmap.layout.engine import LayoutConfig, LayoutEngine, LayoutResult
from fsmap.model.entry import Entry
from fsmap.model.expansion import ExpansionState
from fsmap.model.provider import FileSystemProvider, HierarchyProvider
from fsmap.view.main_window import MainWindow
from fsmap.view.metrics import QtTextMeasurer


logger = logging.getLogger(__name__)


class Controller(QObject):
    """Main application controller.

    Manages the viewing session and coordinates between layers.
    """

    # Signals for UI updates
    layout_painted = pyqtSignal(int)  # Emits node count
    status_message = pyqtSignal(str)

    def __init__(
        self,
        root_path: Path,
        config: LayoutConfig | None = None,
        provider: HierarchyProvider | None = None,
        expansion: ExpansionState | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            root_path: Root directory path to visualize
            config: Layout configuration
            provider: Directory listing source (real file system if None)
            expansion: Initial expansion state (all collapsed if None)
        """
        super().__init__()

        self._window = MainWindow(root_path)
        self._canvas = self._window.canvas

        self._session = LayoutSession(root_path, expansion)
        self._engine = LayoutEngine(
            provider or FileSystemProvider(),
            config=config,
            measurer=QtTextMeasurer(),
        )
        self._origin = (0.0, 0.0)

        # Running passes, kept alive until their thread finishes
        self._workers: dict[int, LayoutWorker] = {}
        self._result: LayoutResult | None = None

        self._connect_signals()

    def _connect_signals(self) -> None:
        """Connect internal signals."""
        self.status_message.connect(self._window.set_status_message)

        self._canvas.node_clicked.connect(self._on_node_clicked)
        self._canvas.home_clicked.connect(self.refresh)

        self._window.directory_changed.connect(self._change_directory)
        self._window.refresh_requested.connect(self.refresh)

    def start(self) -> None:
        """Start the application - run the first layout pass."""
        self.request_layout()

    def show(self) -> None:
        """Show the main window."""
        self._window.show()

    def stop(self) -> None:
        """Wait for running layout passes to finish."""
        for worker in list(self._workers.values()):
            worker.wait()
        self._workers.clear()

    @property
    def window(self) -> MainWindow:
        return self._window

    @property
    def session(self) -> LayoutSession:
        return self._session

    @property
    def result(self) -> LayoutResult | None:
        """Last painted layout."""
        return self._result

    # Layout

    def request_layout(self) -> int:
        """Issue a full layout pass from the root.

        Returns:
            Generation of the issued pass
        """
        ticket = self._session.issue()
        worker = LayoutWorker(self._engine, ticket, self._origin)
        worker.finished_layout.connect(self._on_layout_finished)
        worker.error.connect(self._on_layout_error)
        worker.finished.connect(lambda gen=ticket.generation: self._release_worker(gen))
        self._workers[ticket.generation] = worker

        self.status_message.emit(f"Laying out {ticket.root}...")
        worker.start()
        return ticket.generation

    def _release_worker(self, generation: int) -> None:
        worker = self._workers.pop(generation, None)
        if worker is not None:
            worker.deleteLater()

    def _on_layout_finished(self, generation: int, result: LayoutResult) -> None:
        """Paint a finished pass if it is still the newest one."""
        if not self._session.accept(generation):
            return

        self._result = result
        self._canvas.show_layout(result, self._session.expansion, fit=True)
        self._window.update_stats(len(result.nodes), len(result.failures))
        self.layout_painted.emit(len(result.nodes))

        message = f"{len(result.nodes)} items under {result.root}"
        if result.failures:
            message += f" ({len(result.failures)} directories could not be read)"
        self.status_message.emit(message)

    def _on_layout_error(self, generation: int, message: str) -> None:
        if self._session.is_current(generation):
            self.status_message.emit(f"Error: {message}")

    # Input callbacks

    def _on_node_clicked(self, entry: Entry, parent_path: str) -> None:
        """Toggle a directory or launch a file.

        Args:
            entry: Clicked entry
            parent_path: Directory the entry was listed from
        """
        if entry.is_directory:
            self._session.toggle(entry.path)
            self.request_layout()
            return

        try:
            open_file(entry.path)
            self.status_message.emit(f"Opened: {entry.name}")
        except LaunchError as e:
            logger.error(f"{e}")
            self.status_message.emit(f"Error: {e.reason}")
            self._window.show_launch_error(entry.name, e.reason)

    # Directory management

    def refresh(self) -> None:
        """Recompute the layout with the current expansion state."""
        self.request_layout()

    def _change_directory(self, path: Path) -> None:
        """Change the root directory.

        Args:
            path: New root directory path
        """
        if path == self._session.root:
            return
        self._session.set_root(path)
        self._window.set_root_path(path)
        self.request_layout()
