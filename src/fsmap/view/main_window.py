"""Main application window for fsmap.

Provides the top-level window containing the diagram canvas and the
menu actions for choosing and refreshing the root directory.
"""

from pathlib import Path

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QFileDialog, QLabel, QMainWindow, QMessageBox, QStatusBar

from fsmap.view.canvas import GraphCanvas


class MainWindow(QMainWindow):
    """Main window for the fsmap application."""

    # Signals
    directory_changed = pyqtSignal(Path)
    refresh_requested = pyqtSignal()

    def __init__(self, root_path: Path) -> None:
        """Initialize main window.

        Args:
            root_path: Root directory path to visualize
        """
        super().__init__()

        self._root_path = root_path
        self._canvas: GraphCanvas | None = None
        self._stats_label: QLabel | None = None

        self._setup_ui()
        self._setup_menu_bar()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.resize(1400, 900)
        self._update_title()

        self._canvas = GraphCanvas(self)
        self.setCentralWidget(self._canvas)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)
        self._stats_label = QLabel()
        self._status_bar.addPermanentWidget(self._stats_label)
        self._status_bar.showMessage(f"Root: {self._root_path}")

    def _setup_menu_bar(self) -> None:
        """Set up the menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        open_action = QAction("&Open Directory...", self)
        open_action.setShortcut("Ctrl+O")
        open_action.triggered.connect(self._open_directory)
        file_menu.addAction(open_action)

        up_action = QAction("&Parent Directory", self)
        up_action.setShortcut("Alt+Up")
        up_action.triggered.connect(self._navigate_up)
        file_menu.addAction(up_action)

        file_menu.addSeparator()

        refresh_action = QAction("&Refresh", self)
        refresh_action.setShortcut("F5")
        refresh_action.triggered.connect(self.refresh_requested.emit)
        file_menu.addAction(refresh_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        fit_action = QAction("&Fit to Window", self)
        fit_action.setShortcut("Ctrl+0")
        fit_action.triggered.connect(self._canvas.fit_to_layout)
        view_menu.addAction(fit_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    @property
    def canvas(self) -> GraphCanvas:
        """Get the diagram canvas."""
        return self._canvas

    def set_root_path(self, path: Path) -> None:
        self._root_path = path
        self._update_title()

    def set_status_message(self, message: str) -> None:
        self._status_bar.showMessage(message)

    def update_stats(self, node_count: int, failure_count: int = 0) -> None:
        text = f"Nodes: {node_count}"
        if failure_count:
            text += f"  Unreadable: {failure_count}"
        self._stats_label.setText(text)

    def show_launch_error(self, name: str, reason: str) -> None:
        QMessageBox.warning(self, "Cannot Open File", f"Failed to open {name}:\n{reason}")

    def _update_title(self) -> None:
        self.setWindowTitle(f"fsmap - {self._root_path}")

    # Menu actions

    def _open_directory(self) -> None:
        """Open a directory via file dialog."""
        path = QFileDialog.getExistingDirectory(
            self,
            "Select Directory",
            str(self._root_path),
        )
        if path:
            self.directory_changed.emit(Path(path))

    def _navigate_up(self) -> None:
        """Navigate to parent directory."""
        parent = self._root_path.parent
        if parent != self._root_path and parent.exists():
            self.directory_changed.emit(parent)

    def _show_about(self) -> None:
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About fsmap",
            "<h3>fsmap</h3>"
            "<p>Interactive node-link map of a directory tree.</p>"
            "<p>Click a directory to expand or collapse it, click a file to open it. "
            "Drag to pan, use the mouse wheel to zoom.</p>",
        )
