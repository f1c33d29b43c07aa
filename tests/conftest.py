"""Shared fixtures for Qt tests.

Qt tests run on the offscreen platform and are skipped when PyQt6 cannot
be imported.
"""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError as e:
        pytest.skip(f"PyQt6 unavailable: {e}")
    app = QApplication.instance() or QApplication([])
    yield app
