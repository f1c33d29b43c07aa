"""Controller layer for fsmap.

This module provides the application coordination:

- LayoutSession: Expansion state and ordering of layout passes
- open_file: Launch a file with the OS default application
- Controller: Main application coordinator (Qt)
"""

from fsmap.controller.launcher import launch_command, open_file
from fsmap.controller.session import LayoutSession, PassTicket

__all__ = [
    "LayoutSession",
    "PassTicket",
    "launch_command",
    "open_file",
]
