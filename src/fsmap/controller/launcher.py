"""Open files with the operating system's default application."""

import logging
import subprocess
import sys
from pathlib import Path

from fsmap.errors import LaunchError


logger = logging.getLogger(__name__)


def launch_command(path: Path, platform: str | None = None) -> tuple[list[str], bool]:
    """Build the command that opens a file on the given platform.

    Args:
        path: File to open
        platform: ``sys.platform`` value (current platform if None)

    Returns:
        Tuple of (argv, use_shell)
    """
    platform = platform or sys.platform
    if platform == "darwin":
        return ["open", str(path)], False
    if platform == "win32":
        return ["start", "", str(path)], True
    return ["xdg-open", str(path)], False


def open_file(path: Path) -> None:
    """Open a file with the default application.

    The launcher process is started and not waited for.

    Args:
        path: File to open

    Raises:
        LaunchError: If the file cannot be opened
    """
    path = Path(path)

    if not path.exists():
        raise LaunchError(path, "File does not exist")

    if not path.is_file():
        raise LaunchError(path, "Path is not a file")

    args, shell = launch_command(path)
    try:
        subprocess.Popen(
            args,
            shell=shell,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError as e:
        raise LaunchError(path, "Default application launcher not found on this system") from e
    except OSError as e:
        raise LaunchError(path, f"Failed to open file: {e}") from e

    logger.info(f"Opened {path}")
