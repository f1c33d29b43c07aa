"""Directory listing for the layout engine."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from fsmap.errors import AccessError, NotFoundError
from fsmap.model.entry import Entry


logger = logging.getLogger(__name__)


class HierarchyProvider(ABC):
    """Contract for returning the immediate entries of a directory.

    Implementations may return entries in any order; the layout engine
    places them in exactly the order received.
    """

    @abstractmethod
    def list(self, path: Path) -> list[Entry]:
        """List the immediate entries of a directory.

        Args:
            path: Directory to list

        Returns:
            Entries of the directory

        Raises:
            AccessError: If the directory cannot be read
            NotFoundError: If the directory does not exist
        """
        pass


class FileSystemProvider(HierarchyProvider):
    """Lists the real file system through pathlib."""

    def __init__(self, sort_entries: bool = True) -> None:
        """Initialize the provider.

        Args:
            sort_entries: Return directories first, then files, each sorted by name
        """
        self.sort_entries = sort_entries

    def list(self, path: Path) -> list[Entry]:
        path = Path(path)
        try:
            children = list(path.iterdir())
        except PermissionError as e:
            raise AccessError(path, e.strerror or "permission denied") from e
        except FileNotFoundError as e:
            raise NotFoundError(path, "no such directory") from e
        except NotADirectoryError as e:
            raise NotFoundError(path, "not a directory") from e
        except OSError as e:
            raise AccessError(path, str(e)) from e

        entries = [Entry.from_path(child) for child in children]
        logger.debug(f"Listed {len(entries)} entries in {path}")

        if not self.sort_entries:
            return entries

        dirs = sorted((e for e in entries if e.is_directory), key=lambda e: e.name)
        files = sorted((e for e in entries if not e.is_directory), key=lambda e: e.name)
        return dirs + files
