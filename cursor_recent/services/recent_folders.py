"""
Launcher-facing service for Cursor's recent folders.

Provides the three operations a search-and-select launcher list needs:
- enter(): full list when the feature is activated
- search(): list filtered by the typed text
- select(): open the chosen folder and leave the launcher
"""
import logging
from typing import Callable, Iterable, List, Optional

from cursor_recent.core.config import PLACEHOLDER
from cursor_recent.core.models import RecentFolderEntry
from cursor_recent.readers.recent_reader import list_recent_folders
from cursor_recent.services.launcher import FolderLauncher

logger = logging.getLogger(__name__)


def filter_entries(
    entries: Iterable[RecentFolderEntry], search_word: str
) -> List[RecentFolderEntry]:
    """
    Keep entries whose title contains the search word (case-sensitive).

    Args:
        entries: Entries in display order
        search_word: Substring to look for; empty keeps everything

    Returns:
        Matching entries, order preserved
    """
    return [entry for entry in entries if search_word in entry.title]


class RecentFoldersService:
    """
    Search and open Cursor's recently opened folders.

    The list is read fresh from Cursor's database on every call.
    """

    placeholder = PLACEHOLDER

    def __init__(
        self,
        list_folders: Callable[[], List[RecentFolderEntry]] = list_recent_folders,
        launcher: Optional[FolderLauncher] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize service.

        Args:
            list_folders: Returns the current recent folders
            launcher: Launcher used on select (default: FolderLauncher())
            on_exit: Called right after a folder is launched, e.g. to hide the launcher
        """
        self.list_folders = list_folders
        self.launcher = launcher or FolderLauncher()
        self.on_exit = on_exit

    def enter(self) -> List[RecentFolderEntry]:
        """List all recent folders."""
        return self.list_folders()

    def search(self, search_word: str) -> List[RecentFolderEntry]:
        """List recent folders whose title contains search_word."""
        results = filter_entries(self.list_folders(), search_word)
        logger.debug("Search %r matched %d folders", search_word, len(results))
        return results

    def select(self, entry: RecentFolderEntry) -> None:
        """
        Open the selected folder in Cursor, then exit.

        Does not wait for Cursor to start.
        """
        self.launcher.open_folder(entry.description)
        if self.on_exit is not None:
            self.on_exit()
