"""
Search and reopen folders recently opened in the Cursor editor.
"""

from cursor_recent.core.models import RecentFolderEntry
from cursor_recent.readers.recent_reader import list_recent_folders
from cursor_recent.services.launcher import open_folder

__version__ = "0.1.0"

__all__ = ["RecentFolderEntry", "list_recent_folders", "open_folder"]
