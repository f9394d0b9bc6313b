"""
Readers for Cursor's state databases.
"""

from cursor_recent.readers.recent_reader import RecentFoldersReader, list_recent_folders

__all__ = ["RecentFoldersReader", "list_recent_folders"]
