"""
Core domain models, errors and path resolution for Cursor Recent.
"""

from cursor_recent.core.config import (
    TargetOS,
    get_cursor_global_storage_path,
    get_state_db_path,
)
from cursor_recent.core.models import RecentFolderEntry

__all__ = [
    "TargetOS",
    "get_cursor_global_storage_path",
    "get_state_db_path",
    "RecentFolderEntry",
]
