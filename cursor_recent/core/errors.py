"""
Exceptions raised while reading Cursor's recent folders or launching Cursor.
"""
from pathlib import Path
from typing import Union


class RecentFoldersError(Exception):
    """Base exception for cursor_recent failures."""
    pass


class NotFoundError(RecentFoldersError):
    """Raised when the state database or the recent list cannot be found."""
    pass


class DatabaseNotFoundError(NotFoundError):
    """Raised when Cursor's state.vscdb does not exist."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = str(db_path)
        super().__init__(f"Cursor state database not found: {self.db_path}")


class RecentListNotFoundError(NotFoundError):
    """Raised when ItemTable has no recently opened paths row."""

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = str(db_path)
        super().__init__(f"No recently opened paths list in {self.db_path}")


class ParseError(RecentFoldersError):
    """Raised when stored data is malformed."""
    pass


class RecentListParseError(ParseError):
    """Raised when the recently opened paths value is not the expected JSON shape."""
    pass


class IconReadError(RecentFoldersError, IOError):
    """Raised when the bundled icon cannot be read."""
    pass


class LaunchError(RecentFoldersError):
    """Raised when the cursor command cannot be launched."""
    pass
