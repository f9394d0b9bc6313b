"""
Reader for Cursor's recently opened folders.

The list lives in globalStorage/state.vscdb, ItemTable row
"history.recentlyOpenedPathsList", as JSON of the form
{"entries": [{"folderUri": "file:///..."}, {"fileUri": ...}, ...]}
ordered most recent first.
"""
import json
import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from cursor_recent.core.config import (
    RECENT_PATHS_KEY_PATTERN,
    TargetOS,
    get_state_db_path,
)
from cursor_recent.core.errors import (
    DatabaseNotFoundError,
    RecentFoldersError,
    RecentListNotFoundError,
    RecentListParseError,
)
from cursor_recent.core.models import RecentFolderEntry
from cursor_recent.core.uri import folder_uri_to_path, path_title
from cursor_recent.services.icon import load_icon_data_uri

logger = logging.getLogger(__name__)


class RecentFoldersReader:
    """
    Reads the recently opened folders list from Cursor's global state database.

    The database is owned by Cursor and is only ever opened read-only.
    Every read opens and closes its own connection.
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        target_os: Optional[TargetOS] = None,
        icon_path: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize reader.

        Parameters
        ----
        db_path : Path, optional
            Path to state.vscdb. If None, uses the default location for target_os.
        target_os : TargetOS, optional
            OS family for path resolution and URI rules. If None, uses the running platform.
        icon_path : Path, optional
            Icon attached to each entry. If None, uses the bundled icon.
        """
        if target_os is None:
            target_os = TargetOS.current()
        self.target_os = target_os
        if db_path is None:
            db_path = get_state_db_path(target_os)
        self.db_path = Path(db_path)
        self.icon_path = icon_path

    def _connect(self) -> sqlite3.Connection:
        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        return sqlite3.connect(uri, uri=True)

    def _parse_entries(self, value: Any) -> List[Any]:
        """
        Parse the stored JSON value and return its "entries" list.

        Raises
        ----
        RecentListParseError
            If the value is not JSON or has no list under "entries"
        """
        if value is None:
            raise RecentListParseError("Recently opened paths value is NULL")
        if not isinstance(value, (str, bytes)):
            raise RecentListParseError(
                f"Expected text or blob value, got {type(value).__name__}"
            )
        try:
            if isinstance(value, bytes):
                data = json.loads(value.decode("utf-8"))
            else:
                data = json.loads(value)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RecentListParseError(f"Invalid recently opened paths JSON: {e}") from e

        if not isinstance(data, dict):
            raise RecentListParseError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        entries = data.get("entries")
        if not isinstance(entries, list):
            raise RecentListParseError("Recently opened paths JSON has no 'entries' list")
        return entries

    def _to_entry(self, item: Dict[str, Any], icon: str) -> RecentFolderEntry:
        folder_path = folder_uri_to_path(item["folderUri"], self.target_os)
        return RecentFolderEntry(
            title=path_title(folder_path),
            description=folder_path,
            icon=icon,
        )

    def read_entries(self) -> List[RecentFolderEntry]:
        """
        Read recent folders, most recent first.

        Returns
        ----
        List[RecentFolderEntry]
            One entry per stored item with a folderUri

        Raises
        ----
        DatabaseNotFoundError
            If state.vscdb does not exist
        RecentListNotFoundError
            If no ItemTable row matches the recent paths key
        RecentListParseError
            If the stored value is malformed
        IconReadError
            If the icon cannot be read
        sqlite3.Error
            On database failures
        """
        if not self.db_path.exists():
            raise DatabaseNotFoundError(self.db_path)

        conn = None
        try:
            conn = self._connect()
            cursor = conn.cursor()
            cursor.execute(
                "SELECT value FROM ItemTable WHERE key LIKE ?",
                (RECENT_PATHS_KEY_PATTERN,),
            )
            row = cursor.fetchone()
            if not row:
                raise RecentListNotFoundError(self.db_path)

            logger.debug("Recently opened paths row: %s", row[0])
            raw_entries = self._parse_entries(row[0])

            icon = load_icon_data_uri(self.icon_path)

            entries = []
            for item in raw_entries:
                if not isinstance(item, dict):
                    continue
                folder_uri = item.get("folderUri")
                # Files and workspaces carry fileUri/workspace instead
                if not folder_uri or not isinstance(folder_uri, str):
                    continue
                entries.append(self._to_entry(item, icon))

            logger.debug(
                "Read %d recent folders from %d stored entries",
                len(entries),
                len(raw_entries),
            )
            return entries

        finally:
            if conn is not None:
                try:
                    conn.close()
                except sqlite3.Error as e:
                    logger.warning("Failed to close database connection: %s", e)


def list_recent_folders(
    db_path: Optional[Union[str, Path]] = None,
    target_os: Optional[TargetOS] = None,
    icon_path: Optional[Union[str, Path]] = None,
) -> List[RecentFolderEntry]:
    """
    List Cursor's recently opened folders.

    Never raises: every failure is logged and results in an empty list.

    Args:
        db_path: Path to state.vscdb (default: OS-specific location)
        target_os: OS family for path rules (default: running platform)
        icon_path: Icon attached to each entry (default: bundled icon)

    Returns:
        Recent folders, most recent first
    """
    try:
        reader = RecentFoldersReader(db_path, target_os, icon_path)
        return reader.read_entries()
    except RecentFoldersError as e:
        logger.error("Failed to read Cursor recent folders: %s", e)
    except (sqlite3.Error, OSError, UnicodeDecodeError) as e:
        logger.error("Error reading Cursor state database: %s", e)
    return []
