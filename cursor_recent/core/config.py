"""
Configuration and path resolution for Cursor Recent.

Centralizes OS-specific path logic for the Cursor global state database and
the constants shared by the reader, launcher and CLI.
"""
import platform
from enum import Enum
from pathlib import Path
from typing import Optional

STATE_DB_FILENAME = "state.vscdb"

# Key holding the recently opened folders/files/workspaces in ItemTable
RECENT_PATHS_KEY_PATTERN = "%history.recentlyOpenedPathsList%"

DEFAULT_CURSOR_COMMAND = "cursor"

ICON_PATH = Path(__file__).resolve().parent.parent / "assets" / "icon.png"

PLACEHOLDER = "Search folders recently opened in Cursor"


class TargetOS(str, Enum):
    """Operating system family used to resolve Cursor paths."""
    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def current(cls) -> "TargetOS":
        """Map the running platform to a TargetOS (unknown systems count as Linux)."""
        system = platform.system()
        if system == "Windows":
            return cls.WINDOWS
        elif system == "Darwin":
            return cls.MACOS
        return cls.LINUX


def get_cursor_global_storage_path(
    target_os: Optional[TargetOS] = None, home: Optional[Path] = None
) -> Path:
    """
    Get the path to Cursor global storage directory.

    Parameters
    ----
    target_os : TargetOS, optional
        OS family to resolve for. If None, uses the running platform.
    home : Path, optional
        Home directory. If None, uses the current user's home.

    Returns
    ----
    Path
        Path to globalStorage directory
    """
    if target_os is None:
        target_os = TargetOS.current()
    if home is None:
        home = Path.home()
    home = Path(home)

    if target_os == TargetOS.WINDOWS:
        return home / "AppData" / "Roaming" / "Cursor" / "User" / "globalStorage"
    elif target_os == TargetOS.MACOS:
        return (
            home
            / "Library"
            / "Application Support"
            / "Cursor"
            / "User"
            / "globalStorage"
        )
    # Linux and other Unix-likes
    return home / ".config" / "Cursor" / "User" / "globalStorage"


def get_state_db_path(
    target_os: Optional[TargetOS] = None, home: Optional[Path] = None
) -> Path:
    """
    Get the path to Cursor's global state.vscdb file.

    Returns
    ----
    Path
        Path to globalStorage/state.vscdb
    """
    return get_cursor_global_storage_path(target_os, home) / STATE_DB_FILENAME
