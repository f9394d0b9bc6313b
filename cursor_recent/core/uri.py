"""
Conversion of Cursor folder URIs to filesystem paths.
"""
import re
from typing import Optional
from urllib.parse import unquote

from cursor_recent.core.config import TargetOS

_DRIVE_RE = re.compile(r"^[a-zA-Z]:")
_SLASH_DRIVE_RE = re.compile(r"^/([a-zA-Z]):")


def folder_uri_to_path(folder_uri: str, target_os: Optional[TargetOS] = None) -> str:
    """
    Convert a ``file://`` folder URI into a plain filesystem path.

    Parameters
    ----
    folder_uri : str
        URI as stored by Cursor, e.g. ``file:///Users/a/my%20proj``
    target_os : TargetOS, optional
        OS family whose path rules apply. If None, uses the running platform.

    Returns
    ----
    str
        Decoded path, e.g. ``/Users/a/my proj`` or ``C:/Users/a/proj``
    """
    if target_os is None:
        target_os = TargetOS.current()

    path = folder_uri
    rooted = False
    if path.startswith("file:///"):
        path = path[len("file:///"):]
        rooted = True
    elif path.startswith("file://"):
        path = path[len("file://"):]

    path = unquote(path)

    if target_os == TargetOS.WINDOWS:
        if not _DRIVE_RE.match(path):
            path = _SLASH_DRIVE_RE.sub(r"\1:", path)
        return path

    # POSIX paths keep the root consumed by the third slash
    if rooted and not path.startswith("/"):
        path = "/" + path
    return path


def path_title(path: str) -> str:
    """
    Return the last segment of a path, ignoring trailing separators.

    Behaves like basename: a bare root ("/") yields "", and a drive root
    ("C:/") yields the drive ("C:").
    """
    trimmed = path.rstrip("/\\")
    if not trimmed:
        return ""
    return re.split(r"[/\\]", trimmed)[-1]
