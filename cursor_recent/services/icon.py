"""
Icon shared by every recent folder list item.
"""
import base64
import logging
from pathlib import Path
from typing import Optional, Union

from cursor_recent.core.config import ICON_PATH
from cursor_recent.core.errors import IconReadError

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/png;base64,"


def load_icon_data_uri(icon_path: Optional[Union[str, Path]] = None) -> str:
    """
    Read the icon image and encode it as a base64 data URI.

    Args:
        icon_path: PNG file to read (default: bundled assets/icon.png)

    Returns:
        ``data:image/png;base64,...`` string

    Raises:
        IconReadError: If the file cannot be read
    """
    path = Path(icon_path) if icon_path is not None else ICON_PATH
    try:
        data = path.read_bytes()
    except OSError as e:
        raise IconReadError(f"Failed to read icon {path}: {e}") from e

    logger.debug("Loaded icon %s (%d bytes)", path, len(data))
    return DATA_URI_PREFIX + base64.b64encode(data).decode("ascii")
