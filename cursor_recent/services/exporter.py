"""
Export recent folders to JSON or CSV files.
"""
import json
import logging
from pathlib import Path
from typing import List, Union

import pandas as pd

from cursor_recent.core.models import RecentFolderEntry

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ["json", "csv"]


def entries_to_dataframe(entries: List[RecentFolderEntry]) -> pd.DataFrame:
    """
    Convert entries to a DataFrame with title and path columns.

    The shared icon is left out.
    """
    rows = [{"title": entry.title, "path": entry.description} for entry in entries]
    return pd.DataFrame(rows, columns=["title", "path"])


def export_entries(
    entries: List[RecentFolderEntry],
    output_file: Union[str, Path],
    format: str = "json",
) -> str:
    """
    Write entries to a file.

    Args:
        entries: Entries to export, in display order
        output_file: Destination file
        format: 'json' or 'csv'

    Returns:
        Path to the written file

    Raises:
        ValueError: If format is not supported
    """
    if format not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format: {format}")

    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if format == "csv":
        entries_to_dataframe(entries).to_csv(output_path, index=False)
    else:
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump([entry.to_dict() for entry in entries], f, indent=2, ensure_ascii=False)

    logger.info("Exported %d folders to %s", len(entries), output_path)
    return str(output_path)
