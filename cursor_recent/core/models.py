"""
Domain models for Cursor's recently opened folders.
"""
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class RecentFolderEntry:
    """A folder from Cursor's recently opened list, shaped for a launcher list item."""
    title: str = ""
    description: str = ""
    icon: str = field(default="", repr=False, compare=False)

    @property
    def path(self) -> str:
        """Filesystem path of the folder."""
        return self.description

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for list rendering or export."""
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
        }
