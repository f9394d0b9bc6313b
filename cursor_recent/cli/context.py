"""
CLI context and configuration management.

Provides shared context for Click commands with launcher lifecycle management.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
import logging

from cursor_recent.core.config import DEFAULT_CURSOR_COMMAND
from cursor_recent.core.models import RecentFolderEntry
from cursor_recent.readers.recent_reader import list_recent_folders
from cursor_recent.services.launcher import FolderLauncher

logger = logging.getLogger(__name__)


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.

    Attributes:
        verbose: Enable verbose logging output
        db_path: Optional path to state.vscdb (uses OS-specific default if None)
        command: Executable used to open folders
        _launcher: Internal launcher (lazy-initialized)
    """
    verbose: bool = False
    db_path: Optional[Path] = None
    command: str = DEFAULT_CURSOR_COMMAND
    _launcher: Optional[FolderLauncher] = field(default=None, repr=False, init=False)

    def list_folders(self) -> List[RecentFolderEntry]:
        """Read the recent folders from the configured database."""
        if self.verbose and self.db_path:
            logger.info("Reading database: %s", self.db_path)
        return list_recent_folders(db_path=self.db_path)

    def get_launcher(self) -> FolderLauncher:
        """Get or create the folder launcher."""
        if self._launcher is None:
            self._launcher = FolderLauncher(self.command)
        return self._launcher

    def close(self):
        """
        Clean up resources.

        Waits for pending launches so their outcome is logged before the
        process exits. Called via Click's result_callback.
        """
        if self._launcher is not None:
            if self.verbose:
                logger.debug("Waiting for pending launches")
            self._launcher.wait()
            self._launcher = None
