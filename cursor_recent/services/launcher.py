"""
Launcher for opening folders in Cursor.

Runs the ``cursor`` command line tool with the folder as its only argument.
Launches are fire-and-forget: the outcome is only logged.
"""
import logging
import subprocess
import threading
from typing import List, Optional

from cursor_recent.core.config import DEFAULT_CURSOR_COMMAND
from cursor_recent.core.errors import LaunchError

logger = logging.getLogger(__name__)

TROUBLESHOOTING_HINTS = (
    "--- Troubleshooting ---",
    "1. Make sure the 'cursor' command is on your PATH.",
    "2. In Cursor, open the command palette (Ctrl+Shift+P) and run "
    "'Shell Command: Install 'cursor' command in PATH'.",
    "3. If it still fails, pass the full path to the Cursor executable with --command.",
)


def _log_troubleshooting():
    for line in TROUBLESHOOTING_HINTS:
        logger.error(line)


class FolderLauncher:
    """
    Opens folders in Cursor without blocking the caller.

    Each launch starts a child process and a daemon thread that waits for it
    and logs the result. Nothing is returned to the caller.
    """

    def __init__(self, command: str = DEFAULT_CURSOR_COMMAND):
        """
        Initialize launcher.

        Args:
            command: Executable used to open folders (default: cursor)
        """
        self.command = command
        self._watchers: List[threading.Thread] = []
        self._lock = threading.Lock()

    def launch(self, path: str) -> subprocess.Popen:
        """
        Start the command for a folder without waiting for it.

        Args:
            path: Folder to open, passed as a single argument

        Returns:
            The running child process

        Raises:
            LaunchError: If path is empty or the command cannot be started
        """
        if not path:
            raise LaunchError("No folder path given")
        argv = [self.command, path]
        logger.debug("Running %s", argv)
        try:
            return subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as e:
            raise LaunchError(f"Failed to run '{self.command}': {e}") from e

    def open_folder(self, path: str) -> None:
        """
        Open a folder in Cursor. Failures are logged, never raised.

        Args:
            path: Folder to open
        """
        try:
            process = self.launch(path)
        except LaunchError as e:
            logger.error("Error running command: %s", e)
            if e.__cause__ is not None:
                _log_troubleshooting()
            return

        watcher = threading.Thread(
            target=self._wait_and_log,
            args=(process, path),
            name=f"cursor-launch-{process.pid}",
            daemon=True,
        )
        with self._lock:
            self._watchers = [t for t in self._watchers if t.is_alive()]
            self._watchers.append(watcher)
        watcher.start()

    def _wait_and_log(self, process: subprocess.Popen, path: str):
        """Wait for the child process and log its outcome."""
        try:
            stdout, stderr = process.communicate()
        except (OSError, ValueError) as e:
            logger.error("Error waiting for command: %s", e)
            return

        if process.returncode != 0:
            logger.error(
                "Command '%s' exited with code %s: %s",
                self.command,
                process.returncode,
                (stderr or "").strip(),
            )
            _log_troubleshooting()
            return

        if stderr:
            logger.warning("Command wrote to stderr: %s", stderr.strip())
        logger.info("Command stdout: %s", (stdout or "").strip())
        logger.info("Cursor should now be opening folder: %s", path)

    def wait(self, timeout: Optional[float] = None):
        """
        Wait for outstanding launches to finish logging.

        Args:
            timeout: Seconds to wait per launch (default: no limit)
        """
        with self._lock:
            watchers = list(self._watchers)
            self._watchers.clear()
        for watcher in watchers:
            watcher.join(timeout)


def open_folder(path: str, command: Optional[str] = None) -> None:
    """
    Open a folder in Cursor (fire-and-forget).

    Args:
        path: Folder to open
        command: Executable to run instead of ``cursor``
    """
    FolderLauncher(command or DEFAULT_CURSOR_COMMAND).open_folder(path)
