"""Session adapters: the live set of open files and the working directory.

The registry mirrors a session but never owns it. ``SessionAdapter`` is the
boundary; ``MemorySession`` keeps the state in process and
``StateFileSession`` keeps it in a JSON file so the command line tool sees
the same session across invocations.
"""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

from projectdesk.exceptions import StoreError

logger = logging.getLogger(__name__)


class SessionAdapter:
    """Base class for live editor sessions."""

    def list_open_files(self) -> List[str]:
        """Return the open file paths in editor order."""
        raise NotImplementedError

    def open_file(self, path: str) -> None:
        """Open a file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        raise NotImplementedError

    def close_all_files(self) -> None:
        """Close every open file."""
        raise NotImplementedError

    def get_working_directory(self) -> str:
        """Return the current working directory."""
        raise NotImplementedError

    def set_working_directory(self, path: str) -> None:
        """Change the working directory.

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        raise NotImplementedError


class MemorySession(SessionAdapter):
    """Session held entirely in memory."""

    def __init__(
        self,
        open_files: Optional[List[str]] = None,
        working_directory: Optional[str] = None,
        check_paths: bool = True,
    ):
        """Initialize an in-memory session.

        Args:
            open_files: Initially open files
            working_directory: Initial working directory (default: process cwd)
            check_paths: Require opened files and directories to exist on disk
        """
        self.open_files: List[str] = list(open_files or [])
        self.working_directory = working_directory or os.getcwd()
        self.check_paths = check_paths

    def list_open_files(self) -> List[str]:
        return list(self.open_files)

    def open_file(self, path: str) -> None:
        if self.check_paths and not Path(path).is_file():
            raise FileNotFoundError(f"File '{path}' was not found")
        if path not in self.open_files:
            self.open_files.append(path)

    def close_all_files(self) -> None:
        self.open_files = []

    def get_working_directory(self) -> str:
        return self.working_directory

    def set_working_directory(self, path: str) -> None:
        if self.check_paths and not Path(path).is_dir():
            raise FileNotFoundError(f"Directory '{path}' does not exist")
        self.working_directory = path


class StateFileSession(SessionAdapter):
    """Session persisted to a JSON file between command invocations."""

    def __init__(self, path: Path, default_directory: Optional[str] = None):
        """Initialize a file-backed session.

        Args:
            path: Path to the session state file
            default_directory: Working directory when the file has none (default: process cwd)
        """
        self.path = Path(path)
        self.default_directory = default_directory or os.getcwd()

    def _read(self) -> dict:
        if not self.path.exists():
            return {"open_files": [], "working_directory": self.default_directory}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StoreError(f"Cannot read session state {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Session state {self.path} is corrupt: {e}") from e
        if not isinstance(data, dict):
            raise StoreError(f"Session state {self.path} is invalid")
        data.setdefault("open_files", [])
        data.setdefault("working_directory", self.default_directory)
        return data

    def _write(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StoreError(f"Cannot write session state {self.path}: {e}") from e

    def list_open_files(self) -> List[str]:
        return list(self._read()["open_files"])

    def open_file(self, path: str) -> None:
        file_path = Path(path).expanduser()
        if not file_path.is_file():
            raise FileNotFoundError(f"File '{path}' was not found")
        resolved = str(file_path.resolve())
        data = self._read()
        if resolved not in data["open_files"]:
            data["open_files"].append(resolved)
            self._write(data)
        logger.debug(f"Opened {resolved}")

    def close_all_files(self) -> None:
        data = self._read()
        data["open_files"] = []
        self._write(data)

    def get_working_directory(self) -> str:
        return self._read()["working_directory"]

    def set_working_directory(self, path: str) -> None:
        dir_path = Path(path).expanduser()
        if not dir_path.is_dir():
            raise FileNotFoundError(f"Directory '{path}' does not exist")
        data = self._read()
        data["working_directory"] = str(dir_path.resolve())
        self._write(data)
