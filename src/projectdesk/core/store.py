"""JSON file store for the project registry."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from projectdesk.exceptions import StoreError
from projectdesk.models import RegistryState

logger = logging.getLogger(__name__)


class RegistryStore:
    """Loads and saves the registry to a single JSON file.

    The last writer wins; concurrent processes are not arbitrated.
    """

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: Path to the registry file
        """
        self.path = Path(path)

    @property
    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> RegistryState:
        """Load the registry from disk.

        Returns:
            The persisted RegistryState

        Raises:
            FileNotFoundError: If the store has never been written
            StoreError: If the file cannot be read or is not a valid registry
        """
        if not self.exists:
            raise FileNotFoundError(f"Registry store not found at {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise StoreError(f"Cannot read registry store {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise StoreError(f"Registry store {self.path} is corrupt: {e}") from e

        try:
            return RegistryState.model_validate(data)
        except ValidationError as e:
            raise StoreError(f"Registry store {self.path} is invalid: {e}") from e

    def save(self, state: RegistryState) -> None:
        """Write the registry to disk.

        Raises:
            StoreError: If the file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(state.model_dump_json(indent=2))
        except OSError as e:
            raise StoreError(f"Cannot write registry store {self.path}: {e}") from e

    def load_or_create(self, default_dir: str) -> RegistryState:
        """Load the registry, creating the first-run registry if none exists.

        Args:
            default_dir: Working directory for the bootstrap default project

        Returns:
            The loaded or newly created RegistryState
        """
        try:
            return self.load()
        except FileNotFoundError:
            logger.info(f"Creating project registry at {self.path}")
            state = RegistryState.bootstrap(default_dir)
            self.save(state)
            return state
