"""Configuration management for ProjectDesk."""

import os
from pathlib import Path
from typing import Optional, Dict, Any
import toml
from pydantic import BaseModel, Field, ConfigDict


def default_home() -> Path:
    """Return the ProjectDesk home directory (PROJECTDESK_HOME or ~/.projectdesk)."""
    env_home = os.environ.get("PROJECTDESK_HOME")
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".projectdesk"


class DeskConfig(BaseModel):
    """Configuration for ProjectDesk stored in <home>/config.toml."""

    model_config = ConfigDict(
        extra="allow"
    )  # Allow additional fields for extensibility

    default_directory: str = Field(
        default_factory=lambda: str(Path.home()),
        description="Working directory of the default project on first run",
    )
    store_file: str = Field(
        default="projects.json", description="Registry store file"
    )
    session_file: str = Field(
        default="session.json", description="Live session state file"
    )
    completion_file: Optional[str] = Field(
        default="completion.json", description="Tab-completion descriptor file"
    )
    completion_enabled: bool = Field(
        default=True, description="Export project names for tab completion"
    )


class Config:
    """Manages ProjectDesk configuration."""

    def __init__(self, home_dir: Optional[Path] = None):
        """Initialize config manager.

        Args:
            home_dir: ProjectDesk home directory. If None, uses PROJECTDESK_HOME env var or ~/.projectdesk.
        """
        self.home_dir = Path(home_dir) if home_dir else default_home()
        self.config_path = self.home_dir / "config.toml"
        self._config: Optional[DeskConfig] = None

    @property
    def exists(self) -> bool:
        """Check if config file exists."""
        return self.config_path.exists()

    def load(self) -> DeskConfig:
        """Load configuration from disk, with environment variable overrides.

        A missing config file is not an error; defaults are used instead.
        """
        data: Dict[str, Any] = {}
        if self.exists:
            with open(self.config_path, "r") as f:
                data = toml.load(f)

        self._apply_env_overrides(data)

        self._config = DeskConfig(**data)
        return self._config

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        """Apply environment variable overrides to configuration data."""
        if env_dir := os.environ.get("PROJECTDESK_DEFAULT_DIR"):
            data["default_directory"] = env_dir

        if env_store := os.environ.get("PROJECTDESK_STORE"):
            data["store_file"] = env_store

        if env_completion := os.environ.get("PROJECTDESK_COMPLETION_FILE"):
            data["completion_file"] = env_completion

    def save(self, config: Optional[DeskConfig] = None) -> None:
        """Save configuration to disk.

        Args:
            config: Configuration to save. If None, saves current config.
        """
        if config:
            self._config = config

        if not self._config:
            raise ValueError("No configuration to save")

        self.home_dir.mkdir(parents=True, exist_ok=True)

        # TOML has no null, so unset optional values are left out
        config_dict = {
            key: value
            for key, value in self._config.model_dump().items()
            if value is not None
        }

        with open(self.config_path, "w") as f:
            toml.dump(config_dict, f)

    def resolve(self, file_name: str) -> Path:
        """Resolve a configured file name against the home directory."""
        path = Path(file_name).expanduser()
        if path.is_absolute():
            return path
        return self.home_dir / path

    @property
    def config(self) -> DeskConfig:
        """Loaded configuration, loading it on first access."""
        if self._config is None:
            return self.load()
        return self._config

    @property
    def store_path(self) -> Path:
        return self.resolve(self.config.store_file)

    @property
    def session_path(self) -> Path:
        return self.resolve(self.config.session_file)

    @property
    def completion_path(self) -> Optional[Path]:
        if not self.config.completion_enabled or not self.config.completion_file:
            return None
        return self.resolve(self.config.completion_file)
