"""Tests for configuration management."""

from pathlib import Path

from projectdesk.config import Config, DeskConfig


class TestConfig:
    """Test configuration management."""

    def test_load_defaults_without_file(self, tmp_path):
        """Test loading when no config file exists."""
        config = Config(tmp_path)

        assert not config.exists
        loaded = config.load()
        assert loaded.store_file == "projects.json"
        assert loaded.session_file == "session.json"
        assert loaded.completion_enabled is True
        assert loaded.default_directory == str(Path.home())

    def test_save_and_load(self, tmp_path):
        """Test saving configuration."""
        home = tmp_path / "home"
        config = Config(home)
        config.save(DeskConfig(default_directory="/srv/code", completion_file=None))

        assert config.exists
        reloaded = Config(home).load()
        assert reloaded.default_directory == "/srv/code"
        # None is not written to TOML, so the default comes back
        assert reloaded.completion_file == "completion.json"

    def test_env_home(self, monkeypatch, tmp_path):
        """Test PROJECTDESK_HOME environment variable."""
        monkeypatch.setenv("PROJECTDESK_HOME", str(tmp_path / "desk"))

        config = Config()
        assert config.home_dir == tmp_path / "desk"
        assert config.store_path == tmp_path / "desk" / "projects.json"

    def test_env_overrides(self, monkeypatch, tmp_path):
        """Test environment variable overrides on top of the file."""
        config = Config(tmp_path)
        config.save(DeskConfig(default_directory="/from/file"))

        monkeypatch.setenv("PROJECTDESK_DEFAULT_DIR", "/from/env")
        monkeypatch.setenv("PROJECTDESK_STORE", "other.json")
        monkeypatch.setenv("PROJECTDESK_COMPLETION_FILE", "/tmp/signatures.json")

        loaded = config.load()
        assert loaded.default_directory == "/from/env"
        assert config.store_path == tmp_path / "other.json"
        assert config.completion_path == Path("/tmp/signatures.json")

    def test_resolve(self, tmp_path):
        config = Config(tmp_path)

        assert config.resolve("projects.json") == tmp_path / "projects.json"
        assert config.resolve("/abs/projects.json") == Path("/abs/projects.json")

    def test_completion_disabled(self, tmp_path):
        config = Config(tmp_path)
        config.save(DeskConfig(completion_enabled=False))

        config.load()
        assert config.completion_path is None

    def test_extra_fields_allowed(self, tmp_path):
        (tmp_path / "config.toml").write_text('editor = "vim"\n')

        loaded = Config(tmp_path).load()
        assert loaded.model_extra["editor"] == "vim"
