"""Tests for configuration management."""

from pathlib import Path

import pytest

from clawbrute import config
from clawbrute.errors import ConfigurationError


class TestLoadEnvFile:
    """Tests for load_env_file."""

    def test_load_env_file_missing_returns_empty(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        assert not env_path.exists()
        assert config.load_env_file(env_path) == {}

    def test_load_env_file_parses_key_value(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("FOO=bar\nBAZ=qux\n")
        assert config.load_env_file(env_path) == {"FOO": "bar", "BAZ": "qux"}

    def test_load_env_file_ignores_comments_and_empty(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("# comment\n\nFOO=bar\n  \n# another\nBAR=baz\n")
        assert config.load_env_file(env_path) == {"FOO": "bar", "BAR": "baz"}

    def test_load_env_file_strips_quotes(self, temp_dir: Path) -> None:
        env_path = temp_dir / ".env"
        env_path.write_text("FOO=\"bar\"\nBAZ='qux'\n")
        assert config.load_env_file(env_path) == {"FOO": "bar", "BAZ": "qux"}


class TestLoadGlobalConfig:
    """Tests for load_global_config."""

    def test_missing_returns_empty(self, isolated_config: Path) -> None:
        assert config.load_global_config() == {}

    def test_loads_yml(self, isolated_config: Path) -> None:
        config_dir = isolated_config / ".clawbrute"
        config_dir.mkdir()
        (config_dir / "config.yml").write_text("CLAWBRUTE_CONCURRENCY: 16\n")
        assert config.load_global_config() == {"CLAWBRUTE_CONCURRENCY": 16}

    def test_invalid_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yml"
        path.write_text("key: [unclosed\n")
        with pytest.raises(ConfigurationError, match="invalid YAML"):
            config.load_global_config(path)

    def test_non_mapping(self, temp_dir: Path) -> None:
        path = temp_dir / "config.yml"
        path.write_text("- one\n- two\n")
        with pytest.raises(ConfigurationError, match="mapping"):
            config.load_global_config(path)


class TestGetConfig:
    """Tests for the layered lookup."""

    def _write_project_env(self, project_dir: Path, text: str) -> None:
        (project_dir / ".clawbrute").mkdir(exist_ok=True)
        (project_dir / ".clawbrute" / ".env").write_text(text)

    def _write_global(self, home: Path, text: str) -> None:
        (home / ".clawbrute").mkdir(exist_ok=True)
        (home / ".clawbrute" / "config.yml").write_text(text)

    def test_default(self, isolated_config: Path) -> None:
        assert config.get_config("CLAWBRUTE_TIMEOUT", default=3) == 3

    def test_global_config(self, isolated_config: Path) -> None:
        self._write_global(isolated_config, "CLAWBRUTE_TIMEOUT: 4\n")
        assert config.get_config("CLAWBRUTE_TIMEOUT") == 4

    def test_project_env_beats_global(self, isolated_config: Path) -> None:
        self._write_global(isolated_config, "CLAWBRUTE_TIMEOUT: 4\n")
        self._write_project_env(isolated_config, "CLAWBRUTE_TIMEOUT=5\n")
        assert config.get_config("CLAWBRUTE_TIMEOUT") == "5"

    def test_environment_beats_everything(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        self._write_project_env(isolated_config, "CLAWBRUTE_TIMEOUT=5\n")
        monkeypatch.setenv("CLAWBRUTE_TIMEOUT", "6")
        assert config.get_config("CLAWBRUTE_TIMEOUT") == "6"

    def test_explicit_project_dir(self, isolated_config: Path) -> None:
        project = isolated_config / "elsewhere"
        project.mkdir()
        self._write_project_env(project, "CLAWBRUTE_VERBOSE=yes\n")
        assert config.get_config("CLAWBRUTE_VERBOSE", project) == "yes"
        assert config.get_config("CLAWBRUTE_VERBOSE") is None


class TestTypedGetters:
    """Tests for the typed getters."""

    def test_defaults(self, isolated_config: Path) -> None:
        assert config.get_default_concurrency() == 100
        assert config.get_default_timeout() == config.DEFAULT_TIMEOUT
        assert config.is_verbose() is False

    def test_values_from_environment(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLAWBRUTE_CONCURRENCY", "8")
        monkeypatch.setenv("CLAWBRUTE_TIMEOUT", "2.5")
        monkeypatch.setenv("CLAWBRUTE_VERBOSE", "True")
        assert config.get_default_concurrency() == 8
        assert config.get_default_timeout() == 2.5
        assert config.is_verbose() is True

    def test_yaml_bool(self, isolated_config: Path) -> None:
        (isolated_config / ".clawbrute").mkdir()
        (isolated_config / ".clawbrute" / "config.yml").write_text("CLAWBRUTE_VERBOSE: true\n")
        assert config.is_verbose() is True

    @pytest.mark.parametrize(
        ("key", "value", "getter"),
        [
            ("CLAWBRUTE_CONCURRENCY", "many", config.get_default_concurrency),
            ("CLAWBRUTE_CONCURRENCY", "0", config.get_default_concurrency),
            ("CLAWBRUTE_TIMEOUT", "soon", config.get_default_timeout),
            ("CLAWBRUTE_TIMEOUT", "-1", config.get_default_timeout),
            ("CLAWBRUTE_VERBOSE", "maybe", config.is_verbose),
        ],
    )
    def test_malformed_values(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch, key, value, getter
    ) -> None:
        monkeypatch.setenv(key, value)
        with pytest.raises(ConfigurationError, match=key):
            getter()
