"""
Tests for configuration loading.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from mealscheduler.config import AppConfig, ServerConfig, load_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("MEALSCHEDULER_MODE", raising=False)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadFromYaml:
    """Tests for AppConfig.load_from_yaml."""

    def test_load_full_config(self, tmp_path):
        path = _write(
            tmp_path,
            """
timezone: America/Denver
server:
  port: 8080
  mode: production
congregations:
  - id: 1
    name: Maple Grove
  - id: 2
    name: Riverside
    active: false
""",
        )

        config = AppConfig.load_from_yaml(path)

        assert config.timezone == "America/Denver"
        assert config.server.port == 8080
        assert config.server.is_production
        assert [c.name for c in config.user_congregations()] == ["Maple Grove"]

    def test_empty_file_uses_defaults(self, tmp_path):
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config.server == ServerConfig()
        assert config.congregations == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "server: [unclosed"))

    def test_non_mapping_root(self, tmp_path):
        with pytest.raises(ValueError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- just\n- a list\n"))

    def test_env_overrides(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("MEALSCHEDULER_MODE", "production")

        config = AppConfig.load_from_yaml(_write(tmp_path, "server:\n  port: 8080\n"))

        assert config.server.port == 9001
        assert config.server.mode == "production"


class TestValidation:
    """Tests for field validation."""

    def test_duplicate_congregation_ids(self):
        with pytest.raises(ValidationError, match="Duplicate congregation id"):
            AppConfig(congregations=[{"id": 1, "name": "A"}, {"id": 1, "name": "B"}])

    def test_duplicate_congregation_names(self):
        with pytest.raises(ValidationError, match="Duplicate congregation name"):
            AppConfig(congregations=[{"id": 1, "name": "Riverside"}, {"id": 2, "name": "riverside"}])

    def test_unknown_timezone(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            AppConfig(timezone="Mars/Olympus_Mons")

    def test_log_level_normalised(self):
        assert AppConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("port", [0, 70000])
    def test_port_range(self, port):
        with pytest.raises(ValidationError, match="Port must be between"):
            ServerConfig(port=port)

    def test_unknown_mode(self):
        with pytest.raises(ValidationError):
            ServerConfig(mode="staging")


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("mealscheduler.config.get_default_config_path", lambda: tmp_path / "config.yaml")

        config = load_config()

        assert config == AppConfig()

    def test_explicit_path_must_exist(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.yaml")
