"""Tests for slatus.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from slatus.preferences import (
    DEFAULT_API_URL,
    Preferences,
    load_preferences,
    write_default_preferences,
)


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path)
        assert prefs == Preferences()
        assert prefs.api.base_url == DEFAULT_API_URL
        assert prefs.logging.level == "WARNING"

    def test_load_never_writes(self, tmp_path: Path):
        load_preferences(tmp_path / "new")
        assert not (tmp_path / "new").exists()

    def test_non_utf8_file_returns_defaults(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_bytes(b"api:\n  base_url: \xff\xfe\n")
        assert load_preferences(tmp_path) == Preferences()


class TestWriteDefaultPreferences:
    def test_creates_default_file(self, tmp_path: Path):
        assert write_default_preferences(tmp_path / "new") is True
        path = tmp_path / "new" / "preferences.yaml"
        data = yaml.safe_load(path.read_text())
        assert data["api"]["base_url"] == DEFAULT_API_URL

    def test_default_file_round_trips(self, tmp_path: Path):
        write_default_preferences(tmp_path)
        assert load_preferences(tmp_path) == Preferences()

    def test_keeps_existing_file(self, tmp_path: Path):
        path = tmp_path / "preferences.yaml"
        path.write_text("logging:\n  level: DEBUG\n")
        assert write_default_preferences(tmp_path) is False
        assert path.read_text() == "logging:\n  level: DEBUG\n"


class TestLoadPreferencesFromYAML:
    def test_all_sections(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text(
            yaml.dump(
                {
                    "api": {"base_url": "https://example.test/api/"},
                    "logging": {"level": "debug"},
                }
            )
        )
        prefs = load_preferences(tmp_path)
        assert prefs.api.base_url == "https://example.test/api"
        assert prefs.logging.level == "DEBUG"

    def test_missing_sections_use_defaults(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text(
            yaml.dump({"logging": {"level": "INFO"}})
        )
        prefs = load_preferences(tmp_path)
        assert prefs.logging.level == "INFO"
        assert prefs.api.base_url == DEFAULT_API_URL

    def test_invalid_level_ignored(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text("logging:\n  level: loud\n")
        assert load_preferences(tmp_path).logging.level == "WARNING"

    def test_corrupt_yaml_returns_defaults(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text("{{{{not valid yaml:::::")
        assert load_preferences(tmp_path) == Preferences()

    def test_non_mapping_yaml_returns_defaults(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text("- just\n- a list\n")
        assert load_preferences(tmp_path) == Preferences()

    def test_empty_yaml_returns_defaults(self, tmp_path: Path):
        (tmp_path / "preferences.yaml").write_text("")
        assert load_preferences(tmp_path) == Preferences()


class TestEnvironmentOverride:
    def test_api_url_env_wins(self, tmp_path: Path, monkeypatch):
        (tmp_path / "preferences.yaml").write_text(
            yaml.dump({"api": {"base_url": "https://from-file.test/api"}})
        )
        monkeypatch.setenv("SLATUS_API_URL", "http://localhost:9999/api/")
        assert load_preferences(tmp_path).api.base_url == "http://localhost:9999/api"
