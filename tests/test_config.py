"""Unit tests for profile loading, validation, and persistence."""

import json
import logging
from pathlib import Path

import pytest

from homebase.config import (
    ConfigError,
    ProfileRecord,
    load_profile,
    load_theme,
    log_level,
    save_profile,
    save_theme,
)
from homebase.models import Profile


def _write(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


class TestProfileRecord:
    def test_defaults(self):
        """
        Given no fields
        When ProfileRecord is constructed
        Then display_name is empty and home_base is None
        """
        record = ProfileRecord()
        assert record.display_name == ""
        assert record.home_base is None

    def test_wrong_type_raises(self):
        """
        Given a home_base that is not a string
        When ProfileRecord.model_validate is called
        Then a ValidationError is raised
        """
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            ProfileRecord.model_validate({"home_base": ["Portland"]})


class TestLoadProfile:
    def test_returns_empty_when_file_missing(self, tmp_path: Path):
        """
        Given no profile file exists
        When load_profile is called
        Then it returns an empty Profile without creating the file
        """
        path = tmp_path / "profile.json"
        assert load_profile(path) == Profile()
        assert not path.exists()

    def test_empty_file_returns_empty(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        path.write_text("\n")
        assert load_profile(path) == Profile()

    def test_loads_fields(self, tmp_path: Path):
        """
        Given a valid profile file
        When load_profile is called
        Then the display name and home base are returned
        """
        path = tmp_path / "profile.json"
        _write(path, {"display_name": "Sam", "home_base": "Portland, OR"})
        assert load_profile(path) == Profile(display_name="Sam", home_base="Portland, OR")

    def test_empty_home_base_normalised_to_none(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        _write(path, {"home_base": ""})
        assert load_profile(path).home_base is None

    def test_default_path_is_patchable(self, tmp_path: Path, monkeypatch):
        """
        Given PROFILE_PATH points at a valid file
        When load_profile is called without a path
        Then the module-level default is used
        """
        path = tmp_path / "profile.json"
        _write(path, {"home_base": "Bend, OR"})
        monkeypatch.setattr("homebase.config.PROFILE_PATH", path)
        assert load_profile().home_base == "Bend, OR"

    def test_invalid_json_raises(self, tmp_path: Path):
        """
        Given a profile file that is not valid JSON
        When load_profile is called
        Then ConfigError is raised
        """
        path = tmp_path / "profile.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="not valid JSON"):
            load_profile(path)

    def test_non_object_raises(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        _write(path, ["Portland"])
        with pytest.raises(ConfigError, match="JSON object"):
            load_profile(path)

    def test_schema_violation_raises(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        _write(path, {"home_base": 42})
        with pytest.raises(ConfigError, match="Invalid profile"):
            load_profile(path)

    def test_non_utf8_bytes_raise_config_error(self, tmp_path: Path):
        """
        Given a profile file containing bytes that are not valid UTF-8
        When load_profile is called
        Then ConfigError is raised instead of UnicodeDecodeError
        """
        path = tmp_path / "profile.json"
        path.write_bytes(b'{"home_base": "\xff\xfe"}')
        with pytest.raises(ConfigError, match="not valid UTF-8"):
            load_profile(path)

    def test_latin1_encoded_file_raises_config_error(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        path.write_bytes('{"home_base": "Zürich"}'.encode("latin-1"))
        with pytest.raises(ConfigError):
            load_profile(path)


class TestSaveProfile:
    def test_creates_parent_directories(self, tmp_path: Path):
        """
        Given a profile path whose directory does not exist
        When save_profile is called
        Then the directory and file are created
        """
        path = tmp_path / "nested" / "dir" / "profile.json"
        save_profile(Profile(home_base="Bend, OR"), path)
        assert path.exists()

    def test_unicode_round_trip(self, tmp_path: Path):
        """
        Given a home base with non-ASCII characters
        When it is saved and loaded again
        Then the value is identical
        """
        path = tmp_path / "profile.json"
        save_profile(Profile(display_name="Zoë", home_base="Zürich, ZH"), path)
        assert load_profile(path) == Profile(display_name="Zoë", home_base="Zürich, ZH")
        assert "Zürich" in path.read_text(encoding="utf-8")

    def test_written_as_utf8_bytes(self, tmp_path: Path):
        """
        Given a home base with non-ASCII characters
        When save_profile is called
        Then the file holds the UTF-8 encoding regardless of locale
        """
        path = tmp_path / "profile.json"
        save_profile(Profile(home_base="São Paulo, SP"), path)
        assert "São Paulo".encode("utf-8") in path.read_bytes()

    def test_none_home_base_written_as_null(self, tmp_path: Path):
        path = tmp_path / "profile.json"
        save_profile(Profile(display_name="Sam"), path)
        assert json.loads(path.read_text()) == {"display_name": "Sam", "home_base": None}


class TestLogLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("HOMEBASE_LOG_LEVEL", raising=False)
        assert log_level() == "WARNING"

    def test_env_override_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("HOMEBASE_LOG_LEVEL", "debug")
        assert log_level() == "DEBUG"
        assert logging.getLevelName(log_level()) == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("HOMEBASE_LOG_LEVEL", "chatty")
        assert log_level() == "WARNING"


class TestTheme:
    def test_missing_theme_returns_none(self):
        assert load_theme() is None

    def test_saved_theme_is_loaded(self):
        """
        Given a theme has been saved
        When load_theme is called
        Then the same theme name is returned
        """
        save_theme("nord")
        assert load_theme() == "nord"

    def test_corrupt_theme_file_returns_none(self, tmp_path: Path):
        (tmp_path / "theme.json").write_text("nope")
        assert load_theme() is None
