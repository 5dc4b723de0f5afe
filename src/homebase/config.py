"""Profile file loading, validation, and persistence.

Schema on disk (~/.config/homebase/profile.json):

    {
        "display_name": "Sam",
        "home_base": "Portland, OR"
    }

``home_base`` is omitted or null when the user has not set one.  Any string
is accepted as-is; no geocoding or format checks are applied.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, ValidationError

from homebase.models import Profile

logger = logging.getLogger(__name__)

CONFIG_DIR = Path("~/.config/homebase").expanduser()
PROFILE_PATH = CONFIG_DIR / "profile.json"
LOG_PATH = CONFIG_DIR / "homebase.log"

LOG_LEVEL_ENV = "HOMEBASE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


class ProfileRecord(BaseModel):
    """On-disk representation of a profile."""

    display_name: str = ""
    home_base: str | None = None


class ConfigError(Exception):
    """Raised when profile.json exists but cannot be parsed or validated."""


def load_profile(path: Path | None = None) -> Profile:
    """Load and validate the profile file.

    Returns an empty Profile if the file does not exist or is empty.  Raises
    ConfigError if the file exists but is malformed.
    """
    path = path or PROFILE_PATH
    if not path.exists():
        logger.debug("No profile at %s; starting empty", path)
        return Profile()

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigError(f"profile.json is not valid UTF-8: {exc}") from exc

    if not text.strip():
        return Profile()

    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"profile.json is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("profile.json must be a JSON object at the top level")

    try:
        record = ProfileRecord.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid profile: {exc}") from exc

    return Profile(display_name=record.display_name, home_base=record.home_base or None)


def save_profile(profile: Profile, path: Path | None = None) -> None:
    """Persist a profile to disk, creating directories as needed."""
    path = path or PROFILE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    record = ProfileRecord(display_name=profile.display_name, home_base=profile.home_base)
    path.write_text(
        json.dumps(record.model_dump(), indent=2, ensure_ascii=False), encoding="utf-8"
    )
    logger.info("Saved profile to %s", path)


def log_level() -> str:
    """Return the configured log level name, falling back to the default."""
    level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LOG_LEVEL
    return level


# Theme persistence
THEME_CONFIG_PATH = CONFIG_DIR / "theme.json"


def load_theme() -> str | None:
    """Load the saved theme preference.

    Returns the theme name if set, None otherwise.
    """
    if not THEME_CONFIG_PATH.exists():
        return None
    try:
        data = json.loads(THEME_CONFIG_PATH.read_text())
        return data.get("theme")
    except (json.JSONDecodeError, AttributeError):
        return None


def save_theme(theme: str) -> None:
    """Save the theme preference to disk."""
    THEME_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    THEME_CONFIG_PATH.write_text(json.dumps({"theme": theme}, indent=2))
