"""Profile store protocol and implementations."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Protocol

from homebase.config import load_profile, save_profile
from homebase.models import Profile

logger = logging.getLogger(__name__)


class ProfileStoreError(Exception):
    """Raised when a profile cannot be written to its backing store."""


class ProfileStore(Protocol):
    """Protocol that all profile backends must satisfy."""

    def load(self) -> Profile:
        """Return the stored profile, or an empty one if none exists."""
        ...

    def save(self, profile: Profile) -> None:
        """Replace the stored profile."""
        ...


class MemoryProfileStore:
    """In-memory store, seeded with an optional profile."""

    def __init__(self, profile: Profile | None = None) -> None:
        self._profile = replace(profile) if profile is not None else Profile()

    def load(self) -> Profile:
        return replace(self._profile)

    def save(self, profile: Profile) -> None:
        self._profile = replace(profile)


class JsonProfileStore:
    """Store backed by a profile.json file."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    def load(self) -> Profile:
        """Load the profile. Raises ConfigError if the file is malformed."""
        return load_profile(self._path)

    def save(self, profile: Profile) -> None:
        try:
            save_profile(profile, self._path)
        except OSError as exc:
            logger.error("Profile write failed: %s", exc)
            raise ProfileStoreError(f"Could not write profile: {exc}") from exc
