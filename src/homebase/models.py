"""Domain models."""

from dataclasses import dataclass


@dataclass
class Profile:
    display_name: str = ""
    home_base: str | None = None


@dataclass
class ProfileForm:
    """Editable profile state owned by the profile screen.

    ``home_base`` is the authoritative value the home base editor reads when
    it opens and writes when the user saves.  An empty string means "not set";
    it is mapped to ``None`` on the way back to a ``Profile``.
    """

    home_base: str = ""

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileForm":
        return cls(home_base=profile.home_base or "")

    def to_profile(self, display_name: str = "") -> Profile:
        return Profile(display_name=display_name, home_base=self.home_base or None)

    def has_changes(self, baseline: "ProfileForm") -> bool:
        """Return True if any field differs from the baseline snapshot."""
        return self != baseline
