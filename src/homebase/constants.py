"""Application-wide constants."""

APP_TITLE = "homebase"
APP_SUBTITLE = "Edit profile"

HOME_BASE_TITLE = "Home Base"
HOME_BASE_SECTION = "HOME BASE"
HOME_BASE_PLACEHOLDER = "City, State (e.g., Portland, OR)"
HOME_BASE_HELPER = "Where do you call home when you're not on the road?"
HOME_BASE_EMPTY_ROW = "Add home base"
SAVE_LABEL = "Save"

PROFILE_SECTION = "LIFESTYLE"

DISCARD_PROMPT = "Discard unsaved changes?"
DISCARD_LABEL = "Discard"
KEEP_LABEL = "Keep editing"

# (section title, ((keys, description), ...)) in display order.
HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Profile",
        (
            ("h / Enter", "Edit home base"),
            ("s", "Save profile"),
        ),
    ),
    (
        "Home base editor",
        (
            ("ctrl+s", "Save and go back"),
            ("Escape", "Go back without saving"),
        ),
    ),
    (
        "General",
        (
            ("?", "Toggle this help"),
            ("q", "Quit"),
        ),
    ),
)
