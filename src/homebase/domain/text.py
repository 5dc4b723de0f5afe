"""Pure text helpers used by the home base editor and profile rows.

Nothing here performs I/O or touches widgets, so the rules can be tested
without a running app.
"""

from homebase.constants import HOME_BASE_EMPTY_ROW


def starts_word(before_cursor: str) -> bool:
    """Return True if a character typed after ``before_cursor`` begins a word."""
    return not before_cursor or before_cursor[-1].isspace()


def capitalize_keystroke(before_cursor: str, character: str) -> str:
    """Apply word auto-capitalization to a single typed character.

    Only one lowercase letter typed at the start of a word is upper-cased.
    Multi-character text (a paste) and every other character come back
    unchanged, so the user can still type a lowercase word start by editing
    it afterwards.
    """
    if len(character) != 1 or not character.islower():
        return character
    if not starts_word(before_cursor):
        return character
    return character.upper()


def home_base_row_value(home_base: str) -> str:
    """Return the summary shown in the profile row for a home base value."""
    return home_base if home_base else HOME_BASE_EMPTY_ROW
