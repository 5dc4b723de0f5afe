"""Single-line input that auto-capitalizes the first letter of each word."""

from textual.widgets import Input

from homebase.domain.text import capitalize_keystroke


class WordCapitalizedInput(Input):
    """An ``Input`` that upper-cases a letter typed at the start of a word.

    Typing goes through ``insert_text_at_cursor`` with an empty selection and
    through ``replace`` when text is selected, so both are covered.  Values
    assigned programmatically, deletions and pasted text are kept verbatim.
    """

    def insert_text_at_cursor(self, text: str) -> None:
        before_cursor = self.value[: self.cursor_position]
        super().insert_text_at_cursor(capitalize_keystroke(before_cursor, text))

    def replace(self, text: str, start: int, end: int) -> None:
        before_selection = self.value[: min(start, end)]
        super().replace(capitalize_keystroke(before_selection, text), start, end)
