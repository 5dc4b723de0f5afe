"""Discard screen — shows the pending home base change before quitting."""

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from homebase.constants import DISCARD_LABEL, DISCARD_PROMPT, HOME_BASE_TITLE, KEEP_LABEL
from homebase.domain.text import home_base_row_value


def change_summary(saved: str, edited: str) -> Text:
    """Render ``Home Base  saved → edited`` with the old value struck through."""
    summary = Text(f"{HOME_BASE_TITLE}  ", style="bold")
    summary.append(home_base_row_value(saved), style="strike dim")
    summary.append("  →  ")
    summary.append(home_base_row_value(edited), style="bold #cc5500")
    return summary


class DiscardChangesScreen(ModalScreen[bool]):
    """Modal listing what would be lost if the user quits now.

    Dismisses with True to discard and quit, False to keep editing.  "Keep
    editing" has focus when the modal opens.
    """

    BINDINGS = [
        Binding("escape", "keep", show=False),
        Binding("n", "keep", show=False),
        Binding("y", "discard", show=False),
    ]

    def __init__(self, saved: str, edited: str) -> None:
        super().__init__()
        self._saved = saved
        self._edited = edited

    def compose(self) -> ComposeResult:
        with Vertical(id="discard-container"):
            yield Label(DISCARD_PROMPT, id="discard-message")
            yield Static(change_summary(self._saved, self._edited), id="discard-change")
            with Horizontal(id="discard-buttons"):
                yield Button(DISCARD_LABEL, variant="error", id="discard-yes")
                yield Button(KEEP_LABEL, variant="primary", id="discard-no")

    def on_mount(self) -> None:
        self.query_one("#discard-no", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "discard-yes")

    def action_discard(self) -> None:
        self.dismiss(True)

    def action_keep(self) -> None:
        self.dismiss(False)
