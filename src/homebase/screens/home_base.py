"""Home base screen — edit the profile's home base location."""

import logging

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.reactive import reactive
from textual.screen import Screen
from textual.widgets import Button, Footer, Input, Label, Static

from homebase.constants import (
    HOME_BASE_HELPER,
    HOME_BASE_PLACEHOLDER,
    HOME_BASE_SECTION,
    HOME_BASE_TITLE,
    SAVE_LABEL,
)
from homebase.widgets.capitalized_input import WordCapitalizedInput

logger = logging.getLogger(__name__)


class HomeBaseEditorScreen(Screen[str | None]):
    """Full screen that edits a local draft of the home base.

    The current value is read once, when the screen is constructed.  Edits go
    to ``draft`` only.  The Save button (or ctrl+s) dismisses with the draft,
    unmodified; escape dismisses with None.  A host that pops the screen
    itself gets no result at all, so its value is left as it was.
    """

    BINDINGS = [
        Binding("escape", "back", "Back"),
        Binding("ctrl+s", "save", SAVE_LABEL, priority=True),
    ]

    draft: reactive[str] = reactive("", init=False)

    def __init__(self, home_base: str) -> None:
        super().__init__()
        self._home_base = home_base

    def compose(self) -> ComposeResult:
        with Horizontal(id="home-base-titlebar"):
            yield Label(HOME_BASE_TITLE, id="home-base-title")
            yield Button(SAVE_LABEL, id="home-base-save")
        with VerticalScroll(id="home-base-scroll"):
            yield Label(HOME_BASE_SECTION, id="home-base-section")
            with Vertical(id="home-base-card"):
                yield WordCapitalizedInput(placeholder=HOME_BASE_PLACEHOLDER, id="home-base-input")
            yield Static(HOME_BASE_HELPER, id="home-base-helper")
            yield Static(id="home-base-spacer")
        yield Footer()

    def on_mount(self) -> None:
        # Runs once per presentation; ScreenResume does not reseed.
        self.draft = self._home_base
        input = self.query_one("#home-base-input", Input)
        input.value = self._home_base
        input.focus()
        input.cursor_position = len(self._home_base)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "home-base-input":
            self.draft = event.value

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "home-base-save":
            self.action_save()

    def action_save(self) -> None:
        """Commit the draft to the caller and close."""
        logger.debug("Home base saved: %r", self.draft)
        self.dismiss(self.draft)

    def action_back(self) -> None:
        logger.debug("Home base editor closed without saving")
        self.dismiss(None)
