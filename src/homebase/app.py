"""Main application entry point."""

import logging
from dataclasses import replace

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.reactive import reactive
from textual.widgets import Footer, Header, Label

from homebase.config import (
    LOG_PATH,
    ConfigError,
    load_theme,
    log_level,
    save_theme,
)
from homebase.constants import (
    APP_SUBTITLE,
    APP_TITLE,
    HOME_BASE_EMPTY_ROW,
    HOME_BASE_TITLE,
    PROFILE_SECTION,
)
from homebase.models import Profile, ProfileForm
from homebase.screens.discard import DiscardChangesScreen
from homebase.screens.help import HelpScreen
from homebase.screens.home_base import HomeBaseEditorScreen
from homebase.stores import JsonProfileStore, MemoryProfileStore, ProfileStore, ProfileStoreError
from homebase.widgets.profile_row import ProfileEditRow

logger = logging.getLogger(__name__)


class ProfileApp(App):
    """homebase — profile editor TUI."""

    CSS_PATH = [
        "app.tcss",
        "widgets/profile_row.tcss",
        "screens/home_base.tcss",
    ]
    TITLE = APP_TITLE

    dirty: reactive[bool] = reactive(False)

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "toggle_help", "Help"),
        Binding("h", "edit_home_base", "Home base"),
        Binding("enter", "edit_home_base", show=False),
        Binding("s", "save_profile", "Save"),
    ]

    def __init__(self, store: ProfileStore | None = None) -> None:
        super().__init__()
        self._store: ProfileStore = store or MemoryProfileStore()
        self._profile: Profile = Profile()
        self._form = ProfileForm()
        self._baseline = ProfileForm()

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="profile-panel"):
            yield Label(PROFILE_SECTION, classes="section-label")
            yield ProfileEditRow(
                HOME_BASE_TITLE,
                placeholder=HOME_BASE_EMPTY_ROW,
                id="home-base-row",
            )
        yield Footer()

    def on_mount(self) -> None:
        saved_theme = load_theme()
        if saved_theme:
            self.theme = saved_theme
        self._load_profile()

    def _load_profile(self) -> None:
        """Read the profile from the store and reset the form baseline."""
        try:
            self._profile = self._store.load()
        except ConfigError as exc:
            logger.error("Profile load failed: %s", exc)
            self.notify(f"Load failed: {exc}", severity="error", timeout=8)
            self._profile = Profile()
        self._form = ProfileForm.from_profile(self._profile)
        self._baseline = replace(self._form)
        self._sync()

    @property
    def home_base(self) -> str:
        """The authoritative home base value owned by this app."""
        return self._form.home_base

    def _sync(self) -> None:
        """Push form state into the row and recompute the dirty flag."""
        self.query_one("#home-base-row", ProfileEditRow).value = self._form.home_base
        self.dirty = self._form.has_changes(self._baseline)
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.dirty:
            self.sub_title = f"{APP_SUBTITLE}  unsaved changes"
        else:
            self.sub_title = APP_SUBTITLE

    def watch_dirty(self, dirty: bool) -> None:
        """Reflect unsaved state in the subtitle."""
        self._update_subtitle()

    def watch_theme(self, theme: str) -> None:
        """Persist theme changes whenever the theme is changed."""
        save_theme(theme)

    def check_action(self, action: str, parameters: tuple[object, ...]) -> bool | None:
        """Keep profile-level bindings from firing over pushed screens.

        The editor is a plain Screen, so app bindings still reach it whenever
        focus leaves its input.
        """
        if action in ("edit_home_base", "save_profile"):
            return self.screen is self.screen_stack[0]
        if action == "quit":
            return not any(isinstance(s, HomeBaseEditorScreen) for s in self.screen_stack)
        return True

    def on_profile_edit_row_selected(self, event: ProfileEditRow.Selected) -> None:
        event.stop()
        if event.row.id == "home-base-row":
            self.action_edit_home_base()

    def action_toggle_help(self) -> None:
        self.push_screen(HelpScreen())

    def action_edit_home_base(self) -> None:
        """Push the home base editor; a saved result is written back to the form."""

        def on_close(new_home_base: str | None) -> None:
            if new_home_base is None:
                return
            self._form.home_base = new_home_base
            self._sync()

        self.push_screen(HomeBaseEditorScreen(home_base=self._form.home_base), on_close)

    def action_save_profile(self) -> None:
        """Persist the form through the store.

        On store failure the form stays dirty and an error notification is
        shown.
        """
        if not self.dirty:
            self.notify("No changes to save", timeout=2)
            return
        profile = self._form.to_profile(display_name=self._profile.display_name)
        try:
            self._store.save(profile)
        except ProfileStoreError as exc:
            self.notify(f"Save failed: {exc}", severity="error", timeout=8)
            return
        self._profile = profile
        self._baseline = replace(self._form)
        self._sync()
        self.notify("Profile saved", timeout=2)

    async def action_quit(self) -> None:
        """Quit, asking first if there are unsaved changes."""
        if not self.dirty:
            self.exit()
            return

        def on_confirm(confirmed: bool | None) -> None:
            if confirmed:
                self.exit()

        self.push_screen(
            DiscardChangesScreen(saved=self._baseline.home_base, edited=self._form.home_base),
            on_confirm,
        )


def configure_logging() -> None:
    """Send log records to a file; the terminal belongs to the TUI."""
    LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=LOG_PATH,
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    configure_logging()
    ProfileApp(store=JsonProfileStore()).run()


if __name__ == "__main__":
    main()
