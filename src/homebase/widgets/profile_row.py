"""Profile row widget: a titled, clickable summary of one profile field."""

from rich.text import Text
from textual.app import ComposeResult
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Static


class ProfileEditRow(Widget):
    """A row showing a field title and its current value.

    Renders as:  Home Base                      Portland, OR  ›

    ``value`` is a reactive kept in sync by the app; an empty value shows
    ``placeholder`` dimmed instead.  Clicking anywhere on the row posts
    ``ProfileEditRow.Selected`` so the app can push the matching editor.
    """

    class Selected(Message):
        """Posted when the user clicks the row."""

        def __init__(self, row: "ProfileEditRow") -> None:
            super().__init__()
            self.row = row

    can_focus = False

    value: reactive[str] = reactive("", init=False)

    def __init__(
        self,
        title: str,
        value: str = "",
        placeholder: str = "",
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(id=id, classes=classes)
        self._title = title
        self._placeholder = placeholder
        self.set_reactive(ProfileEditRow.value, value)

    @property
    def summary(self) -> str:
        """The text currently shown in the value column."""
        return self.value or self._placeholder

    def _render_value(self) -> Text:
        # Text, not markup: user values may contain "[".
        if self.value:
            return Text(self.value)
        return Text(self._placeholder, style="italic")

    def compose(self) -> ComposeResult:
        yield Static(self._title, classes="row-title")
        yield Static(self._render_value(), classes="row-value")
        yield Static("›", classes="row-chevron")

    def on_mount(self) -> None:
        self.query_one(".row-value", Static).set_class(not self.value, "empty")

    def watch_value(self, value: str) -> None:
        row_value = self.query_one(".row-value", Static)
        row_value.update(self._render_value())
        row_value.set_class(not value, "empty")

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(ProfileEditRow.Selected(self))
