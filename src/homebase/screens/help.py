"""Help overlay screen."""

from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import Static

from homebase.constants import HELP_SECTIONS

HelpSections = tuple[tuple[str, tuple[tuple[str, str], ...]], ...]


def help_table(sections: HelpSections) -> Table:
    """Build a two-column key table with a heading row per section."""
    table = Table.grid(padding=(0, 3))
    table.add_column(style="bold #cc5500", no_wrap=True)
    table.add_column()
    for index, (title, rows) in enumerate(sections):
        if index:
            table.add_row("", "")
        table.add_row(Text(title, style="bold #4a5468"), "")
        for keys, description in rows:
            table.add_row(keys, description)
    return table


class HelpScreen(ModalScreen):
    """Modal overlay listing key bindings, grouped by where they apply."""

    BINDINGS = [
        Binding("escape", "dismiss", show=False),
        Binding("?", "dismiss", show=False),
        Binding("q", "dismiss", show=False),
    ]

    def __init__(self, sections: HelpSections = HELP_SECTIONS) -> None:
        super().__init__()
        self._sections = sections

    def compose(self) -> ComposeResult:
        yield Container(
            Static(help_table(self._sections), id="help-text"),
            id="help-container",
        )

    def on_click(self) -> None:
        """Dismiss on any click."""
        self.dismiss()
