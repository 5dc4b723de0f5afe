"""Inspect and edit the stored homebase profile from the command line."""

import sys
from pathlib import Path

import typer

from homebase.config import ConfigError
from homebase.domain.text import home_base_row_value
from homebase.models import Profile, ProfileForm
from homebase.stores import JsonProfileStore, ProfileStoreError

app = typer.Typer(
    help="Inspect and edit the stored homebase profile",
    no_args_is_help=True,
)

# Module-level defaults for Typer options
_PATH_HELP = "Path to profile.json (defaults to ~/.config/homebase/profile.json)"


def _load(store: JsonProfileStore) -> Profile:
    try:
        return store.load()
    except ConfigError as e:
        typer.echo(f"Error reading profile: {e}", err=True)
        sys.exit(1)


def _commit(store: JsonProfileStore, profile: Profile, form: ProfileForm) -> None:
    """Write the form back through the store, exiting non-zero on failure."""
    try:
        store.save(form.to_profile(display_name=profile.display_name))
    except ProfileStoreError as e:
        typer.echo(f"Error writing profile: {e}", err=True)
        sys.exit(1)


@app.command()
def show(
    path: Path | None = typer.Option(None, "--path", "-p", help=_PATH_HELP),  # noqa: B008
) -> None:
    """Print the stored display name and home base."""
    profile = _load(JsonProfileStore(path))
    if profile.display_name:
        typer.echo(f"Name:      {profile.display_name}")
    typer.echo(f"Home Base: {home_base_row_value(profile.home_base or '')}")


@app.command("set-home-base")
def set_home_base(
    value: str = typer.Argument(..., help="New home base, stored exactly as given"),
    path: Path | None = typer.Option(None, "--path", "-p", help=_PATH_HELP),  # noqa: B008
) -> None:
    """Replace the home base with VALUE."""
    store = JsonProfileStore(path)
    profile = _load(store)
    form = ProfileForm.from_profile(profile)
    form.home_base = value
    _commit(store, profile, form)
    typer.echo(f"Home Base: {home_base_row_value(form.home_base)}")


@app.command()
def clear(
    path: Path | None = typer.Option(None, "--path", "-p", help=_PATH_HELP),  # noqa: B008
) -> None:
    """Remove the stored home base."""
    store = JsonProfileStore(path)
    profile = _load(store)
    form = ProfileForm.from_profile(profile)
    form.home_base = ""
    _commit(store, profile, form)
    typer.echo("Home base cleared")


if __name__ == "__main__":
    app()
