"""CLI entry point for goodreads2vault."""

import sys
from functools import partial

import click

from .config import Config, load_config
from .exceptions import ConfigError, SettingsError
from .fetcher import fetch_html
from .plugin import BookNotePlugin, Host, SettingsView, UrlPrompt
from .settings import CLI_KEYS, SettingsStore
from .writer import Vault

vault_path_option = click.option(
    "--vault-path",
    type=click.Path(),
    default=None,
    help="Path to Obsidian vault (default: current directory or OBSIDIAN_VAULT_PATH env var)",
)
verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)


def _notify(message: str) -> None:
    click.echo(message, err=True)


def _open_file(path) -> None:
    click.launch(str(path))


def _build_plugin(config: Config, open_file=_open_file) -> BookNotePlugin:
    host = Host(
        vault=Vault(config.vault_path),
        settings_store=SettingsStore.for_vault(config.vault_path),
        fetch=partial(fetch_html, config=config),
        notify=_notify,
        open_file=open_file,
    )
    plugin = BookNotePlugin(host, verbose=config.verbose)
    plugin.on_activate()
    return plugin


def _load(vault_path, verbose: bool = False, open_file=_open_file) -> BookNotePlugin:
    try:
        config = load_config(vault_path=vault_path, verbose=verbose)
        if verbose:
            click.echo(f"Vault path: {config.vault_path}")
            click.echo(f"Transport: {config.transport}")
        return _build_plugin(config, open_file=open_file)
    except (ConfigError, SettingsError) as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)


@click.group()
def main():
    """Create Obsidian book notes from Goodreads pages."""


@main.command()
@click.argument("url", required=False)
@vault_path_option
@click.option(
    "--no-open",
    is_flag=True,
    default=False,
    help="Do not open the new note after creating it",
)
@verbose_option
def new(url, vault_path, no_open, verbose):
    """Create a book note from a Goodreads URL.

    Prompts for the URL when it is not given.

    Example: goodreads2vault new https://www.goodreads.com/book/show/234225.Dune
    """
    open_file = (lambda path: None) if no_open else _open_file
    plugin = _load(vault_path, verbose=verbose, open_file=open_file)

    if url:
        path = plugin.new_book_note(url)
    else:
        path = UrlPrompt(plugin, ask=click.prompt).on_show()

    if path is None:
        sys.exit(1)
    click.echo(f"Created: {path}")


@main.group()
def settings():
    """Show or change the note settings of a vault."""


@settings.command("show")
@vault_path_option
def settings_show(vault_path):
    """Print the current settings."""
    plugin = _load(vault_path)
    click.echo(SettingsView(plugin).on_render(), nl=False)


@settings.command("set")
@click.argument("key", type=click.Choice(sorted(CLI_KEYS)))
@click.argument("value")
@vault_path_option
def settings_set(key, value, vault_path):
    """Change one setting and save it."""
    plugin = _load(vault_path)
    SettingsView(plugin).change(key, value)
    click.echo(f"Saved {key}.")


@settings.command("reset")
@vault_path_option
def settings_reset(vault_path):
    """Restore the default settings."""
    plugin = _load(vault_path)
    SettingsView(plugin).reset()
    click.echo("Settings restored to defaults.")
