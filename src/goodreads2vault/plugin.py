"""Book note plugin: wires the pipeline to the host's capabilities.

The host (the CLI, or anything else embedding the plugin) provides the
vault, the settings store, the page fetcher, a way to show notices and a
way to open files. Components expose explicit lifecycle hooks that the host
calls: on_activate for the plugin, on_show for the URL prompt and on_render
for the settings view.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import click

from .exceptions import FetchError, NoteWriteError, TemplateError
from .formatter import build_book_note
from .settings import Settings, SettingsStore
from .writer import Vault, write_note


@dataclass
class Host:
    """Capabilities the plugin needs from its host."""

    vault: Vault
    settings_store: SettingsStore
    fetch: Callable[[str], str]
    notify: Callable[[str], None]
    open_file: Callable[[Path], None]


def get_template(settings: Settings, vault: Vault, verbose: bool = False) -> str:
    """The body template: the template file's content if it exists, else inline."""
    template_file = settings.template_file()
    if template_file:
        path = vault.first_linkpath_dest(template_file)
        if path is not None:
            if verbose:
                click.echo(f"  Template: {path}")
            return vault.read(path)
        if verbose:
            click.echo(f"  Template file {template_file} not found, using inline template")
    return settings.good_reads_book_template


def create_book_note(
    url: str,
    settings: Settings,
    host: Host,
    verbose: bool = False,
) -> Optional[Path]:
    """Fetch, extract, render and write one book note.

    Failures are reported through host.notify and give None; on success the
    new note is opened and its path returned.
    """
    try:
        template = get_template(settings, host.vault, verbose=verbose)
    except TemplateError as e:
        host.notify(f"Error loading template: {e}")
        return None
    host.notify("Loading GoodReads Book Info")

    try:
        html = host.fetch(url)
    except FetchError as e:
        host.notify(f"Error loading GoodReads link: {e}")
        return None
    if verbose:
        click.echo(f"  Fetched {len(html)} chars from {url}")

    note = build_book_note(html, template)
    if verbose:
        click.echo(f"  Title: {note.title!r}")

    try:
        path = write_note(host.vault, note, settings.file_name, settings.folder)
    except NoteWriteError as e:
        host.notify(f"Error creating GoodReads Book Note: {e}")
        return None
    if verbose:
        click.echo(f"  Wrote: {path}")

    host.open_file(path)
    return path


class BookNotePlugin:
    """Holds the loaded settings and runs the note pipeline."""

    def __init__(self, host: Host, verbose: bool = False):
        self.host = host
        self.verbose = verbose
        self.settings = Settings()

    def on_activate(self) -> None:
        self.settings = self.host.settings_store.load()

    def save_settings(self) -> None:
        self.host.settings_store.save(self.settings)

    def new_book_note(self, url: str) -> Optional[Path]:
        return create_book_note(url, self.settings, self.host, verbose=self.verbose)


class UrlPrompt:
    """Asks for a Goodreads URL and creates a note from it."""

    title = "Enter GoodReads URL"

    def __init__(self, plugin: BookNotePlugin, ask: Callable[[str], str]):
        self.plugin = plugin
        self._ask = ask

    def on_show(self) -> Optional[Path]:
        url = self._ask(self.title)
        return self.plugin.new_book_note(url)


class SettingsView:
    """Displays and edits the plugin settings."""

    def __init__(self, plugin: BookNotePlugin):
        self.plugin = plugin

    def on_render(self) -> str:
        settings = self.plugin.settings
        sections = [
            ("Template", settings.good_reads_book_template,
             "Available placeholders: {{Title}}, {{Description}}, {{Date}}, "
             "{{Tag}}, {{Author}}, {{Rating}}, {{Cover}}, {{Total Page}}, "
             "{{Timestamp}}"),
            ("Template file", settings.template_path or "(none)",
             "Template in a .md file, path relative to the vault"),
            ("Folder", settings.folder or "(vault root)",
             "New book notes are saved here"),
            ("Filename template", settings.file_name,
             "Available placeholders: {{Title}}, {{Date}}, {{Timestamp}}"),
        ]
        lines = ["Settings for GoodReads Book Note", ""]
        for name, value, description in sections:
            lines.append(f"{name}: {description}")
            lines.extend(f"    {line}" for line in value.splitlines() or [""])
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"

    def change(self, key: str, value: str) -> None:
        self.plugin.settings.update(key, value)
        self.plugin.save_settings()

    def reset(self) -> None:
        self.plugin.settings = Settings()
        self.plugin.save_settings()
