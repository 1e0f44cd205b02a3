"""Persisted per-vault settings: templates, target folder, template file."""

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from .exceptions import ConfigError, SettingsError

DEFAULT_TEMPLATE = (
    "---\n"
    "tags: {{Tag}}\n"
    "Author: {{Author}}\n"
    "Date: {{Date}}\n"
    "Finished:\n"
    "Rating: {{Rating}}\n"
    "Cover: {{Cover}}\n"
    "Page: {{Total Page}}\n"
    "Current:\n"
    "---\n"
    "# {{Title}}\n"
    "## Description\n"
    "{{Description}}\n"
    "## Notes\n"
)
DEFAULT_FILE_NAME = "{{Title}}"

# Attribute name -> key used in the stored JSON.
_STORED_KEYS = {
    "good_reads_book_template": "goodReadsBookTemplate",
    "file_name": "fileName",
    "folder": "folder",
    "template_path": "templatePath",
}

# Names accepted by `settings set` on the command line.
CLI_KEYS = {
    "template": "good_reads_book_template",
    "template-file": "template_path",
    "folder": "folder",
    "file-name": "file_name",
}


@dataclass
class Settings:
    """User settings for note creation."""

    good_reads_book_template: str = DEFAULT_TEMPLATE
    file_name: str = DEFAULT_FILE_NAME
    folder: str = ""
    template_path: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Build settings from stored data, keeping defaults for absent keys."""
        values = {}
        for attr, key in _STORED_KEYS.items():
            if key in data and isinstance(data[key], str):
                values[attr] = data[key]
        return cls(**values)

    def to_dict(self) -> dict:
        return {_STORED_KEYS[k]: v for k, v in asdict(self).items()}

    def template_file(self) -> str:
        """Vault-relative template path with the .md suffix, or ''."""
        path = self.template_path.strip()
        if path and not path.endswith(".md"):
            path += ".md"
        return path

    def update(self, cli_key: str, value: str) -> None:
        """Set one setting by its command line name."""
        if cli_key not in CLI_KEYS:
            raise ConfigError(
                f"Unknown setting: {cli_key}. "
                f"Use one of: {', '.join(sorted(CLI_KEYS))}."
            )
        setattr(self, CLI_KEYS[cli_key], value)


class SettingsStore:
    """Loads and saves Settings as JSON, where the host keeps plugin data."""

    def __init__(self, path: Path):
        self.path = Path(path)

    @classmethod
    def for_vault(cls, vault_path: Path) -> "SettingsStore":
        return cls(
            Path(vault_path) / ".obsidian" / "plugins" / "goodreads2vault" / "data.json"
        )

    def load(self) -> Settings:
        """Read stored settings merged over the defaults."""
        if not self.path.is_file():
            return Settings()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise SettingsError(f"Cannot read settings from {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings in {self.path} must be a JSON object")
        return Settings.from_dict(data)

    def save(self, settings: Settings) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(settings.to_dict(), indent=2) + "\n", encoding="utf-8"
        )
