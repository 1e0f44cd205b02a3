"""Custom exceptions for goodreads2vault."""


class Goodreads2VaultError(Exception):
    """Base exception for goodreads2vault."""


class ConfigError(Goodreads2VaultError):
    """Raised when configuration is missing or invalid."""


class SettingsError(Goodreads2VaultError):
    """Raised when the persisted plugin settings cannot be read."""


class FetchError(Goodreads2VaultError):
    """Raised when a book page cannot be downloaded."""


class NoteWriteError(Goodreads2VaultError):
    """Raised when a note file cannot be created in the vault."""


class TemplateError(Goodreads2VaultError):
    """Raised when a template file exists but cannot be read."""
