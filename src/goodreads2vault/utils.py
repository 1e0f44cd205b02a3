"""Utility functions for goodreads2vault."""

import re
import time
from datetime import date
from typing import Optional

_TITLE_PUNCTUATION = re.compile(r"[-{}:,\[\]|><#\"']")
_ILLEGAL_FILENAME_CHARS = re.compile(r'[\\/:"*?<>|]')
_LINE_BREAKS = re.compile(r"\r\n|\n|\r")


def reduce_string(text: str) -> str:
    """Drop line breaks and surrounding whitespace."""
    return _LINE_BREAKS.sub("", text).strip()


def sanitize_title(title: str) -> str:
    """Replace punctuation that breaks YAML, links or paths with spaces."""
    return _TITLE_PUNCTUATION.sub(" ", title)


def sanitize_filename(name: str) -> str:
    """Remove characters that are invalid in filenames."""
    return _ILLEGAL_FILENAME_CHARS.sub("", name)


def format_date(today: Optional[date] = None) -> str:
    """Format a date (default: today, local time) as YYYY-MM-DD."""
    return (today or date.today()).strftime("%Y-%m-%d")


def timestamp_ms() -> str:
    """Milliseconds since the epoch, as a decimal string."""
    return str(int(time.time() * 1000))
