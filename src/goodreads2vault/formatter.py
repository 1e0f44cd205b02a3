"""Placeholder substitution for note bodies and file names."""

import re
from dataclasses import replace
from datetime import date
from typing import Optional

from .models import Book, BookNote
from .parser import load_book
from .utils import format_date, sanitize_filename, sanitize_title, timestamp_ms

BODY_PLACEHOLDERS = (
    "Title",
    "Description",
    "Date",
    "Tag",
    "Author",
    "Rating",
    "Cover",
    "Total Page",
    "Timestamp",
)
FILE_NAME_PLACEHOLDERS = ("Title", "Date", "Timestamp")


def _substitute(template: str, values: dict[str, str]) -> str:
    """Replace every {{Name}} whose Name is a key of values.

    A single pass, so text inserted for one placeholder is never scanned
    for another. Unrecognized placeholders are kept as they are.
    """
    pattern = re.compile(
        "|".join(re.escape("{{" + name + "}}") for name in values)
    )
    return pattern.sub(lambda m: values[m.group(0)[2:-2]], template)


def sanitize_book(book: Book) -> Book:
    """Return a copy of book with a sanitized title."""
    return replace(book, title=sanitize_title(book.title))


def apply_template(
    book: Book,
    template: str,
    timestamp: Optional[str] = None,
) -> BookNote:
    """Render the note body for book."""
    book = sanitize_book(book)
    content = _substitute(template, {
        "Title": book.title,
        "Description": book.desc,
        "Date": book.date,
        "Tag": book.tags,
        "Author": book.author,
        "Rating": book.rating,
        "Cover": book.cover,
        "Total Page": book.page,
        "Timestamp": timestamp or timestamp_ms(),
    })
    return BookNote(title=book.title, content=content)


def apply_file_name_template(
    note: BookNote,
    template: str,
    today: Optional[date] = None,
    timestamp: Optional[str] = None,
) -> str:
    """Render the file name (without .md) for note."""
    name = _substitute(template, {
        "Title": note.title,
        "Timestamp": timestamp or timestamp_ms(),
        "Date": format_date(today),
    })
    return sanitize_filename(name)


def build_book_note(html: str, template: str) -> BookNote:
    """Extract a book from html and render it with template.

    Blank markup gives an empty note instead of a page of defaults.
    """
    if not html or not html.strip():
        return BookNote(title="", content="")
    return apply_template(load_book(html), template)
