"""Data models for goodreads2vault."""

from dataclasses import dataclass

NOT_FOUND = "Can't find information"


@dataclass
class Book:
    """Fields scraped from a single Goodreads book page."""

    tags: str = ""
    author: str = ""
    date: str = ""
    rating: str = ""
    cover: str = ""
    page: str = ""
    title: str = ""
    desc: str = ""


@dataclass
class BookNote:
    """A rendered note, ready to be written to the vault."""

    title: str
    content: str
