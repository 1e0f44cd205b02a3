import re
from datetime import date

from goodreads2vault.formatter import (
    BODY_PLACEHOLDERS,
    apply_file_name_template,
    apply_template,
    build_book_note,
)
from goodreads2vault.models import Book, BookNote
from goodreads2vault.settings import DEFAULT_TEMPLATE

ALL_PLACEHOLDERS = "\n".join(f"{name}={{{{{name}}}}}" for name in BODY_PLACEHOLDERS)


def test_apply_template_substitutes_every_placeholder(book):
    note = apply_template(book, ALL_PLACEHOLDERS, timestamp="1700000000000")

    assert note.content.splitlines() == [
        "Title=A Wizard of Earthsea",
        "Description=A boy grows up on the island of **Gont**.",
        "Date=2024-01-02",
        "Tag=book/fantasy book/history",
        "Author=Ursula K. Le Guin",
        "Rating=4.2",
        "Cover=https://images.example.com/cover.jpg",
        "Total Page=183",
        "Timestamp=1700000000000",
    ]
    names = "|".join(re.escape(name) for name in BODY_PLACEHOLDERS)
    assert not re.search(r"\{\{(" + names + r")\}\}", note.content)


def test_apply_template_replaces_all_occurrences(book):
    note = apply_template(book, "{{Rating}}/{{Rating}}")

    assert note.content == "4.2/4.2"


def test_apply_template_keeps_unknown_placeholders(book):
    note = apply_template(book, "{{Publisher}} {{title}} {{Author}}")

    assert note.content == "{{Publisher}} {{title}} Ursula K. Le Guin"


def test_apply_template_sanitizes_title_without_mutating_book(book):
    book.title = "Dune: Part [One] - #1"

    note = apply_template(book, "# {{Title}}")

    assert note.title == "Dune  Part  One     1"
    assert note.content == "# Dune  Part  One     1"
    assert book.title == "Dune: Part [One] - #1"


def test_field_values_are_not_substituted_again(book):
    book.desc = "Literally {{Author}}"

    note = apply_template(book, "{{Description}}")

    assert note.content == "Literally {{Author}}"


def test_timestamp_defaults_to_current_time(book):
    note = apply_template(book, "{{Timestamp}}")

    assert note.content.isdigit()
    assert len(note.content) >= 13


def test_file_name_template():
    note = BookNote(title="Dune  A Novel", content="")

    name = apply_file_name_template(
        note, "{{Date}} {{Title}} {{Timestamp}}", today=date(2024, 3, 5), timestamp="42"
    )

    assert name == "2024-03-05 Dune  A Novel 42"


def test_file_name_template_ignores_body_placeholders():
    note = BookNote(title="Dune", content="")

    assert apply_file_name_template(note, "{{Title}} {{Author}}") == "Dune {{Author}}"


def test_file_name_strips_illegal_characters():
    note = BookNote(title='a\\b/c:d"e*f?g<h>i|j k.-_(x)', content="")

    assert apply_file_name_template(note, "{{Title}}") == "abcdefghij k.-_(x)"


def test_build_book_note_with_default_template(dune_page):
    note = build_book_note(dune_page, DEFAULT_TEMPLATE)

    assert note.title == "Dune  A Novel"
    lines = note.content.splitlines()
    assert "# Dune  A Novel" in lines
    assert "tags: book/space opera" in lines
    assert "Rating: 4.5" in lines
    assert "Page: 412" in lines
    assert "Author: Frank Herbert" in lines
    assert lines[-1] == "## Notes"


def test_build_book_note_from_empty_response():
    assert build_book_note("", DEFAULT_TEMPLATE) == BookNote(title="", content="")
    assert build_book_note("  \n", DEFAULT_TEMPLATE) == BookNote(title="", content="")


def test_build_book_note_without_fields():
    note = build_book_note("<html><body></body></html>", DEFAULT_TEMPLATE)

    assert note.title == ""
    assert "Cover: Can't find information" in note.content
    assert "# \n" in note.content


def test_apply_template_accepts_fresh_book():
    note = apply_template(Book(), "[{{Title}}]")

    assert note == BookNote(title="", content="[]")
