"""Extract book fields from Goodreads book page markup.

The selectors target the classic Goodreads book page layout. Every lookup
degrades to an empty string (or NOT_FOUND for the cover and description)
when the element is missing, so extraction never fails.
"""

from datetime import date
from typing import Optional

from bs4 import BeautifulSoup
from markdownify import markdownify

from .models import NOT_FOUND, Book
from .utils import format_date, reduce_string

TAG_SELECTOR = "div[class=left]"
AUTHOR_SELECTOR = "div[id=bookAuthors] span[itemprop=author]"
RATING_SELECTOR = "div[id=bookMeta] span[itemprop=ratingValue]"
COVER_SELECTOR = "img[id=coverImage]"
PAGES_SELECTOR = "div[id=details] div[class=row] span[itemprop=numberOfPages]"
TITLE_SELECTOR = "h1[id=bookTitle]"
DESCRIPTION_SELECTOR = "div[id=descriptionContainer] div[id=description] span"

MAX_TAGS = 3


def _text(soup: BeautifulSoup, selector: str) -> str:
    """Concatenated text of every element matching selector."""
    # Joins every match, like jQuery-style .text() on a whole selection.
    return "".join(el.get_text() for el in soup.select(selector))


def _parse_tags(soup: BeautifulSoup) -> str:
    # Breadcrumbs read like "Fiction > Fantasy"; only the leaf becomes a tag.
    tags = []
    for el in soup.select(TAG_SELECTOR):
        leaf = reduce_string(el.get_text()).split(">")[-1]
        tags.append(f"book/{reduce_string(leaf).lower()}")
    return " ".join(tags[:MAX_TAGS])


def _parse_cover(soup: BeautifulSoup) -> str:
    img = soup.select_one(COVER_SELECTOR)
    if img is None:
        return NOT_FOUND
    return img.get("src") or NOT_FOUND


def _parse_description(soup: BeautifulSoup) -> str:
    # The first span holds the truncated blurb, the second the full text.
    spans = soup.select(DESCRIPTION_SELECTOR)
    if len(spans) < 2:
        return NOT_FOUND
    inner_html = spans[1].decode_contents()
    if not inner_html:
        return NOT_FOUND
    return markdownify(inner_html).strip()


def load_book(html: str, today: Optional[date] = None) -> Book:
    """Parse a Goodreads book page into a Book."""
    soup = BeautifulSoup(html, "html.parser")

    return Book(
        tags=_parse_tags(soup),
        author=reduce_string(_text(soup, AUTHOR_SELECTOR)),
        date=format_date(today),
        rating=reduce_string(_text(soup, RATING_SELECTOR)),
        cover=_parse_cover(soup),
        page=_text(soup, PAGES_SELECTOR).replace(" pages", "", 1),
        title=reduce_string(_text(soup, TITLE_SELECTOR)),
        desc=_parse_description(soup),
    )
