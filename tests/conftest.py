import pytest
from pathlib import Path

from goodreads2vault.models import Book

DUNE_PAGE = """
<html>
<head><title>Dune by Frank Herbert | Goodreads</title></head>
<body>
<div id="coverImageContainer">
  <img id="coverImage" alt="Dune" src="https://images.example.com/dune.jpg">
</div>
<div id="bookTitle_wrap">
  <h1 id="bookTitle" class="gr-h1 gr-h1--serif" itemprop="name">
        Dune: A Novel
  </h1>
</div>
<div id="bookAuthors">
  <span>by</span>
  <span itemprop="author"><a class="authorName" href="/author/58">Frank Herbert</a></span>
</div>
<div id="bookMeta">
  <span itemprop="ratingValue">
    4.5
  </span>
</div>
<div id="descriptionContainer">
  <div id="description">
    <span id="freeTextContainer">Set on the desert planet...</span>
    <span id="freeText" style="display:none">Set on the desert planet <b>Arrakis</b>.</span>
  </div>
</div>
<div id="details">
  <div class="row"><span itemprop="bookFormat">Paperback</span>, <span itemprop="numberOfPages">412 pages</span></div>
</div>
<div class="elementList">
  <div class="left">
    <a class="bookPageGenreLink" href="/genres/science-fiction">Sci-Fi</a>
    &gt;
    <a class="bookPageGenreLink" href="/genres/space-opera">Space Opera</a>
  </div>
</div>
</body>
</html>
"""


def _breadcrumb_page(*breadcrumbs: str) -> str:
    divs = "\n".join(
        f'<div class="elementList"><div class="left">\n  {crumb}\n</div></div>'
        for crumb in breadcrumbs
    )
    return f"<html><body>{divs}</body></html>"


@pytest.fixture
def dune_page() -> str:
    return DUNE_PAGE


@pytest.fixture
def vault_dir(tmp_path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()
    return vault


@pytest.fixture
def book() -> Book:
    return Book(
        tags="book/fantasy book/history",
        author="Ursula K. Le Guin",
        date="2024-01-02",
        rating="4.2",
        cover="https://images.example.com/cover.jpg",
        page="183",
        title="A Wizard of Earthsea",
        desc="A boy grows up on the island of **Gont**.",
    )


@pytest.fixture
def breadcrumb_page():
    return _breadcrumb_page
