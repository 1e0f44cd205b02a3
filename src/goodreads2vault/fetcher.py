"""Download raw book page markup, via Firecrawl or plain HTTP."""

import requests
from firecrawl import FirecrawlApp

from .config import Config
from .exceptions import FetchError


def _scrape_with_firecrawl(url: str, config: Config) -> str:
    app = FirecrawlApp(api_key=config.firecrawl_api_key)

    try:
        result = app.scrape(url, formats=["rawHtml"])
    except Exception as e:
        raise FetchError(f"Failed to scrape {url}: {e}") from e

    if not result:
        return ""

    if hasattr(result, "raw_html"):
        return result.raw_html or ""
    return result.get("rawHtml") or ""


def _get_with_requests(url: str, config: Config) -> str:
    try:
        resp = requests.get(url, headers={"User-Agent": config.user_agent})
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to download {url}: {e}") from e
    return resp.text


def fetch_html(url: str, config: Config) -> str:
    """Return the page markup for url.

    An empty string means the server answered with no body; transport and
    HTTP status failures raise FetchError.
    """
    if not url or not url.strip():
        raise FetchError("No URL given")

    if config.transport == "firecrawl":
        return _scrape_with_firecrawl(url.strip(), config)
    return _get_with_requests(url.strip(), config)
