# ABOUTME: Finds the high resolution cover art on a backloggd.com game page
# ABOUTME: Absence is a normal outcome, many game pages have no high-res artwork

from bs4 import BeautifulSoup

from backloggd_snippet.extraction.html import optional_url

ARTWORK_SELECTOR = "#artwork-high-res"


def extract_game_image(document: BeautifulSoup, base_url: str) -> str | None:
    """Return the absolute URL of the game's high-res artwork, or None."""
    return optional_url(document.select_one(ARTWORK_SELECTOR), "src", base_url)
