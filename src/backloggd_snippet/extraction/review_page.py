# ABOUTME: Extracts ReviewInfo fields from a parsed backloggd.com review page
# ABOUTME: Pure function of (document, base URL); the cover image is filled in later

from bs4 import BeautifulSoup
from pydantic import ValidationError

from backloggd_snippet.core.models import ReviewInfo
from backloggd_snippet.extraction.base import StructuralFault
from backloggd_snippet.extraction.html import inline_style, optional_url, require, require_url

DATE_PREFIX = "Reviewed on "

REVIEWER_SELECTOR = "a > .username-link"
AVATAR_SELECTOR = "#avatar img"
GAME_TITLE_SELECTOR = ".review-game-name"
GAME_LINK_SELECTOR = '#review-sidebar a[href^="/games/"]'
PLATFORM_SELECTOR = ".review-platform"
STARS_SELECTOR = ".stars-top"
STATUS_SELECTOR = ".game-status a"
DATE_SELECTOR = ".review-card p"
BODY_SELECTOR = ".review-body .card-text"
REVIEW_CARD_SELECTOR = ".review-card"

# Where each record field comes from, for reporting records the page cannot produce
FIELD_SOURCES: dict[str, tuple[str, str | None]] = {
    "reviewer_url": (REVIEWER_SELECTOR, "href"),
    "reviewer_avatar": (AVATAR_SELECTOR, "src"),
    "game_url": (GAME_LINK_SELECTOR, "href"),
    "platform_url": (PLATFORM_SELECTOR, "href"),
    "status_url": (STATUS_SELECTOR, "href"),
}


def extract_date(document: BeautifulSoup) -> str:
    """Return the first 'Reviewed on ...' line of the review card, prefix removed."""
    for paragraph in document.select(DATE_SELECTOR):
        text = paragraph.get_text().strip()
        if text.startswith(DATE_PREFIX):
            return text[len(DATE_PREFIX) :]
    raise StructuralFault(f"{DATE_SELECTOR} starting with '{DATE_PREFIX}'")


def extract_body(document: BeautifulSoup) -> str:
    """Wrap each review body block in a paragraph, keeping its inner markup."""
    return "".join(f"<p>{block.decode_contents()}</p>" for block in document.select(BODY_SELECTOR))


def extract_review(document: BeautifulSoup, base_url: str) -> ReviewInfo:
    """Build a ReviewInfo (without image) from a parsed review page.

    Args:
        document: Parsed review page
        base_url: Resolved URL of the review response, used for relative links

    Raises:
        StructuralFault: If a required element or link is missing
    """
    reviewer_el = require(document, REVIEWER_SELECTOR)
    username_link = reviewer_el.parent
    game_link = require(document, GAME_LINK_SELECTOR)
    status_link = require(document, STATUS_SELECTOR)
    avatar = require(document, AVATAR_SELECTOR)

    platform_link = document.select_one(PLATFORM_SELECTOR)
    platform_url = optional_url(platform_link, "href", base_url)
    platform = platform_link.get_text().strip() if platform_link is not None and platform_url else None

    stars = document.select_one(STARS_SELECTOR)

    fields = dict(
        url=base_url,
        date=extract_date(document),
        reviewer=reviewer_el.get_text().strip(),
        reviewer_url=require_url(username_link, "href", base_url, REVIEWER_SELECTOR),
        reviewer_avatar=require_url(avatar, "src", base_url, AVATAR_SELECTOR),
        game=require(document, GAME_TITLE_SELECTOR).get_text().strip(),
        game_url=require_url(game_link, "href", base_url, GAME_LINK_SELECTOR),
        platform=platform,
        platform_url=platform_url if platform is not None else None,
        stars_percentage=inline_style(stars, "width") if stars is not None else None,
        body=extract_body(document),
        mastered=document.select_one(".mastered-icon") is not None,
        backer=document.select_one(".backer-badge") is not None,
        replay=document.select_one(".review-card .fa-history") is not None,
        status=status_link.get_text().strip(),
        status_url=require_url(status_link, "href", base_url, STATUS_SELECTOR),
        image=None,
    )

    try:
        return ReviewInfo(**fields)
    except ValidationError as e:
        raise _as_structural_fault(e) from e


def _as_structural_fault(error: ValidationError) -> StructuralFault:
    for detail in error.errors():
        field = detail["loc"][0] if detail["loc"] else None
        if field in FIELD_SOURCES:
            return StructuralFault(*FIELD_SOURCES[field])
    return StructuralFault(REVIEW_CARD_SELECTOR)
