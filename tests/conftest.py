# ABOUTME: Shared fixtures for review and game page HTML
# ABOUTME: Builds minimal backloggd.com markup with optional sections toggled per test

from collections.abc import Callable

import pytest
from loguru import logger

from backloggd_snippet.config import reload_config
from backloggd_snippet.core.models import FetchedPage

REVIEW_URL = "https://backloggd.com/u/bob/review/42"
GAME_URL = "https://backloggd.com/games/outer-wilds/"


def build_review_page(
    *,
    reviewer_href: str = "/u/bob/",
    body_blocks: tuple[str, ...] = ("Loved it.",),
    platform: bool = False,
    stars: str | None = None,
    mastered: bool = False,
    backer: bool = False,
    replay: bool = False,
    date_line: str = "Reviewed on Mar 14, 2024",
    game_link: bool = True,
) -> str:
    """Return review page HTML containing every required selector."""
    platform_html = '<a class="review-platform" href="/games/lib/platform:pc">  PC  </a>' if platform else ""
    stars_html = (
        f'<div class="stars-container"><div class="stars-top" style="width: {stars};">★★★★★</div></div>'
        if stars
        else ""
    )
    mastered_html = '<img class="mastered-icon" src="/mastered.svg">' if mastered else ""
    backer_html = '<span class="backer-badge">Backer</span>' if backer else ""
    replay_html = '<i class="fas fa-history"></i>' if replay else ""
    game_link_html = '<a href="/games/outer-wilds/"><img src="/cover.jpg"></a>' if game_link else ""
    body_html = "".join(f'<div class="card-text">{block}</div>' for block in body_blocks)

    return f"""<!DOCTYPE html>
<html>
<body>
  <div id="avatar"><img src="/avatars/bob.png"></div>
  <a href="{reviewer_href}"><p class="username-link"> bob </p></a>
  {backer_html}
  <div id="review-sidebar">{game_link_html}</div>
  <div class="review-card">
    <a class="review-game-name" href="/games/outer-wilds/">
      Outer Wilds
    </a>
    {platform_html}
    {stars_html}
    {mastered_html}
    {replay_html}
    <p>Some other line</p>
    <p>{date_line}</p>
    <p>Reviewed on a later line</p>
    <div class="game-status"><a href="/u/bob/games/played/type:completed"> Completed </a></div>
    <div class="review-body">{body_html}</div>
  </div>
</body>
</html>"""


def build_game_page(artwork_src: str | None = "/images/outer-wilds-hd.jpg") -> str:
    artwork = f'<img id="artwork-high-res" src="{artwork_src}">' if artwork_src else ""
    return f"<html><body><div id='game-cover'>{artwork}</div></body></html>"


class FakeFetcher:
    """In-memory PageFetcher returning canned pages or raising canned errors."""

    def __init__(self, pages: dict[str, FetchedPage | Exception] | None = None):
        self.pages = pages or {}
        self.requests: list[str] = []

    async def fetch(self, url: str) -> FetchedPage:
        self.requests.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        return page


@pytest.fixture
def review_page_factory() -> Callable[..., str]:
    return build_review_page


@pytest.fixture
def game_page_factory() -> Callable[..., str]:
    return build_game_page


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the developer's environment and .env file."""
    for name in (
        "USER_AGENT",
        "REQUEST_TIMEOUT",
        "INCLUDE_IMAGE",
        "ATTRIBUTION",
        "EXPORT_LINK_STYLE",
        "LOG_MODE",
        "LOG_LEVEL",
        "LOG_FILE",
    ):
        monkeypatch.delenv(f"BACKLOGGD_SNIPPET_{name}", raising=False)
    reload_config()
    yield
    reload_config()


@pytest.fixture(autouse=True)
def reset_loguru_sinks():
    """Drop sinks bound to streams that CliRunner closes after each invocation."""
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def reset_logging_status(monkeypatch):
    """Forget the mode recorded by earlier configure_logging calls."""
    from backloggd_snippet.utils.logging import config as logging_config

    monkeypatch.setattr(logging_config, "_active_mode", None)
    monkeypatch.setattr(logging_config, "_active_log_file", None)
