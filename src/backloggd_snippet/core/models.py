# ABOUTME: Domain records produced by the extraction pipeline
# ABOUTME: ReviewInfo is immutable; adding the cover image yields a new record

from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _require_absolute(value: str | None) -> str | None:
    if value is None:
        return None
    parsed = urlparse(value)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"Expected an absolute URL, got {value!r}")
    return value


class FetchedPage(BaseModel):
    """Result of an HTTP GET: the resolved URL after redirects and the body text."""

    model_config = ConfigDict(frozen=True)

    url: str
    status_code: int = 200
    text: str = ""


class ReviewInfo(BaseModel):
    """Structured metadata extracted from one backloggd.com review page."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Resolved URL of the review page")
    date: str = Field(description="Review date as displayed, without the 'Reviewed on ' prefix")
    reviewer: str
    reviewer_url: str
    reviewer_avatar: str
    game: str
    game_url: str
    platform: str | None = None
    platform_url: str | None = None
    stars_percentage: str | None = Field(default=None, description="Raw CSS width of the star bar, e.g. '80%'")
    body: str = Field(description="Review body paragraphs as HTML")
    image: str | None = Field(default=None, description="High resolution cover art from the game page")
    mastered: bool = False
    backer: bool = False
    replay: bool = False
    status: str
    status_url: str

    @field_validator(
        "url", "reviewer_url", "reviewer_avatar", "game_url", "platform_url", "image", "status_url"
    )
    @classmethod
    def _absolute_url(cls, value: str | None) -> str | None:
        return _require_absolute(value)

    @model_validator(mode="after")
    def _platform_pair(self) -> "ReviewInfo":
        if (self.platform is None) != (self.platform_url is None):
            raise ValueError("platform and platform_url must be both present or both absent")
        return self

    @property
    def has_image(self) -> bool:
        return self.image is not None

    def with_image(self, image: str | None) -> "ReviewInfo":
        """Return a copy of this record carrying the given cover image."""
        # model_copy does not run validators
        return ReviewInfo(**{**self.model_dump(), "image": image})
