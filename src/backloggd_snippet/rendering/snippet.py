# ABOUTME: Renders a ReviewInfo into a styled, self-contained HTML snippet
# ABOUTME: Jinja2 template with the include-image and attribution rendering hints

from importlib.resources import files
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from backloggd_snippet.core.models import ReviewInfo

SNIPPET_TEMPLATE = "snippet.html.jinja2"

STATUS_COLORS: dict[str, str] = {
    "Played": "#ea377a",
    "Completed": "#43b94f",
    "Mastered": "#8d58af",
    "Abandoned": "#ea4747",
    "Retired": "#4b7bd4",
    "Shelved": "#e69b3e",
}
DEFAULT_STATUS_COLOR = "#8f9ca7"
STAR_COLOR = "#ea377a"


def status_color(status: str) -> str:
    return STATUS_COLORS.get(status, DEFAULT_STATUS_COLOR)


class SnippetRenderer:
    """Renders review snippets from the packaged Jinja2 template.

    Args:
        include_image: Show the game cover art when the review has one
        attribution: Credit the reviewer and link back to the original review
        template_dir: Alternative template directory (defaults to the packaged templates)
    """

    def __init__(self, include_image: bool = True, attribution: bool = True, template_dir: Path | None = None):
        if template_dir is None:
            template_dir = Path(str(files("backloggd_snippet.rendering").joinpath("templates")))

        self.include_image = include_image
        self.attribution = attribution
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "jinja2"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, review: ReviewInfo) -> str:
        template = self.env.get_template(SNIPPET_TEMPLATE)
        return template.render(
            review=review,
            include_image=self.include_image,
            attribution=self.attribution,
            status_color=status_color(review.status),
            mastered_color=STATUS_COLORS["Mastered"],
            star_color=STAR_COLOR,
            stars="★★★★★",
        ).strip()
