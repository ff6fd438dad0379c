# ABOUTME: Cleans rendered snippet markup into portable HTML for pasting elsewhere
# ABOUTME: Tree-based cleanup of comments, tooling attributes and classes, plus clipboard-style sinks

import copy
import re
import sys
from pathlib import Path
from typing import Protocol, TextIO

from bs4 import BeautifulSoup, Comment, Tag

from backloggd_snippet.config import DEFAULT_EXPORT_LINK_STYLE
from backloggd_snippet.extraction.html import PARSER
from backloggd_snippet.utils.logging import get_logger

logger = get_logger(__name__)

# Links inside the review body sit two paragraph levels deep in the snippet
BODY_LINK_SELECTOR = "p p a"
MARKER_ATTRIBUTE_PATTERN = r"^_ng"
PRESENTATIONAL_CLASSES = ("ng-star-inserted",)


class ExportError(Exception):
    """Raised when exported HTML cannot be written to its destination."""

    pass


class ClipboardSink(Protocol):
    """Destination for exported HTML."""

    def write(self, text: str) -> None: ...


class FileSink:
    """Writes exported HTML to a file as UTF-8."""

    def __init__(self, path: Path):
        self.path = path

    def write(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")


class StreamSink:
    """Writes exported HTML to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream or sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.write("\n")
        self.stream.flush()


class ExportFormatter:
    """Turns a rendered snippet into HTML that pastes cleanly into rich-text editors.

    Args:
        link_style: Inline style forced onto links matched by link_selector
        link_selector: CSS selector for the links that receive link_style
        marker_attribute_pattern: Regex; matching attribute names are removed
        presentational_classes: Class names stripped from every element
    """

    def __init__(
        self,
        link_style: str = DEFAULT_EXPORT_LINK_STYLE,
        link_selector: str = BODY_LINK_SELECTOR,
        marker_attribute_pattern: str = MARKER_ATTRIBUTE_PATTERN,
        presentational_classes: tuple[str, ...] = PRESENTATIONAL_CLASSES,
    ):
        self.link_style = link_style
        self.link_selector = link_selector
        self.marker_attribute = re.compile(marker_attribute_pattern)
        self.presentational_classes = set(presentational_classes)

    def format(self, fragment: str | Tag) -> str:
        """Return the cleaned inner markup of fragment. The input is never modified."""
        if isinstance(fragment, Tag):
            root = copy.copy(fragment)
        else:
            root = BeautifulSoup(fragment, PARSER)

        for anchor in root.select(self.link_selector):
            anchor["style"] = self.link_style

        for comment in root.find_all(string=lambda text: isinstance(text, Comment)):
            comment.extract()

        for element in [root, *root.find_all(True)]:
            self._clean_attributes(element)

        return root.decode_contents()

    def _clean_attributes(self, element: Tag) -> None:
        for name in [name for name in element.attrs if self.marker_attribute.search(name)]:
            del element[name]

        classes = element.get("class")
        if classes is None:
            return
        if isinstance(classes, str):
            classes = classes.split()
        kept = [name for name in classes if name not in self.presentational_classes]
        if kept:
            element["class"] = kept
        else:
            del element["class"]


def export_html(fragment: str | Tag, sink: ClipboardSink, formatter: ExportFormatter | None = None) -> str:
    """Format fragment for export and write it to sink.

    Returns:
        The exported HTML

    Raises:
        ExportError: If the sink fails to accept the text
    """
    html = (formatter or ExportFormatter()).format(fragment)
    try:
        sink.write(html)
    except Exception as e:
        logger.error("Failed to write exported HTML", error=str(e), error_type=type(e).__name__)
        raise ExportError(f"Could not export HTML: {e}") from e

    logger.info("Exported HTML", length=len(html))
    return html
