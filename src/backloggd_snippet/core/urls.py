# ABOUTME: Recognizes backloggd.com review URLs
# ABOUTME: Pure predicate used to gate network calls and report input validity

import re

REVIEW_URL_PATTERN = re.compile(r"^https://(www\.)?backloggd\.com/u/[^/]+/review/[0-9]+/?$")


def is_valid_review_url(text: str | None) -> bool:
    """Return True if text is exactly a backloggd.com review URL.

    No normalization is applied: scheme and host are matched case-sensitively.
    """
    if not text:
        return False
    return REVIEW_URL_PATTERN.fullmatch(text) is not None
