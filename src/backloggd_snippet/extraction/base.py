# ABOUTME: Shared exception types for HTML extraction
# ABOUTME: StructuralFault marks a fetched page that lacks markup the extractors rely on


class ExtractionError(Exception):
    """Raised when review data cannot be extracted from a page."""

    pass


class StructuralFault(ExtractionError):
    """Raised when a required element or attribute is missing from a fetched page.

    This usually means backloggd.com changed its markup rather than a transient
    network problem, so it is not recovered from.
    """

    def __init__(self, selector: str, attribute: str | None = None):
        self.selector = selector
        self.attribute = attribute
        if attribute:
            message = f"Required attribute '{attribute}' missing or unusable on element '{selector}'"
        else:
            message = f"Required element '{selector}' not found"
        super().__init__(message)
