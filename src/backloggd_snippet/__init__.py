# ABOUTME: Backloggd Snippet - turn backloggd.com reviews into portable HTML snippets
# ABOUTME: Public API: the extraction pipeline, review record, renderer, and export formatter

from backloggd_snippet.core.models import ReviewInfo
from backloggd_snippet.core.pipeline import ExtractionPipeline, PipelineState
from backloggd_snippet.core.urls import is_valid_review_url
from backloggd_snippet.rendering import ExportFormatter, SnippetRenderer, export_html

__version__ = "0.1.0"

__all__ = [
    "ExportFormatter",
    "ExtractionPipeline",
    "PipelineState",
    "ReviewInfo",
    "SnippetRenderer",
    "export_html",
    "is_valid_review_url",
]
