# ABOUTME: Presentation of review records as HTML snippets and their export cleanup
# ABOUTME: Jinja2 snippet rendering plus BeautifulSoup-based export formatting

from .export import ClipboardSink, ExportError, ExportFormatter, FileSink, StreamSink, export_html
from .snippet import STATUS_COLORS, SnippetRenderer

__all__ = [
    "ClipboardSink",
    "ExportError",
    "ExportFormatter",
    "FileSink",
    "STATUS_COLORS",
    "SnippetRenderer",
    "StreamSink",
    "export_html",
]
