# ABOUTME: HTML extraction for backloggd.com review and game pages
# ABOUTME: Pure functions over (parsed document, base URL) with typed structural faults

"""
Extraction Layer: Turn fetched HTML into review records

This layer handles:
- Parsing HTML into BeautifulSoup trees
- Review page field extraction
- Game page cover art discovery

Data Flow: Fetched pages → ReviewInfo → Rendering layer
"""

from .base import ExtractionError, StructuralFault
from .game_page import extract_game_image
from .html import parse_html
from .review_page import extract_review

__all__ = [
    "ExtractionError",
    "StructuralFault",
    "extract_game_image",
    "extract_review",
    "parse_html",
]
