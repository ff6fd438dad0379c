# ABOUTME: Cross-cutting utilities and shared infrastructure
# ABOUTME: Supporting services: logging, busy indicators, rich table output

"""
Utils Layer: Shared infrastructure and cross-cutting concerns

This layer provides:
- Logging configuration and structured loggers
- CLI busy indicators
- Rich table helpers for displaying review records
"""

from . import logging

__all__ = [
    "logging",
]
