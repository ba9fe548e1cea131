"""Keyboard layout helpers: geometry, weights, search, pages, views, reports and corpus settings."""

__version__ = "0.1.0"

__all__ = [
    "analysis_view",
    "corpus",
    "geometry",
    "metadata",
    "pages",
    "report",
    "search",
    "weights",
]