"""
Content: loading and validating the study-item corpus.

Core modules:
- loader: JSON corpus loading with per-record validation
"""

from .loader import load_items, parse_items

__all__ = [
    "load_items",
    "parse_items",
]
