"""Search helpers."""

from .engine import SearchEngine, fuzzy_match, levenshtein_distance
from .fields import field_value, search_items

__all__ = [
    "SearchEngine",
    "field_value",
    "fuzzy_match",
    "levenshtein_distance",
    "search_items",
]
