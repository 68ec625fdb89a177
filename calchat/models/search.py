"""Search result data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class SearchHit:
    """An indexed record matched by a search engine query."""

    type: str  # "events", "messages", "contacts", "files"
    item: Any
    score: float = 0.0
