"""Word-index search over events, messages, contacts and files."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from ..logging_config import get_logger, log_context
from ..models import SearchHit
from .fields import field_value

logger = get_logger(__name__)

# Searchable fields per index bucket.
INDEXED_FIELDS: dict[str, tuple[str, ...]] = {
    "events": ("title", "description", "location", "category"),
    "messages": ("content", "sender_name"),
    "contacts": ("name", "email", "department"),
    "files": ("name", "type"),
}

MIN_WORD_LENGTH = 3
FUZZY_THRESHOLD = 0.7
FUZZY_WEIGHT = 0.7
MAX_RESULTS = 50
MAX_SUGGESTIONS = 10


@dataclass
class _IndexEntry:
    type: str
    item: Any
    relevance: float


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between two strings."""
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(min(previous[j - 1], current[j - 1], previous[j]) + 1)
        previous = current
    return previous[-1]


def fuzzy_match(pattern: str, text: str, threshold: float = FUZZY_THRESHOLD) -> bool:
    """True when the normalized edit similarity reaches ``threshold``."""
    if not pattern:
        return True
    if not text:
        return False
    distance = levenshtein_distance(pattern, text)
    similarity = 1 - distance / max(len(pattern), len(text))
    return similarity >= threshold


def calculate_relevance(word: str, text: str) -> float:
    """Occurrences of ``word`` per hundred characters of ``text``."""
    if not text:
        return 0.0
    return text.count(word) / len(text) * 100


def _as_date(value: Any) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def _flatten_messages(messages: Iterable[Any] | Mapping[str, list[Any]]) -> list[Any]:
    if isinstance(messages, Mapping):
        return [message for chat in messages.values() for message in chat]
    return list(messages)


class SearchEngine:
    """Full-text index with relevance scoring and fuzzy matching.

    Keys are ``"<type>:<word>"``; every word longer than two characters of an
    item's searchable text points back to the item.
    """

    def __init__(self):
        self._index: dict[str, list[_IndexEntry]] = {}

    def __len__(self) -> int:
        return len(self._index)

    def clear(self) -> None:
        """Drop every indexed word."""
        self._index.clear()

    def build_index(
        self,
        events: Iterable[Any] = (),
        messages: Iterable[Any] | Mapping[str, list[Any]] = (),
        contacts: Iterable[Any] = (),
        files: Iterable[Any] = (),
    ) -> None:
        """Replace the index with the given records.

        ``messages`` may also be a mapping of chat id to message list.
        """
        self.clear()
        buckets = {
            "events": list(events),
            "messages": _flatten_messages(messages),
            "contacts": list(contacts),
            "files": list(files),
        }
        for type_, items in buckets.items():
            for item in items:
                self._add_to_index(type_, item)

        logger.info(
            "Search index built",
            extra=log_context(keys=len(self._index), **{k: len(v) for k, v in buckets.items()}),
        )

    def _add_to_index(self, type_: str, item: Any) -> None:
        values = (field_value(item, f) for f in INDEXED_FIELDS[type_])
        text = " ".join(str(v) for v in values if v).lower()

        for word in text.split():
            if len(word) < MIN_WORD_LENGTH:
                continue
            self._index.setdefault(f"{type_}:{word}", []).append(
                _IndexEntry(type=type_, item=item, relevance=calculate_relevance(word, text))
            )

    @staticmethod
    def _hit_key(entry: _IndexEntry) -> str:
        item_id = field_value(entry.item, "id")
        if item_id is None:
            item_id = id(entry.item)
        return f"{entry.type}:{item_id}"

    def search(
        self,
        query: str,
        types: Iterable[str] | None = None,
        date_range: tuple[date, date] | None = None,
        categories: Iterable[str] | None = None,
    ) -> list[SearchHit]:
        """
        Rank indexed items against a free-text query.

        Each query word longer than two characters scores every indexed word
        that contains it with full relevance, and every indexed word within
        fuzzy distance with reduced relevance.

        Args:
            query: Free text; blank returns no hits.
            types: Keep only these buckets.
            date_range: Inclusive (start, end); drops events dated outside it.
            categories: Drops items whose category is not listed.

        Returns:
            Up to 50 hits, highest score first.
        """
        if not query.strip():
            return []

        hits: dict[str, SearchHit] = {}

        def score(entry: _IndexEntry, weight: float) -> None:
            key = self._hit_key(entry)
            if key not in hits:
                hits[key] = SearchHit(type=entry.type, item=entry.item)
            hits[key].score += entry.relevance * weight

        for word in query.lower().split():
            if len(word) < MIN_WORD_LENGTH:
                continue
            for key, entries in self._index.items():
                indexed_word = key.split(":", 1)[1]
                if word in indexed_word:
                    for entry in entries:
                        score(entry, 1.0)
                if fuzzy_match(word, indexed_word):
                    for entry in entries:
                        score(entry, FUZZY_WEIGHT)

        results = list(hits.values())

        if types:
            allowed_types = set(types)
            results = [hit for hit in results if hit.type in allowed_types]

        if date_range:
            start, end = _as_date(date_range[0]), _as_date(date_range[1])
            results = [hit for hit in results if self._in_date_range(hit, start, end)]

        if categories:
            allowed_categories = set(categories)
            results = [
                hit
                for hit in results
                if not field_value(hit.item, "category")
                or field_value(hit.item, "category") in allowed_categories
            ]

        results.sort(key=lambda hit: hit.score, reverse=True)
        return results[:MAX_RESULTS]

    @staticmethod
    def _in_date_range(hit: SearchHit, start: date | None, end: date | None) -> bool:
        raw = field_value(hit.item, "date")
        if hit.type != "events" or not raw:
            return True
        event_date = _as_date(raw)
        if event_date is None or start is None or end is None:
            return False
        return start <= event_date <= end

    def suggestions(self, query: str) -> list[str]:
        """Indexed words that extend ``query``, in index order."""
        prefix = query.lower()
        found: dict[str, None] = {}
        for key in self._index:
            word = key.split(":", 1)[1]
            if word.startswith(prefix) and word != prefix:
                found[word] = None
        return list(found)[:MAX_SUGGESTIONS]
