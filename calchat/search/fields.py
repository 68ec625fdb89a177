"""Case-insensitive substring search over record fields."""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def field_value(item: Any, field: str) -> Any:
    """Read a field from a mapping by key or from any other object by attribute."""
    if isinstance(item, Mapping):
        return item.get(field)
    return getattr(item, field, None)


def field_text(item: Any, field: str) -> str:
    """Lower-cased string form of a field; missing or None reads as ""."""
    value = field_value(item, field)
    if value is None:
        return ""
    return str(value).lower()


def search_items(items: Iterable[T], query: str, fields: Sequence[str]) -> list[T]:
    """
    Filter records whose fields contain the query, ignoring case.

    An item is kept when at least one of ``fields`` contains ``query`` as a
    substring. Values are stringified first, so ``42`` matches ``"4"``. An
    empty query keeps every item; an empty ``fields`` keeps none. The result
    is a new list in input order; items are not modified.
    """
    q = query.lower()
    return [item for item in items if any(q in field_text(item, f) for f in fields)]
