"""
Filtered views and aggregate counts over in-memory entity lists.

Every function here is pure: it takes a snapshot and returns a new list or
mapping without touching the input. Filters are independent predicates, so
chaining them in any order gives the same result.
"""
from typing import Iterable, Optional

ALL = "all"


def filter_by(items: Iterable[dict], field: str, value) -> list:
    """Keep items whose ``field`` equals ``value``; ``"all"`` or None keeps everything."""
    if value is None or value == ALL:
        return list(items)
    return [item for item in items if item.get(field) == value]


def filter_many(items: Iterable[dict], criteria: dict) -> list:
    filtered = list(items)
    for field, value in criteria.items():
        filtered = filter_by(filtered, field, value)
    return filtered


def count_by(items: Iterable[dict], field: str, categories: Optional[Iterable] = None) -> dict:
    """
    Count items per value of ``field`` in a single pass.

    The result always holds ``"all"`` (the total) and every category in
    ``categories``, with zero for categories that never occur.
    """
    counts = {ALL: 0}
    for category in categories or ():
        counts[category] = 0

    for item in items:
        counts[ALL] += 1
        value = item.get(field)
        counts[value] = counts.get(value, 0) + 1

    return counts


def distinct_values(items: Iterable[dict], field: str) -> list:
    seen = []
    for item in items:
        value = item.get(field)
        if value not in seen:
            seen.append(value)
    return seen
