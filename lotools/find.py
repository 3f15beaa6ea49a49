"""Searching helpers: lookups, extremes, positional access and random sampling."""

from __future__ import annotations

import random
from collections import Counter
from typing import Any, Callable, Hashable, Iterable, Mapping, Sequence, TypeVar

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")

RandomIntGenerator = Callable[[int], int]


def _like(collection: Any, items: Iterable[T]) -> Any:
    """Build a sequence of the same kind as ``collection`` from ``items``."""
    if isinstance(collection, (list, tuple)):
        return type(collection)(items)
    return list(items)


def index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the first occurrence of ``element``, or -1."""
    return next((i for i, item in enumerate(collection) if item == element), -1)


def last_index_of(collection: Sequence[T], element: T) -> int:
    """Return the index of the last occurrence of ``element``, or -1."""
    for i in reversed(range(len(collection))):
        if collection[i] == element:
            return i
    return -1


def find(collection: Iterable[T], predicate: Callable[[T], bool]) -> tuple[T | None, bool]:
    """Return ``(item, True)`` for the first item matching ``predicate``, else ``(None, False)``."""
    for item in collection:
        if predicate(item):
            return item, True
    return None, False


def find_index_of(
    collection: Iterable[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return ``(item, index, True)`` for the first match, else ``(None, -1, False)``."""
    for i, item in enumerate(collection):
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_last_index_of(
    collection: Sequence[T], predicate: Callable[[T], bool]
) -> tuple[T | None, int, bool]:
    """Return ``(item, index, True)`` for the last match, else ``(None, -1, False)``."""
    for i in reversed(range(len(collection))):
        item = collection[i]
        if predicate(item):
            return item, i, True
    return None, -1, False


def find_or_else(collection: Iterable[T], fallback: T, predicate: Callable[[T], bool]) -> T:
    """Return the first item matching ``predicate``, or ``fallback``."""
    item, ok = find(collection, predicate)
    return item if ok else fallback  # type: ignore[return-value]


def find_key(mapping: Mapping[K, V], value: V) -> tuple[K | None, bool]:
    """Return ``(key, True)`` for the first key whose value equals ``value``."""
    for key, item in mapping.items():
        if item == value:
            return key, True
    return None, False


def find_key_by(
    mapping: Mapping[K, V], predicate: Callable[[K, V], bool]
) -> tuple[K | None, bool]:
    """Return ``(key, True)`` for the first entry matching ``predicate``."""
    for key, item in mapping.items():
        if predicate(key, item):
            return key, True
    return None, False


def find_uniques_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the items whose key, computed by ``iteratee``, occurs exactly once, in order."""
    keys = [iteratee(item) for item in collection]
    counts = Counter(keys)
    return _like(collection, (item for item, key in zip(collection, keys) if counts[key] == 1))


def find_uniques(collection: Sequence[T]) -> Any:
    """Return the items that occur exactly once, in order."""
    return find_uniques_by(collection, lambda item: item)


def find_duplicates_by(collection: Sequence[T], iteratee: Callable[[T], Hashable]) -> Any:
    """Return the first occurrence of each item whose key occurs more than once, in order."""
    keys = [iteratee(item) for item in collection]
    counts = Counter(keys)
    emitted: set[Hashable] = set()
    result = []
    for item, key in zip(collection, keys):
        if counts[key] > 1 and key not in emitted:
            emitted.add(key)
            result.append(item)
    return _like(collection, result)


def find_duplicates(collection: Sequence[T]) -> Any:
    """Return the first occurrence of each duplicated item, in order."""
    return find_duplicates_by(collection, lambda item: item)


def _extreme_index_by(
    collection: Sequence[T], better: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    if not collection:
        return None, -1
    best, best_index = collection[0], 0
    for i, item in enumerate(collection):
        if i and better(item, best):
            best, best_index = item, i
    return best, best_index


def min_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Return ``(item, index)`` of the minimum, where ``comparison(a, b)`` means a < b.

    Ties keep the first item; an empty collection gives ``(None, -1)``.
    """
    return _extreme_index_by(collection, comparison)


def min_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Return the minimum item by ``comparison``, or ``None`` if empty."""
    return min_index_by(collection, comparison)[0]


def min_index(collection: Sequence[T]) -> tuple[T | None, int]:
    """Return ``(item, index)`` of the smallest item, or ``(None, -1)`` if empty."""
    return _extreme_index_by(collection, lambda a, b: a < b)


def minimum(collection: Sequence[T]) -> T | None:
    """Return the smallest item, or ``None`` if empty."""
    return min_index(collection)[0]


def max_index_by(
    collection: Sequence[T], comparison: Callable[[T, T], bool]
) -> tuple[T | None, int]:
    """Return ``(item, index)`` of the maximum, where ``comparison(a, b)`` means a > b.

    Ties keep the first item; an empty collection gives ``(None, -1)``.
    """
    return _extreme_index_by(collection, comparison)


def max_by(collection: Sequence[T], comparison: Callable[[T, T], bool]) -> T | None:
    """Return the maximum item by ``comparison``, or ``None`` if empty."""
    return max_index_by(collection, comparison)[0]


def max_index(collection: Sequence[T]) -> tuple[T | None, int]:
    """Return ``(item, index)`` of the largest item, or ``(None, -1)`` if empty."""
    return _extreme_index_by(collection, lambda a, b: a > b)


def maximum(collection: Sequence[T]) -> T | None:
    """Return the largest item, or ``None`` if empty."""
    return max_index(collection)[0]


def earliest(*times: T) -> T | None:
    """Return the earliest of the given times, or ``None`` if none are given."""
    return minimum(times)


def _by_time(
    collection: Sequence[T], iteratee: Callable[[T], Any], better: Callable[[Any, Any], bool]
) -> T | None:
    if not collection:
        return None
    best = collection[0]
    best_time = iteratee(best)
    for item in collection[1:]:
        item_time = iteratee(item)
        if better(item_time, best_time):
            best, best_time = item, item_time
    return best


def earliest_by(collection: Sequence[T], iteratee: Callable[[T], Any]) -> T | None:
    """Return the item whose time, given by ``iteratee``, is earliest, or ``None`` if empty."""
    return _by_time(collection, iteratee, lambda a, b: a < b)


def latest(*times: T) -> T | None:
    """Return the latest of the given times, or ``None`` if none are given."""
    return maximum(times)


def latest_by(collection: Sequence[T], iteratee: Callable[[T], Any]) -> T | None:
    """Return the item whose time, given by ``iteratee``, is latest, or ``None`` if empty."""
    return _by_time(collection, iteratee, lambda a, b: a > b)


def first(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return ``(first item, True)``, or ``(None, False)`` if empty."""
    if not collection:
        return None, False
    return collection[0], True


def first_or_empty(collection: Sequence[T]) -> T | None:
    """Return the first item, or ``None`` if empty."""
    return first(collection)[0]


def first_or(collection: Sequence[T], fallback: T) -> T:
    """Return the first item, or ``fallback`` if empty."""
    item, ok = first(collection)
    return item if ok else fallback  # type: ignore[return-value]


def last(collection: Sequence[T]) -> tuple[T | None, bool]:
    """Return ``(last item, True)``, or ``(None, False)`` if empty."""
    if not collection:
        return None, False
    return collection[-1], True


def last_or_empty(collection: Sequence[T]) -> T | None:
    """Return the last item, or ``None`` if empty."""
    return last(collection)[0]


def last_or(collection: Sequence[T], fallback: T) -> T:
    """Return the last item, or ``fallback`` if empty."""
    item, ok = last(collection)
    return item if ok else fallback  # type: ignore[return-value]


def nth(collection: Sequence[T], n: int) -> T:
    """Return the item at ``n``; a negative ``n`` counts from the end.

    Raises ``IndexError`` when ``n`` is out of bounds.
    """
    n = int(n)
    length = len(collection)
    if n >= length or -n > length:
        raise IndexError(f"nth: {n} out of slice bounds")
    return collection[n]


def nth_or(collection: Sequence[T], n: int, fallback: T) -> T:
    """Return the item at ``n``, or ``fallback`` when out of bounds."""
    try:
        return nth(collection, n)
    except IndexError:
        return fallback


def nth_or_empty(collection: Sequence[T], n: int) -> T | None:
    """Return the item at ``n``, or ``None`` when out of bounds."""
    return nth_or(collection, n, None)


def sample_by(collection: Sequence[T], random_int_generator: RandomIntGenerator) -> T | None:
    """Return a random item chosen with ``random_int_generator(n)`` (in ``[0, n)``), or ``None``."""
    if not collection:
        return None
    return collection[random_int_generator(len(collection))]


def sample(collection: Sequence[T]) -> T | None:
    """Return a random item, or ``None`` if empty."""
    return sample_by(collection, random.randrange)


def samples_by(
    collection: Sequence[T], count: int, random_int_generator: RandomIntGenerator
) -> Any:
    """Return up to ``count`` distinct-position random items, chosen with ``random_int_generator``."""
    pool = list(collection)
    results = []
    while pool and len(results) < count:
        index = random_int_generator(len(pool))
        results.append(pool[index])
        pool[index] = pool[-1]
        pool.pop()
    return _like(collection, results)


def samples(collection: Sequence[T], count: int) -> Any:
    """Return up to ``count`` random items taken from distinct positions."""
    return samples_by(collection, count, random.randrange)