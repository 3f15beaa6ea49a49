"""Helpers for reading, filtering and transforming mappings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Hashable, Iterable, Mapping, TypeVar

K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


@dataclass(frozen=True)
class Entry(Generic[K, V]):
    """A key/value pair."""

    key: K
    value: V


def _new_like(mapping: Mapping[Any, Any]) -> dict:
    """Return an empty mapping of the same kind as ``mapping`` when it is a dict."""
    return type(mapping)() if isinstance(mapping, dict) else {}


def keys(*mappings: Mapping[K, V]) -> list[K]:
    """Return the keys of all mappings, duplicates included."""
    return [key for mapping in mappings for key in mapping]


def uniq_keys(*mappings: Mapping[K, V]) -> list[K]:
    """Return the distinct keys of all mappings, in first-seen order."""
    return list(dict.fromkeys(keys(*mappings)))


def has_key(mapping: Mapping[K, V], key: K) -> bool:
    """Return whether ``key`` is in ``mapping``."""
    return key in mapping


def values(*mappings: Mapping[K, V]) -> list[V]:
    """Return the values of all mappings, duplicates included."""
    return [value for mapping in mappings for value in mapping.values()]


def uniq_values(*mappings: Mapping[K, V]) -> list[V]:
    """Return the distinct values of all mappings, in first-seen order."""
    return list(dict.fromkeys(values(*mappings)))


def value_or(mapping: Mapping[K, V], key: K, fallback: V) -> V:
    """Return the value for ``key``, or ``fallback`` if it is absent."""
    return mapping[key] if key in mapping else fallback


def pick_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Any:
    """Return the entries for which ``predicate(key, value)`` holds."""
    result = _new_like(mapping)
    result.update((k, v) for k, v in mapping.items() if predicate(k, v))
    return result


def pick_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> Any:
    """Return the entries whose key is among ``keys``."""
    result = _new_like(mapping)
    result.update((k, mapping[k]) for k in keys if k in mapping)
    return result


def pick_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> Any:
    """Return the entries whose value is among ``values``."""
    wanted = list(values)
    return pick_by(mapping, lambda _k, v: v in wanted)


def omit_by(mapping: Mapping[K, V], predicate: Callable[[K, V], bool]) -> Any:
    """Return the entries for which ``predicate(key, value)`` does not hold."""
    return pick_by(mapping, lambda k, v: not predicate(k, v))


def omit_by_keys(mapping: Mapping[K, V], keys: Iterable[K]) -> Any:
    """Return the entries whose key is not among ``keys``."""
    unwanted = set(keys)
    return pick_by(mapping, lambda k, _v: k not in unwanted)


def omit_by_values(mapping: Mapping[K, V], values: Iterable[V]) -> Any:
    """Return the entries whose value is not among ``values``."""
    unwanted = list(values)
    return pick_by(mapping, lambda _k, v: v not in unwanted)


def entries(mapping: Mapping[K, V]) -> list[Entry[K, V]]:
    """Return the entries of ``mapping`` as ``Entry`` pairs."""
    return [Entry(k, v) for k, v in mapping.items()]


def to_pairs(mapping: Mapping[K, V]) -> list[Entry[K, V]]:
    """Alias of ``entries``."""
    return entries(mapping)


def from_entries(entries: Iterable[Entry[K, V]]) -> dict[K, V]:
    """Build a dict from ``Entry`` pairs; later keys overwrite earlier ones."""
    return {entry.key: entry.value for entry in entries}


def from_pairs(entries: Iterable[Entry[K, V]]) -> dict[K, V]:
    """Alias of ``from_entries``."""
    return from_entries(entries)


def invert(mapping: Mapping[K, V]) -> dict[V, K]:
    """Swap keys and values; for duplicate values the last key wins."""
    return {v: k for k, v in mapping.items()}


def assign(*mappings: Mapping[K, V]) -> Any:
    """Merge mappings from left to right into a new mapping."""
    result = _new_like(mappings[0]) if mappings else {}
    for mapping in mappings:
        result.update(mapping)
    return result


def chunk_entries(mapping: Mapping[K, V], size: int) -> list[dict[K, V]]:
    """Split ``mapping`` into dicts of at most ``size`` entries.

    Raises ``ValueError`` when ``size`` is not positive.
    """
    if size <= 0:
        raise ValueError("The chunk size must be greater than 0")
    result: list[dict[K, V]] = []
    for k, v in mapping.items():
        if not result or len(result[-1]) == size:
            result.append({})
        result[-1][k] = v
    return result


def map_keys(mapping: Mapping[K, V], iteratee: Callable[[V, K], Hashable]) -> dict:
    """Return a dict keyed by ``iteratee(value, key)`` with the original values."""
    return {iteratee(v, k): v for k, v in mapping.items()}


def map_values(mapping: Mapping[K, V], iteratee: Callable[[V, K], R]) -> dict[K, R]:
    """Return a dict with the same keys and values ``iteratee(value, key)``."""
    return {k: iteratee(v, k) for k, v in mapping.items()}


def map_entries(mapping: Mapping[K, V], iteratee: Callable[[K, V], tuple[Any, Any]]) -> dict:
    """Return a dict built from the ``(key, value)`` pairs returned by ``iteratee(key, value)``."""
    return dict(iteratee(k, v) for k, v in mapping.items())


def map_to_slice(mapping: Mapping[K, V], iteratee: Callable[[K, V], R]) -> list[R]:
    """Return ``iteratee(key, value)`` for every entry."""
    return [iteratee(k, v) for k, v in mapping.items()]