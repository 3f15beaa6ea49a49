"""Membership tests and set-like operations on sequences."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def _like(collection: Any, items: Iterable[T]) -> Any:
    """Build a sequence of the same kind as ``collection`` from ``items``."""
    if isinstance(collection, (list, tuple)):
        return type(collection)(items)
    return list(items)


def contains(collection: Iterable[T], element: T) -> bool:
    """Return whether ``element`` is present in ``collection``."""
    return any(item == element for item in collection)


def contains_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for some item."""
    return any(predicate(item) for item in collection)


def every(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether every item of ``subset`` is in ``collection`` (true for an empty subset)."""
    return all(contains(collection, item) for item in subset)


def every_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for all items (true when empty)."""
    return all(predicate(item) for item in collection)


def some(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether at least one item of ``subset`` is in ``collection``."""
    return any(contains(collection, item) for item in subset)


def some_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for at least one item."""
    return any(predicate(item) for item in collection)


def none(collection: Sequence[T], subset: Iterable[T]) -> bool:
    """Return whether no item of ``subset`` is in ``collection`` (true for an empty subset)."""
    return not some(collection, subset)


def none_by(collection: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    """Return whether ``predicate`` holds for no item (true when empty)."""
    return not some_by(collection, predicate)


def intersect(list1: Sequence[T], list2: Sequence[T]) -> Any:
    """Return the items of ``list2`` that also appear in ``list1``, in ``list2``'s order."""
    seen = set(list1)
    return _like(list1, (item for item in list2 if item in seen))


def difference(list1: Sequence[T], list2: Sequence[T]) -> tuple[Any, Any]:
    """Return ``(items of list1 absent from list2, items of list2 absent from list1)``."""
    seen_left = set(list1)
    seen_right = set(list2)
    left = _like(list1, (item for item in list1 if item not in seen_right))
    right = _like(list1, (item for item in list2 if item not in seen_left))
    return left, right


def union(*lists: Sequence[T]) -> Any:
    """Return all distinct items of the given sequences, in first-seen order."""
    seen: set[Hashable] = set()
    result = []
    for items in lists:
        for item in items:
            if item not in seen:
                seen.add(item)
                result.append(item)
    return _like(lists[0], result) if lists else []


def without(collection: Sequence[T], *exclude: T) -> Any:
    """Return ``collection`` without any of the excluded values."""
    excluded = set(exclude)
    return _like(collection, (item for item in collection if item not in excluded))


def without_by(
    collection: Sequence[T], iteratee: Callable[[T], Hashable], *exclude: Hashable
) -> list[T]:
    """Return the items whose key, computed by ``iteratee``, is not among ``exclude``."""
    excluded = set(exclude)
    return [item for item in collection if iteratee(item) not in excluded]


def without_nth(collection: Sequence[T], *nths: int) -> Any:
    """Return ``collection`` without the items at the given indexes; out-of-range indexes are ignored."""
    to_remove = {n for n in nths if 0 <= n < len(collection)}
    return _like(
        collection, (item for i, item in enumerate(collection) if i not in to_remove)
    )