from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")

Predicate = Callable[[T], bool]


def clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def normalize(index: int, size: int) -> int:
    if size <= 0:
        return 0
    return ((index % size) + size) % size


def first_matching(items: Sequence[T], pred: Predicate[T]) -> int | None:
    for idx, item in enumerate(items):
        if pred(item):
            return idx
    return None


def last_matching(items: Sequence[T], pred: Predicate[T]) -> int | None:
    for idx in range(len(items) - 1, -1, -1):
        if pred(items[idx]):
            return idx
    return None


def _scan(items: Sequence[T], indexes: Iterable[int], pred: Predicate[T]) -> int | None:
    for idx in indexes:
        if pred(items[idx]):
            return idx
    return None


def next_matching(items: Sequence[T], focused: int, pred: Predicate[T]) -> int | None:
    n = len(items)
    found = _scan(items, range(focused + 1, n), pred)
    if found is not None:
        return found
    return _scan(items, range(0, min(focused, n - 1) + 1), pred)


def previous_matching(items: Sequence[T], focused: int, pred: Predicate[T]) -> int | None:
    # focused itself is checked first here, last in next_matching
    n = len(items)
    found = _scan(items, range(min(focused, n - 1), -1, -1), pred)
    if found is not None:
        return found
    return _scan(items, range(n - 1, focused, -1), pred)


def shift_after_removal(index: int, removed: int) -> int | None:
    if index == removed:
        return None
    if index > removed:
        return index - 1
    return index


def focus_after_removal(focused: int, removed: int, size: int) -> int:
    # size is the length before removal.
    remaining = size - 1
    if remaining <= 0:
        return 0
    if removed == size - 1:
        return normalize(focused - 1, remaining)
    return normalize(focused, remaining)


def shift_index_set(indexes: Iterable[int], offset: int) -> frozenset[int]:
    return frozenset(idx + offset for idx in indexes)
