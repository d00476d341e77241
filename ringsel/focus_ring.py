from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .indexing import (
    Predicate,
    clamp,
    first_matching,
    focus_after_removal,
    last_matching,
    next_matching,
    normalize,
    previous_matching,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class FocusRing(Generic[T]):
    """Ordered items with one wrap-around focus cursor.

    Every operation returns a new ring. Indexes are normalized with floored
    modulo, so ``focus_on(-1)`` is the last item. Operations on an empty ring
    are no-ops and accessors return ``None``.

    Removal keeps the numeric focus unless the last index was removed, in
    which case focus steps back by one. Removing an item before the focus
    therefore moves focus onto the item that followed the old one.
    """

    items: tuple[T, ...] = ()
    focused: int = 0

    def __post_init__(self) -> None:
        items = tuple(self.items)
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "focused", normalize(self.focused, len(items)))

    # construction

    @classmethod
    def empty(cls) -> FocusRing[T]:
        return cls()

    @classmethod
    def singleton(cls, item: T) -> FocusRing[T]:
        return cls(items=(item,))

    @classmethod
    def from_list(cls, items: Iterable[T]) -> FocusRing[T]:
        return cls(items=tuple(items))

    def with_items(self, items: Iterable[T], preferred: T | None = None) -> FocusRing[T]:
        new_items = tuple(items)
        if not new_items:
            return replace(self, items=(), focused=0)
        if preferred is not None and preferred in new_items:
            return replace(self, items=new_items, focused=new_items.index(preferred))
        old = self.get_focused()
        if old is not None and old in new_items:
            return replace(self, items=new_items, focused=new_items.index(old))
        return replace(self, items=new_items, focused=clamp(self.focused, 0, len(new_items) - 1))

    # sequence protocol

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def size(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    # growing and shrinking

    def push(self, item: T) -> FocusRing[T]:
        return replace(self, items=self.items + (item,))

    def append(self, items: Iterable[T]) -> FocusRing[T]:
        return replace(self, items=self.items + tuple(items))

    def prepend(self, items: Iterable[T]) -> FocusRing[T]:
        head = tuple(items)
        if not self.items:
            return replace(self, items=head, focused=0)
        return replace(self, items=head + self.items, focused=self.focused + len(head))

    def remove_at(self, index: int) -> FocusRing[T]:
        n = len(self.items)
        if n == 0:
            logger.debug("remove_at(%d) on empty ring", index)
            return self
        idx = normalize(index, n)
        if n == 1:
            logger.debug("removed the only item; ring is now empty")
        return replace(
            self,
            items=self.items[:idx] + self.items[idx + 1 :],
            focused=focus_after_removal(self.focused, idx, n),
        )

    def remove_first(self) -> FocusRing[T]:
        return self.remove_at(0)

    def remove_last(self) -> FocusRing[T]:
        return self.remove_at(len(self.items) - 1)

    def remove_focused(self) -> FocusRing[T]:
        return self.remove_at(self.focused)

    # focus movement

    def focus_on(self, index: int) -> FocusRing[T]:
        if not self.items:
            logger.debug("focus_on(%d) on empty ring", index)
            return self
        return replace(self, focused=normalize(index, len(self.items)))

    def focus_on_next(self) -> FocusRing[T]:
        return self.focus_on(self.focused + 1)

    def focus_on_previous(self) -> FocusRing[T]:
        return self.focus_on(self.focused - 1)

    def focus_on_first(self) -> FocusRing[T]:
        return self.focus_on(0)

    def focus_on_last(self) -> FocusRing[T]:
        return self.focus_on(len(self.items) - 1)

    def _focus_on_found(self, found: int | None, search: str) -> FocusRing[T]:
        if found is None:
            logger.debug("%s: no item matched, focus stays at %d", search, self.focused)
            return self
        return replace(self, focused=found)

    def focus_on_first_matching(self, pred: Predicate[T]) -> FocusRing[T]:
        return self._focus_on_found(first_matching(self.items, pred), "focus_on_first_matching")

    def focus_on_last_matching(self, pred: Predicate[T]) -> FocusRing[T]:
        return self._focus_on_found(last_matching(self.items, pred), "focus_on_last_matching")

    def focus_on_next_matching(self, pred: Predicate[T]) -> FocusRing[T]:
        return self._focus_on_found(
            next_matching(self.items, self.focused, pred), "focus_on_next_matching"
        )

    def focus_on_previous_matching(self, pred: Predicate[T]) -> FocusRing[T]:
        return self._focus_on_found(
            previous_matching(self.items, self.focused, pred), "focus_on_previous_matching"
        )

    # access

    def get(self, index: int) -> T | None:
        if not self.items:
            return None
        return self.items[normalize(index, len(self.items))]

    def get_first(self) -> T | None:
        return self.get(0)

    def get_last(self) -> T | None:
        return self.get(-1)

    def get_focused(self) -> T | None:
        return self.get(self.focused)

    def get_focused_index(self) -> int:
        return self.focused

    def set(self, index: int, item: T) -> FocusRing[T]:
        if not self.items:
            return self
        idx = normalize(index, len(self.items))
        return replace(self, items=self.items[:idx] + (item,) + self.items[idx + 1 :])

    def set_focused(self, item: T) -> FocusRing[T]:
        return self.set(self.focused, item)

    def is_focused_at(self, index: int) -> bool:
        return bool(self.items) and normalize(index, len(self.items)) == self.focused

    def is_focused_matching(self, pred: Predicate[T]) -> bool:
        return bool(self.items) and pred(self.items[self.focused])

    def to_list(self) -> list[T]:
        return list(self.items)

    def to_tuple(self) -> tuple[T, ...]:
        return self.items

    # transforms

    def map(self, fn: Callable[[T], U]) -> FocusRing[U]:
        return FocusRing(items=tuple(fn(item) for item in self.items), focused=self.focused)

    def map_focused(self, fn: Callable[[T], U]) -> U | None:
        if not self.items:
            return None
        return fn(self.items[self.focused])

    def map_each_into_list(
        self,
        basic: Callable[[T], U],
        focused: Callable[[T], U],
    ) -> list[U]:
        return [
            focused(item) if idx == self.focused else basic(item)
            for idx, item in enumerate(self.items)
        ]

    def map_each_into_tuple(
        self,
        basic: Callable[[T], U],
        focused: Callable[[T], U],
    ) -> tuple[U, ...]:
        return tuple(self.map_each_into_list(basic, focused))
