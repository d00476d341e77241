from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
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
    shift_after_removal,
    shift_index_set,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class MultiSelectRing(Generic[T]):
    items: tuple[T, ...] = ()
    focused: int = 0
    selected: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        items = tuple(self.items)
        n = len(items)
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "focused", normalize(self.focused, n))
        object.__setattr__(
            self,
            "selected",
            frozenset(normalize(idx, n) for idx in self.selected) if n else frozenset(),
        )

    @classmethod
    def empty(cls) -> MultiSelectRing[T]:
        return cls()

    @classmethod
    def singleton(cls, item: T) -> MultiSelectRing[T]:
        return cls(items=(item,))

    @classmethod
    def from_list(cls, items: Iterable[T]) -> MultiSelectRing[T]:
        return cls(items=tuple(items))

    def with_items(self, items: Iterable[T], preferred: T | None = None) -> MultiSelectRing[T]:
        new_items = tuple(items)
        if not new_items:
            return replace(self, items=(), focused=0, selected=frozenset())
        old_focused = self.get_focused()
        if preferred is not None and preferred in new_items:
            focused = new_items.index(preferred)
        elif old_focused is not None and old_focused in new_items:
            focused = new_items.index(old_focused)
        else:
            focused = clamp(self.focused, 0, len(new_items) - 1)
        # every new item equal to a previously selected one stays selected
        kept = self.get_selected()
        selected = frozenset(idx for idx, item in enumerate(new_items) if item in kept)
        return replace(self, items=new_items, focused=focused, selected=selected)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def size(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def _norm(self, index: int) -> int:
        return normalize(index, len(self.items))

    # growing and shrinking

    def push(self, item: T) -> MultiSelectRing[T]:
        return replace(self, items=self.items + (item,))

    def append(self, items: Iterable[T]) -> MultiSelectRing[T]:
        return replace(self, items=self.items + tuple(items))

    def prepend(self, items: Iterable[T]) -> MultiSelectRing[T]:
        head = tuple(items)
        if not self.items:
            return replace(self, items=head, focused=0, selected=frozenset())
        offset = len(head)
        return replace(
            self,
            items=head + self.items,
            focused=self.focused + offset,
            selected=shift_index_set(self.selected, offset),
        )

    def remove_at(self, index: int) -> MultiSelectRing[T]:
        n = len(self.items)
        if n == 0:
            logger.debug("remove_at(%d) on empty ring", index)
            return self
        idx = self._norm(index)
        if n == 1:
            logger.debug("removed the only item; ring is now empty")
        shifted = (shift_after_removal(sel, idx) for sel in self.selected)
        return replace(
            self,
            items=self.items[:idx] + self.items[idx + 1 :],
            focused=focus_after_removal(self.focused, idx, n),
            selected=frozenset(sel for sel in shifted if sel is not None),
        )

    def remove_first(self) -> MultiSelectRing[T]:
        return self.remove_at(0)

    def remove_last(self) -> MultiSelectRing[T]:
        return self.remove_at(len(self.items) - 1)

    def remove_focused(self) -> MultiSelectRing[T]:
        return self.remove_at(self.focused)

    def remove_selected(self) -> MultiSelectRing[T]:
        ring = self
        # highest first so the remaining indexes stay valid
        for idx in sorted(self.selected, reverse=True):
            ring = ring.remove_at(idx)
        return ring

    # focus movement

    def focus_on(self, index: int) -> MultiSelectRing[T]:
        if not self.items:
            logger.debug("focus_on(%d) on empty ring", index)
            return self
        return replace(self, focused=self._norm(index))

    def focus_on_next(self) -> MultiSelectRing[T]:
        return self.focus_on(self.focused + 1)

    def focus_on_previous(self) -> MultiSelectRing[T]:
        return self.focus_on(self.focused - 1)

    def focus_on_first(self) -> MultiSelectRing[T]:
        return self.focus_on(0)

    def focus_on_last(self) -> MultiSelectRing[T]:
        return self.focus_on(len(self.items) - 1)

    def _focus_on_found(self, found: int | None, search: str) -> MultiSelectRing[T]:
        if found is None:
            logger.debug("%s: no item matched, focus stays at %d", search, self.focused)
            return self
        return replace(self, focused=found)

    def focus_on_first_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self._focus_on_found(first_matching(self.items, pred), "focus_on_first_matching")

    def focus_on_last_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self._focus_on_found(last_matching(self.items, pred), "focus_on_last_matching")

    def focus_on_next_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self._focus_on_found(
            next_matching(self.items, self.focused, pred), "focus_on_next_matching"
        )

    def focus_on_previous_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self._focus_on_found(
            previous_matching(self.items, self.focused, pred), "focus_on_previous_matching"
        )

    # selection

    def select_at(self, index: int) -> MultiSelectRing[T]:
        return self.select_many([index])

    def select_first(self) -> MultiSelectRing[T]:
        return self.select_at(0)

    def select_last(self) -> MultiSelectRing[T]:
        return self.select_at(len(self.items) - 1)

    def select_focused(self) -> MultiSelectRing[T]:
        return self.select_at(self.focused)

    def select_all(self) -> MultiSelectRing[T]:
        return replace(self, selected=frozenset(range(len(self.items))))

    def select_many(self, indexes: Iterable[int]) -> MultiSelectRing[T]:
        if not self.items:
            logger.debug("select on empty ring ignored")
            return self
        return replace(self, selected=self.selected | {self._norm(idx) for idx in indexes})

    def select_many_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self.select_many(idx for idx, item in enumerate(self.items) if pred(item))

    def deselect_at(self, index: int) -> MultiSelectRing[T]:
        return self.deselect_many([index])

    def deselect_first(self) -> MultiSelectRing[T]:
        return self.deselect_at(0)

    def deselect_last(self) -> MultiSelectRing[T]:
        return self.deselect_at(len(self.items) - 1)

    def deselect_focused(self) -> MultiSelectRing[T]:
        return self.deselect_at(self.focused)

    def deselect_all(self) -> MultiSelectRing[T]:
        return replace(self, selected=frozenset())

    def deselect_many(self, indexes: Iterable[int]) -> MultiSelectRing[T]:
        if not self.items:
            logger.debug("deselect on empty ring ignored")
            return self
        return replace(self, selected=self.selected - {self._norm(idx) for idx in indexes})

    def deselect_many_matching(self, pred: Predicate[T]) -> MultiSelectRing[T]:
        return self.deselect_many(idx for idx, item in enumerate(self.items) if pred(item))

    def toggle_at(self, index: int) -> MultiSelectRing[T]:
        if self.is_selected_at(index):
            return self.deselect_at(index)
        return self.select_at(index)

    def toggle_first(self) -> MultiSelectRing[T]:
        return self.toggle_at(0)

    def toggle_last(self) -> MultiSelectRing[T]:
        return self.toggle_at(len(self.items) - 1)

    def toggle_focused(self) -> MultiSelectRing[T]:
        return self.toggle_at(self.focused)

    def is_none_selected(self) -> bool:
        return not self.selected

    def is_any_selected(self) -> bool:
        return len(self.selected) > 0

    def is_all_selected(self) -> bool:
        return len(self.selected) == len(self.items)

    def is_selected_at(self, index: int) -> bool:
        return bool(self.items) and self._norm(index) in self.selected

    def is_focused_selected(self) -> bool:
        return bool(self.items) and self.focused in self.selected

    def count_selected(self) -> int:
        return len(self.selected)

    def count_deselected(self) -> int:
        return len(self.items) - len(self.selected)

    # access

    def get(self, index: int) -> T | None:
        if not self.items:
            return None
        return self.items[self._norm(index)]

    def get_first(self) -> T | None:
        return self.get(0)

    def get_last(self) -> T | None:
        return self.get(-1)

    def get_focused(self) -> T | None:
        return self.get(self.focused)

    def get_focused_index(self) -> int:
        return self.focused

    def get_selected(self) -> list[T]:
        return [self.items[idx] for idx in sorted(self.selected)]

    def get_selected_indexes(self) -> list[int]:
        return sorted(self.selected)

    def set(self, index: int, item: T) -> MultiSelectRing[T]:
        if not self.items:
            return self
        idx = self._norm(index)
        return replace(self, items=self.items[:idx] + (item,) + self.items[idx + 1 :])

    def set_focused(self, item: T) -> MultiSelectRing[T]:
        return self.set(self.focused, item)

    def is_focused_at(self, index: int) -> bool:
        return bool(self.items) and self._norm(index) == self.focused

    def is_focused_matching(self, pred: Predicate[T]) -> bool:
        return bool(self.items) and pred(self.items[self.focused])

    def to_list(self) -> list[T]:
        return list(self.items)

    def to_tuple(self) -> tuple[T, ...]:
        return self.items

    # transforms

    def map(self, fn: Callable[[T], U]) -> MultiSelectRing[U]:
        return MultiSelectRing(
            items=tuple(fn(item) for item in self.items),
            focused=self.focused,
            selected=self.selected,
        )

    def map_focused(self, fn: Callable[[T], U]) -> U | None:
        if not self.items:
            return None
        return fn(self.items[self.focused])

    def map_each_into_list(
        self,
        basic: Callable[[T], U],
        focused: Callable[[T], U],
        selected: Callable[[T], U],
    ) -> list[U]:
        out: list[U] = []
        for idx, item in enumerate(self.items):
            if idx == self.focused:
                out.append(focused(item))
            elif idx in self.selected:
                out.append(selected(item))
            else:
                out.append(basic(item))
        return out

    def map_each_into_tuple(
        self,
        basic: Callable[[T], U],
        focused: Callable[[T], U],
        selected: Callable[[T], U],
    ) -> tuple[U, ...]:
        return tuple(self.map_each_into_list(basic, focused, selected))
