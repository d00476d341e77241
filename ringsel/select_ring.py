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
    shift_after_removal,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class SelectRing(Generic[T]):
    items: tuple[T, ...] = ()
    focused: int = 0
    selected: int | None = None

    def __post_init__(self) -> None:
        items = tuple(self.items)
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "focused", normalize(self.focused, len(items)))
        if self.selected is not None:
            selected = normalize(self.selected, len(items)) if items else None
            object.__setattr__(self, "selected", selected)

    @classmethod
    def empty(cls) -> SelectRing[T]:
        return cls()

    @classmethod
    def singleton(cls, item: T) -> SelectRing[T]:
        return cls(items=(item,))

    @classmethod
    def from_list(cls, items: Iterable[T]) -> SelectRing[T]:
        return cls(items=tuple(items))

    def with_items(self, items: Iterable[T], preferred: T | None = None) -> SelectRing[T]:
        new_items = tuple(items)
        if not new_items:
            return replace(self, items=(), focused=0, selected=None)
        old_focused = self.get_focused()
        if preferred is not None and preferred in new_items:
            focused = new_items.index(preferred)
        elif old_focused is not None and old_focused in new_items:
            focused = new_items.index(old_focused)
        else:
            focused = clamp(self.focused, 0, len(new_items) - 1)
        # selection follows its value; dropped when the value is gone
        old_selected = self.get_selected()
        selected = None
        if self.selected is not None and old_selected in new_items:
            selected = new_items.index(old_selected)
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

    def push(self, item: T) -> SelectRing[T]:
        return replace(self, items=self.items + (item,))

    def append(self, items: Iterable[T]) -> SelectRing[T]:
        return replace(self, items=self.items + tuple(items))

    def prepend(self, items: Iterable[T]) -> SelectRing[T]:
        head = tuple(items)
        if not self.items:
            return replace(self, items=head, focused=0, selected=None)
        offset = len(head)
        selected = None if self.selected is None else self.selected + offset
        return replace(self, items=head + self.items, focused=self.focused + offset, selected=selected)

    def remove_at(self, index: int) -> SelectRing[T]:
        n = len(self.items)
        if n == 0:
            logger.debug("remove_at(%d) on empty ring", index)
            return self
        idx = self._norm(index)
        if n == 1:
            logger.debug("removed the only item; ring is now empty")
        selected = None if self.selected is None else shift_after_removal(self.selected, idx)
        return replace(
            self,
            items=self.items[:idx] + self.items[idx + 1 :],
            focused=focus_after_removal(self.focused, idx, n),
            selected=selected,
        )

    def remove_first(self) -> SelectRing[T]:
        return self.remove_at(0)

    def remove_last(self) -> SelectRing[T]:
        return self.remove_at(len(self.items) - 1)

    def remove_focused(self) -> SelectRing[T]:
        return self.remove_at(self.focused)

    def remove_selected(self) -> SelectRing[T]:
        if self.selected is None:
            return self
        return self.remove_at(self.selected)

    # focus movement

    def focus_on(self, index: int) -> SelectRing[T]:
        if not self.items:
            logger.debug("focus_on(%d) on empty ring", index)
            return self
        return replace(self, focused=self._norm(index))

    def focus_on_next(self) -> SelectRing[T]:
        return self.focus_on(self.focused + 1)

    def focus_on_previous(self) -> SelectRing[T]:
        return self.focus_on(self.focused - 1)

    def focus_on_first(self) -> SelectRing[T]:
        return self.focus_on(0)

    def focus_on_last(self) -> SelectRing[T]:
        return self.focus_on(len(self.items) - 1)

    def _focus_on_found(self, found: int | None, search: str) -> SelectRing[T]:
        if found is None:
            logger.debug("%s: no item matched, focus stays at %d", search, self.focused)
            return self
        return replace(self, focused=found)

    def focus_on_first_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        return self._focus_on_found(first_matching(self.items, pred), "focus_on_first_matching")

    def focus_on_last_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        return self._focus_on_found(last_matching(self.items, pred), "focus_on_last_matching")

    def focus_on_next_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        return self._focus_on_found(
            next_matching(self.items, self.focused, pred), "focus_on_next_matching"
        )

    def focus_on_previous_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        return self._focus_on_found(
            previous_matching(self.items, self.focused, pred), "focus_on_previous_matching"
        )

    # selection

    def select_at(self, index: int) -> SelectRing[T]:
        if not self.items:
            logger.debug("select_at(%d) on empty ring", index)
            return self
        return replace(self, selected=self._norm(index))

    def select_first(self) -> SelectRing[T]:
        return self.select_at(0)

    def select_last(self) -> SelectRing[T]:
        return self.select_at(len(self.items) - 1)

    def select_focused(self) -> SelectRing[T]:
        return self.select_at(self.focused)

    def select_first_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        found = first_matching(self.items, pred)
        if found is None:
            logger.debug("select_first_matching: no item matched")
            return self
        return replace(self, selected=found)

    def select_last_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        found = last_matching(self.items, pred)
        if found is None:
            logger.debug("select_last_matching: no item matched")
            return self
        return replace(self, selected=found)

    def clear_selected(self) -> SelectRing[T]:
        return replace(self, selected=None)

    def deselect_at(self, index: int) -> SelectRing[T]:
        if self.is_selected_at(index):
            return self.clear_selected()
        return self

    def deselect_first(self) -> SelectRing[T]:
        return self.deselect_at(0)

    def deselect_last(self) -> SelectRing[T]:
        return self.deselect_at(len(self.items) - 1)

    def deselect_focused(self) -> SelectRing[T]:
        return self.deselect_at(self.focused)

    def deselect_matching(self, pred: Predicate[T]) -> SelectRing[T]:
        if self.is_selected_matching(pred):
            return self.clear_selected()
        return self

    def toggle_at(self, index: int) -> SelectRing[T]:
        if self.is_selected_at(index):
            return self.clear_selected()
        return self.select_at(index)

    def toggle_first(self) -> SelectRing[T]:
        return self.toggle_at(0)

    def toggle_last(self) -> SelectRing[T]:
        return self.toggle_at(len(self.items) - 1)

    def toggle_focused(self) -> SelectRing[T]:
        return self.toggle_at(self.focused)

    def is_none_selected(self) -> bool:
        return self.selected is None

    def is_any_selected(self) -> bool:
        return self.selected is not None

    def is_selected_at(self, index: int) -> bool:
        return bool(self.items) and self.selected == self._norm(index)

    def is_selected_matching(self, pred: Predicate[T]) -> bool:
        if self.selected is None:
            return False
        return pred(self.items[self.selected])

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

    def get_selected(self) -> T | None:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def get_selected_index(self) -> int | None:
        return self.selected

    def set(self, index: int, item: T) -> SelectRing[T]:
        if not self.items:
            return self
        idx = self._norm(index)
        return replace(self, items=self.items[:idx] + (item,) + self.items[idx + 1 :])

    def set_focused(self, item: T) -> SelectRing[T]:
        return self.set(self.focused, item)

    def set_selected(self, item: T) -> SelectRing[T]:
        if self.selected is None:
            return self
        return self.set(self.selected, item)

    def is_focused_at(self, index: int) -> bool:
        return bool(self.items) and self._norm(index) == self.focused

    def is_focused_matching(self, pred: Predicate[T]) -> bool:
        return bool(self.items) and pred(self.items[self.focused])

    def to_list(self) -> list[T]:
        return list(self.items)

    def to_tuple(self) -> tuple[T, ...]:
        return self.items

    # transforms

    def map(self, fn: Callable[[T], U]) -> SelectRing[U]:
        return SelectRing(
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
            # focus wins when an item is both focused and selected
            if idx == self.focused:
                out.append(focused(item))
            elif idx == self.selected:
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
