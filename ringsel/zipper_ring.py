from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Generic, Iterable, Iterator, TypeVar

from .indexing import Predicate

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ZipperRing(Generic[T]):
    """Non-empty ring stored as ``(left, focus, right)``.

    ``left`` holds the items before the focus nearest-first, so the ring in
    order is ``reversed(left) + (focus,) + right``. Stepping is cheap;
    there is no indexed access and no removal.
    """

    left: tuple[T, ...]
    focus: T
    right: tuple[T, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "left", tuple(self.left))
        object.__setattr__(self, "right", tuple(self.right))

    @classmethod
    def singleton(cls, item: T) -> ZipperRing[T]:
        return cls(left=(), focus=item, right=())

    @classmethod
    def from_list(cls, items: Iterable[T]) -> ZipperRing[T] | None:
        values = tuple(items)
        if not values:
            return None
        return cls(left=(), focus=values[0], right=values[1:])

    @classmethod
    def from_list_with_default(cls, default: T, items: Iterable[T]) -> ZipperRing[T]:
        ring = cls.from_list(items)
        if ring is None:
            return cls.singleton(default)
        return ring

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())

    def size(self) -> int:
        return len(self.left) + 1 + len(self.right)

    def push(self, item: T) -> ZipperRing[T]:
        return replace(self, right=self.right + (item,))

    def append(self, item: T) -> ZipperRing[T]:
        return self.push(item)

    def prepend(self, item: T) -> ZipperRing[T]:
        return replace(self, left=self.left + (item,))

    def focus_on_first(self) -> ZipperRing[T]:
        if not self.left:
            return self
        between = tuple(reversed(self.left[:-1]))
        return ZipperRing(left=(), focus=self.left[-1], right=between + (self.focus,) + self.right)

    def focus_on_last(self) -> ZipperRing[T]:
        if not self.right:
            return self
        between = tuple(reversed(self.right[:-1]))
        return ZipperRing(left=between + (self.focus,) + self.left, focus=self.right[-1], right=())

    def focus_on_next(self) -> ZipperRing[T]:
        if not self.right:
            return self.focus_on_first()
        return ZipperRing(left=(self.focus,) + self.left, focus=self.right[0], right=self.right[1:])

    def focus_on_previous(self) -> ZipperRing[T]:
        if not self.left:
            return self.focus_on_last()
        return ZipperRing(left=self.left[1:], focus=self.left[0], right=(self.focus,) + self.right)

    def _walk(
        self,
        start: ZipperRing[T],
        step: Callable[[ZipperRing[T]], ZipperRing[T]],
        pred: Predicate[T],
    ) -> ZipperRing[T] | None:
        # Compare whole triples: equal focus values elsewhere must not end the walk.
        ring = start
        for _ in range(self.size()):
            if pred(ring.focus):
                return ring
            ring = step(ring)
            if ring == start:
                break
        logger.debug("zipper search: no item matched in %d steps", self.size())
        return None

    def focus_on_first_matching(self, pred: Predicate[T]) -> ZipperRing[T] | None:
        return self._walk(self.focus_on_first(), ZipperRing.focus_on_next, pred)

    def focus_on_last_matching(self, pred: Predicate[T]) -> ZipperRing[T] | None:
        return self._walk(self.focus_on_last(), ZipperRing.focus_on_previous, pred)

    def focus_on_next_matching(self, pred: Predicate[T]) -> ZipperRing[T] | None:
        ring = self.focus_on_next()
        while ring != self:
            if pred(ring.focus):
                return ring
            ring = ring.focus_on_next()
        logger.debug("focus_on_next_matching: no other item matched")
        return None

    def focus_on_previous_matching(self, pred: Predicate[T]) -> ZipperRing[T] | None:
        ring = self.focus_on_previous()
        while ring != self:
            if pred(ring.focus):
                return ring
            ring = ring.focus_on_previous()
        logger.debug("focus_on_previous_matching: no other item matched")
        return None

    def get_focused(self) -> T:
        return self.focus

    def get_focused_index(self) -> int:
        return len(self.left)

    def is_focused_matching(self, pred: Predicate[T]) -> bool:
        return pred(self.focus)

    def to_list(self) -> list[T]:
        return list(reversed(self.left)) + [self.focus] + list(self.right)

    def map(self, fn: Callable[[T], U]) -> ZipperRing[U]:
        return ZipperRing(
            left=tuple(fn(item) for item in self.left),
            focus=fn(self.focus),
            right=tuple(fn(item) for item in self.right),
        )

    def map_focused(self, fn: Callable[[T], T]) -> ZipperRing[T]:
        return replace(self, focus=fn(self.focus))
