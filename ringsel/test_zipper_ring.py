from __future__ import annotations

import unittest

from ringsel.zipper_ring import ZipperRing


def numbers() -> ZipperRing[int]:
    ring = ZipperRing.from_list([1, 2, 3, 4])
    assert ring is not None
    return ring


class ConstructionTests(unittest.TestCase):
    def test_from_list_round_trip(self) -> None:
        for items in ([7], [1, 2], ["a", "b", "a", "c"]):
            ring = ZipperRing.from_list(items)
            assert ring is not None
            self.assertEqual(ring.to_list(), items)
            self.assertEqual(ring.get_focused(), items[0])

    def test_from_list_empty(self) -> None:
        self.assertIsNone(ZipperRing.from_list([]))

    def test_from_list_with_default(self) -> None:
        self.assertEqual(ZipperRing.from_list_with_default(9, []), ZipperRing.singleton(9))
        self.assertEqual(ZipperRing.from_list_with_default(9, [1, 2]).to_list(), [1, 2])

    def test_singleton(self) -> None:
        ring = ZipperRing.singleton("x")
        self.assertEqual(ring.size(), 1)
        self.assertEqual(ring.left, ())
        self.assertEqual(ring.right, ())


class NavigationTests(unittest.TestCase):
    def test_next_full_cycle_restores_triple(self) -> None:
        ring = numbers()
        moved = ring
        for _ in range(ring.size()):
            moved = moved.focus_on_next()
        self.assertEqual(moved, ring)

    def test_next_and_previous_are_inverses(self) -> None:
        ring = numbers().focus_on_next()
        self.assertEqual(ring.focus_on_next().focus_on_previous(), ring)
        self.assertEqual(ring.focus_on_previous().focus_on_next(), ring)

    def test_previous_wraps_to_last(self) -> None:
        ring = numbers().focus_on_previous()
        self.assertEqual(ring.get_focused(), 4)
        self.assertEqual(ring.left, (3, 2, 1))
        self.assertEqual(ring.right, ())

    def test_next_wraps_to_first(self) -> None:
        ring = numbers().focus_on_last().focus_on_next()
        self.assertEqual(ring, numbers())

    def test_focus_on_first_restores_order(self) -> None:
        ring = numbers().focus_on_last().focus_on_first()
        self.assertEqual(ring.left, ())
        self.assertEqual(ring.get_focused(), 1)
        self.assertEqual(ring.right, (2, 3, 4))

    def test_first_and_last_are_noops_at_the_ends(self) -> None:
        ring = numbers()
        self.assertIs(ring.focus_on_first(), ring)
        last = ring.focus_on_last()
        self.assertIs(last.focus_on_last(), last)

    def test_singleton_navigation(self) -> None:
        ring = ZipperRing.singleton(1)
        self.assertEqual(ring.focus_on_next(), ring)
        self.assertEqual(ring.focus_on_previous(), ring)


class GrowthTests(unittest.TestCase):
    def test_push_and_append_add_to_end(self) -> None:
        ring = numbers().focus_on_next().push(5).append(6)
        self.assertEqual(ring.to_list(), [1, 2, 3, 4, 5, 6])
        self.assertEqual(ring.get_focused(), 2)

    def test_prepend_adds_to_front(self) -> None:
        ring = numbers().focus_on_next().prepend(0)
        self.assertEqual(ring.to_list(), [0, 1, 2, 3, 4])
        self.assertEqual(ring.get_focused(), 2)
        self.assertEqual(ring.get_focused_index(), 2)
        self.assertEqual(ring.focus_on_first().get_focused(), 0)


class MatchingTests(unittest.TestCase):
    def test_first_matching(self) -> None:
        ring = numbers().focus_on_last()
        found = ring.focus_on_first_matching(lambda x: x > 2)
        assert found is not None
        self.assertEqual(found.get_focused(), 3)
        self.assertEqual(found.get_focused_index(), 2)
        self.assertIsNone(ring.focus_on_first_matching(lambda x: x > 10))

    def test_last_matching(self) -> None:
        found = numbers().focus_on_last_matching(lambda x: x < 3)
        assert found is not None
        self.assertEqual(found.get_focused_index(), 1)

    def test_next_matching_skips_duplicate_of_start(self) -> None:
        ring = ZipperRing.from_list([1, 2, 1, 2])
        assert ring is not None
        found = ring.focus_on_next_matching(lambda x: x == 1)
        assert found is not None
        self.assertEqual(found.get_focused_index(), 2)
        again = found.focus_on_next_matching(lambda x: x == 1)
        self.assertEqual(again, ring)

    def test_next_matching_excludes_start(self) -> None:
        self.assertIsNone(numbers().focus_on_next_matching(lambda x: x == 1))
        self.assertIsNone(ZipperRing.singleton(1).focus_on_next_matching(lambda _x: True))

    def test_previous_matching_wraps(self) -> None:
        ring = ZipperRing.from_list([1, 2, 1])
        assert ring is not None
        found = ring.focus_on_previous_matching(lambda x: x == 1)
        assert found is not None
        self.assertEqual(found.get_focused_index(), 2)
        self.assertIsNone(ring.focus_on_previous_matching(lambda x: x == 5))

    def test_is_focused_matching(self) -> None:
        self.assertTrue(numbers().is_focused_matching(lambda x: x == 1))


class TransformTests(unittest.TestCase):
    def test_map(self) -> None:
        ring = numbers().focus_on_next().map(lambda x: x * 10)
        self.assertEqual(ring.to_list(), [10, 20, 30, 40])
        self.assertEqual(ring.get_focused(), 20)

    def test_map_focused_touches_only_focus(self) -> None:
        ring = numbers().focus_on_next().map_focused(lambda x: -x)
        self.assertEqual(ring.to_list(), [1, -2, 3, 4])

    def test_size_and_iteration(self) -> None:
        ring = numbers().focus_on_next()
        self.assertEqual(ring.size(), 4)
        self.assertEqual(len(ring), 4)
        self.assertEqual(list(ring), [1, 2, 3, 4])


if __name__ == "__main__":
    unittest.main()
