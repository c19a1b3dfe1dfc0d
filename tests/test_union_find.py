import unittest

from labyrinth.maze import NodeArena, UnionFind


class UnionFindTests(unittest.TestCase):
    def setUp(self) -> None:
        self.sets = UnionFind(range(5))

    def test_each_element_starts_alone(self) -> None:
        self.assertEqual(self.sets.set_count, 5)
        self.assertEqual(len(self.sets), 5)
        for element in range(5):
            self.assertEqual(self.sets.find(element), element)

    def test_union_joins_transitively(self) -> None:
        self.assertTrue(self.sets.union(1, 2))
        self.assertTrue(self.sets.union(2, 3))
        self.assertEqual(self.sets.find(1), self.sets.find(3))
        self.assertTrue(self.sets.connected(1, 3))
        self.assertFalse(self.sets.connected(0, 3))
        self.assertEqual(self.sets.set_count, 3)

    def test_repeated_union_is_a_no_op(self) -> None:
        self.sets.union(1, 2)
        self.sets.union(2, 3)
        self.assertFalse(self.sets.union(2, 3))
        self.assertFalse(self.sets.union(1, 3))
        self.assertEqual(self.sets.set_count, 3)

    def test_representative_is_stable_after_compression(self) -> None:
        for a, b in ((0, 1), (1, 2), (2, 3), (3, 4)):
            self.sets.union(b, a)
        root = self.sets.find(0)
        self.assertTrue(all(self.sets.find(e) == root for e in range(5)))
        self.assertEqual(self.sets.set_count, 1)

    def test_make_set_is_idempotent(self) -> None:
        self.sets.make_set(4)
        self.sets.make_set((2, 4))
        self.assertEqual(self.sets.set_count, 6)
        self.assertIn((2, 4), self.sets)

    def test_unknown_elements_raise(self) -> None:
        with self.assertRaises(KeyError):
            self.sets.find(99)
        with self.assertRaises(KeyError):
            self.sets.union(0, 99)


class NodeArenaTests(unittest.TestCase):
    def test_path_walks_parent_indices_to_root(self) -> None:
        arena = NodeArena()
        root = arena.add((0, 0))
        child = arena.add((0, 1), root)
        grandchild = arena.add((1, 1), child)
        arena.add((1, 0), root)

        self.assertEqual(arena.path_to(grandchild), [(0, 0), (0, 1), (1, 1)])
        self.assertIsNone(arena.parent(root))
        self.assertEqual(arena.parent(grandchild), child)
        self.assertEqual(arena.position(child), (0, 1))

    def test_release_all_frees_each_entry_once(self) -> None:
        arena = NodeArena()
        root = arena.add((0, 0))
        arena.add((0, 1), root)
        self.assertEqual(arena.outstanding, 2)
        self.assertEqual(arena.release_all(), 2)
        self.assertEqual(arena.release_all(), 0)
        self.assertEqual(arena.allocated, arena.released)
        self.assertEqual(len(arena), 0)

    def test_unknown_parent_is_rejected(self) -> None:
        arena = NodeArena()
        with self.assertRaises(IndexError):
            arena.add((0, 0), 3)


if __name__ == "__main__":
    unittest.main()
