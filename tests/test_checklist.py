"""Tests for the checklist model (mt.core.checklist)."""

import unittest


class TestChecklist(unittest.TestCase):

    def setUp(self):
        from mt.core.checklist import Checklist
        self.cl = Checklist()

    def _descriptions(self):
        return [i.description for i in self.cl]

    def test_add_trims_and_assigns_ids(self):
        a = self.cl.add("  buy milk ")
        b = self.cl.add("call bob")
        self.assertEqual(a.description, "buy milk")
        self.assertFalse(a.completed)
        self.assertEqual((a.id, b.id), (0, 1))
        self.assertEqual(len(self.cl), 2)

    def test_add_blank_is_ignored(self):
        self.assertIsNone(self.cl.add(""))
        self.assertIsNone(self.cl.add("   "))
        self.assertEqual(len(self.cl), 0)

    def test_ids_are_not_reused(self):
        a = self.cl.add("one")
        self.cl.remove(a.id)
        b = self.cl.add("two")
        self.assertNotEqual(a.id, b.id)

    def test_remove(self):
        a = self.cl.add("one")
        self.cl.add("two")
        self.cl.remove(a.id)
        self.assertEqual(self._descriptions(), ["two"])

    def test_remove_unknown_is_noop(self):
        self.cl.add("one")
        self.cl.remove(99)
        self.assertEqual(len(self.cl), 1)

    def test_set_completed(self):
        a = self.cl.add("one")
        self.cl.set_completed(a.id, True)
        self.assertTrue(self.cl.get(a.id).completed)
        self.cl.set_completed(a.id, False)
        self.assertFalse(self.cl.get(a.id).completed)

    def test_live_edit_keeps_raw_text(self):
        a = self.cl.add("one")
        self.cl.set_description(a.id, " one more ")
        self.assertEqual(self.cl.get(a.id).description, " one more ")

    def test_commit_keeps_non_blank(self):
        a = self.cl.add("one")
        self.cl.set_description(a.id, "uno")
        self.assertFalse(self.cl.commit_edit(a.id))
        self.assertEqual(self._descriptions(), ["uno"])

    def test_commit_drops_blank(self):
        a = self.cl.add("one")
        self.cl.add("two")
        self.cl.set_description(a.id, "   ")
        self.assertTrue(self.cl.commit_edit(a.id))
        self.assertEqual(self._descriptions(), ["two"])

    def test_commit_unknown_id(self):
        self.assertFalse(self.cl.commit_edit(42))

    def test_move_down_and_up(self):
        for d in ("a", "b", "c", "d"):
            self.cl.add(d)
        self.cl.move(0, 2)
        self.assertEqual(self._descriptions(), ["b", "c", "a", "d"])
        self.cl.move(3, 0)
        self.assertEqual(self._descriptions(), ["d", "b", "c", "a"])

    def test_move_same_index_or_out_of_range_is_noop(self):
        for d in ("a", "b"):
            self.cl.add(d)
        self.cl.move(1, 1)
        self.cl.move(0, 5)
        self.cl.move(-1, 0)
        self.assertEqual(self._descriptions(), ["a", "b"])

    def test_move_preserves_ids(self):
        a = self.cl.add("a")
        self.cl.add("b")
        self.cl.move(0, 1)
        self.assertEqual(self.cl.index_of(a.id), 1)
        self.assertIs(self.cl.get(a.id), a)

    def test_index_of_unknown(self):
        self.assertIsNone(self.cl.index_of(3))
        self.assertIsNone(self.cl.get(3))


if __name__ == "__main__":
    unittest.main()
