import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from cellbook.model import Notebook, TextCell


class TestReparenting(unittest.TestCase):
    def setUp(self):
        self.nb = Notebook("nb")
        self.p1 = self.nb.create_page("one")
        self.p2 = self.nb.create_page("two")

    def test_create_page_attaches(self):
        self.assertIs(self.p1.parent, self.nb)
        self.assertEqual(list(self.nb.pages), [self.p1, self.p2])

    def test_move_between_parents(self):
        c = TextCell("x")
        self.p1.add_cell(c)
        self.assertIs(c.parent, self.p1)
        self.assertIn(c, self.p1.cells)

        c.parent = self.p2
        self.assertIs(c.parent, self.p2)
        self.assertIn(c, self.p2.cells)
        self.assertNotIn(c, self.p1.cells)

    def test_detach_with_none(self):
        c = self.p1.add_cell(TextCell("x"))
        c.parent = None
        self.assertIsNone(c.parent)
        self.assertEqual(self.p1.cells, ())
        self.assertEqual(self.p2.cells, ())

    def test_same_parent_twice_is_idempotent(self):
        a = self.p1.add_cell(TextCell("a"))
        b = self.p1.add_cell(TextCell("b"))
        self.p1.add_cell(a)
        a.parent = self.p1
        self.assertEqual(list(self.p1.cells), [a, b])

    def test_order_preserved_and_reattach_appends(self):
        cells = [self.p1.add_cell(TextCell(str(i))) for i in range(4)]
        self.assertEqual(list(self.p1.cells), cells)

        cells[1].parent = None
        cells[1].parent = self.p1
        self.assertEqual(
            [c.text for c in self.p1.cells], ["0", "2", "3", "1"]
        )

    def test_identity_not_equality(self):
        # equal-looking cells are still distinct children
        a = self.p1.add_cell(TextCell("same"))
        b = self.p1.add_cell(TextCell("same"))
        self.assertEqual(len(self.p1.cells), 2)
        b.parent = None
        self.assertEqual(len(self.p1.cells), 1)
        self.assertIs(self.p1.cells[0], a)

    def test_children_view_is_read_only(self):
        self.p1.add_cell(TextCell("a"))
        cells = self.p1.cells
        self.assertIsInstance(cells, tuple)
        with self.assertRaises(AttributeError):
            cells.append(TextCell("b"))  # type: ignore[attr-defined]
        self.assertEqual(len(self.p1.children), 1)

    def test_cycle_is_rejected(self):
        c = self.p1.add_cell(TextCell("x"))
        with self.assertRaises(ValueError):
            self.nb.parent = self.p1
        with self.assertRaises(ValueError):
            self.p1.parent = self.p1
        with self.assertRaises(ValueError):
            self.nb.parent = c
        # tree unchanged
        self.assertIsNone(self.nb.parent)
        self.assertIs(self.p1.parent, self.nb)
        self.assertEqual(list(self.nb.pages), [self.p1, self.p2])

    def test_notebook_cannot_have_parent(self):
        other = Notebook("other")
        with self.assertRaises(ValueError):
            other.parent = self.p1
        self.assertIsNone(other.parent)
        self.assertEqual(self.p1.cells, ())
        # detaching a root stays allowed
        other.parent = None
        self.assertIsNone(other.parent)

    def test_cell_constructed_with_parent(self):
        c = TextCell("x", parent=self.p2)
        self.assertEqual(list(self.p2.cells), [c])
        self.assertEqual(c.children, ())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
