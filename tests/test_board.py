import unittest

from puzzle import Board, DEFAULT_SIZE


class TestBoard(unittest.TestCase):
    def test_given_no_size_when_creating_then_default_square_board(self):
        board = Board()
        self.assertEqual(board.cols, DEFAULT_SIZE)
        self.assertEqual(board.rows, DEFAULT_SIZE)
        self.assertEqual(len(list(board.cells())), DEFAULT_SIZE * DEFAULT_SIZE)

    def test_given_new_board_when_inspecting_then_only_periphery_bounded(self):
        board = Board(2, 1)
        self.assertEqual(board.boundaries, {(0, 1), (4, 1), (1, 0), (3, 0), (1, 2), (3, 2)})
        self.assertFalse(board.is_boundary(2, 1))
        self.assertEqual(board.centers(), ())
        self.assertTrue(all(board.mark(x, y) == 0 for (x, y) in board.cells()))
        self.assertEqual(board.xlim(), 5)
        self.assertEqual(board.ylim(), 3)

    def test_given_bad_size_when_creating_then_value_error(self):
        with self.assertRaises(ValueError):
            Board(0, 3)
        with self.assertRaises(ValueError):
            Board(3, -1)

    def test_given_edge_when_toggling_twice_then_boundary_restored(self):
        board = Board(2, 1)
        board.toggle_boundary(2, 1)
        self.assertTrue(board.is_boundary(2, 1))
        board.toggle_boundary(2, 1)
        self.assertFalse(board.is_boundary(2, 1))
        # Periphery edges may be toggled too
        board.toggle_boundary(0, 1)
        self.assertFalse(board.is_boundary(0, 1))

    def test_given_non_edge_when_toggling_then_value_error(self):
        board = Board(2, 1)
        for p in [(1, 1), (2, 2), (7, 1)]:
            with self.assertRaises(ValueError):
                board.toggle_boundary(*p)

    def test_given_centers_when_placing_then_ordered_and_duplicates_kept(self):
        board = Board(2, 2)
        board.place_center(2, 2)
        board.place_center(1, 1)
        board.place_center(2, 2)
        self.assertEqual(board.centers(), ((2, 2), (1, 1), (2, 2)))
        self.assertTrue(board.is_center(1, 1))
        self.assertFalse(board.is_center(3, 3))
        with self.assertRaises(ValueError):
            board.place_center(5, 1)

    def test_given_marks_when_reading_and_writing_then_validated(self):
        board = Board(2, 2)
        board.set_mark(3, 1, 4)
        self.assertEqual(board.mark(3, 1), 4)
        self.assertEqual(board.mark(1, 3), 0)
        self.assertEqual(board.mark(2, 1), -1)  # an edge
        self.assertEqual(board.mark(9, 9), -1)
        with self.assertRaises(ValueError):
            board.set_mark(2, 1, 1)
        with self.assertRaises(ValueError):
            board.set_mark(1, 1, -1)
        self.assertEqual(board.marked_cells(), [(3, 1, 4)])

    def test_given_bulk_marks_when_applied_then_every_listed_cell_updated(self):
        board = Board(2, 2)
        board.mark_all([(1, 1), (3, 3)], 2)
        self.assertEqual(board.marked_cells(), [(1, 1, 2), (3, 3, 2)])
        board.set_all_marks(5)
        self.assertTrue(all(board.mark(x, y) == 5 for (x, y) in board.cells()))
        with self.assertRaises(ValueError):
            board.set_all_marks(-1)
        with self.assertRaises(ValueError):
            board.mark_all([(1, 1)], -3)

    def test_given_board_when_copying_then_independent(self):
        board = Board(2, 2)
        board.toggle_boundary(2, 1)
        board.place_center(2, 2)
        board.set_mark(1, 1, 1)
        other = board.copy()
        self.assertEqual(other, board)
        other.toggle_boundary(2, 3)
        other.place_center(1, 1)
        other.set_mark(3, 3, 1)
        self.assertFalse(board.is_boundary(2, 3))
        self.assertEqual(board.centers(), ((2, 2),))
        self.assertEqual(board.mark(3, 3), 0)

    def test_given_edited_board_when_clearing_then_back_to_periphery_only(self):
        board = Board(2, 2)
        board.toggle_boundary(2, 1)
        board.place_center(1, 1)
        board.set_mark(1, 1, 1)
        board.clear()
        self.assertEqual(board, Board(2, 2))

    def test_given_board_when_pretty_then_one_char_per_place(self):
        board = Board(1, 1)
        board.place_center(1, 1)
        self.assertEqual(board.pretty(), " = \nIoI\n = ")
        board.set_mark(1, 1, 1)
        self.assertEqual(board.pretty(), " = \nIOI\n = ")

        wide = Board(2, 1)
        wide.place_center(2, 1)
        wide.set_mark(3, 1, 1)
        self.assertEqual(wide.pretty().splitlines(), [" = = ", "I o*I", " = = "])
        wide.toggle_boundary(2, 1)
        self.assertEqual(wide.pretty().splitlines()[1], "I O*I")


if __name__ == '__main__':
    unittest.main(verbosity=2)
