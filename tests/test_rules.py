import unittest

from speedstack.core.constants import Direction
from speedstack.game.navigation import calculate_next_cell
from speedstack.game.rules import (
    board_with_cell,
    board_with_cleared_cell,
    calculate_points,
    calculate_speed_multiplier,
    get_next_size,
    is_clue_cell,
    is_puzzle_correctly_completed,
    should_apply_penalty,
)


class ScoringTests(unittest.TestCase):
    def test_speed_multiplier_decays_linearly(self) -> None:
        self.assertAlmostEqual(calculate_speed_multiplier(0), 3.0)
        self.assertAlmostEqual(calculate_speed_multiplier(15), 2.0)
        self.assertAlmostEqual(calculate_speed_multiplier(30), 1.0)
        self.assertAlmostEqual(calculate_speed_multiplier(120), 1.0)
        self.assertAlmostEqual(calculate_speed_multiplier(-4), 3.0)

    def test_points_scale_with_size_and_speed(self) -> None:
        self.assertEqual(calculate_points(4, 0), 120)
        self.assertEqual(calculate_points(4, 30), 40)
        self.assertEqual(calculate_points(9, 15), 180)
        self.assertEqual(calculate_points(1, 0), 30)

    def test_level_progression(self) -> None:
        expected = {0: 1, 2: 1, 3: 2, 5: 2, 6: 3, 9: 4, 11: 4, 12: 5, 13: 5,
                    14: 6, 16: 7, 18: 8, 19: 8, 20: 9, 75: 9}
        for completed, size in expected.items():
            self.assertEqual(get_next_size(completed), size, f"after {completed}")


class MoveRuleTests(unittest.TestCase):
    def test_penalty_only_when_timer_started(self) -> None:
        board = [[1, 0], [0, 0]]
        self.assertTrue(should_apply_penalty(board, 0, 1, 1, timer_started=True))
        self.assertFalse(should_apply_penalty(board, 0, 1, 1, timer_started=False))
        self.assertFalse(should_apply_penalty(board, 0, 1, 2, timer_started=True))

    def test_any_valid_completion_wins(self) -> None:
        self.assertTrue(is_puzzle_correctly_completed([[1, 2], [2, 1]]))
        self.assertTrue(is_puzzle_correctly_completed([[2, 1], [1, 2]]))
        self.assertFalse(is_puzzle_correctly_completed([[1, 1], [2, 2]]))
        self.assertFalse(is_puzzle_correctly_completed([[1, 2], [2, 0]]))

    def test_board_edits_return_new_boards(self) -> None:
        board = [[1, 0], [0, 0]]
        filled = board_with_cell(board, 1, 1, 1)
        cleared = board_with_cleared_cell(board, 0, 0)
        self.assertEqual(filled, [[1, 0], [0, 1]])
        self.assertEqual(cleared, [[0, 0], [0, 0]])
        self.assertEqual(board, [[1, 0], [0, 0]])

    def test_clue_cells(self) -> None:
        puzzle = [[1, 0], [0, 0]]
        self.assertTrue(is_clue_cell(puzzle, 0, 0))
        self.assertFalse(is_clue_cell(puzzle, 1, 1))


class NavigationTests(unittest.TestCase):
    def test_single_steps(self) -> None:
        result = calculate_next_cell(0, 0, 4, Direction.RIGHT)
        self.assertEqual((result.row, result.col, result.moved), (0, 1, True))
        result = calculate_next_cell(2, 1, 4, "left")
        self.assertEqual((result.row, result.col, result.moved), (2, 0, True))

    def test_boundary_blocks_movement(self) -> None:
        result = calculate_next_cell(0, 0, 4, Direction.UP)
        self.assertEqual((result.row, result.col, result.moved), (0, 0, False))
        result = calculate_next_cell(3, 3, 4, Direction.RIGHT)
        self.assertFalse(result.moved)

    def test_jump_to_edge(self) -> None:
        result = calculate_next_cell(1, 2, 9, Direction.DOWN, jump=True)
        self.assertEqual((result.row, result.col, result.moved), (8, 2, True))
        result = calculate_next_cell(1, 2, 9, Direction.LEFT, jump=True)
        self.assertEqual((result.row, result.col, result.moved), (1, 0, True))
        result = calculate_next_cell(8, 2, 9, Direction.DOWN, jump=True)
        self.assertFalse(result.moved)

    def test_out_of_range_start_does_not_move(self) -> None:
        result = calculate_next_cell(5, 0, 4, Direction.UP)
        self.assertEqual((result.row, result.col, result.moved), (5, 0, False))

    def test_single_cell_grid_never_moves(self) -> None:
        for direction in Direction:
            self.assertFalse(calculate_next_cell(0, 0, 1, direction, jump=True).moved)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
