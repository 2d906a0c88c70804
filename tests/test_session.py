import unittest
from unittest.mock import patch

from speedstack.core.exceptions import InvalidGridSizeError
from speedstack.engine.checker import find_empty_cell, is_valid_board
from speedstack.game.session import GameConfig, GameSession, MoveOutcome


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _solve_current(session: GameSession) -> MoveOutcome:
    """Fill empty cells from the stored solution until the puzzle is solved."""

    completed = session.completed_count
    outcome = MoveOutcome.IGNORED
    while session.completed_count == completed:
        row, col = find_empty_cell(session.user_board)
        outcome = session.fill_cell(row, col, session.solution[row][col])
        if outcome == MoveOutcome.IGNORED:
            break
    return outcome


class GameConfigTests(unittest.TestCase):
    def test_defaults_follow_game_constants(self) -> None:
        config = GameConfig()
        self.assertEqual(config.initial_time, 30)
        self.assertEqual(config.time_bonus, 8)
        self.assertEqual(config.time_penalty, 5)
        self.assertEqual(config.max_time, 99)
        self.assertEqual(config.start_size, 1)

    def test_rejects_bad_values(self) -> None:
        with self.assertRaises(InvalidGridSizeError):
            GameConfig(start_size=0)
        with self.assertRaises(ValueError):
            GameConfig(initial_time=0)
        with self.assertRaises(ValueError):
            GameConfig(initial_time=50, max_time=40)


class GameSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.session = GameSession(GameConfig(seed=17), clock=self.clock)

    def test_input_ignored_before_start(self) -> None:
        self.assertEqual(self.session.fill_cell(0, 0, 1), MoveOutcome.IGNORED)
        self.assertEqual(self.session.user_board, [[0]])

    def test_solving_scores_and_rewards_time(self) -> None:
        self.session.start()
        self.clock.now = 15.0
        outcome = self.session.fill_cell(0, 0, 1)
        self.assertEqual(outcome, MoveOutcome.SOLVED)
        self.assertEqual(self.session.score, 20)
        self.assertEqual(self.session.completed_count, 1)
        self.assertEqual(self.session.bonuses, 1)
        self.assertEqual(self.session.time_remaining, 38)
        # A fresh 1x1 puzzle is dealt for the next level.
        self.assertEqual(self.session.user_board, [[0]])

    def test_invalid_digit_costs_time(self) -> None:
        self.session.start()
        outcome = self.session.fill_cell(0, 0, 2)
        self.assertEqual(outcome, MoveOutcome.REJECTED)
        self.assertEqual(self.session.penalties, 1)
        self.assertEqual(self.session.time_remaining, 25)
        self.assertEqual(self.session.user_board, [[0]])

    def test_penalty_can_end_the_game(self) -> None:
        session = GameSession(GameConfig(initial_time=4, seed=1), clock=self.clock)
        session.start()
        self.assertEqual(session.fill_cell(0, 0, 9), MoveOutcome.REJECTED)
        self.assertEqual(session.time_remaining, 0)
        self.assertTrue(session.is_game_over)
        self.assertEqual(session.fill_cell(0, 0, 1), MoveOutcome.IGNORED)

    def test_time_bonus_is_capped(self) -> None:
        session = GameSession(GameConfig(initial_time=95, seed=3), clock=self.clock)
        session.start()
        session.fill_cell(0, 0, 1)
        self.assertEqual(session.time_remaining, 99)

    def test_level_advances_after_three_puzzles(self) -> None:
        self.session.start()
        for _ in range(3):
            self.assertEqual(_solve_current(self.session), MoveOutcome.SOLVED)
        self.assertEqual(self.session.current_size, 2)
        self.assertEqual(self.session.max_level, 2)
        self.assertEqual(len(self.session.user_board), 2)
        self.assertTrue(is_valid_board(self.session.user_board))

    def test_clue_cells_cannot_be_edited(self) -> None:
        session = GameSession(GameConfig(start_size=9, seed=5), clock=self.clock)
        session.start()
        row, col = next(
            (r, c)
            for r in range(9)
            for c in range(9)
            if session.puzzle[r][c] != 0
        )
        self.assertEqual(session.fill_cell(row, col, 1), MoveOutcome.IGNORED)
        self.assertFalse(session.clear_cell(row, col))
        self.assertEqual(session.fill_cell(9, 0, 1), MoveOutcome.IGNORED)

    def test_overwrite_is_checked_without_old_value(self) -> None:
        session = GameSession(GameConfig(start_size=4, seed=9), clock=self.clock)
        session.start()
        row, col = session.pair.empty_cells()[0]
        answer = session.solution[row][col]
        self.assertIn(session.fill_cell(row, col, answer), (MoveOutcome.ACCEPTED, MoveOutcome.SOLVED))
        if session.completed_count == 0:
            # Re-entering the same digit is not a conflict with itself.
            self.assertNotEqual(session.fill_cell(row, col, answer), MoveOutcome.REJECTED)
            self.assertTrue(session.clear_cell(row, col))
            self.assertEqual(session.user_board[row][col], 0)

    def test_select_number_toggles(self) -> None:
        self.session.start()
        self.assertIsNone(self.session.select_number(1))
        self.assertEqual(self.session.selected_number, 1)
        self.assertIsNone(self.session.select_number(1))
        self.assertIsNone(self.session.selected_number)

    def test_select_cell_then_number_fills(self) -> None:
        self.session.start()
        self.assertIsNone(self.session.select_cell(0, 0))
        self.assertEqual(self.session.selected_cell, (0, 0))
        self.assertEqual(self.session.select_number(1), MoveOutcome.SOLVED)

    def test_tick_runs_out_the_clock(self) -> None:
        self.session.tick(10)
        self.assertEqual(self.session.time_remaining, 30)
        self.session.start()
        self.session.tick(10)
        self.assertEqual(self.session.time_remaining, 20)
        self.session.tick(25)
        self.assertEqual(self.session.time_remaining, 0)
        self.assertTrue(self.session.is_game_over)

    def test_hint_fills_from_completion(self) -> None:
        self.session.start()
        self.assertEqual(self.session.hint(), (0, 0, 1))
        self.assertEqual(self.session.completed_count, 1)

    def test_hint_falls_back_to_stored_solution(self) -> None:
        self.session.start()
        with patch("speedstack.game.session.solve_board", return_value=None):
            self.assertEqual(self.session.hint(), (0, 0, 1))

    def test_restart_resets_progress(self) -> None:
        self.session.start()
        self.session.fill_cell(0, 0, 1)
        self.session.restart()
        self.assertFalse(self.session.has_started)
        self.assertEqual(self.session.score, 0)
        self.assertEqual(self.session.completed_count, 0)
        self.assertEqual(self.session.time_remaining, 30)

    def test_summary(self) -> None:
        self.session.start()
        self.session.fill_cell(0, 0, 1)
        self.clock.now = 12.34
        summary = self.session.summary()
        self.assertEqual(summary["score"], 30)
        self.assertEqual(summary["completed_count"], 1)
        self.assertEqual(summary["max_level"], 1)
        self.assertEqual(summary["play_time"], 12.3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
