import argparse
import unittest

import numpy as np

from dropfour.debug import DebugManager, DebugLevel
from dropfour.utils import (BANNERS, GameConfig, InvalidColumn, Phase, Player,
                            render_board_ascii)


class TestPlayerAndPhase(unittest.TestCase):
    def test_given_players_when_asking_other_then_swapped(self):
        self.assertEqual(Player.A.other(), Player.B)
        self.assertEqual(Player.B.other(), Player.A)
        self.assertEqual(Player.EMPTY.other(), Player.EMPTY)

    def test_given_phase_helpers_when_queried_then_consistent(self):
        self.assertEqual(Phase.turn_of(Player.B), Phase.TURN_B)
        self.assertEqual(Phase.won_by(Player.A), Phase.WON_A)
        self.assertEqual(Phase.WON_B.player, Player.B)
        self.assertIsNone(Phase.DRAW.player)
        self.assertIsNone(Phase.INIT.player)
        self.assertTrue(Phase.DRAW.is_terminal())
        self.assertFalse(Phase.TURN_A.is_terminal())
        self.assertTrue(Phase.TURN_A.is_turn())
        self.assertFalse(Phase.INIT.is_turn())

    def test_given_terminal_phases_when_reading_banners_then_texts_match(self):
        self.assertEqual(BANNERS[Phase.WON_A], "Player A wins!")
        self.assertEqual(BANNERS[Phase.WON_B], "Player B wins!")
        self.assertEqual(BANNERS[Phase.DRAW], "Draw!")
        self.assertNotIn(Phase.TURN_A, BANNERS)


class TestGameConfig(unittest.TestCase):
    def test_given_defaults_when_created_then_eight_by_eight_connect_four(self):
        config = GameConfig()
        self.assertEqual((config.board_height, config.board_width, config.win_length), (8, 8, 4))
        self.assertFalse(config.diagonal_wins)

    def test_given_bad_values_when_created_then_value_error(self):
        with self.assertRaises(ValueError):
            GameConfig(board_height=0)
        with self.assertRaises(ValueError):
            GameConfig(win_length=0)
        with self.assertRaises(ValueError):
            GameConfig(board_height=3, board_width=3, win_length=4)

    def test_given_namespace_when_building_then_fields_copied(self):
        args = argparse.Namespace(rows=6, cols=7, win_length=4, diagonals=True)
        config = GameConfig.from_args(args)
        self.assertEqual(config, GameConfig(6, 7, 4, True))
        self.assertEqual(GameConfig.from_args(argparse.Namespace()), GameConfig())


class TestErrorsAndRendering(unittest.TestCase):
    def test_given_invalid_column_when_raised_then_is_value_error(self):
        err = InvalidColumn(9, 8)
        self.assertIsInstance(err, ValueError)
        self.assertIn("0-7", str(err))

    def test_given_grid_when_rendering_then_column_numbers_shown(self):
        grid = np.zeros((2, 3), dtype=np.int8)
        grid[1, 2] = Player.B.value
        lines = render_board_ascii(grid).splitlines()
        self.assertEqual(lines[1], "| . . . |")
        self.assertEqual(lines[2], "| . . B |")
        self.assertEqual(lines[-1], "  0 1 2")


class TestDebugManager(unittest.TestCase):
    def test_given_level_strings_when_set_then_known_levels_accepted(self):
        manager = DebugManager("dropfour.test")
        self.assertTrue(manager.set_from_string("trace"))
        self.assertEqual(manager.level, DebugLevel.TRACE)
        self.assertFalse(manager.set_from_string("loud"))
        self.assertEqual(manager.level, DebugLevel.TRACE)

    def test_given_timer_when_ended_then_elapsed_returned_once(self):
        manager = DebugManager("dropfour.test")
        manager.configure(level=DebugLevel.NONE)
        manager.start_timer("t")
        self.assertGreaterEqual(manager.end_timer("t"), 0.0)
        self.assertIsNone(manager.end_timer("t"))


if __name__ == '__main__':
    unittest.main()
