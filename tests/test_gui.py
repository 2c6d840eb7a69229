import unittest

from dropfour.interfaces.gui import HIGHLIGHT_COLORS, PIECE_COLORS, column_at, window_size
from dropfour.game.rules import GameSession
from dropfour.utils import GameConfig, Phase, Player


class TestPointerMapping(unittest.TestCase):
    def test_given_pixel_x_when_mapped_then_floor_of_cell(self):
        self.assertEqual(column_at(0, 90), 0)
        self.assertEqual(column_at(89.9, 90), 0)
        self.assertEqual(column_at(90, 90), 1)
        self.assertEqual(column_at(719, 90), 7)

    def test_given_pixel_outside_board_when_mapped_then_column_out_of_range(self):
        self.assertEqual(column_at(720, 90), 8)
        self.assertEqual(column_at(-0.5, 90), -1)

    def test_given_click_past_right_edge_when_applied_then_session_rejects(self):
        session = GameSession()
        session.tick()
        self.assertFalse(session.tick(column_at(725, 90)))
        self.assertEqual(session.history, ())

    def test_given_config_when_sizing_window_then_cells_times_dimensions(self):
        self.assertEqual(window_size(GameConfig(6, 7, 4), 50), (350, 300))

    def test_given_palette_when_checked_then_every_player_and_turn_colored(self):
        self.assertEqual(set(PIECE_COLORS), {Player.A, Player.B})
        self.assertEqual(set(HIGHLIGHT_COLORS), {Phase.TURN_A, Phase.TURN_B})


if __name__ == '__main__':
    unittest.main()
