import unittest
from connect4.core.enums import Player
from connect4.core.errors import ParseMoveError
from connect4.core.history import parse_history, format_history


class TestParseHistory(unittest.TestCase):

    def test_parses_alternating_moves(self):
        moves = parse_history("B2R2B1R3")
        self.assertEqual(len(moves), 4)
        self.assertEqual(moves[0].player, Player.BLUE)
        self.assertEqual(moves[0].column, 2)
        self.assertEqual(moves[3].player, Player.RED)
        self.assertEqual(moves[3].column, 3)

    def test_player_tags_are_case_insensitive(self):
        moves = parse_history("r3b4")
        self.assertEqual([(m.player, m.column) for m in moves],
                         [(Player.RED, 3), (Player.BLUE, 4)])

    def test_empty_and_blank_history(self):
        self.assertEqual(parse_history(""), [])
        self.assertEqual(parse_history("   "), [])

    def test_no_semantic_validation(self):
        """Seven pieces in one column parse fine; replay is what rejects them."""
        moves = parse_history("R0" * 7)
        self.assertEqual(len(moves), 7)

    def test_bad_player_tag(self):
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("R1X2")
        self.assertEqual(ctx.exception.position, 2)
        self.assertEqual(ctx.exception.reason, "expected R or B, found X")

    def test_missing_column(self):
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("R3B")
        self.assertEqual(ctx.exception.position, 3)
        self.assertEqual(ctx.exception.reason, "missing column number")

    def test_non_digit_column(self):
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("Rx")
        self.assertEqual(ctx.exception.position, 1)
        self.assertEqual(ctx.exception.reason, "expected column digit, found x")

    def test_non_ascii_digit_is_rejected(self):
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("R٣")  # ARABIC-INDIC DIGIT THREE
        self.assertEqual(ctx.exception.position, 1)

    def test_column_beyond_board_width(self):
        """Scenario: 'R7' fails at position 1 (valid columns are 0..6)."""
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("R7")
        self.assertEqual(ctx.exception.position, 1)
        self.assertEqual(str(ctx.exception),
                         "invalid move string at position 1: column must be 0-6")

    def test_trailing_whitespace_is_not_ignored(self):
        with self.assertRaises(ParseMoveError) as ctx:
            parse_history("R1 ")
        self.assertEqual(ctx.exception.position, 2)


class TestFormatHistory(unittest.TestCase):

    def test_canonical_upper_case(self):
        self.assertEqual(format_history(parse_history("r3b4R0")), "R3B4R0")

    def test_empty(self):
        self.assertEqual(format_history([]), "")


if __name__ == '__main__':
    unittest.main()
