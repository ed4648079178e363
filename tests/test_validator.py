import io
import unittest

from wordogram.core.models import OverlayEntry, Puzzle
from wordogram.engine.builder import build_puzzle
from wordogram.engine.validator import PuzzleValidator
from wordogram.utils.pretty import format_puzzle, print_puzzle_stats


def make_puzzle(solution, overlay=(), cols=None) -> Puzzle:
    return Puzzle(
        id="t",
        rows=len(solution),
        cols=cols if cols is not None else len(solution[0]),
        solution=list(solution),
        overlay=list(overlay),
    )


class PuzzleValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = PuzzleValidator()

    def test_built_puzzle_passes(self) -> None:
        phrase = "It's a long way to the top!"
        puzzle = build_puzzle(phrase, min_width=8, max_width=12)
        result = self.validator.validate(puzzle, phrase)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_rejects_bad_shapes_and_cells(self) -> None:
        cases = {
            "ragged": make_puzzle(["AB", "A"], cols=2),
            "lowercase": make_puzzle(["Ab"]),
            "digit": make_puzzle(["A1"]),
            "off grid": make_puzzle(["A "], [OverlayEntry(0, 2, "!")]),
            "covers letter": make_puzzle(["AB"], [OverlayEntry(0, 1, "!")]),
            "duplicate": make_puzzle(["A "], [OverlayEntry(0, 1, "!"), OverlayEntry(0, 1, "?")]),
            "letter overlay": make_puzzle(["A "], [OverlayEntry(0, 1, "B")]),
        }
        for name, puzzle in cases.items():
            with self.subTest(name):
                self.assertFalse(self.validator.validate(puzzle).ok)

    def test_letter_preservation(self) -> None:
        puzzle = make_puzzle(["AB"])
        self.assertTrue(self.validator.validate(puzzle, "a, b").ok)
        result = self.validator.validate(puzzle, "abc")
        self.assertFalse(result.ok)
        self.assertIn("missing", result.messages[0])


class PrettyTests(unittest.TestCase):
    def test_format_shows_overlay_and_blanks(self) -> None:
        puzzle = build_puzzle("DON'T STOP", min_width=10, max_width=10)
        rendered = format_puzzle(puzzle)
        last = rendered.splitlines()[-1]
        self.assertTrue(last.startswith(" 0 |"))
        self.assertIn("'", last)
        self.assertIn(".", last)

    def test_stats_include_layout_when_debug(self) -> None:
        puzzle = build_puzzle("ABCDE E", min_width=5, max_width=5, debug=True)
        stream = io.StringIO()
        print_puzzle_stats(puzzle, stream=stream)
        text = stream.getvalue()
        self.assertIn("Size:          2 x 5", text)
        self.assertIn("Overlap:       1", text)
        self.assertIn("shift  4", text)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
