import json
import unittest

from wordogram.core.constants import ErrorKind
from wordogram.core.exceptions import PinConflictError
from wordogram.core.models import OverlayEntry, Pin
from wordogram.engine.cells import split_cells
from wordogram.engine.shifter import (
    best_shift,
    overlap_score,
    resolve_pins,
    score_shift,
    shift_rows,
)


def splits_for(raws, width):
    return [split_cells(raw, width, row=index) for index, raw in enumerate(raws)]


class ScoreTests(unittest.TestCase):
    def test_matches_count_once_per_placed_row(self) -> None:
        self.assertEqual(score_shift("A", 0, ["A  ", "A  "]), 2)
        self.assertEqual(score_shift("A", 1, ["A  ", "A  "]), 0)

    def test_spaces_never_score(self) -> None:
        self.assertEqual(score_shift("A B", 0, ["A B"]), 2)
        self.assertEqual(score_shift(" ", 0, ["   "]), 0)

    def test_ties_prefer_smallest_shift(self) -> None:
        self.assertEqual(best_shift("A", 2, ["A A"]), 0)
        self.assertEqual(best_shift("A", 2, ["  A"]), 2)
        self.assertEqual(best_shift("Q", 3, ["ABC "]), 0)

    def test_overlap_score_counts_row_pairs(self) -> None:
        self.assertEqual(overlap_score(["AB", "AC", "AB"]), 4)
        self.assertEqual(overlap_score(["  ", "  "]), 0)


class ShiftRowsTests(unittest.TestCase):
    def test_row_aligns_with_letter_above(self) -> None:
        result = shift_rows(splits_for(["ABCDE", "E"], 5), 5)
        self.assertEqual(result.solution, ["ABCDE", "    E"])
        self.assertEqual(result.shifts, [0, 4])

    def test_equal_scores_keep_smaller_shift(self) -> None:
        result = shift_rows(splits_for(["ABA", "A"], 3), 3)
        self.assertEqual(result.solution, ["ABA", "A  "])

    def test_scores_sum_over_all_previous_rows(self) -> None:
        # Shift 0 matches "X" in two rows; shift 1 matches a single "B".
        result = shift_rows(splits_for(["X B", "X", "XB"], 3), 3)
        self.assertEqual(result.shifts[2], 0)

    def test_overlay_moves_with_row(self) -> None:
        result = shift_rows(splits_for(["ABCDE", "D!"], 5), 5)
        self.assertEqual(result.shifts, [0, 3])
        self.assertEqual(result.solution[1], "   D ")
        self.assertEqual(result.overlay, [OverlayEntry(row=1, col=4, ch="!")])


class PinTests(unittest.TestCase):
    def test_pin_overrides_search(self) -> None:
        splits = splits_for(["ABCDE", "E"], 5)
        result = shift_rows(splits, 5, [Pin(row=1, raw_index=0, target_col=2)])
        self.assertEqual(result.solution[1], "  E  ")

    def test_pinned_row_feeds_later_rows(self) -> None:
        splits = splits_for(["AB", "CDE", "B"], 5)
        result = shift_rows(splits, 5, [Pin(row=0, raw_index=1, target_col=4)])
        self.assertEqual(result.solution[0], "   AB")
        self.assertEqual(result.solution[2], "    B")

    def test_pin_places_character_exactly(self) -> None:
        splits = splits_for(["ABCDE", "X-Y"], 5)
        result = shift_rows(splits, 5, [Pin(row=1, raw_index=1, target_col=3)])
        self.assertIn(OverlayEntry(row=1, col=3, ch="-"), result.overlay)
        self.assertEqual(result.solution[1], "  X Y")

    def test_repeated_identical_pin_is_fine(self) -> None:
        splits = splits_for(["ABCDE", "XY"], 5)
        pin = Pin(row=1, raw_index=0, target_col=1)
        self.assertEqual(resolve_pins(splits, 5, [pin, pin]), {1: 1})

    def test_unreachable_pins_raise(self) -> None:
        splits = splits_for(["ABCDE", "XY"], 5)
        bad_pins = [
            Pin(row=5, raw_index=0, target_col=0),
            Pin(row=-1, raw_index=0, target_col=0),
            Pin(row=1, raw_index=2, target_col=3),
            Pin(row=1, raw_index=1, target_col=0),
            Pin(row=1, raw_index=0, target_col=4),
            Pin(row=1, raw_index=0, target_col=7),
            Pin(row=0, raw_index=0, target_col=1),
        ]
        for pin in bad_pins:
            with self.subTest(pin=pin):
                with self.assertRaises(PinConflictError) as ctx:
                    shift_rows(splits, 5, [pin])
                self.assertEqual(ctx.exception.kind, ErrorKind.PIN_CONFLICT)
                detail = json.loads(json.dumps(ctx.exception.to_jsonable()))["detail"]
                self.assertEqual(detail["pin"], pin.to_jsonable())

    def test_conflicting_pins_on_same_row_raise(self) -> None:
        splits = splits_for(["ABCDE", "XY"], 5)
        pins = [Pin(row=1, raw_index=0, target_col=1), Pin(row=1, raw_index=0, target_col=2)]
        with self.assertRaises(PinConflictError) as ctx:
            resolve_pins(splits, 5, pins)
        self.assertEqual(ctx.exception.detail["locked_shift"], 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
