import unittest

from wordogram.core.constants import CellKind
from wordogram.data.tokenizer import classify, is_letter, letter_multiset, tokenize


class TokenizerTests(unittest.TestCase):
    def test_splits_on_whitespace_runs_only(self) -> None:
        chunks = tokenize("  don't\tstop\n\nnow  ")
        self.assertEqual([c.text for c in chunks], ["DON'T", "STOP", "NOW"])

    def test_punctuation_stays_attached(self) -> None:
        self.assertEqual([c.text for c in tokenize("ghost-white")], ["GHOST-WHITE"])
        self.assertEqual([c.text for c in tokenize("done it— the")], ["DONE", "IT—", "THE"])

    def test_non_letters_pass_through(self) -> None:
        self.assertEqual([c.text for c in tokenize("123 abc! café")], ["123", "ABC!", "CAFé"])

    def test_blank_phrase_has_no_chunks(self) -> None:
        self.assertEqual(tokenize(""), [])
        self.assertEqual(tokenize(" \t\n "), [])

    def test_classify(self) -> None:
        self.assertEqual(classify("q"), CellKind.LETTER)
        self.assertEqual(classify(" "), CellKind.SPACE)
        self.assertEqual(classify("7"), CellKind.OVERLAY)
        self.assertEqual(classify("é"), CellKind.OVERLAY)
        self.assertFalse(is_letter("É"))

    def test_letter_multiset_ignores_punctuation(self) -> None:
        counts = letter_multiset("Don't, don't!")
        self.assertEqual(counts["D"], 2)
        self.assertEqual(counts["T"], 2)
        self.assertNotIn("'", counts)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
