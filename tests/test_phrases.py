import tempfile
import unittest
from pathlib import Path

from wordogram.io.phrases import load_phrase_table


class PhraseTableTests(unittest.TestCase):
    def test_reads_optional_columns(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "phrases.tsv"
            sample.write_text(
                "phrase\tid\tauthor\tmin_width\tmax_width\n"
                "DON'T STOP\tp1\tAna\t10\t10\n"
                "ghost-white\t\t\t\t\n"
                "\tp3\t\t\t\n",
                encoding="utf-8",
            )
            requests = load_phrase_table(sample)

        self.assertEqual(len(requests), 2)
        first, second = requests
        self.assertEqual(first.phrase, "DON'T STOP")
        self.assertEqual(first.id, "p1")
        self.assertEqual(first.author, "Ana")
        self.assertEqual((first.min_width, first.max_width), (10, 10))
        self.assertEqual(second.phrase, "ghost-white")
        self.assertIsNone(second.id)
        self.assertIsNone(second.min_width)

    def test_phrase_column_required(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "bad.tsv"
            sample.write_text("text\nhello\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_phrase_table(sample)

    def test_phrase_text_is_kept_verbatim(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            sample = Path(tmpdir) / "spaced.tsv"
            sample.write_text(
                "phrase\tauthor\n"
                "  spaced out  \t  Ana  \n"
                "   \tBo\n",
                encoding="utf-8",
            )
            entries = load_phrase_table(sample)

        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0].phrase, "  spaced out  ")
        self.assertEqual(entries[0].author, "Ana")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
