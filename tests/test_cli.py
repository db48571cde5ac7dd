import io
import json
import tempfile
import unicodedata
import unittest
from contextlib import redirect_stderr, redirect_stdout

from main import FAILURE_MESSAGE, clamp_word_count, main
from wordsearch.core.models import Placement, PuzzleResult
from wordsearch.data.datasets import DatasetStat
from wordsearch.utils.pretty import MASK_SYMBOL, format_grid, format_stats, format_word_list


def tiny_result() -> PuzzleResult:
    placement = Placement(word=("가", "나"), origin=(0, 0), direction=(1, 0), cells=((0, 0), (1, 0)))
    return PuzzleResult(
        grid=(("가", "나"), ("다", "라")),
        words=("가나",),
        placements=(placement,),
        solution_cells=frozenset(placement.cells),
        attempts=1,
    )


class PrettyTests(unittest.TestCase):
    def test_reveal_masks_non_solution_cells(self) -> None:
        rendered = format_grid(tiny_result(), reveal=True).splitlines()
        self.assertIn("가 나", rendered[2])
        self.assertEqual(rendered[3].count(MASK_SYMBOL), 2)

    def test_mask_is_as_wide_as_hangul(self) -> None:
        self.assertIn(unicodedata.east_asian_width(MASK_SYMBOL), ("F", "W"))
        self.assertEqual(unicodedata.east_asian_width(MASK_SYMBOL), unicodedata.east_asian_width("가"))

    def test_word_list_and_stats(self) -> None:
        self.assertEqual(format_word_list(["고양이"]), "찾을 단어\n• 고양이")
        stats = [
            DatasetStat("animals", "동물", 12),
            DatasetStat("foods", "음식", None, "missing"),
        ]
        self.assertEqual(format_stats(stats), "동물: 12개\n음식: 로드 실패")


class CliTests(unittest.TestCase):
    def test_clamp_word_count(self) -> None:
        self.assertEqual(clamp_word_count(1), 4)
        self.assertEqual(clamp_word_count(30), 20)
        self.assertEqual(clamp_word_count(9), 9)

    def test_json_output_for_explicit_words(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = main(["--words", "가나다", "라마바사", "사자", "기린", "--seed", "4", "--json"])
        self.assertEqual(code, 0)
        payload = json.loads(stdout.getvalue())
        self.assertEqual(payload["size"], 6)
        self.assertEqual(len(payload["words"]), 4)
        self.assertTrue(all(len(row) == 6 for row in payload["grid"]))

    def test_generation_failure_reports_message(self) -> None:
        stderr = io.StringIO()
        # Twenty two-syllable words cannot all fit in a 6x6 grid.
        words = [f"{chr(0xAC00 + i)}{chr(0xAC00 + 100 + i)}" for i in range(20)]
        with redirect_stderr(stderr):
            code = main(["--words", *words, "--count", "20", "--seed", "1"])
        self.assertEqual(code, 1)
        self.assertIn(FAILURE_MESSAGE, stderr.getvalue())

    def test_unwritable_output_exits_with_error(self) -> None:
        stderr = io.StringIO()
        with tempfile.TemporaryDirectory() as tmpdir:
            # A directory cannot be written as a file.
            with redirect_stderr(stderr):
                code = main(["--words", "가나다", "라마바사", "사자", "기린", "--seed", "4", "--output", tmpdir])
        self.assertEqual(code, 2)
        self.assertIn("error:", stderr.getvalue())

    def test_missing_dataset_exits_with_error(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            code = main(["--data-dir", "does/not/exist", "--category", "foods"])
        self.assertEqual(code, 2)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
