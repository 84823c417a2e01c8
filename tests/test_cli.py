import io
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock


ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from maxsumline import cli
from maxsumline.models import AnalysisResult


ASSETS = Path(__file__).resolve().parent / "assets"


def run_cli(argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = cli.main(argv)
    return code, buffer.getvalue()


class CliTest(unittest.TestCase):
    def test_valid_file_report(self) -> None:
        code, output = run_cli([str(ASSETS / "AllLinesValid.txt")])
        self.assertEqual(code, 0)
        self.assertEqual(output, "Lines with max sum of elements: 4\n")

    def test_mixed_file_report(self) -> None:
        code, output = run_cli([str(ASSETS / "MixedLines.txt")])
        self.assertEqual(code, 0)
        self.assertEqual(
            output,
            "Lines with max sum of elements: 1, 4, 7\nInvalid lines: 2, 3\n",
        )

    def test_invalid_file_report(self) -> None:
        code, output = run_cli([str(ASSETS / "AllLinesInvalid.txt")])
        self.assertEqual(code, 0)
        self.assertEqual(output, "Invalid lines: 1, 2, 3, 5, 6\n")

    def test_empty_file_report(self) -> None:
        code, output = run_cli([str(ASSETS / "EmptyFile.txt")])
        self.assertEqual(code, 0)
        self.assertEqual(output, "No results to display.\n")

    def test_prompt_when_path_missing(self) -> None:
        with mock.patch("builtins.input", return_value=str(ASSETS / "AllLinesValid.txt")) as prompt:
            code, output = run_cli([])
        prompt.assert_called_once_with(cli.PROMPT)
        self.assertEqual(code, 0)
        self.assertIn("Lines with max sum of elements: 4", output)

    def test_prompt_eof_is_invalid_path(self) -> None:
        with mock.patch("builtins.input", side_effect=EOFError):
            code, output = run_cli([])
        self.assertEqual(code, 1)
        self.assertIn("An error occurred during current operation:", output)

    def test_invalid_path_exit_code(self) -> None:
        code, output = run_cli(["rel/path.txt"])
        self.assertEqual(code, 1)
        self.assertIn("  - path contains invalid path characters", output)
        self.assertIn("Stack Trace", output)
        self.assertNotIn("Inner exception:", output)

    def test_missing_file_exit_code(self) -> None:
        code, output = run_cli([str(ASSETS / "IAmNothing.txt")])
        self.assertEqual(code, 1)
        self.assertIn('File "IAmNothing.txt" does not exist', output)

    def test_chained_cause_is_printed(self) -> None:
        def failing_parse(path):
            try:
                raise OSError("disk unavailable")
            except OSError as exc:
                raise ValueError("could not read input") from exc

        with mock.patch.object(cli.analyzer, "parse", side_effect=failing_parse):
            code, output = run_cli(["/data/numbers.txt"])
        self.assertEqual(code, 1)
        self.assertIn("  - could not read input", output)
        self.assertIn("Inner exception:", output)
        self.assertIn("  - disk unavailable", output)

    def test_print_result_without_content(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            cli.print_result(AnalysisResult.empty())
        self.assertEqual(buffer.getvalue(), "No results to display.\n")


if __name__ == "__main__":
    unittest.main()
