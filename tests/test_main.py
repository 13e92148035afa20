import logging
import tempfile
import unittest
from pathlib import Path

from binairo.errors import ParseError
from binairo.logging_config import setup_logging
from main import build_report, load_puzzle_from_file, run, run_with_trace, write_solution


PUZZLE_TEXT = "1  1\n 11 \n    \n    \n"


class TestMainTextInput(unittest.TestCase):
    def test_loads_puzzle_file(self) -> None:
        file_path = self._write_text(PUZZLE_TEXT)

        grid = load_puzzle_from_file(file_path)

        self.assertEqual(grid.width, 4)
        self.assertEqual(grid.height, 4)
        self.assertEqual(grid.rows(), ["1  1", " 11 ", "    ", "    "])

    def test_raises_when_file_is_missing(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError):
                load_puzzle_from_file(str(Path(temp_dir) / "missing.txt"))

    def test_raises_when_symbol_is_invalid(self) -> None:
        file_path = self._write_text("1x\n01\n")
        with self.assertRaises(ParseError):
            load_puzzle_from_file(file_path)

    def test_raises_when_file_is_blank(self) -> None:
        file_path = self._write_text("\n\n")
        with self.assertRaises(ValueError):
            load_puzzle_from_file(file_path)

    def test_run_solves_lines(self) -> None:
        result = run(PUZZLE_TEXT.splitlines())
        self.assertEqual(result.rows(), ["1001", "0110", "0011", "1100"])

    def test_run_with_trace_returns_trace(self) -> None:
        result, trace_log = run_with_trace(PUZZLE_TEXT.splitlines())
        self.assertTrue(result.is_complete())
        self.assertTrue(any("Guess" in line for line in trace_log))

    def test_report_for_solved_puzzle(self) -> None:
        report = build_report(load_puzzle_from_file(self._write_text(PUZZLE_TEXT)))
        self.assertEqual(
            report,
            {
                "solved": True,
                "complete": True,
                "solution": ["1001", "0110", "0011", "1100"],
                "violations": [],
            },
        )

    def test_report_for_unsolvable_puzzle_keeps_input(self) -> None:
        report = build_report(load_puzzle_from_file(self._write_text("11 \n  0\n  0\n")), trace=True)
        self.assertFalse(report["solved"])
        self.assertFalse(report["complete"])
        self.assertEqual(report["solution"], ["11 ", "  0", "  0"])
        self.assertTrue(any("Collision (2,0)" in line for line in report["trace"]))

    def test_report_caps_failure_lines_in_trace(self) -> None:
        puzzle = load_puzzle_from_file(self._write_text("11 \n  0\n  0\n"))
        report = build_report(puzzle, trace=True, failure_max_lines=1)
        self.assertTrue(report["trace"][-2].startswith("Got stuck in basic rule"))
        self.assertEqual(report["trace"][-1], "... report truncated after 1 lines")

    def test_write_solution_uses_text_format(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            output_path = Path(temp_dir) / "solution.txt"
            write_solution(str(output_path), ["01", "10"])
            self.assertEqual(output_path.read_text(encoding="utf-8"), "01\n10\n")
            self.assertEqual(load_puzzle_from_file(str(output_path)).rows(), ["01", "10"])

    def test_setup_logging_configures_package_logger(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = Path(temp_dir) / "solver.log"
            logger = setup_logging(logging.DEBUG, str(log_path))
            self.addCleanup(self._reset_logger, logger)

            run(PUZZLE_TEXT.splitlines())
            for handler in logger.handlers:
                handler.flush()

            self.assertEqual(logger.name, "binairo")
            self.assertEqual(len(logger.handlers), 2)
            self.assertIn("Guess 0 at (0, 2)", log_path.read_text(encoding="utf-8"))
            self._reset_logger(logger)

    def _reset_logger(self, logger: logging.Logger) -> None:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)

    def _write_text(self, text: str) -> str:
        tmp_file = tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8")
        tmp_file.write(text)
        tmp_file.flush()
        tmp_file.close()
        self.addCleanup(lambda: Path(tmp_file.name).unlink(missing_ok=True))
        return tmp_file.name


if __name__ == "__main__":
    unittest.main()
