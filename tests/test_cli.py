from __future__ import annotations

import io
import logging
import sys
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rustlearn import cli
from rustlearn.dispatcher import FAREWELL
from rustlearn.log import LOGGER_NAME, setup_logging


class CliTests(unittest.TestCase):
    def _run(self, text: str) -> tuple[int, str, str]:
        stdout, stderr = io.StringIO(), io.StringIO()
        with mock.patch.object(sys, "stdin", io.StringIO(text)), \
                mock.patch.object(sys, "stdout", stdout), \
                mock.patch.object(sys, "stderr", stderr):
            code = cli.main([])
        return code, stdout.getvalue(), stderr.getvalue()

    def test_quit_exits_cleanly(self) -> None:
        code, out, err = self._run("q\n")
        self.assertEqual(code, cli.EXIT_OK)
        self.assertIn(FAREWELL, out)
        self.assertEqual(err, "")

    def test_end_of_input_exits_with_failure(self) -> None:
        code, out, err = self._run("99\n")
        self.assertEqual(code, cli.EXIT_INPUT_CLOSED)
        self.assertNotIn(FAREWELL, out)
        self.assertIn("Unable to read input", err)
        self.assertNotIn("Unable to read input", out)

    def test_keyboard_interrupt_exit_code(self) -> None:
        with mock.patch.object(cli.Dispatcher, "start", side_effect=KeyboardInterrupt):
            code, _, _ = self._run("")
        self.assertEqual(code, cli.EXIT_INTERRUPTED)

    def test_lesson_output_reaches_stdout(self) -> None:
        code, out, _ = self._run("1\n\nq\n")
        self.assertEqual(code, cli.EXIT_OK)
        self.assertIn("=== 第1课：变量和数据类型 ===", out)


class SetupLoggingTests(unittest.TestCase):
    def test_handlers_are_replaced_not_stacked(self) -> None:
        self.addCleanup(setup_logging)
        setup_logging()
        logger = setup_logging(logging.DEBUG)
        self.assertEqual(len(logger.handlers), 1)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
        self.assertIs(logger, logging.getLogger(LOGGER_NAME))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
