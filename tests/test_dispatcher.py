from __future__ import annotations

import io
import os
import sys
import unittest
from pathlib import Path
from typing import List
from unittest import mock

from colored import attr, fg, stylize

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rustlearn.catalog import LessonCatalog, LessonEntry
from rustlearn.dispatcher import (
    BANNER,
    CONTINUE_PROMPT,
    FAREWELL,
    INVALID_CHOICE,
    MENU_PROMPT,
    QUIT_LINE,
    Dispatcher,
    DispatcherState,
)
from rustlearn.exceptions import DispatcherError, InputClosedError


class _BrokenStream(io.StringIO):
    def readline(self, *args: object) -> str:  # type: ignore[override]
        raise OSError("device went away")


class DispatcherTests(unittest.TestCase):
    def setUp(self) -> None:
        self.calls: List[str] = []
        self.states: List[DispatcherState] = []

        def make_action(identifier: str):
            def action() -> None:
                self.calls.append(identifier)
                self.states.append(self.dispatcher.state)
                print(f"lesson {identifier} output")

            return action

        self.catalog = LessonCatalog(
            [
                LessonEntry("1", "First", make_action("1")),
                LessonEntry("2", "Second", make_action("2")),
                LessonEntry("10", "Tenth", make_action("10")),
            ]
        )
        self.dispatcher: Dispatcher

    def _dispatcher(self, text: str) -> tuple[Dispatcher, io.StringIO]:
        out = io.StringIO()
        self.dispatcher = Dispatcher(self.catalog, stdin=io.StringIO(text), stdout=out)
        return self.dispatcher, out

    def test_quit_immediately(self) -> None:
        dispatcher, out = self._dispatcher("q\n")
        dispatcher.start()
        text = out.getvalue()
        self.assertEqual(dispatcher.state, DispatcherState.TERMINATED)
        self.assertIn(FAREWELL, text)
        self.assertNotIn(CONTINUE_PROMPT, text)
        self.assertEqual(self.calls, [])

    def test_uppercase_quit(self) -> None:
        dispatcher, out = self._dispatcher("Q\n")
        dispatcher.start()
        self.assertIn(FAREWELL, out.getvalue())

    def test_menu_lists_lessons_in_order_then_quit_line(self) -> None:
        dispatcher, out = self._dispatcher("q\n")
        dispatcher.start()
        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], BANNER)
        self.assertEqual(
            lines[2:6],
            ["1. First", "2. Second", "10. Tenth", QUIT_LINE],
        )

    def test_lesson_runs_then_continue_prompt_then_menu_again(self) -> None:
        dispatcher, out = self._dispatcher("2\n\nq\n")
        dispatcher.start()
        text = out.getvalue()
        self.assertEqual(self.calls, ["2"])
        self.assertEqual(text.count(CONTINUE_PROMPT), 1)
        self.assertEqual(text.count(BANNER), 2)
        self.assertLess(text.index("lesson 2 output"), text.index(CONTINUE_PROMPT))
        self.assertLess(text.index(CONTINUE_PROMPT), text.index(FAREWELL))

    def test_continue_line_content_is_discarded(self) -> None:
        dispatcher, _ = self._dispatcher("1\n2\nq\n")
        dispatcher.start()
        # "2" was consumed by the continue prompt, not treated as a selection.
        self.assertEqual(self.calls, ["1"])

    def test_selection_is_whitespace_trimmed(self) -> None:
        dispatcher, _ = self._dispatcher("  10 \t\n\n q \n")
        dispatcher.start()
        self.assertEqual(self.calls, ["10"])
        self.assertEqual(dispatcher.state, DispatcherState.TERMINATED)

    def test_invalid_choice_reprompts_without_continue(self) -> None:
        dispatcher, out = self._dispatcher("99\n\nabc\nq\n")
        dispatcher.start()
        text = out.getvalue()
        self.assertEqual(text.count(INVALID_CHOICE.rstrip("\n")), 3)
        self.assertNotIn(CONTINUE_PROMPT, text)
        self.assertEqual(text.count(BANNER), 4)
        self.assertEqual(self.calls, [])

    def test_matching_is_exact(self) -> None:
        dispatcher, out = self._dispatcher("01\nq\n")
        dispatcher.start()
        self.assertEqual(self.calls, [])
        self.assertIn(INVALID_CHOICE.rstrip("\n"), out.getvalue())

    def test_end_of_input_at_menu_is_fatal(self) -> None:
        dispatcher, out = self._dispatcher("99\n")
        with self.assertRaises(InputClosedError):
            dispatcher.start()
        self.assertIn(INVALID_CHOICE.rstrip("\n"), out.getvalue())
        self.assertNotIn(FAREWELL, out.getvalue())

    def test_end_of_input_at_continue_prompt_is_fatal(self) -> None:
        dispatcher, _ = self._dispatcher("1\n")
        with self.assertRaises(InputClosedError):
            dispatcher.start()
        self.assertEqual(self.calls, ["1"])

    def test_read_failure_is_wrapped(self) -> None:
        dispatcher = Dispatcher(self.catalog, stdin=_BrokenStream(), stdout=io.StringIO())
        with self.assertRaises(InputClosedError) as ctx:
            dispatcher.start()
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertIn("device went away", str(ctx.exception))

    def test_state_is_executing_while_lesson_runs(self) -> None:
        dispatcher, _ = self._dispatcher("1\n\nq\n")
        self.assertEqual(dispatcher.state, DispatcherState.PROMPTING)
        dispatcher.start()
        self.assertEqual(self.states, [DispatcherState.EXECUTING])

    def test_state_returns_to_prompting_when_lesson_raises(self) -> None:
        def explode() -> None:
            raise RuntimeError("boom")

        catalog = LessonCatalog([LessonEntry("1", "Broken", explode)])
        dispatcher = Dispatcher(catalog, stdin=io.StringIO("1\n"), stdout=io.StringIO())
        with self.assertRaises(RuntimeError):
            dispatcher.start()
        self.assertEqual(dispatcher.state, DispatcherState.PROMPTING)

    def test_start_after_termination_is_rejected(self) -> None:
        dispatcher, _ = self._dispatcher("q\n")
        dispatcher.start()
        with self.assertRaises(DispatcherError):
            dispatcher.start()

    def test_uncolored_output_has_no_escape_codes(self) -> None:
        dispatcher, out = self._dispatcher("x\nq\n")
        dispatcher.start()
        self.assertNotIn("\x1b[", out.getvalue())

    def test_colored_output_wraps_banner_and_status_lines(self) -> None:
        with mock.patch.dict(os.environ, {"FORCE_COLOR": "1"}):
            for name in ("NO_COLOR", "DISABLE_COLOR"):
                os.environ.pop(name, None)
            out = io.StringIO()
            self.dispatcher = Dispatcher(
                self.catalog, stdin=io.StringIO("x\nq\n"), stdout=out, color=True
            )
            self.dispatcher.start()
            bold_banner = stylize(BANNER, attr("bold"))
            green_farewell = stylize(FAREWELL, fg("green"))
            yellow_invalid = stylize(INVALID_CHOICE, fg("yellow"))
        text = out.getvalue()
        self.assertIn("\x1b[", text)
        self.assertNotEqual(bold_banner, BANNER)
        self.assertEqual(text.count(bold_banner), 2)
        self.assertIn(green_farewell, text)
        self.assertIn(yellow_invalid, text)
        self.assertIn(QUIT_LINE, text)

    def test_menu_block_is_identical_on_every_iteration(self) -> None:
        dispatcher, out = self._dispatcher("x\n1\n\nq\n")
        dispatcher.start()
        chunks = out.getvalue().split(BANNER)[1:]
        blocks = [chunk.split(QUIT_LINE)[0] + QUIT_LINE for chunk in chunks]
        self.assertEqual(len(blocks), 3)
        self.assertEqual(
            blocks[0],
            f"\n{MENU_PROMPT}\n1. First\n2. Second\n10. Tenth\n{QUIT_LINE}",
        )
        for block in blocks[1:]:
            self.assertEqual(block, blocks[0])

    def test_lesson_output_goes_to_dispatcher_stream(self) -> None:
        dispatcher, out = self._dispatcher("1\n\nq\n")
        dispatcher.start()
        self.assertIn("lesson 1 output", out.getvalue())


class DefaultCatalogScenarioTests(unittest.TestCase):
    def test_pattern_matching_lesson_then_quit(self) -> None:
        out = io.StringIO()
        dispatcher = Dispatcher(stdin=io.StringIO("5\n\nq\n"), stdout=out)
        dispatcher.start()
        text = out.getvalue()
        self.assertIn("=== 第5课：模式匹配 ===", text)
        self.assertEqual(text.count(CONTINUE_PROMPT), 1)
        self.assertTrue(text.rstrip("\n").endswith(FAREWELL))

    def test_unknown_choice_then_end_of_input(self) -> None:
        out = io.StringIO()
        dispatcher = Dispatcher(stdin=io.StringIO("99\n"), stdout=out)
        with self.assertRaises(InputClosedError):
            dispatcher.start()
        self.assertEqual(out.getvalue().count(INVALID_CHOICE.rstrip("\n")), 1)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
