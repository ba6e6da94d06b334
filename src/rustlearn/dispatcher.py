"""Interactive menu loop that runs one lesson per selection."""

from __future__ import annotations

import enum
import logging
import sys
from contextlib import redirect_stdout
from typing import Optional, TextIO

from colored import attr, fg, stylize

from .catalog import DEFAULT_CATALOG, QUIT_TOKEN, QUIT_TOKENS, LessonCatalog, LessonEntry
from .exceptions import DispatcherError, InputClosedError

logger = logging.getLogger(__name__)

BANNER = "=== Rust 学习示例程序 ==="
MENU_PROMPT = "请选择您想学习的知识点:"
QUIT_LINE = f"{QUIT_TOKEN}. 退出程序"
CONTINUE_PROMPT = "\n按回车键继续..."
INVALID_CHOICE = "无效的选择，请重新输入。\n"
FAREWELL = "感谢使用 Rust 学习示例程序！再见！"


class DispatcherState(enum.Enum):
    PROMPTING = "prompting"
    EXECUTING = "executing"
    TERMINATED = "terminated"


class Dispatcher:
    """Render the catalog, read a choice, run the matching lesson, repeat.

    Parameters:
        catalog: The lessons on offer. Defaults to the ten built-in lessons.
        stdin: Line-oriented text stream that selections are read from.
        stdout: Stream the menu, prompts and lesson output are written to.
        color: Wrap the banner and status messages in terminal colors.
    """

    def __init__(
        self,
        catalog: LessonCatalog = DEFAULT_CATALOG,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        color: bool = False,
    ) -> None:
        self._catalog = catalog
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._color = color
        self._state = DispatcherState.PROMPTING

    @property
    def state(self) -> DispatcherState:
        return self._state

    @property
    def catalog(self) -> LessonCatalog:
        return self._catalog

    def start(self) -> None:
        """Run the menu loop until the quit token is entered.

        Raises:
            InputClosedError: when standard input is exhausted or fails.
            DispatcherError: when the dispatcher has already terminated.
        """
        if self._state is DispatcherState.TERMINATED:
            raise DispatcherError("Dispatcher has already terminated.")

        while True:
            self.render_menu()
            choice = self.read_line().strip()
            logger.debug("selection received: %r", choice)

            if choice in QUIT_TOKENS:
                self._emit(self._paint(FAREWELL, fg("green")))
                self._state = DispatcherState.TERMINATED
                logger.info("quit token received, leaving menu loop")
                return

            entry = self._catalog.resolve(choice)
            if entry is None:
                logger.info("invalid menu choice %r", choice)
                self._emit(self._paint(INVALID_CHOICE, fg("yellow")))
                continue

            self._run(entry)
            self._emit(CONTINUE_PROMPT)
            # The continue read only paces output; its content is discarded.
            self.read_line()

    def render_menu(self) -> None:
        self._emit(self._paint(BANNER, attr("bold")))
        self._emit(MENU_PROMPT)
        for entry in self._catalog:
            self._emit(entry.menu_line())
        self._emit(QUIT_LINE)

    def read_line(self) -> str:
        """Block until one full line of input is available and return it.

        Raises:
            InputClosedError: when the stream reports end-of-file or errors.
        """
        self._stdout.flush()
        try:
            line = self._stdin.readline()
        except (OSError, ValueError) as exc:
            raise InputClosedError(str(exc)) from exc
        if line == "":
            raise InputClosedError("end of input stream")
        return line

    def _run(self, entry: LessonEntry) -> None:
        logger.debug("dispatching lesson %s (%s)", entry.identifier, entry.title)
        self._state = DispatcherState.EXECUTING
        try:
            with redirect_stdout(self._stdout):
                entry.action()
        finally:
            self._state = DispatcherState.PROMPTING

    def _emit(self, text: str) -> None:
        print(text, file=self._stdout)

    def _paint(self, text: str, style: str) -> str:
        if not self._color:
            return text
        return stylize(text, style)
