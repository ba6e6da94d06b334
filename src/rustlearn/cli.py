"""Console entry points for the lesson menu."""

from __future__ import annotations

import sys

from .dispatcher import Dispatcher
from .exceptions import InputClosedError
from .log import setup_logging

EXIT_OK = 0
EXIT_INPUT_CLOSED = 1
EXIT_INTERRUPTED = 130


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on the process streams.

    The program has no options; ``argv`` is accepted so the signature
    matches the other console entry points and is otherwise ignored.
    """

    del argv
    logger = setup_logging()
    dispatcher = Dispatcher(color=sys.stdout.isatty())
    try:
        dispatcher.start()
    except InputClosedError as exc:
        logger.error("%s", exc)
        return EXIT_INPUT_CLOSED
    except KeyboardInterrupt:
        print(file=sys.stdout)
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
