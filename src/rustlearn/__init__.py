"""Interactive Rust language lessons for the terminal.

The package exposes the lesson catalog and the dispatcher that drives the
numbered menu. ``python -m rustlearn`` (or the ``rustlearn`` console script)
starts the menu on the process streams.
"""

from __future__ import annotations

from .catalog import (
    DEFAULT_CATALOG,
    LESSONS,
    QUIT_TOKENS,
    LessonCatalog,
    LessonEntry,
)
from .dispatcher import Dispatcher, DispatcherState
from .exceptions import (
    CatalogError,
    DispatcherError,
    InputClosedError,
    RustLearnError,
)

__all__ = [
    "DEFAULT_CATALOG",
    "LESSONS",
    "QUIT_TOKENS",
    "LessonCatalog",
    "LessonEntry",
    "Dispatcher",
    "DispatcherState",
    "CatalogError",
    "DispatcherError",
    "InputClosedError",
    "RustLearnError",
]

__version__ = "0.1.0"
