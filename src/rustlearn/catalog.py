"""The fixed, ordered table of lessons offered by the menu.

The catalog is built once at import time and never changes afterwards. The
dispatcher receives it as a constructor argument instead of reaching for a
module global, which keeps tests free to inject a catalog of fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Iterator, Optional

from .exceptions import CatalogError
from .lessons import (
    common_collections,
    enums,
    error_handling,
    functions_control_flow,
    generics,
    lifetimes,
    packages_modules,
    pattern_matching,
    structs,
    variables,
)

QUIT_TOKENS = frozenset({"q", "Q"})
# Rendered in the menu after the lessons; ``QUIT_TOKENS`` holds every accepted spelling.
QUIT_TOKEN = "q"

LessonAction = Callable[[], None]


@dataclass(frozen=True)
class LessonEntry:
    """A single selectable lesson: menu identifier, title and printer."""

    identifier: str
    title: str
    action: LessonAction

    def menu_line(self) -> str:
        return f"{self.identifier}. {self.title}"


class LessonCatalog:
    """Immutable ordered mapping from identifier to :class:`LessonEntry`."""

    def __init__(self, entries: Iterable[LessonEntry]) -> None:
        ordered = tuple(entries)
        index: dict[str, LessonEntry] = {}
        for entry in ordered:
            if not entry.identifier or entry.identifier != entry.identifier.strip():
                raise CatalogError(
                    f"Lesson identifier {entry.identifier!r} must be a non-empty token."
                )
            if entry.identifier in QUIT_TOKENS:
                raise CatalogError(
                    f"Lesson identifier {entry.identifier!r} collides with the quit token."
                )
            if entry.identifier in index:
                raise CatalogError(f"Duplicate lesson identifier {entry.identifier!r}.")
            index[entry.identifier] = entry
        self._entries = ordered
        self._index = MappingProxyType(index)

    def __iter__(self) -> Iterator[LessonEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index

    @property
    def identifiers(self) -> tuple[str, ...]:
        return tuple(entry.identifier for entry in self._entries)

    def resolve(self, token: str) -> Optional[LessonEntry]:
        """Return the entry registered under ``token``, or ``None``.

        Matching is exact; callers are expected to strip the token first.
        """
        return self._index.get(token)


LESSONS: tuple[LessonEntry, ...] = (
    LessonEntry("1", "变量和数据类型 (Variables and Data Types)", variables.run_all),
    LessonEntry("2", "函数和流程控制 (Functions and Control Flow)", functions_control_flow.run_all),
    LessonEntry("3", "结构体 (Structs)", structs.run_all),
    LessonEntry("4", "枚举 (Enums)", enums.run_all),
    LessonEntry("5", "模式匹配 (Pattern Matching)", pattern_matching.run_all),
    LessonEntry("6", "常见集合及其操作 (Collections)", common_collections.run_all),
    LessonEntry("7", "包和模块 (Packages and Modules)", packages_modules.run_all),
    LessonEntry("8", "错误处理 (Error Handling)", error_handling.run_all),
    LessonEntry("9", "泛型 (Generics)", generics.run_all),
    LessonEntry("10", "生命周期 (Lifetimes)", lifetimes.run_all),
)

DEFAULT_CATALOG = LessonCatalog(LESSONS)
