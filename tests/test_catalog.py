from __future__ import annotations

import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rustlearn import catalog
from rustlearn.catalog import DEFAULT_CATALOG, LessonCatalog, LessonEntry
from rustlearn.exceptions import CatalogError, RustLearnError


def _noop() -> None:
    pass


class LessonCatalogTests(unittest.TestCase):
    def test_default_catalog_lists_ten_lessons_in_order(self) -> None:
        self.assertEqual(
            DEFAULT_CATALOG.identifiers,
            ("1", "2", "3", "4", "5", "6", "7", "8", "9", "10"),
        )
        self.assertEqual(len(DEFAULT_CATALOG), 10)

    def test_menu_lines_pair_identifier_and_title(self) -> None:
        lines = [entry.menu_line() for entry in DEFAULT_CATALOG]
        self.assertEqual(lines[0], "1. 变量和数据类型 (Variables and Data Types)")
        self.assertEqual(lines[9], "10. 生命周期 (Lifetimes)")

    def test_resolve_is_exact(self) -> None:
        self.assertIs(DEFAULT_CATALOG.resolve("5"), catalog.LESSONS[4])
        self.assertIsNone(DEFAULT_CATALOG.resolve(" 5"))
        self.assertIsNone(DEFAULT_CATALOG.resolve("05"))
        self.assertIsNone(DEFAULT_CATALOG.resolve("99"))
        self.assertIsNone(DEFAULT_CATALOG.resolve(""))

    def test_contains(self) -> None:
        self.assertIn("10", DEFAULT_CATALOG)
        self.assertNotIn("q", DEFAULT_CATALOG)

    def test_iteration_preserves_insertion_order(self) -> None:
        entries = [LessonEntry("b", "B", _noop), LessonEntry("a", "A", _noop)]
        self.assertEqual([e.identifier for e in LessonCatalog(entries)], ["b", "a"])

    def test_rejects_duplicate_identifiers(self) -> None:
        entries = [LessonEntry("1", "One", _noop), LessonEntry("1", "Again", _noop)]
        with self.assertRaises(CatalogError):
            LessonCatalog(entries)

    def test_rejects_quit_token_collision(self) -> None:
        for token in ("q", "Q"):
            with self.subTest(token=token):
                with self.assertRaises(CatalogError):
                    LessonCatalog([LessonEntry(token, "Quit?", _noop)])

    def test_rejects_blank_or_padded_identifier(self) -> None:
        for token in ("", " 1", "2 "):
            with self.subTest(token=token):
                with self.assertRaises(CatalogError):
                    LessonCatalog([LessonEntry(token, "Bad", _noop)])

    def test_catalog_error_is_a_package_error(self) -> None:
        self.assertTrue(issubclass(CatalogError, RustLearnError))

    def test_entries_are_frozen(self) -> None:
        entry = DEFAULT_CATALOG.resolve("1")
        assert entry is not None
        with self.assertRaises(AttributeError):
            entry.title = "changed"  # type: ignore[misc]

    def test_source_iterable_changes_do_not_leak_in(self) -> None:
        entries = [LessonEntry("1", "One", _noop)]
        lessons = LessonCatalog(entries)
        entries.append(LessonEntry("2", "Two", _noop))
        self.assertEqual(lessons.identifiers, ("1",))
        self.assertIsNone(lessons.resolve("2"))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
