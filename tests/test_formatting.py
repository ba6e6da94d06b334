from __future__ import annotations

import enum
import sys
import unittest
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rustlearn.formatting import (
    debug,
    debug_struct,
    debug_tuple,
    display,
    format_duration,
    some,
)


class Shade(enum.Enum):
    LIGHT = 1
    DARK = 2
    PITCH_BLACK = 3
    Dusk = 4


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Person:
    name: str
    age: int


class DisplayTests(unittest.TestCase):
    def test_booleans_are_lowercase(self) -> None:
        self.assertEqual(display(True), "true")
        self.assertEqual(display(False), "false")

    def test_integral_floats_drop_the_fraction(self) -> None:
        self.assertEqual(display(6.0), "6")
        self.assertEqual(display(-0.0), "-0")

    def test_floats_use_shortest_round_trip(self) -> None:
        self.assertEqual(display(3.14), "3.14")
        self.assertEqual(display(22.360679774997898), "22.360679774997898")

    def test_small_floats_avoid_exponent_notation(self) -> None:
        self.assertEqual(display(1e-7), "0.0000001")

    def test_special_floats(self) -> None:
        self.assertEqual(display(float("nan")), "NaN")
        self.assertEqual(display(float("inf")), "inf")
        self.assertEqual(display(float("-inf")), "-inf")


class DebugTests(unittest.TestCase):
    def test_scalars(self) -> None:
        self.assertEqual(debug(None), "None")
        self.assertEqual(debug(42), "42")
        self.assertEqual(debug(2.0), "2.0")
        self.assertEqual(debug('say "hi"\n'), '"say \\"hi\\"\\n"')

    def test_collections(self) -> None:
        self.assertEqual(debug([1, "x"]), '[1, "x"]')
        self.assertEqual(debug((1,)), "(1,)")
        self.assertEqual(debug(("a", 2)), '("a", 2)')
        self.assertEqual(debug({"one": 1}), '{"one": 1}')
        self.assertEqual(debug({3, 1, 2}), "{1, 2, 3}")
        self.assertEqual(debug([]), "[]")

    def test_enum_member_renders_its_variant_name(self) -> None:
        self.assertEqual(debug(Shade.DARK), "Dark")
        self.assertEqual(debug(Shade.PITCH_BLACK), "PitchBlack")
        self.assertEqual(debug(Shade.Dusk), "Dusk")

    def test_dataclass_renders_as_struct(self) -> None:
        self.assertEqual(debug(Point(1, 2)), "Point { x: 1, y: 2 }")

    def test_dataclass_with_name_field_renders_as_struct(self) -> None:
        self.assertEqual(debug(Person("bo", 3)), 'Person { name: "bo", age: 3 }')
        self.assertEqual(debug([Person("al", 7)]), '[Person { name: "al", age: 7 }]')

    def test_debug_hook_wins(self) -> None:
        class Custom:
            def __rust_debug__(self) -> str:
                return "Custom!"

        self.assertEqual(debug([Custom()]), "[Custom!]")

    def test_struct_and_tuple_helpers(self) -> None:
        self.assertEqual(debug_struct("Unit"), "Unit")
        self.assertEqual(debug_struct("User", name="bo", age=3), 'User { name: "bo", age: 3 }')
        self.assertEqual(debug_tuple("Move", 1, 2), "Move(1, 2)")
        self.assertEqual(
            debug_struct("Tagged", struct_name="x", variant_name=1),
            'Tagged { struct_name: "x", variant_name: 1 }',
        )

    def test_some(self) -> None:
        self.assertEqual(some(5), "Some(5)")
        self.assertEqual(some("a"), 'Some("a")')
        self.assertEqual(some(None), "None")


class FormatDurationTests(unittest.TestCase):
    def test_picks_largest_whole_unit(self) -> None:
        self.assertEqual(format_duration(2), "2s")
        self.assertEqual(format_duration(0.01234), "12.34ms")
        self.assertEqual(format_duration(1.5e-6), "1.5µs")
        self.assertEqual(format_duration(5e-7), "500ns")

    def test_zero_and_negative_clamp_to_zero(self) -> None:
        self.assertEqual(format_duration(0), "0ns")
        self.assertEqual(format_duration(-1), "0ns")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
