"""Lesson 1: variables, mutability, primitive types and casts.

Each ``demo_*`` function covers one topic and prints what the equivalent Rust
snippet prints. Python has no ``let``/``let mut`` distinction, so mutability
is illustrated by rebinding and by a frozen dataclass that rejects writes.
"""

from __future__ import annotations

import dataclasses
import math

from ..formatting import display, rprint

MAX_SCORE = 100
PI = 3.14159


def add(a: int, b: int) -> int:
    return a + b


def as_u32(value: int) -> int:
    """Reinterpret an integer the way ``as u32`` does (wrap modulo 2**32)."""
    return value % (1 << 32)


def as_i32(value: float | bool) -> int:
    """Saturating float-to-int cast; ``bool`` maps to 0 or 1."""
    if isinstance(value, bool):
        return int(value)
    if math.isnan(value):
        return 0
    return max(-(1 << 31), min((1 << 31) - 1, math.trunc(value)))


def demo_1_mutability() -> None:
    """Immutable bindings, ``mut`` bindings and shadowing."""
    print("\n--- 变量的可变性与不可变性 ---")

    @dataclasses.dataclass(frozen=True)
    class Binding:
        value: int

    x = Binding(5)
    print(f"不可变变量 x = {x.value}")
    try:
        x.value = 10  # type: ignore[misc]
    except dataclasses.FrozenInstanceError:
        pass  # rejected, like assigning twice to an immutable variable.

    y = 5
    print(f"可变变量 y = {y}")
    y = 10
    print(f"修改后，可变变量 y = {y}")

    y = y + 5  # shadowing: a new binding reusing the name.
    print(f"变量遮蔽后，y = {y}")


def demo_2_primitive_types() -> None:
    """Signed and unsigned integers, floats, booleans and chars."""
    print("\n--- 基本数据类型 ---")

    integers = [
        ("i32", -42),
        ("u32", 42),
        ("i64", -10_000_000_000),
        ("u64", 10_000_000_000),
        ("isize", -100),
        ("usize", 100),
    ]
    print("整数类型：")
    for name, value in integers:
        print(f"{name}: {value}")

    print("\n浮点数类型：")
    print(f"f32: {display(3.14)}")
    print(f"f64: {display(3.14159265359)}")

    print("\n布尔值类型：")
    rprint("true:", True)
    rprint("false:", False)

    # A Rust char is one Unicode scalar value, which is a length-1 str here.
    print("\n字符类型：")
    for ch in ("a", "中", "😊"):
        print(f"'{ch}': {ch}")


def demo_3_type_annotations() -> None:
    """Inferred versus explicitly annotated bindings."""
    print("\n--- 类型标注 ---")

    inferred_integer = 42
    inferred_float = 3.14
    inferred_boolean = True
    print("编译器推断的类型：")
    print(f"inferred_integer = {inferred_integer}, 类型: i32")
    print(f"inferred_float = {display(inferred_float)}, 类型: f64")
    print(f"inferred_boolean = {display(inferred_boolean)}, 类型: bool")

    explicit_integer: int = 42
    explicit_float: float = 3.14
    print("\n显式标注的类型：")
    print(f"explicit_integer = {explicit_integer}, 类型: i64")
    print(f"explicit_float = {display(explicit_float)}, 类型: f32")

    print("\n调用 add 函数：")
    print(f"10 + 20 = {add(10, 20)}")


def demo_4_type_conversions() -> None:
    """Explicit ``as`` casts between numeric, bool and char types."""
    print("\n--- 类型转换 ---")

    a = 100
    print(f"i32 {a} 转换为 u32: {as_u32(a)}")

    c = 42
    print(f"i32 {c} 转换为 f64: {display(float(c))}")

    e = 3.99
    print(f"f64 {display(e)} 转换为 i32: {as_i32(e)}")

    print(f"bool true 转换为 i32: {as_i32(True)}")
    print(f"bool false 转换为 i32: {as_i32(False)}")

    print(f"char 'A' 转换为 u32 (Unicode 码点): {ord('A')}")


def demo_5_constants_and_statics() -> None:
    """Module constants and a counter standing in for a ``static mut``."""
    print("\n--- 常量和静态变量 ---")

    print(f"常量 MAX_SCORE = {MAX_SCORE}")
    print(f"常量 PI = {display(PI)}")

    # Local to the call, unlike a Rust static; every run prints 1 then 2.
    counter = 0
    counter += 1
    print(f"静态变量 COUNTER = {counter}")
    counter += 1
    print(f"更新后，静态变量 COUNTER = {counter}")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第1课：变量和数据类型 ===")
    print("本示例将介绍 Rust 中的变量声明、可变性、基本数据类型和类型转换。\n")
    demo_1_mutability()
    demo_2_primitive_types()
    demo_3_type_annotations()
    demo_4_type_conversions()
    demo_5_constants_and_statics()


if __name__ == "__main__":
    run_all()
