"""Lesson 5: pattern matching in every position Rust allows it."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class Coin(enum.Enum):
    PENNY = 1
    NICKEL = 5
    DIME = 10
    QUARTER = 25


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Point3:
    x: int
    y: int
    z: int


def grade(score: int) -> str:
    match score:
        case s if 0 <= s <= 59:
            return "不及格"
        case s if 60 <= s <= 79:
            return "及格"
        case s if 80 <= s <= 89:
            return "良好"
        case s if 90 <= s <= 100:
            return "优秀"
        case _:
            return "无效成绩"


def classify_char(c: str) -> str:
    match c:
        case _ if "A" <= c <= "Z":
            return f"{c} 是大写字母"
        case _ if "a" <= c <= "z":
            return f"{c} 是小写字母"
        case _ if "0" <= c <= "9":
            return f"{c} 是数字"
        case _:
            return f"{c} 是其他字符"


def demo_1_match_basics() -> None:
    """``match`` over an enum; every variant must be covered."""
    print("\n--- match 表达式基础 ---")

    def value_in_cents(coin: Coin) -> int:
        match coin:
            case Coin.PENNY:
                return 1
            case Coin.NICKEL:
                return 5
            case Coin.DIME:
                return 10
            case Coin.QUARTER:
                return 25
        raise ValueError(coin)

    print(f"便士的价值: {value_in_cents(Coin.PENNY)}")
    print(f"镍币的价值: {value_in_cents(Coin.NICKEL)}")
    print(f"一角硬币的价值: {value_in_cents(Coin.DIME)}")
    print(f"二角五分硬币的价值: {value_in_cents(Coin.QUARTER)}")


def demo_2_destructuring() -> None:
    print("\n--- 模式匹配中的解构 ---")

    p = Point(x=10, y=20)
    match p:
        case Point(x=x, y=y):
            print(f"解构结构体: x = {x}, y = {y}")

    match p:
        case Point(x=0, y=y):
            print(f"x 坐标为 0, y = {y}")
        case Point(x=x, y=0):
            print(f"y 坐标为 0, x = {x}")
        case Point(x=x, y=y):
            print(f"普通点: ({x}, {y})")

    msg: tuple = ("Move", {"x": 30, "y": 40})
    match msg:
        case ("Quit", _):
            print("退出消息")
        case ("Move", {"x": x, "y": y}):
            print(f"移动到: ({x}, {y})")
        case ("Write", text):
            print(f"写入文本: {text}")
        case ("ChangeColor", (r, g, b)):
            print(f"更改为颜色: RGB({r}, {g}, {b})")


def demo_3_ranges() -> None:
    print("\n--- 模式匹配中的范围匹配 ---")
    for score in (50, 75, 85, 95, 101):
        print(f"成绩 {score}: {grade(score)}")
    print(classify_char("R"))


def demo_4_wildcards() -> None:
    print("\n--- 模式匹配中的通配符 ---")

    p = Point3(x=1, y=2, z=3)
    match p:
        case Point3(x=x):
            print(f"只关心 x 坐标: x = {x}")

    match p:
        case Point3(x=0, y=y, z=z):
            print(f"x 为 0: y = {y}, z = {z}")
        case Point3(x=x, y=0, z=z):
            print(f"y 为 0: x = {x}, z = {z}")
        case Point3(x=x, y=y, z=0):
            print(f"z 为 0: x = {x}, y = {y}")
        case _:
            print("所有坐标都不为 0")

    color: object = ("Custom", 255, 0, 0)
    match color:
        case "Red":
            print("红色")
        case "Green":
            print("绿色")
        case "Blue":
            print("蓝色")
        case ("Custom", r, g, b):
            print(f"自定义颜色: RGB({r}, {g}, {b})")
        case _:
            print("其他颜色")


def demo_5_if_let() -> None:
    print("\n--- if let 表达式 ---")

    some_number: Optional[int] = 42
    absent_number: Optional[int] = None

    match some_number:
        case int(n):
            print(f"有值: {n}")
        case _:
            pass

    if (n := some_number) is not None:
        print(f"使用 if let 有值: {n}")

    if absent_number is not None:
        print("这个不会执行，因为 absent_number 是 None")
    else:
        print("absent_number 是 None")

    coin = Coin.PENNY
    if coin is Coin.PENNY:
        print("找到一个便士！")


def demo_6_while_let() -> None:
    print("\n--- while let 表达式 ---")

    stack = [1, 2, 3, 4, 5]
    print("弹出栈中的元素:")
    while stack:
        top = stack.pop()
        print(f"弹出: {top}")

    optional_numbers: list[Optional[int]] = [1, 2, None, 4, None, 6]
    print("\n处理包含 None 的迭代器:")
    while optional_numbers:
        optional = optional_numbers.pop()
        if optional is not None:
            print(f"处理数字: {optional}")
        else:
            print("遇到 None")


def demo_7_for_patterns() -> None:
    print("\n--- for 循环中的模式 ---")

    v = [10, 20, 30, 40, 50]
    print("遍历数组并获取索引:")
    for index, value in enumerate(v):
        print(f"索引 {index}: 值 {value}")

    positions = [(1, 2), (3, 4), (5, 6)]
    print("\n遍历元组数组:")
    for x, y in positions:
        print(f"位置: ({x}, {y})")


def demo_8_let_patterns() -> None:
    print("\n--- let 语句中的模式 ---")

    x = 5
    print(f"x = {x}")

    a, b = 10, 20
    print(f"解构元组: a = {a}, b = {b}")

    p = Point(x=30, y=40)
    match p:
        case Point(x=px, y=py):
            print(f"解构结构体: px = {px}, py = {py}")
    match p:
        case Point(x=x, y=y):
            print(f"简化解构: x = {x}, y = {y}")

    _, c = 50, 60
    print(f"忽略第一个值: c = {c}")


def demo_9_parameter_patterns() -> None:
    print("\n--- 函数参数中的模式 ---")

    def print_coordinates(point: tuple[int, int]) -> None:
        x, y = point
        print(f"坐标: ({x}, {y})")

    print_coordinates((100, 200))

    @dataclass(frozen=True)
    class Rectangle:
        width: int
        height: int

    def area(rect: Rectangle) -> int:
        match rect:
            case Rectangle(width=width, height=height):
                return width * height
        raise TypeError(rect)

    print(f"矩形面积: {area(Rectangle(width=10, height=20))}")

    def process_option(option: Optional[int]) -> None:
        match option:
            case None:
                print("没有值")
            case value:
                print(f"处理值: {value}")

    process_option(42)
    process_option(None)


def demo_10_advanced() -> None:
    """Match guards, ``@`` bindings and nested destructuring."""
    print("\n--- 高级模式匹配技巧 ---")

    num: Optional[int] = 4
    match num:
        case int(x) if x < 5:
            print(f"小于 5 的数字: {x}")
        case int(x):
            print(f"大于或等于 5 的数字: {x}")
        case None:
            print("没有数字")

    # ``id_variable @ 3..=7`` binds and tests in one step; a capture with a
    # guard is the Python spelling.
    msg = {"Hello": {"id": 5}}
    match msg:
        case {"Hello": {"id": int(id_variable)}} if 3 <= id_variable <= 7:
            print(f"找到 ID 在范围内: {id_variable}")
        case {"Hello": {"id": int(other)}} if 10 <= other <= 12:
            print("找到 ID 在 10-12 范围内")
        case {"Hello": {"id": other}}:
            print(f"找到其他 ID: {other}")

    @dataclass(frozen=True)
    class Rectangle:
        top_left: Point
        bottom_right: Point

    rect = Rectangle(top_left=Point(x=0, y=10), bottom_right=Point(x=10, y=0))
    match rect:
        case Rectangle(
            top_left=Point(x=left, y=top),
            bottom_right=Point(x=right, y=bottom),
        ):
            print(f"矩形: 左上角({left}, {top}), 右下角({right}, {bottom})")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第5课：模式匹配 ===")
    print("本示例将介绍 Rust 中的模式匹配语法和应用场景。\n")
    demo_1_match_basics()
    demo_2_destructuring()
    demo_3_ranges()
    demo_4_wildcards()
    demo_5_if_let()
    demo_6_while_let()
    demo_7_for_patterns()
    demo_8_let_patterns()
    demo_9_parameter_patterns()
    demo_10_advanced()


if __name__ == "__main__":
    run_all()
