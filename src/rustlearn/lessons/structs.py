"""Lesson 3: structs, methods and associated functions.

Named-field structs map to dataclasses, tuple structs to ``NamedTuple``
and unit structs to a field-less dataclass. Struct update syntax
(``..user1``) maps to :func:`dataclasses.replace`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import NamedTuple

from ..formatting import display


@dataclass
class Rectangle:
    width: int
    height: int

    def area(self) -> int:
        return self.width * self.height

    def can_hold(self, other: "Rectangle") -> bool:
        return self.width >= other.width and self.height >= other.height

    def resize(self, new_width: int, new_height: int) -> None:
        self.width = new_width
        self.height = new_height

    @classmethod
    def square(cls, size: int) -> "Rectangle":
        return cls(width=size, height=size)

    @classmethod
    def default(cls) -> "Rectangle":
        return cls(width=100, height=100)


@dataclass(frozen=True)
class User:
    username: str
    email: str
    sign_in_count: int
    active: bool


def demo_1_definition() -> None:
    print("\n--- 结构体定义与实例化 ---")

    @dataclass
    class Person:
        name: str
        age: int
        is_student: bool

    person1 = Person(name="张三", age=25, is_student=True)
    print(f"姓名: {person1.name}")
    print(f"年龄: {person1.age}")
    print(f"是否是学生: {display(person1.is_student)}")

    person2 = Person(name="李四", age=30, is_student=False)
    person2.age = 31
    person2.is_student = True

    print("\n修改后的信息:")
    print(f"姓名: {person2.name}")
    print(f"年龄: {person2.age}")
    print(f"是否是学生: {display(person2.is_student)}")


def demo_2_tuple_structs() -> None:
    print("\n--- 元组结构体 ---")

    class Point(NamedTuple):
        x: int
        y: int

    class Color(NamedTuple):
        r: int
        g: int
        b: int

    origin = Point(0, 0)
    red = Color(255, 0, 0)
    blue = Color(0, 0, 255)
    print(f"原点坐标: ({origin[0]}, {origin[1]})")
    print(f"红色 RGB 值: ({red[0]}, {red[1]}, {red[2]})")
    print(f"蓝色 RGB 值: ({blue[0]}, {blue[1]}, {blue[2]})")

    # NamedTuple is immutable, so "mutating" a field builds a new value.
    point = Point(10, 20)
    point = point._replace(x=15)
    point = point._replace(y=25)
    print(f"修改后的坐标: ({point[0]}, {point[1]})")


def demo_3_unit_structs() -> None:
    print("\n--- 单元结构体 ---")

    @dataclass(frozen=True)
    class Unit:
        pass

    unit = Unit()
    print(f"单元结构体已创建: {type(unit).__name__}")


def demo_4_methods() -> None:
    print("\n--- 结构体方法 ---")

    rect1 = Rectangle(width=30, height=50)
    print(f"矩形面积: {rect1.area()}")

    rect2 = Rectangle(width=20, height=40)
    print(f"rect1 可以容纳 rect2: {display(rect1.can_hold(rect2))}")

    rect3 = Rectangle(width=10, height=20)
    print(f"修改前的面积: {rect3.area()}")
    rect3.resize(15, 25)
    print(f"修改后的面积: {rect3.area()}")


def demo_5_associated_functions() -> None:
    print("\n--- 关联函数 ---")

    square = Rectangle.square(20)
    print(f"正方形 - 宽: {square.width}, 高: {square.height}, 面积: {square.area()}")

    default_rect = Rectangle.default()
    print(
        f"默认矩形 - 宽: {default_rect.width}, 高: {default_rect.height}, "
        f"面积: {default_rect.area()}"
    )


def demo_6_field_visibility() -> None:
    """Inside the defining module every field is reachable."""
    print("\n--- 结构体字段可见性 ---")
    rect = Rectangle(width=50, height=30)
    print(f"访问私有字段: 宽 = {rect.width}, 高 = {rect.height}")


def demo_7_update_syntax() -> None:
    print("\n--- 结构体更新语法 ---")

    user1 = User(
        username="alice",
        email="alice@example.com",
        sign_in_count=1,
        active=True,
    )
    user2 = dataclasses.replace(user1, email="bob@example.com", username="bob")

    print(f"user2 用户名: {user2.username}")
    print(f"user2 邮箱: {user2.email}")
    print(f"user2 登录次数: {user2.sign_in_count}")
    print(f"user2 是否活跃: {display(user2.active)}")


def demo_8_destructuring() -> None:
    print("\n--- 解构结构体 ---")

    rect = Rectangle(width=40, height=60)

    width, height = rect.width, rect.height
    print(f"解构后的宽: {width}, 解构后的高: {height}")

    match rect:
        case Rectangle(width=0):
            print("宽度为 0")
        case Rectangle(height=0):
            print("高度为 0")
        case Rectangle(width=w, height=h):
            print(f"在 match 中解构: 宽 = {w}, 高 = {h}")

    match rect:
        case Rectangle(width=only_width):
            print(f"只解构宽度: {only_width}")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第3课：结构体 ===")
    print("本示例将介绍 Rust 中的结构体定义、实例化、方法和关联函数等知识。\n")
    demo_1_definition()
    demo_2_tuple_structs()
    demo_3_unit_structs()
    demo_4_methods()
    demo_5_associated_functions()
    demo_6_field_visibility()
    demo_7_update_syntax()
    demo_8_destructuring()


if __name__ == "__main__":
    run_all()
