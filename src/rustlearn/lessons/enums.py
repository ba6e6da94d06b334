"""Lesson 4: enums, payload-carrying variants, ``Option`` and ``Result``.

C-like enums map to :class:`enum.Enum`; variants that carry data map to a
small family of dataclasses joined in a ``Union`` and taken apart with
``match``. ``Option<T>`` is ``Optional[T]``, and ``Result<T, E>`` is the
``Ok``/``Err`` pair defined below.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from ..formatting import display

T = TypeVar("T")
E = TypeVar("E")


class Direction(enum.Enum):
    NORTH = enum.auto()
    EAST = enum.auto()
    SOUTH = enum.auto()
    WEST = enum.auto()


class HttpStatusCode(enum.IntEnum):
    OK = 200
    CREATED = 201
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    NOT_FOUND = 404
    INTERNAL_SERVER_ERROR = 500


class Coin(enum.Enum):
    PENNY = enum.auto()
    NICKEL = enum.auto()
    DIME = enum.auto()
    QUARTER = enum.auto()


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class Move:
    x: int
    y: int


@dataclass(frozen=True)
class Write:
    text: str


@dataclass(frozen=True)
class ChangeColor:
    r: int
    g: int
    b: int


Message = Union[Quit, Move, Write, ChangeColor]


@dataclass(frozen=True)
class V4:
    a: int
    b: int
    c: int
    d: int


@dataclass(frozen=True)
class V6:
    address: str


IpAddr = Union[V4, V6]


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]


def description(msg: Message) -> str:
    match msg:
        case Quit():
            return "退出消息"
        case Move(x=x, y=y):
            return f"移动到坐标 ({x}, {y})"
        case Write(text=text):
            return f"写入文本: {text}"
        case ChangeColor(r=r, g=g, b=b):
            return f"更改为 RGB 颜色({r}, {g}, {b})"
    raise TypeError(f"not a message: {msg!r}")


def print_direction(direction: Direction) -> None:
    match direction:
        case Direction.NORTH:
            print("向北")
        case Direction.EAST:
            print("向东")
        case Direction.SOUTH:
            print("向南")
        case Direction.WEST:
            print("向西")


def print_message_type(msg: Message) -> None:
    print(f"消息类型: {type(msg).__name__}")


def print_ip_address(ip: IpAddr) -> None:
    match ip:
        case V4(a, b, c, d):
            print(f"IPv4 地址: {a}.{b}.{c}.{d}")
        case V6(address):
            print(f"IPv6 地址: {address}")


def process_input(value: int | str | bool) -> None:
    # bool is checked first because it is a subclass of int.
    match value:
        case bool():
            print(f"布尔输入: {display(value)}")
        case int():
            print(f"数字输入: {value}")
        case str():
            print(f"文本输入: {value}")


def unwrap(option: Optional[T]) -> T:
    if option is None:
        raise ValueError("called `Option::unwrap()` on a `None` value")
    return option


def unwrap_or(option: Optional[T], default: T) -> T:
    return default if option is None else option


def divide(a: int, b: int) -> Result[int, str]:
    if b == 0:
        return Err("除数不能为零")
    # Rust integer division truncates toward zero.
    return Ok(int(a / b))


def calculate(a: int, b: int) -> Result[int, str]:
    """Double ``a / b``, returning the division error unchanged (the ``?`` operator)."""
    intermediate = divide(a, b)
    if isinstance(intermediate, Err):
        return intermediate
    return Ok(intermediate.value * 2)


def result_text(result: Result[int, str]) -> str:
    match result:
        case Ok(value):
            return str(value)
        case Err(error):
            return error
    raise TypeError(f"not a result: {result!r}")


def demo_1_definition() -> None:
    print("\n--- 枚举定义与实例化 ---")
    print("枚举实例化与匹配:")
    for direction in (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST):
        print_direction(direction)


def demo_2_variants() -> None:
    print("\n--- 枚举的变体 ---")
    print(f"HTTP OK 状态码: {int(HttpStatusCode.OK)}")
    print(f"HTTP Not Found 状态码: {int(HttpStatusCode.NOT_FOUND)}")

    print("\n复杂枚举类型:")
    for msg in (Quit(), Move(x=10, y=20), Write("Hello, Rust!"), ChangeColor(255, 0, 0)):
        print_message_type(msg)


def demo_3_pattern_matching() -> None:
    print("\n--- 枚举的模式匹配 ---")

    def value_in_cents(coin: Coin) -> int:
        match coin:
            case Coin.PENNY:
                print("幸运便士！")
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


def demo_4_payloads() -> None:
    print("\n--- 带关联数据的枚举 ---")
    print_ip_address(V4(127, 0, 0, 1))
    print_ip_address(V6("::1"))

    print("\n用户输入处理:")
    process_input(42)
    process_input("Hello")
    process_input(True)


def demo_5_methods() -> None:
    print("\n--- 为枚举实现方法 ---")
    messages = (Quit(), Move(x=10, y=20), Write("Hello, Rust!"), ChangeColor(255, 0, 0))
    for number, msg in enumerate(messages, start=1):
        print(f"消息 {number} 描述: {description(msg)}")


def demo_6_option() -> None:
    print("\n--- Option 枚举 ---")

    some_number: Optional[int] = 5
    some_string: Optional[str] = "Hello"
    absent_number: Optional[int] = None

    print("Option 值处理:")
    for option, label in ((some_number, "有值"), (some_string, "有字符串值"), (absent_number, "有值")):
        if option is None:
            print("无值")
        else:
            print(f"{label}: {option}")

    print(f"使用 unwrap 获取的值: {unwrap(some_number)}")
    print(f"使用 unwrap_or 获取的值: {unwrap_or(absent_number, 0)}")


def demo_7_result() -> None:
    print("\n--- Result 枚举 ---")
    print(f"10 / 2 = {result_text(divide(10, 2))}")
    print(f"10 / 0 = {result_text(divide(10, 0))}")
    print(f"calculate(10, 2) = {result_text(calculate(10, 2))}")
    print(f"calculate(10, 0) = {result_text(calculate(10, 0))}")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第4课：枚举 ===")
    print("本示例将介绍 Rust 中的枚举定义、模式匹配、关联数据和方法等知识。\n")
    demo_1_definition()
    demo_2_variants()
    demo_3_pattern_matching()
    demo_4_payloads()
    demo_5_methods()
    demo_6_option()
    demo_7_result()


if __name__ == "__main__":
    run_all()
