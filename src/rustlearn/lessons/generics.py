"""Lesson 9: generic functions, types and trait bounds.

Type parameters are :class:`typing.TypeVar` objects, generic containers
subclass :class:`typing.Generic`, and traits become
:class:`typing.Protocol` classes. Python checks none of this at run time;
the annotations carry the same information a Rust signature would.
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Protocol, Sequence, TypeVar, Union

from ..formatting import debug, display, format_duration, rprint, some

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


Ord = TypeVar("Ord", bound=SupportsLessThan)


def find_max(items: Sequence[Ord]) -> Optional[Ord]:
    if not items:
        return None
    largest = items[0]
    for item in items[1:]:
        if largest < item:
            largest = item
    return largest


def print_value(value: Any) -> None:
    rprint("Value:", value)


@dataclass
class Point(Generic[T]):
    x: T
    y: T

    def get_x(self) -> T:
        return self.x

    def get_y(self) -> T:
        return self.y

    def distance_from_origin(self) -> float:
        """Only meaningful for integer points, like ``impl Point<i32>``."""
        if not (isinstance(self.x, int) and isinstance(self.y, int)):
            raise TypeError("distance_from_origin is defined for Point[int] only")
        return math.sqrt(self.x ** 2 + self.y ** 2)


@dataclass
class Pair(Generic[K, V]):
    key: K
    value: V

    def get(self) -> tuple[K, V]:
        return self.key, self.value


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Number(Generic[T]):
    value: T


@dataclass(frozen=True)
class PairMessage(Generic[T, U]):
    first: T
    second: U


@dataclass(frozen=True)
class Empty:
    pass


Message = Union[Text, Number[T], PairMessage[T, U], Empty]


def print_message(message: Message) -> None:
    match message:
        case Text(text=text):
            print(f"Text: {text}")
        case Number(value=value):
            print(f"Number: {debug(value)}")
        case PairMessage(first=a, second=b):
            print(f"Pair: {debug(a)}, {debug(b)}")
        case Empty():
            print("Empty message")


@dataclass
class Container(Generic[T]):
    value: T

    def get(self) -> T:
        return self.value

    def map(self, f: Callable[[T], U]) -> "Container[U]":
        return Container(f(self.value))

    def increment(self) -> None:
        self.value += 1  # type: ignore[operator]

    def square(self) -> "Container[int]":
        return Container(self.value ** 2)  # type: ignore[operator]


def add(a: T, b: T) -> T:
    return a + b  # type: ignore[operator]


def subtract(a: T, b: T) -> T:
    return a - b  # type: ignore[operator]


def display_and_add(a: T, b: T) -> None:
    result = add(a, b)
    print(f"{display(a)} + {display(b)} = {display(result)}")


class Calculator(Generic[T]):
    def __init__(self, value: T) -> None:
        self._value = value

    def add(self, other: T) -> None:
        self._value = self._value + other  # type: ignore[operator]

    def subtract(self, other: T) -> None:
        self._value = self._value - other  # type: ignore[operator]

    def get(self) -> T:
        return self._value


class Draw(Protocol):
    def draw(self) -> None: ...


@dataclass
class Circle:
    radius: float

    def draw(self) -> None:
        print(f"绘制一个半径为 {display(self.radius)} 的圆形")


@dataclass
class Rectangle:
    width: float
    height: float

    def draw(self) -> None:
        print(f"绘制一个 {display(self.width)}x{display(self.height)} 的矩形")


@dataclass
class Triangle:
    base: float
    height: float

    def draw(self) -> None:
        print(f"绘制一个底为 {display(self.base)}，高为 {display(self.height)} 的三角形")


class Summary(Protocol):
    def summarize(self) -> str: ...


@dataclass
class NewsArticle:
    headline: str
    location: str
    author: str
    content: str

    def summarize(self) -> str:
        return f"{self.headline}, by {self.author} ({self.location})"

    def __str__(self) -> str:
        return self.summarize()


@dataclass
class Tweet:
    username: str
    content: str
    reply: bool
    retweet: bool

    def summarize(self) -> str:
        return f"{self.username}: {self.content}"


def notify(item: Summary) -> None:
    print(f"Breaking news! {item.summarize()}")


def multiply(a: T, b: T) -> T:
    return a * b  # type: ignore[operator]


def apply_function(value: T, f: Callable[[T], R]) -> R:
    return f(value)


def demo_1_basics() -> None:
    print("\n--- 泛型的基本概念 ---")
    print("泛型是一种编程概念，允许我们编写可以处理不同类型数据的代码：")
    print("- 在 Rust 中，泛型使用尖括号 <T> 表示")
    print("- T 是一个类型参数，可以是任何类型")
    print("- 泛型让我们可以编写更通用、可重用的代码")
    print("- 泛型在编译时会被单态化（monomorphization），不会有运行时开销")

    print("\n泛型的使用场景：")
    print("1. 集合类型（如 Vec<T>, HashMap<K, V>）")
    print("2. 函数和方法需要处理多种类型的数据")
    print("3. 结构体和枚举需要存储不同类型的数据")
    print("4. 实现多态性行为")

    numbers: List[int] = [1, 2, 3, 4, 5]
    words: List[str] = ["hello", "world"]
    print(f"numbers 是一个 Vec<i32> 类型: {debug(numbers)}")
    print(f"words 是一个 Vec<&str> 类型: {debug(words)}")


def demo_2_functions() -> None:
    print("\n--- 泛型函数 ---")
    print("泛型函数是可以接受不同类型参数的函数：")

    largest = find_max([1, 5, 3, 9, 2])
    if largest is not None:
        print(f"数组中的最大值: {largest}")

    largest_float = find_max([1.5, 5.2, 3.7, 9.1, 2.8])
    if largest_float is not None:
        print(f"浮点数数组中的最大值: {display(largest_float)}")

    largest_word = find_max(["apple", "banana", "orange", "pear"])
    if largest_word is not None:
        print(f"字符串数组中的最大值: {largest_word}")

    print_value(42)
    print_value(3.14)
    print_value("Hello, Rust!")


def demo_3_structs() -> None:
    print("\n--- 泛型结构体 ---")
    print("泛型结构体是可以包含不同类型字段的结构体：")

    integer_point: Point[int] = Point(10, 20)
    print(f"整数坐标点: ({integer_point.get_x()}, {integer_point.get_y()})")
    print(f"到原点的距离: {display(integer_point.distance_from_origin())}")

    float_point: Point[float] = Point(1.5, 2.5)
    print(f"浮点坐标点: ({display(float_point.get_x())}, {display(float_point.get_y())})")

    key1, value1 = Pair("name", "Alice").get()
    print(f"键值对1: {key1} = {value1}")

    key2, value2 = Pair(1, 100).get()
    print(f"键值对2: {key2} = {value2}")


def demo_4_enums() -> None:
    print("\n--- 泛型枚举 ---")
    print("泛型枚举是可以包含不同类型关联数据的枚举：")

    print_message(Text("Hello"))
    print_message(Number(42))
    print_message(PairMessage("x", 100))
    print_message(Empty())

    some_value: Optional[int] = 5
    none_value: Optional[int] = None
    print(f"Option 值: {some(some_value)}, {some(none_value)}")


def demo_5_methods() -> None:
    print("\n--- 泛型方法 ---")
    print("泛型方法是在结构体或枚举上定义的可以处理不同类型数据的方法：")

    container1 = Container(42)
    print(f"Container 1 的值: {container1.get()}")

    container2 = Container(10)
    container2.increment()
    print(f"Container 2 递增后的值: {container2.get()}")
    print(f"Container 2 的平方: {container2.square().get()}")

    mapped = Container(5).map(str)
    print(f"转换为字符串后的值: {mapped.get()}")

    mapped2 = Container("hello").map(len)
    print(f"字符串长度: {mapped2.get()}")


def demo_6_constraints() -> None:
    print("\n--- 泛型约束 ---")
    print("泛型约束用于限制泛型参数可以接受的类型：")
    print("- 使用 where 子句或直接在尖括号中指定约束")
    print("- 常见的约束包括：Trait 约束、生命周期约束等")

    print(f"1 + 2 = {add(1, 2)}")
    print(f"3.5 + 2.5 = {display(add(3.5, 2.5))}")
    print(f"5 - 3 = {subtract(5, 3)}")
    print(f"10.5 - 4.2 = {display(subtract(10.5, 4.2))}")

    display_and_add(10, 20)
    display_and_add(5.5, 4.5)

    calc = Calculator(100)
    print(f"初始值: {calc.get()}")
    calc.add(50)
    print(f"加 50 后: {calc.get()}")
    calc.subtract(25)
    print(f"减 25 后: {calc.get()}")

    float_calc = Calculator(10.5)
    print(f"初始浮点值: {display(float_calc.get())}")
    float_calc.add(5.5)
    print(f"加 5.5 后: {display(float_calc.get())}")


def demo_7_polymorphism() -> None:
    """Static dispatch through a type variable and dynamic dispatch through a protocol."""
    print("\n--- 多态性和泛型 ---")
    print("泛型允许我们实现编译时多态性：")
    print("- 相同的代码可以处理不同类型的数据")
    print("- 编译器会为每种具体类型生成专门的代码")

    DrawT = TypeVar("DrawT", bound=Draw)

    def draw_shape(shape: DrawT) -> None:
        shape.draw()

    def draw_shape_dyn(shape: Draw) -> None:
        shape.draw()

    print("使用泛型函数：")
    for shape in (Circle(5.0), Rectangle(10.0, 5.0), Triangle(6.0, 8.0)):
        draw_shape(shape)

    print("\n使用特征对象：")
    for shape in (Circle(5.0), Rectangle(10.0, 5.0), Triangle(6.0, 8.0)):
        draw_shape_dyn(shape)

    shapes: List[Draw] = [Circle(3.0), Rectangle(4.0, 6.0), Triangle(5.0, 7.0)]
    print("\n遍历特征对象集合：")
    for shape in shapes:
        shape.draw()


def demo_8_performance() -> None:
    print("\n--- 泛型的性能考量 ---")
    print("Rust 中的泛型在性能方面有几个重要特点：")
    print("1. 单态化（monomorphization）：编译器为每种使用的具体类型生成专用的代码")
    print("2. 零运行时开销：泛型不会引入额外的运行时开销")
    print("3. 静态分发：使用泛型的函数调用在编译时确定，与具体类型直接调用一样高效")
    print("4. 类型擦除 vs 单态化：与某些语言的类型擦除不同，Rust 的单态化确保了最佳性能")

    start = time.perf_counter()
    print(f"整数乘法结果: {multiply(10, 20)}")
    print(f"浮点数乘法结果: {display(multiply(10.5, 20.5))}")
    elapsed = time.perf_counter() - start
    print(f"计算耗时: {format_duration(elapsed)}")


def demo_9_traits() -> None:
    print("\n--- 泛型与特征（Trait）的结合使用 ---")
    print("泛型与特征（Trait）的结合使用是 Rust 类型系统的重要特性：")

    def display_and_summarize(item: NewsArticle) -> None:
        print(f"Display: {item}")
        print(f"Summary: {item.summarize()}")

    def returns_summarizable() -> Summary:
        return Tweet(
            username="horse_ebooks",
            content="of course, as you probably already know, people",
            reply=False,
            retweet=False,
        )

    article = NewsArticle(
        headline="Penguins win the Stanley Cup Championship",
        location="Pittsburgh, PA, USA",
        author="Iceburgh",
        content="The Pittsburgh Penguins once again are the best hockey team in the NHL.",
    )
    tweet = Tweet(
        username="horse_ebooks",
        content="of course, as you probably already know, people",
        reply=False,
        retweet=False,
    )

    print(f"Article summary: {article.summarize()}")
    print(f"Tweet summary: {tweet.summarize()}")

    notify(article)
    notify(tweet)

    display_and_summarize(NewsArticle(
        headline="Penguins win again",
        location="Pittsburgh",
        author="Iceburgh",
        content="Another championship for Pittsburgh!",
    ))

    print(f"Returned summary: {returns_summarizable().summarize()}")


def demo_10_advanced() -> None:
    print("\n--- 泛型的高级用法 ---")
    print("Rust 中的泛型还有一些高级用法：")

    vec: List[int] = []
    vec.append(10)
    vec.append(20)
    vec.append(30)
    second = vec[1] if len(vec) > 1 else None
    if second is not None:
        print(f"Vec 中的第二个元素: {second}")

    def print_with_prefix(value: Any, prefix: str) -> None:
        print(f"{prefix}, value: {display(value)}")

    print_with_prefix(42, "数字")
    print_with_prefix("Hello, Rust!", "文本")

    class Dog:
        @staticmethod
        def name() -> str:
            return "Dog"

    class Cat:
        @staticmethod
        def name() -> str:
            return "Cat"

    print(f"Dog 的名称: {Dog.name()}")
    print(f"Cat 的名称: {Cat.name()}")

    print(f"5 的两倍: {apply_function(5, lambda x: x * 2)}")
    print(f"5 的平方: {apply_function(5, lambda x: x * x)}")
    print(f"字符串 'hello' 的长度: {apply_function('hello', len)}")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第9课：泛型 ===")
    print("本示例将介绍 Rust 中的泛型机制。\n")
    demo_1_basics()
    demo_2_functions()
    demo_3_structs()
    demo_4_enums()
    demo_5_methods()
    demo_6_constraints()
    demo_7_polymorphism()
    demo_8_performance()
    demo_9_traits()
    demo_10_advanced()


if __name__ == "__main__":
    run_all()
