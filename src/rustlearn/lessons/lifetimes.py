"""Lesson 10: lifetimes and the borrow checker.

Python is garbage collected and has no borrow checker, so the lifetime
parameters of the Rust examples have nothing to bind to here. The helper
functions keep the same shapes and return values, and string lengths
are measured in UTF-8 bytes the way ``str::len`` measures them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, TypeVar

from ..formatting import display, rprint

T = TypeVar("T")
R = TypeVar("R")


def byte_len(s: str) -> int:
    return len(s.encode("utf-8"))


def longest(x: str, y: str) -> str:
    """Return ``x`` if it is strictly longer, otherwise ``y``."""
    if byte_len(x) > byte_len(y):
        return x
    return y


def first_word(s: str) -> str:
    """Everything before the first ASCII space, or the whole string."""
    index = s.find(" ")
    if index == -1:
        return s
    return s[:index]


@dataclass(frozen=True)
class ImportantExcerpt:
    part: str

    def level(self) -> int:
        return 3

    def announce_and_return_part(self, announcement: str) -> str:
        print(f"Attention please: {announcement}")
        return self.part


class Descriptor(Protocol):
    def describe(self) -> str: ...


@dataclass(frozen=True)
class Book:
    title: str
    author: str

    def get_title(self) -> str:
        return self.title

    def combine_titles(self, other: "Book") -> str:
        return f"{self.title} and {other.title}"

    def compare_title(self, other_title: str) -> bool:
        return self.title == other_title

    def get_longer_title(self, other_title: str) -> str:
        if byte_len(self.title) > byte_len(other_title):
            return self.title
        return other_title

    def describe(self) -> str:
        return self.title


def print_longest(x: Any, y: Any) -> None:
    if x > y:
        print(f"较长的值: {display(x)}")
    else:
        print(f"较长的值: {display(y)}")


def with_lifetime(value: T, f: Callable[[T], R]) -> R:
    return f(value)


def demo_1_basics() -> None:
    print("\n--- 生命周期的基本概念 ---")
    print("生命周期是 Rust 中的一个关键概念，用于确保引用的有效性：")
    print("- 生命周期是对引用有效的时间段的抽象")
    print("- 它帮助编译器在编译时确保所有引用都是有效的")
    print("- 生命周期解决了悬垂引用（dangling references）的问题")
    print("- 生命周期不改变任何引用或变量的存活时间")
    print("- 它们只是被编译器用来验证引用的有效性")

    x = 5
    y = x
    print(f"x = {x}, y = {y}")

    print("\n生命周期的主要用途：")
    print("1. 确保引用在使用时不会指向已释放的内存")
    print("2. 防止悬垂引用")
    print("3. 帮助编译器进行借用检查")
    print("4. 支持复杂的引用关系")


def demo_2_annotations() -> None:
    print("\n--- 生命周期注解语法 ---")
    print("生命周期注解是描述引用生命周期关系的语法：")
    print("- 使用撇号（'）后跟名称来表示生命周期参数，如 'a、'b、'c")
    print("- 生命周期参数放在尖括号中，如 <'a>")
    print("- 生命周期注解不会改变引用的实际生命周期")
    print("- 它们只是告诉编译器多个引用之间的生命周期关系")

    print(f"较长的字符串是: {longest('abcd', 'xyz')}")

    print("\n生命周期注解的位置：")
    print("1. 函数参数：fn function<'a>(x: &'a Type)")
    print("2. 函数返回值：fn function<'a>(x: &'a Type) -> &'a Type")
    print("3. 结构体字段：struct Struct<'a> { field: &'a Type }")
    print("4. 泛型参数一起使用：fn function<'a, T>(x: &'a T)")


def demo_3_function_signatures() -> None:
    print("\n--- 函数签名中的生命周期 ---")
    print("在函数签名中使用生命周期注解来表示参数和返回值之间的生命周期关系：")

    def mix_lifetimes(x: str, y: str) -> tuple[str, str]:
        return x, y

    def print_ref(x: Any) -> None:
        rprint(x)

    string1 = "hello"
    string2 = "world"
    print(f"最长的字符串: {longest(string1, string2)}")

    print(f"第一个单词: {first_word('hello world')}")

    ref1, ref2 = mix_lifetimes(string1, string2)
    print(f"混合引用: {ref1}, {ref2}")

    print_ref(42)
    print_ref(3.14)


def demo_4_structs() -> None:
    print("\n--- 结构体中的生命周期 ---")
    print("当结构体包含引用时，必须为这些引用添加生命周期注解：")

    novel = "Call me Ishmael. Some years ago..."
    first_sentence = novel.split(".")[0]
    excerpt = ImportantExcerpt(part=first_sentence)
    print(f"重要摘录: {excerpt.part}")
    print(f"摘录级别: {excerpt.level()}")

    part = excerpt.announce_and_return_part("New chapter released!")
    print(f"返回的部分: {part}")

    @dataclass(frozen=True)
    class MultiRef:
        first: str
        second: str

    multi = MultiRef(first="hello", second="world")
    print(f"多引用结构体: {multi.first}, {multi.second}")


def demo_5_methods() -> None:
    print("\n--- 方法定义中的生命周期 ---")
    print("在结构体或枚举的方法中使用生命周期注解：")

    book1 = Book(title="The Rust Programming Language", author="Steve Klabnik and Carol Nichols")
    print(f"书籍描述: {book1.describe()}")

    other_title = "Programming Rust"
    print(f"标题相同? {display(book1.compare_title(other_title))}")
    print(f"较长的标题: {book1.get_longer_title(other_title)}")

    book2 = Book(title="Effective Rust", author="Various Authors")
    print(f"组合标题: {book1.combine_titles(book2)}")


def demo_6_elision() -> None:
    print("\n--- 生命周期省略规则 ---")
    print("Rust 有一套生命周期省略规则，可以在某些情况下省略显式的生命周期注解：")
    print("1. 每个引用参数获得自己的生命周期参数")
    print("2. 如果只有一个输入生命周期参数，它被赋予所有输出生命周期参数")
    print("3. 如果有多个输入生命周期参数，但其中一个是 &self 或 &mut self，")
    print("   那么 self 的生命周期被赋予所有输出生命周期参数")

    @dataclass(frozen=True)
    class Person:
        name: str

        def get_name(self) -> str:
            return self.name

    print(f"第一个单词: {first_word('hello world')}")
    print(f"人名: {Person(name='Alice').get_name()}")


def demo_7_static() -> None:
    """String literals and module-level data live for the whole program."""
    print("\n--- 静态生命周期 ---")
    print("'static 是一个特殊的生命周期，表示整个程序的执行期间：")
    print("- 字符串字面量默认具有 'static 生命周期")
    print("- 可以显式地将变量标记为 'static")
    print("- 'static 生命周期的引用必须指向在程序整个生命周期内都有效的数据")

    print("静态字符串: I have a static lifetime")

    # Local to the call; every run prints 1.
    counter = 0
    counter += 1
    print(f"计数器值: {counter}")

    def get_static_string() -> str:
        return "This is a static string"

    def create_static_string() -> str:
        return "".join(["Created", " as ", "static"])

    print(f"从函数获取的静态字符串: {get_static_string()}")
    print(f"创建的静态字符串: {create_static_string()}")


def demo_8_bounds() -> None:
    print("\n--- 生命周期约束 ---")
    print("生命周期约束用于指定泛型类型参数与生命周期之间的关系：")

    @dataclass(frozen=True)
    class Container:
        item: Any

    def process_and_print(item: Any) -> None:
        print(f"处理并打印: {display(item)}")

    num1, num2 = 42, 100
    print_longest(num1, num2)
    print_longest(3.14, 2.71)
    string1 = "hello"
    print_longest(string1, "world")

    container = Container(item=42)
    print(f"容器中的项目: {container.item}")

    process_and_print(num1)
    process_and_print(string1)


def demo_9_subtyping() -> None:
    print("\n--- 生命周期子类型化 ---")
    print("生命周期子类型化允许我们表达一个生命周期比另一个生命周期长的关系：")
    print("- 如果 'a 是 'b 的子类型，表示 'a 的生命周期至少与 'b 一样长")
    print("- 记作 'a: 'b")

    def longer_lived(x: int, _: int) -> int:
        return x

    @dataclass(frozen=True)
    class RefPair:
        first: int
        second: int

    outer = 100
    inner = 200
    print(f"结果: {longer_lived(outer, inner)}")
    pair = RefPair(first=outer, second=inner)
    print(f"RefPair: {pair.first}, {pair.second}")

    @dataclass(frozen=True)
    class Description:
        text: str

        def describe(self) -> str:
            return self.text

    def print_description(desc: Descriptor) -> None:
        print(f"描述: {desc.describe()}")

    print_description(Description(text="示例描述"))


def demo_10_advanced() -> None:
    print("\n--- 高级生命周期用法 ---")
    print("Rust 中的一些高级生命周期用法：")

    def apply_function(f: Callable[[], R]) -> R:
        return f()

    class SimpleHandler:
        def handle(self, data: str) -> None:
            print(f"处理数据: {data}")

    string = "hello"
    print(f"字符串长度: {apply_function(lambda: byte_len(string))}")

    outer = "outer"
    inner = [outer]
    print(f"嵌套引用: {inner[0]}")

    print(f"处理后的数字: {with_lifetime(42, lambda n: n * 2)}")

    SimpleHandler().handle("test data")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第10课：生命周期 ===")
    print("本示例将介绍 Rust 中的生命周期机制。\n")
    demo_1_basics()
    demo_2_annotations()
    demo_3_function_signatures()
    demo_4_structs()
    demo_5_methods()
    demo_6_elision()
    demo_7_static()
    demo_8_bounds()
    demo_9_subtyping()
    demo_10_advanced()


if __name__ == "__main__":
    run_all()
