"""Lesson 2: functions, parameters, return values and control flow."""

from __future__ import annotations

from typing import List


def say_hello() -> None:
    print("Hello, Rust!")


def greet_person(name: str) -> None:
    print(f"Hello, {name}!")


def calculate_sum(a: int, b: int) -> int:
    return a + b


def multiply(a: int, b: int) -> int:
    return a * b


def describe_number(n: int, is_large: bool) -> str:
    if is_large:
        return f"{n} 是一个很大的数字"
    return f"{n} 是一个不大的数字"


def increment(value: List[int], amount: int) -> None:
    """Add ``amount`` through a one-element list standing in for ``&mut i32``."""
    value[0] += amount


def square(x: int) -> int:
    return x * x


def find_max(a: int, b: int) -> int:
    if a > b:
        return a
    else:
        return b


def calculate_sum_and_product(a: int, b: int) -> tuple[int, int]:
    return a + b, a * b


def grade(score: int) -> str:
    """Map a 0-100 score the way the ``0..=59`` style match arms do."""
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
            return "分数无效"


def demo_1_function_definition() -> None:
    print("\n--- 函数的定义与调用 ---")
    say_hello()
    greet_person("Alice")
    print(f"5 + 10 = {calculate_sum(5, 10)}")


def demo_2_function_parameters() -> None:
    print("\n--- 函数参数 ---")
    print(f"3 * 4 = {multiply(3, 4)}")
    print(f"描述: {describe_number(42, True)}")

    value = [10]
    increment(value, 5)
    print(f"递增后的值: {value[0]}")


def demo_3_return_values() -> None:
    print("\n--- 函数返回值 ---")
    print(f"5 的平方 = {square(5)}")
    print(f"10 和 20 中的最大值 = {find_max(10, 20)}")
    sum_result, product_result = calculate_sum_and_product(3, 7)
    print(f"3 + 7 = {sum_result}, 3 * 7 = {product_result}")


def demo_4_if_else() -> None:
    """``if`` is an expression in Rust; the conditional expression mirrors it."""
    print("\n--- if/else 条件语句 ---")

    number = 7
    if number > 5:
        print(f"{number} 大于 5")
    else:
        print(f"{number} 小于或等于 5")

    parity = "偶数" if number % 2 == 0 else "奇数"
    print(f"{number} 是一个 {parity}")

    score = 85
    if score >= 90:
        print("优秀")
    elif score >= 80:
        print("良好")
    elif score >= 60:
        print("及格")
    else:
        print("不及格")


def demo_5_loop() -> None:
    """An unconditional loop, and a loop whose ``break`` yields a value."""
    print("\n--- loop 循环语句 ---")

    count = 0
    while True:
        count += 1
        print(f"循环计数: {count}")
        if count >= 3:
            break

    attempts = 0
    while True:
        attempts += 1
        print(f"尝试次数: {attempts}")
        if attempts == 5:
            result = attempts * 10
            break
    print(f"loop 表达式返回值: {result}")


def demo_6_while() -> None:
    print("\n--- while 循环语句 ---")

    countdown = 5
    while countdown > 0:
        print(f"倒计时: {countdown}")
        countdown -= 1
    print("倒计时结束！")

    numbers = [10, 20, 30, 40, 50]
    index = 0
    while index < len(numbers):
        print(f"数组元素[{index}]: {numbers[index]}")
        index += 1


def demo_7_for() -> None:
    print("\n--- for 循环语句 ---")

    print("遍历范围 1 到 5:")
    for number in range(1, 6):
        print(f"数字: {number}")

    fruits = ["苹果", "香蕉", "橙子", "葡萄"]
    print("\n遍历水果数组:")
    for fruit in fruits:
        print(f"水果: {fruit}")

    print("\n遍历带索引的水果数组:")
    for index, fruit in enumerate(fruits):
        print(f"水果[{index}]: {fruit}")

    print("\n遍历字符串中的字符:")
    for c in "Hello":
        print(f"字符: {c}")


def demo_8_break_continue() -> None:
    print("\n--- break 和 continue 关键字 ---")

    print("寻找第一个大于 10 的数字:")
    for number in range(1, 20):
        print(f"检查: {number}")
        if number > 10:
            print(f"找到大于 10 的数字: {number}")
            break

    print("\n打印 1 到 10 之间的偶数:")
    for number in range(1, 11):
        if number % 2 != 0:
            continue
        print(f"偶数: {number}")


def demo_9_match() -> None:
    print("\n--- match 表达式 ---")

    number = 3
    match number:
        case 1:
            print("一")
        case 2:
            print("二")
        case 3:
            print("三")
        case 4:
            print("四")
        case 5:
            print("五")
        case _:
            print("其他数字")

    color = "red"
    match color:
        case "red":
            status = "警告"
        case "green":
            status = "安全"
        case "yellow":
            status = "注意"
        case _:
            status = "未知颜色"
    print(f"颜色 {color} 表示: {status}")

    print(grade(85))


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第2课：函数和流程控制 ===")
    print("本示例将介绍 Rust 中的函数定义、参数传递、返回值以及各种流程控制语句。\n")
    demo_1_function_definition()
    demo_2_function_parameters()
    demo_3_return_values()
    demo_4_if_else()
    demo_5_loop()
    demo_6_while()
    demo_7_for()
    demo_8_break_continue()
    demo_9_match()


if __name__ == "__main__":
    run_all()
