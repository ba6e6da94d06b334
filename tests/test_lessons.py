from __future__ import annotations

import io
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from typing import Callable

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from rustlearn.catalog import DEFAULT_CATALOG
from rustlearn.lessons import (
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


def capture(action: Callable[[], None]) -> str:
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        action()
    return buffer.getvalue()


class LessonOutputTests(unittest.TestCase):
    def assertLines(self, text: str, *expected: str) -> None:
        lines = text.splitlines()
        for line in expected:
            self.assertIn(line, lines)

    def test_every_lesson_opens_with_its_header(self) -> None:
        for number, entry in enumerate(DEFAULT_CATALOG, start=1):
            with self.subTest(lesson=entry.identifier):
                first_line = capture(entry.action).splitlines()[0]
                self.assertTrue(first_line.startswith(f"=== 第{number}课："))

    def test_lessons_print_the_same_text_every_run(self) -> None:
        for entry in DEFAULT_CATALOG:
            with self.subTest(lesson=entry.identifier):
                first = capture(entry.action)
                second = capture(entry.action)
                if entry.action is generics.run_all:
                    # The timing line varies between runs.
                    first, second = (
                        "\n".join(l for l in text.splitlines() if not l.startswith("计算耗时"))
                        for text in (first, second)
                    )
                self.assertEqual(first, second)

    def test_variables(self) -> None:
        self.assertLines(
            capture(variables.run_all),
            "变量遮蔽后，y = 15",
            "f64 3.99 转换为 i32: 3",
            "char 'A' 转换为 u32 (Unicode 码点): 65",
            "静态变量 COUNTER = 1",
            "更新后，静态变量 COUNTER = 2",
        )

    def test_functions_control_flow(self) -> None:
        self.assertLines(
            capture(functions_control_flow.run_all),
            "5 + 10 = 15",
            "递增后的值: 15",
            "loop 表达式返回值: 50",
            "颜色 red 表示: 警告",
        )

    def test_structs(self) -> None:
        self.assertLines(
            capture(structs.run_all),
            "矩形面积: 1500",
            "rect1 可以容纳 rect2: true",
            "修改后的面积: 375",
            "user2 登录次数: 1",
        )

    def test_enums(self) -> None:
        self.assertLines(
            capture(enums.run_all),
            "HTTP Not Found 状态码: 404",
            "10 / 0 = 除数不能为零",
            "calculate(10, 2) = 10",
            "布尔输入: true",
        )

    def test_pattern_matching(self) -> None:
        self.assertLines(
            capture(pattern_matching.run_all),
            "成绩 101: 无效成绩",
            "找到 ID 在范围内: 5",
            "R 是大写字母",
            "矩形: 左上角(0, 10), 右下角(10, 0)",
        )

    def test_common_collections(self) -> None:
        self.assertLines(
            capture(common_collections.run_all),
            'HashMap: {"Alice": 100, "Bob": 85, "Charlie": 90}',
            "Alice 的旧分数: Some(100)",
            "s4 的长度: 17",
            "插入重复元素 3 的结果: false",
            "set1 和 set2 的交集: {4, 5}",
            "BTreeSet: {1, 2, 5, 7, 9}",
            "删除的最后一个元素: Some(6)",
            "元素总和: 150",
        )

    def test_packages_modules(self) -> None:
        self.assertLines(
            capture(packages_modules.run_all),
            "调用公共模块函数 math::subtract(10, 4) = 6",
            "Playing Gibson Les Paul",
            "Tweety is watching the dogs",
            "小计: $999.98",
            "总计: $2089.94",
            "总计: $1089.96",
        )

    def test_error_handling(self) -> None:
        text = capture(error_handling.run_all)
        self.assertLines(
            text,
            "解析失败: ParseIntError { kind: InvalidDigit }",
            '处理失败: InvalidInput("输入必须为正数")',
            "处理失败: ParseError(ParseIntError { kind: InvalidDigit })",
            '处理失败: InvalidInput("输入不能为空")',
            'API 错误: ApiError { error_code: 500, details: "处理数据失败: 连接超时" }',
            "错误链: Parse(ParseIntError { kind: InvalidDigit })",
            "用户创建失败: 无效的用户名: 'bo'. 用户名必须至少包含 3 个字符.",
            "用户创建失败: 无效的密码长度. 密码必须至少包含 8 个字符.",
        )
        self.assertIn("无法打开文件: Os { code: 2, kind: NotFound", text)

    def test_generics(self) -> None:
        text = capture(generics.run_all)
        self.assertLines(
            text,
            "到原点的距离: 22.360679774997898",
            "10.5 - 4.2 = 6.3",
            "5.5 + 4.5 = 10",
            "加 5.5 后: 16",
            'Pair: "x", 100',
            "Option 值: Some(5), None",
            "浮点数乘法结果: 215.25",
            "Display: Penguins win again, by Iceburgh (Pittsburgh)",
        )
        self.assertRegex(text, r"计算耗时: \d+(\.\d+)?(s|ms|µs|ns)\n")

    def test_lifetimes(self) -> None:
        self.assertLines(
            capture(lifetimes.run_all),
            "较长的字符串是: abcd",
            "最长的字符串: world",
            "重要摘录: Call me Ishmael",
            "较长的标题: The Rust Programming Language",
            "较长的值: 3.14",
            "计数器值: 1",
        )


class LessonHelperTests(unittest.TestCase):
    def test_integer_casts(self) -> None:
        self.assertEqual(variables.as_u32(-1), 4294967295)
        self.assertEqual(variables.as_i32(-3.99), -3)
        self.assertEqual(variables.as_i32(1e20), 2147483647)
        self.assertEqual(variables.as_i32(float("nan")), 0)
        self.assertEqual(variables.as_i32(True), 1)

    def test_grades(self) -> None:
        self.assertEqual(functions_control_flow.grade(59), "不及格")
        self.assertEqual(functions_control_flow.grade(100), "优秀")
        self.assertEqual(functions_control_flow.grade(-1), "分数无效")
        self.assertEqual(pattern_matching.grade(101), "无效成绩")

    def test_rectangle_methods(self) -> None:
        rect = structs.Rectangle(width=3, height=4)
        self.assertEqual(rect.area(), 12)
        self.assertFalse(rect.can_hold(structs.Rectangle.square(5)))
        self.assertEqual(structs.Rectangle.default().area(), 10000)

    def test_divide_truncates_toward_zero(self) -> None:
        self.assertEqual(enums.divide(-7, 2), enums.Ok(-3))
        self.assertEqual(enums.calculate(1, 0), enums.Err("除数不能为零"))

    def test_unwrap_on_none_raises(self) -> None:
        with self.assertRaises(ValueError):
            enums.unwrap(None)

    def test_parse_i32_rules(self) -> None:
        kinds = error_handling.IntErrorKind
        self.assertEqual(error_handling.parse_i32("+7"), 7)
        self.assertEqual(error_handling.parse_i32("-2147483648"), -(1 << 31))
        for text, kind in (
            ("", kinds.EMPTY),
            ("-", kinds.INVALID_DIGIT),
            (" 1", kinds.INVALID_DIGIT),
            ("1_000", kinds.INVALID_DIGIT),
            ("2147483648", kinds.POS_OVERFLOW),
            ("-2147483649", kinds.NEG_OVERFLOW),
        ):
            with self.subTest(text=text):
                with self.assertRaises(error_handling.ParseIntError) as ctx:
                    error_handling.parse_i32(text)
                self.assertIs(ctx.exception.kind, kind)

    def test_conversion_keeps_original_error_as_cause(self) -> None:
        with self.assertRaises(error_handling.CustomError) as ctx:
            error_handling.process_input("abc")
        self.assertIsInstance(ctx.exception.__cause__, error_handling.ParseIntError)

    def test_find_max(self) -> None:
        self.assertIsNone(generics.find_max([]))
        self.assertEqual(generics.find_max(["apple", "pear", "banana"]), "pear")

    def test_distance_only_for_integer_points(self) -> None:
        with self.assertRaises(TypeError):
            generics.Point(1.5, 2.5).distance_from_origin()

    def test_longest_prefers_second_on_tie(self) -> None:
        self.assertEqual(lifetimes.longest("hello", "world"), "world")
        self.assertEqual(lifetimes.longest("中", "abc"), "abc")
        self.assertEqual(lifetimes.longest("中文", "abc"), "中文")

    def test_first_word(self) -> None:
        self.assertEqual(lifetimes.first_word("hello world"), "hello")
        self.assertEqual(lifetimes.first_word("single"), "single")
        self.assertEqual(lifetimes.first_word(""), "")

    def test_cart_total(self) -> None:
        cart = packages_modules.ShoppingCart()
        cart.add_item(packages_modules.Product(1, "A", 2.5, "x"), 2)
        cart.add_item(packages_modules.Product(2, "B", 1.0, "x"), 1)
        cart.remove_item(2)
        self.assertEqual(cart.calculate_total(), 5.0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
