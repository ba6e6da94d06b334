"""Lesson 8: recoverable and unrecoverable errors.

Rust returns ``Result`` values where Python raises exceptions, so the demos
raise and catch real exception classes and print them with the ``{:?}``
rendering the Rust program would produce. ``From`` conversions become
``raise ... from exc`` so the original error stays attached as
``__cause__``.
"""

from __future__ import annotations

import enum
import errno
import os
from typing import Optional

from ..formatting import debug, debug_struct, debug_tuple

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1

MISSING_FILE = "nonexistent_file.txt"


class IntErrorKind(enum.Enum):
    EMPTY = "Empty"
    INVALID_DIGIT = "InvalidDigit"
    POS_OVERFLOW = "PosOverflow"
    NEG_OVERFLOW = "NegOverflow"


class ParseIntError(ValueError):
    """Raised by :func:`parse_i32`; ``kind`` says which rule the text broke."""

    def __init__(self, kind: IntErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __rust_debug__(self) -> str:
        return f"ParseIntError {{ kind: {self.kind.value} }}"


def parse_i32(text: str) -> int:
    """Parse ``text`` with the rules of ``str::parse::<i32>``.

    An optional leading sign followed by ASCII digits only; surrounding
    whitespace, underscores and non-ASCII digits are all rejected.
    """
    if not text:
        raise ParseIntError(IntErrorKind.EMPTY)
    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(c not in "0123456789" for c in digits):
        raise ParseIntError(IntErrorKind.INVALID_DIGIT)
    value = int(text)
    if value > I32_MAX:
        raise ParseIntError(IntErrorKind.POS_OVERFLOW)
    if value < I32_MIN:
        raise ParseIntError(IntErrorKind.NEG_OVERFLOW)
    return value


_IO_KINDS = {
    errno.ENOENT: "NotFound",
    errno.EACCES: "PermissionDenied",
    errno.EEXIST: "AlreadyExists",
}


def io_error_debug(exc: OSError) -> str:
    """Render an ``OSError`` like ``std::io::Error``'s Debug output."""
    if exc.errno is None:
        return debug_struct("Custom", kind="Other", error=str(exc))
    kind = _IO_KINDS.get(exc.errno, "Other")
    message = exc.strerror or os.strerror(exc.errno)
    return f"Os {{ code: {exc.errno}, kind: {kind}, message: {debug(message)} }}"


def read_file(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        return f.read()


class CustomError(Exception):
    """Either ``ParseError`` wrapping a :class:`ParseIntError` or ``InvalidInput``."""

    def __init__(self, variant: str, payload: object) -> None:
        super().__init__(variant, payload)
        self.variant = variant
        self.payload = payload

    def __rust_debug__(self) -> str:
        return debug_tuple(self.variant, self.payload)


def process_input(text: str) -> int:
    if not text:
        raise CustomError("InvalidInput", "输入不能为空")
    try:
        number = parse_i32(text)
    except ParseIntError as exc:
        raise CustomError("ParseError", exc) from exc
    if number < 0:
        raise CustomError("InvalidInput", "输入必须为正数")
    return number


class NetworkError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __rust_debug__(self) -> str:
        return debug_struct("NetworkError", message=self.message)


class ApiError(Exception):
    def __init__(self, error_code: int, details: str) -> None:
        super().__init__(error_code, details)
        self.error_code = error_code
        self.details = details

    def __rust_debug__(self) -> str:
        return debug_struct("ApiError", error_code=self.error_code, details=self.details)


def fetch_data() -> str:
    raise NetworkError("连接超时")


def process_data() -> str:
    try:
        return fetch_data()
    except NetworkError as exc:
        raise ApiError(500, f"处理数据失败: {exc.message}") from exc


class DataError(Exception):
    """``Parse`` wraps a :class:`ParseIntError`; ``Validation`` carries text."""

    def __init__(self, variant: str, payload: object) -> None:
        super().__init__(variant, payload)
        self.variant = variant
        self.payload = payload

    def __rust_debug__(self) -> str:
        return debug_tuple(self.variant, self.payload)


def parse_data(data: str) -> int:
    try:
        num = parse_i32(data)
    except ParseIntError as exc:
        raise DataError("Parse", exc) from exc
    if num < 0:
        raise DataError("Validation", "数值必须为正数")
    return num


class UserError(Exception):
    pass


class InvalidUsername(UserError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"无效的用户名: '{self.name}'. 用户名必须至少包含 3 个字符."


class InvalidPasswordLength(UserError):
    def __str__(self) -> str:
        return "无效的密码长度. 密码必须至少包含 8 个字符."


def create_user(username: str, password: str) -> None:
    # Rust measures both lengths in UTF-8 bytes.
    if len(username.encode("utf-8")) < 3:
        raise InvalidUsername(username)
    if len(password.encode("utf-8")) < 8:
        raise InvalidPasswordLength()
    print("用户创建逻辑将在这里执行...")


def demo_1_error_types() -> None:
    print("\n--- 错误的类型 ---")
    print("Rust 中有两种主要的错误类型：")
    print("1. 可恢复错误（Recoverable Errors）")
    print("   - 表示可能会失败但程序可以继续执行的情况")
    print("   - 使用 Result<T, E> 枚举来处理")
    print("   - 例如：文件未找到、网络连接失败等")
    print("2. 不可恢复错误（Unrecoverable Errors）")
    print("   - 表示程序无法继续执行的严重错误")
    print("   - 使用 panic! 宏来处理")
    print("   - 例如：索引越界、断言失败等")

    print("\nRust 的错误处理理念：")
    print("- 显式处理错误而不是忽略它们")
    print("- 错误也是值，可以像其他值一样处理")
    print("- 区分可恢复和不可恢复错误，采取不同的处理策略")


def demo_2_panic() -> None:
    print("\n--- panic! 宏的使用 ---")
    print("panic! 宏用于处理不可恢复的错误，它会：")
    print("1. 打印错误信息")
    print("2. 展开调用栈（backtrace）")
    print("3. 终止程序")

    print("\n以下是 panic! 的示例，但我们不会实际触发它，因为它会终止程序：")
    print("// panic!()")

    print("\npanic! 的常见使用场景：")
    print("1. 开发和调试阶段，用于快速发现和处理错误")
    print("2. 发生了不可能恢复的严重错误")
    print("3. 断言失败，验证条件不满足")


def demo_3_result() -> None:
    print("\n--- Result 枚举的使用 ---")
    print("Result<T, E> 是一个枚举，用于处理可恢复的错误：")
    print("- Ok(T)：表示操作成功，包含成功值")
    print("- Err(E)：表示操作失败，包含错误值")

    print("\n文件操作示例：")
    try:
        read_file(MISSING_FILE)
    except OSError as exc:
        print(f"无法打开文件: {io_error_debug(exc)}")
    else:
        print("成功打开文件")

    print("\n字符串解析示例：")
    for text in ("42", "not a number"):
        try:
            number = parse_i32(text)
        except ParseIntError as exc:
            print(f"解析失败: {debug(exc)}")
        else:
            print(f"解析成功: {number}")


def demo_4_propagation() -> None:
    """Explicit open and close versus a ``with`` block; both let the error travel."""
    print("\n--- 错误传播 ---")
    print("错误传播是指将函数中的错误传递给调用者处理：")
    print("- 使用 ? 操作符可以简化错误传播代码")
    print("- ? 操作符只能用于返回 Result<T, E> 或 Option<T> 的函数")

    def read_file_verbose() -> str:
        f = open(MISSING_FILE, encoding="utf-8")
        try:
            return f.read()
        finally:
            f.close()

    def read_file_simple() -> str:
        return read_file(MISSING_FILE)

    for label, reader in (
        ("\n测试 verbose 版本:", read_file_verbose),
        ("\n测试 simple 版本 (使用 ? 操作符):", read_file_simple),
    ):
        print(label)
        try:
            contents = reader()
        except OSError as exc:
            print(f"错误: {io_error_debug(exc)}")
        else:
            print(f"文件内容: {contents}")


def demo_5_custom_errors() -> None:
    print("\n--- 自定义错误类型 ---")
    print("在实际项目中，我们经常需要定义自己的错误类型：")

    for test in ("42", "-1", "not a number", ""):
        print(f"\n测试输入: '{test}'")
        try:
            value = process_input(test)
        except CustomError as exc:
            print(f"处理失败: {debug(exc)}")
        else:
            print(f"处理成功: {value}")


def demo_6_conversion() -> None:
    print("\n--- 错误转换 ---")
    print("错误转换允许我们在不同的错误类型之间进行转换：")
    print("- 使用 From trait 和 Into trait")
    print("- 使用 map_err 方法转换错误类型")

    print("\n使用 map_err 转换错误:")
    try:
        data = process_data()
    except ApiError as exc:
        print(f"API 错误: {debug(exc)}")
    else:
        print(f"成功获取数据: {data}")


def demo_7_chaining() -> None:
    print("\n--- 错误链 ---")
    print("错误链是指在处理错误时保留原始错误的上下文：")

    print("\n测试无效数字输入:")
    try:
        value = parse_data("not a number")
    except DataError as exc:
        print(f"错误链: {debug(exc)}")
    else:
        print(f"成功: {value}")


def demo_8_unwrap_and_expect() -> None:
    print("\n--- unwrap 和 expect 方法 ---")
    print("unwrap 和 expect 方法是处理 Result 和 Option 的便捷方法：")
    print("- unwrap(): 如果是 Ok/Some 则返回值，否则 panic!")
    print("- expect(msg): 类似于 unwrap，但提供自定义 panic 消息")

    def expect(value: Optional[int], message: str) -> int:
        if value is None:
            raise RuntimeError(message)
        return value

    print(f"Ok.unwrap() = {expect(42, 'called `Result::unwrap()` on an `Err` value')}")
    print(f"Some.unwrap() = {expect(100, 'called `Option::unwrap()` on a `None` value')}")
    print(f"Ok.expect() = {expect(99, '这不会发生')}")

    print("\nunwrap 和 expect 的适用场景：")
    print("1. 原型开发和快速测试")
    print("2. 确定不会失败的操作")
    print("3. 开发和调试阶段")


def demo_9_best_practices() -> None:
    print("\n--- 错误处理的最佳实践 ---")
    print("Rust 错误处理的一些最佳实践：")
    print("1. 优先使用 Result 处理可恢复错误，而不是 panic!")
    print("2. 为公共 API 定义明确的错误类型")
    print("3. 实现 From trait 以支持错误转换")
    print("4. 使用 ? 操作符简化错误传播")
    print("5. 提供有意义的错误信息")

    for username, password in (("alice", "password123"), ("bo", "password123"), ("charlie", "pass")):
        print(f"\n测试创建用户: username='{username}', password='{password}'")
        try:
            create_user(username, password)
        except UserError as exc:
            print(f"用户创建失败: {exc}")
        else:
            print("用户创建成功！")


def demo_10_error_libraries() -> None:
    print("\n--- 错误处理库的使用 ---")
    print("Rust 社区提供了一些优秀的错误处理库，可以简化错误处理代码：")
    print("1. thiserror: 主要用于定义库的错误类型")
    print("2. anyhow: 主要用于应用程序中的错误处理")

    print("\n使用 thiserror 的优势：")
    print("- 自动派生常见的 trait（如 Debug、Display）")
    print("- 简化 From trait 的实现")
    print("- 支持错误原因链接")

    print("\n使用 anyhow 的优势：")
    print("- 可以处理任何实现了 Error trait 的错误类型")
    print("- 提供了方便的上下文添加方法")
    print("- 简化错误处理代码")

    print("\n要使用这些库，需要在 Cargo.toml 中添加依赖:")
    print("[dependencies]")
    print('thiserror = "1.0"')
    print('anyhow = "1.0"')

    print("\n注意: 由于我们没有在当前项目中添加这些依赖,所以这里不提供具体的代码示例.")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第8课：错误处理 ===")
    print("本示例将介绍 Rust 中的错误处理机制。\n")
    demo_1_error_types()
    demo_2_panic()
    demo_3_result()
    demo_4_propagation()
    demo_5_custom_errors()
    demo_6_conversion()
    demo_7_chaining()
    demo_8_unwrap_and_expect()
    demo_9_best_practices()
    demo_10_error_libraries()


if __name__ == "__main__":
    run_all()
