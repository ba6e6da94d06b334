"""Lesson 6: the standard collections and what they cost.

``Vec`` is a ``list``, ``String`` a ``str``, ``HashMap`` a ``dict`` and
``HashSet`` a ``set``. The ordered ``BTreeMap``/``BTreeSet`` pair is shown
by sorting on output. Hash-based containers print in insertion order here,
where Rust's order is unspecified.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from ..formatting import debug, display, some


def demo_1_vector() -> None:
    print("\n--- Vector (动态数组) ---")

    v1: List[int] = []
    print(f"创建空 Vector: v1 = {debug(v1)}")

    v2 = [1, 2, 3, 4, 5]
    print(f"使用 vec! 宏创建 Vector: v2 = {debug(v2)}")

    v1.append(10)
    v1.append(20)
    v1.append(30)
    print(f"添加元素后: v1 = {debug(v1)}")

    print(f"v2 的第一个元素: {v2[0]}")

    second: Optional[int] = v2[1] if len(v2) > 1 else None
    if second is not None:
        print(f"v2 的第二个元素: {second}")
    else:
        print("索引超出范围")

    print("遍历 v2 中的元素:")
    for element in v2:
        print(f"{element} ")

    print(f"修改前: v1 = {debug(v1)}")
    if v1:
        v1[0] = 100
    print(f"修改后: v1 = {debug(v1)}")

    print(f"v1 的长度: {len(v1)}")
    print(f"v1 是否为空: {display(not v1)}")


def demo_2_string() -> None:
    """``len`` of a Rust string counts UTF-8 bytes, not characters."""
    print("\n--- String (字符串) ---")

    s1 = ""
    print(f"创建空字符串: s1 = '{s1}'")

    s2 = "Hello"
    print(f"使用 from 方法创建字符串: s2 = '{s2}'")

    s1 += "Rust"
    print(f"使用 push_str 添加字符串: s1 = '{s1}'")

    s1 += "!"
    print(f"使用 push 添加字符: s1 = '{s1}'")

    s3 = s2 + " " + s1
    print(f"使用 + 运算符拼接字符串: s3 = '{s3}'")

    s4 = f"{s2} {s1} World"
    print(f"使用 format! 宏拼接字符串: s4 = '{s4}'")

    print(f"s4 的长度: {len(s4.encode('utf-8'))}")

    print("遍历 s4 中的字符:")
    for c in s4:
        print(c)

    print("遍历 s4 中的前 10 个字节:")
    for i, byte in enumerate(s4.encode("utf-8")[:10]):
        print(f"字节 {i}: {byte}")


def demo_3_hashmap() -> None:
    print("\n--- HashMap (哈希映射) ---")

    scores: Dict[str, int] = {}
    scores["Alice"] = 100
    scores["Bob"] = 85
    scores["Charlie"] = 90
    print(f"HashMap: {debug(scores)}")

    name = "Alice"
    score = scores.get(name)
    if score is not None:
        print(f"{name} 的分数: {score}")
    else:
        print(f"未找到 {name} 的分数")

    print("遍历 HashMap:")
    for key, value in scores.items():
        print(f"{key}: {value}")

    name2 = "David"
    print(f"HashMap 中是否包含 {name2}: {display(name2 in scores)}")

    # ``insert`` hands back the value it replaced.
    old_score = scores.get("Alice")
    scores["Alice"] = 105
    print(f"Alice 的旧分数: {some(old_score)}")
    print(f"更新后的 HashMap: {debug(scores)}")

    scores.setdefault("David", 75)
    scores.setdefault("Alice", 0)
    print(f"使用 entry 方法后的 HashMap: {debug(scores)}")

    print(f"HashMap 的长度: {len(scores)}")

    del scores[name]
    print(f"删除 Alice 后的 HashMap: {debug(scores)}")


def demo_4_hashset() -> None:
    print("\n--- HashSet (哈希集合) ---")

    numbers: Set[int] = set()
    for n in (1, 2, 3, 4, 5):
        numbers.add(n)

    inserted = 3 not in numbers
    numbers.add(3)
    print(f"插入重复元素 3 的结果: {display(inserted)}")

    print(f"HashSet: {debug(numbers)}")

    print(f"HashSet 中是否包含 3: {display(3 in numbers)}")
    print(f"HashSet 中是否包含 10: {display(10 in numbers)}")

    print("遍历 HashSet:")
    for number in sorted(numbers):
        print(number)

    print(f"HashSet 的长度: {len(numbers)}")

    numbers.discard(3)
    print(f"删除 3 后的 HashSet: {debug(numbers)}")

    set1 = {1, 2, 3, 4, 5}
    set2 = {4, 5, 6, 7, 8}
    print(f"set1 和 set2 的交集: {debug(set1 & set2)}")
    set1 |= set2
    print(f"set1 和 set2 的并集: {debug(set1)}")


def demo_5_btreemap() -> None:
    print("\n--- BTreeMap (有序映射) ---")

    scores = {"Charlie": 90, "Alice": 100, "Bob": 85}
    ordered = dict(sorted(scores.items()))
    print(f"BTreeMap: {debug(ordered)}")

    print("遍历 BTreeMap (按键排序):")
    for key, value in ordered.items():
        print(f"{key}: {value}")


def demo_6_btreeset() -> None:
    print("\n--- BTreeSet (有序集合) ---")

    numbers = {5, 2, 7, 1, 9}
    print(f"BTreeSet: {debug(numbers)}")

    print("遍历 BTreeSet (自动排序):")
    for number in sorted(numbers):
        print(number)


def demo_7_iteration() -> None:
    print("\n--- 集合的遍历和迭代 ---")

    v = [10, 20, 30, 40, 50]
    print("遍历 Vector (不可变引用):")
    for element in v:
        print(element)

    mv = [10, 20, 30, 40, 50]
    print("\n遍历 Vector (可变引用，增加值):")
    for i in range(len(mv)):
        mv[i] += 5
        print(mv[i])

    print("\n使用 into_iter 消耗 Vector:")
    print(f"元素总和: {sum(v)}")

    mapping = {"one": 1, "two": 2, "three": 3}

    print("\n遍历 HashMap 的键:")
    for key in mapping:
        print(key)

    print("\n遍历 HashMap 的值:")
    for value in mapping.values():
        print(value)

    print("\n遍历 HashMap 的键值对:")
    for key, value in mapping.items():
        print(f"{key}: {value}")


def demo_8_common_operations() -> None:
    print("\n--- 集合的常见操作 ---")

    v = [1, 2, 3, 4, 5]
    print(f"原始 Vector: {debug(v)}")

    v.append(6)
    print(f"添加元素后: {debug(v)}")

    last = v.pop() if v else None
    print(f"删除的最后一个元素: {some(last)}")
    print(f"删除后: {debug(v)}")

    v.insert(2, 100)
    print(f"在索引 2 插入 100 后: {debug(v)}")

    removed = v.pop(2)
    print(f"删除索引 2 的元素: {removed}")
    print(f"删除后: {debug(v)}")

    s = "Hello"
    print(f"\n原始字符串: '{s}'")
    s += " Rust"
    print(f"追加字符串后: '{s}'")
    print(f"以 'Hello' 开头: {display(s.startswith('Hello'))}")
    print(f"以 'Rust' 结尾: {display(s.endswith('Rust'))}")
    print(f"替换后: '{s.replace('Rust', 'World')}'")


PERFORMANCE_NOTES = (
    ("Vector 性能特点:", (
        "随机访问: O(1)",
        "在末尾添加/删除元素: 平均 O(1)",
        "在中间插入/删除元素: O(n)",
    )),
    ("String 性能特点:", (
        "追加字符串到末尾: 平均 O(1)",
        "随机访问字符: O(n) (因为 UTF-8 编码)",
    )),
    ("HashMap 性能特点:", (
        "插入键值对: 平均 O(1)",
        "查找键值对: 平均 O(1)",
        "删除键值对: 平均 O(1)",
        "遍历: O(n)",
    )),
    ("BTreeMap 性能特点:", (
        "插入键值对: O(log n)",
        "查找键值对: O(log n)",
        "删除键值对: O(log n)",
        "有序遍历: O(n)",
    )),
    ("选择集合的建议:", (
        "需要动态数组: 使用 Vector",
        "需要键值对映射且不需要排序: 使用 HashMap",
        "需要键值对映射且需要排序: 使用 BTreeMap",
        "需要存储唯一值且不需要排序: 使用 HashSet",
        "需要存储唯一值且需要排序: 使用 BTreeSet",
    )),
)


def demo_9_performance() -> None:
    print("\n--- 集合的性能特点 ---")
    for index, (heading, notes) in enumerate(PERFORMANCE_NOTES):
        print(heading if index == 0 else f"\n{heading}")
        for note in notes:
            print(f"- {note}")


def demo_10_ownership() -> None:
    """Moving values into a collection versus storing borrowed ones."""
    print("\n--- 集合的所有权问题 ---")

    owned = ["hello", "world"]
    print(f"Vector 中的字符串: {debug(owned)}")

    s3, s4 = "rust", "programming"
    borrowed = [s3, s4]
    print(f"Vector 中的字符串引用: {debug(borrowed)}")
    print(f"s3: {s3}, s4: {s4}")

    print(f"HashMap: {debug({'one': '一'})}")

    key2, value2 = "two", "二"
    print(f"HashMap with references: {debug({key2: value2})}")
    print(f"key2: {key2}, value2: {value2}")


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第6课：常见集合及其操作 ===")
    print("本示例将介绍 Rust 中的常见集合类型和操作方法。\n")
    demo_1_vector()
    demo_2_string()
    demo_3_hashmap()
    demo_4_hashset()
    demo_5_btreemap()
    demo_6_btreeset()
    demo_7_iteration()
    demo_8_common_operations()
    demo_9_performance()
    demo_10_ownership()


if __name__ == "__main__":
    run_all()
