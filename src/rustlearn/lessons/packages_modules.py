"""Lesson 7: packages, crates, modules and visibility.

Rust's inline ``mod`` blocks have no direct Python spelling inside a
function, so each one is modelled as a :class:`types.SimpleNamespace`
holding the module's public items. Private items follow the Python
convention of a leading underscore and are simply left out of the
namespace.
"""

from __future__ import annotations

import types
from dataclasses import dataclass, field
from typing import List, Tuple

from ..formatting import display


@dataclass
class Product:
    id: int
    name: str
    price: float
    category: str

    def display(self) -> None:
        print(f"Product #{self.id}: {self.name}, ${display(self.price)}, Category: {self.category}")


@dataclass
class ShoppingCart:
    _items: List[Tuple[Product, int]] = field(default_factory=list)

    def add_item(self, product: Product, quantity: int) -> None:
        self._items.append((product, quantity))

    def remove_item(self, product_id: int) -> None:
        self._items = [(p, q) for p, q in self._items if p.id != product_id]

    def calculate_total(self) -> float:
        total = 0.0
        for product, quantity in self._items:
            total += product.price * quantity
        return total

    def display(self) -> None:
        print("购物车内容：")
        for product, quantity in self._items:
            product.display()
            print(f"数量: {quantity}")
            print(f"小计: ${display(product.price * quantity)}")
            print("---")
        print(f"总计: ${display(self.calculate_total())}")


@dataclass(frozen=True)
class Customer:
    id: int
    name: str
    email: str


ecommerce = types.SimpleNamespace(
    products=types.SimpleNamespace(Product=Product),
    cart=types.SimpleNamespace(ShoppingCart=ShoppingCart),
    customer=types.SimpleNamespace(Customer=Customer),
)


def demo_1_packages_and_crates() -> None:
    print("\n--- 包和 Crate 的概念 ---")
    print("Rust 的代码组织层次：")
    print("1. 包（Package）：是一个项目的基本单位，包含一个 Cargo.toml 文件")
    print("   - 可以包含多个 Crate")
    print("   - 至少包含一个 Crate")
    print("2. Crate：是一个编译单元，可以生成可执行文件或库")
    print("   - 二进制 Crate（Binary Crate）：生成可执行文件，有 main 函数")
    print("   - 库 Crate（Library Crate）：生成库文件，没有 main 函数")
    print("3. 模块（Module）：用于组织 Crate 中的代码，可以嵌套")

    print("\n当前项目结构：")
    print("- rustlearn/ (包)")
    print("  - Cargo.toml (包配置文件)")
    print("  - src/ (源代码目录)")
    print("    - main.rs (二进制 Crate 的入口文件)")
    print("    - lib.rs (库 Crate 的入口文件，如果存在)")


def demo_2_module_definition() -> None:
    print("\n--- 模块的定义 ---")
    print("模块的定义使用 'mod' 关键字：")
    print("mod module_name {")
    print("    // 模块内容")
    print("}")

    def _add(a: int, b: int) -> int:
        return a + b

    def subtract(a: int, b: int) -> int:
        return a - b

    # Only ``subtract`` is exported; ``_add`` stays private to the block.
    math = types.SimpleNamespace(subtract=subtract)
    print(f"调用公共模块函数 math::subtract(10, 4) = {math.subtract(10, 4)}")


def demo_3_visibility() -> None:
    print("\n--- 可见性控制 ---")
    print("Rust 使用 'pub' 关键字控制可见性：")
    print("- 默认情况下，所有内容都是私有的")
    print("- 使用 'pub' 使其变为公共的")
    print("- 私有项只能在定义它的模块及其子模块中访问")

    @dataclass
    class _Employee:
        name: str
        position: str

    class Department:
        def __init__(self, name: str) -> None:
            self._name = name
            self._employees: List[_Employee] = []

        def get_name(self) -> str:
            return self._name

    @dataclass
    class Project:
        name: str
        budget: int

    def create_project(name: str, budget: int) -> Project:
        return Project(name=name, budget=budget)

    company = types.SimpleNamespace(Department=Department, create_project=create_project)

    engineering = company.Department("Engineering")
    print(f"部门名称: {engineering.get_name()}")

    website = company.create_project("Website Redesign", 50000)
    print(f"项目名称: {website.name}, 预算: {website.budget}")


def demo_4_use_keyword() -> None:
    print("\n--- 使用 use 关键字导入模块 ---")
    print("'use' 关键字用于导入模块，避免每次都写完整路径：")

    @dataclass
    class Guitar:
        brand: str
        model: str

        def play(self) -> None:
            print(f"Playing {self.brand} {self.model}")

    @dataclass
    class Piano:
        brand: str
        model: str

    @dataclass
    class Drums:
        brand: str
        pieces: int

    instruments = types.SimpleNamespace(
        strings=types.SimpleNamespace(Guitar=Guitar, Piano=Piano),
        percussion=types.SimpleNamespace(Drums=Drums),
    )

    guitar1 = instruments.strings.Guitar("Fender", "Stratocaster")
    print(f"不使用 use 关键字: 创建了 {guitar1.brand} {guitar1.model}")

    strings = instruments.strings
    piano = strings.Piano("Yamaha", "U3")
    print(f"使用 use 导入模块: 创建了 {piano.brand} {piano.model}")

    imported_guitar = instruments.strings.Guitar
    guitar2 = imported_guitar("Gibson", "Les Paul")
    print(f"使用 use 导入特定类型: 创建了 {guitar2.brand} {guitar2.model}")
    guitar2.play()

    DrumKit = instruments.percussion.Drums
    drums = DrumKit("Pearl", 5)
    print(f"使用 use as 重命名导入: 创建了 {drums.brand} 鼓组，共 {drums.pieces} 件")

    everything = vars(instruments.strings)
    guitar3 = everything["Guitar"]("Ibanez", "RG")
    piano2 = everything["Piano"]("Steinway", "Model D")
    print(f"使用 * 导入所有公共项: 创建了 {guitar3.brand} 和 {piano2.brand} {piano2.model}")


def demo_5_nested_modules() -> None:
    print("\n--- 嵌套模块 ---")
    print("Rust 允许模块嵌套，形成层次结构：")

    @dataclass
    class Professor:
        name: str
        subject: str

        def teach(self) -> None:
            print(f"Professor {self.name} is teaching {self.subject}")

    @dataclass
    class Project:
        title: str
        funding: int

    university = types.SimpleNamespace(
        faculty=types.SimpleNamespace(
            department=types.SimpleNamespace(
                Professor=Professor,
                research=types.SimpleNamespace(Project=Project),
            ),
        ),
    )

    prof = university.faculty.department.Professor("Dr. Smith", "Computer Science")
    prof.teach()

    research_project = university.faculty.department.research.Project
    project = research_project("AI Research", 100000)
    print(f"研究项目: {project.title},  funding: ${project.funding}")


def demo_6_file_structure() -> None:
    print("\n--- 模块文件结构 ---")
    print("Rust 中模块与文件系统的关系：")
    print("1. 每个文件都是一个模块")
    print("2. 模块可以通过两种方式定义：")
    print("   a. 在文件中使用 'mod' 关键字定义内联模块")
    print("   b. 使用单独的文件或目录来定义模块")
    print("3. 对于同名的目录和文件，目录会被优先使用")

    print("\n模块文件结构示例：")
    for line in (
        "src/",
        "  main.rs (或 lib.rs)",
        "  module1.rs (模块文件)",
        "  module2.rs (模块文件)",
        "  module3/ (模块目录)",
        "    mod.rs (模块目录的入口文件)",
        "    submodule1.rs",
        "    submodule2.rs",
    ):
        print(line)

    print("\n在当前项目中，我们的模块结构：")
    for line in (
        "src/",
        "  main.rs (主入口文件)",
        "  lesson_01.rs (第1课模块)",
        "  lesson_02.rs (第2课模块)",
        "  ...",
        "  lesson_07.rs (当前模块)",
    ):
        print(line)


def demo_7_paths() -> None:
    print("\n--- Rust 中的路径 ---")
    print("Rust 中有两种路径表示方式：")
    print("1. 绝对路径：从 crate 根开始，使用 crate:: 前缀")
    print("2. 相对路径：从当前模块开始，使用 self::、super:: 或模块名称")

    @dataclass
    class Dog:
        name: str

        def bark(self) -> None:
            print(f"{self.name} is barking!")

    mammals = types.SimpleNamespace(Dog=Dog)

    @dataclass
    class Sparrow:
        name: str

        def chirp(self) -> None:
            print(f"{self.name} is chirping!")

        def interact_with_mammal(self) -> None:
            # ``super::mammals`` resolves to the sibling namespace.
            mammals.Dog("Rex").bark()
            mammals.Dog("Fido").bark()
            print(f"{self.name} is watching the dogs")

    animals = types.SimpleNamespace(
        mammals=mammals,
        birds=types.SimpleNamespace(Sparrow=Sparrow),
    )

    animals.mammals.Dog("Buddy").bark()
    sparrow = animals.birds.Sparrow("Tweety")
    sparrow.chirp()
    sparrow.interact_with_mammal()


def demo_8_external_crates() -> None:
    print("\n--- 外部包的使用 ---")
    print("在 Rust 中使用外部包的步骤：")
    print("1. 在 Cargo.toml 文件中添加依赖")
    print("2. 使用 'use' 关键字导入外部包中的项")

    print("\n例如，要使用 rand 包生成随机数：")
    print("// 在 Cargo.toml 中添加：")
    print("[dependencies]")
    print('rand = "0.8.5"\n')

    print("// 在代码中使用：")
    print("use rand::Rng;")
    print("fn main() {")
    print("    let random_number = rand::thread_rng().gen_range(1..=100);")
    print('    println!("随机数: {}" , random_number);')
    print("}\n")

    print("当前项目没有添加额外的外部依赖，所以我们不能实际演示外部包的使用。")
    print("如果需要使用外部包，请在 Cargo.toml 文件中添加依赖。")


def demo_9_workspaces() -> None:
    print("\n--- 工作空间 ---")
    print("工作空间（Workspace）是一组共享相同 Cargo.lock 和输出目录的包：")
    print("1. 用于管理多个相互依赖的包")
    print("2. 创建一个根目录，包含 Cargo.toml 文件定义工作空间")

    print("\n工作空间的 Cargo.toml 示例：")
    print("[workspace]")
    print("members = [")
    print('    "package1",')
    print('    "package2",')
    print('    "path/to/package3",')
    print("]")

    print("\n工作空间的优势：")
    print("- 共享依赖，避免重复下载")
    print("- 统一构建和测试")
    print("- 方便管理多包项目")


def demo_10_practical_example() -> None:
    """A small storefront split into products, cart and customer modules."""
    print("\n--- 实用的模块组织示例 ---")

    make_product = ecommerce.products.Product
    laptop = make_product(1, "Laptop", 999.99, "Electronics")
    phone = make_product(2, "Smartphone", 499.99, "Electronics")
    book = make_product(3, "Rust Programming Book", 29.99, "Books")

    customer = ecommerce.customer.Customer(101, "John Doe", "john@example.com")

    cart = ecommerce.cart.ShoppingCart()
    cart.add_item(laptop, 1)
    cart.add_item(phone, 2)
    cart.add_item(book, 3)

    print(f"客户: {customer.name}, Email: {customer.email}")
    cart.display()

    print("\n删除产品 2 后的购物车：")
    cart.remove_item(2)
    cart.display()


def run_all() -> None:
    """Execute every demo in lesson order."""
    print("=== 第7课：包和模块 ===")
    print("本示例将介绍 Rust 中的包和模块系统。\n")
    demo_1_packages_and_crates()
    demo_2_module_definition()
    demo_3_visibility()
    demo_4_use_keyword()
    demo_5_nested_modules()
    demo_6_file_structure()
    demo_7_paths()
    demo_8_external_crates()
    demo_9_workspaces()
    demo_10_practical_example()


if __name__ == "__main__":
    run_all()
