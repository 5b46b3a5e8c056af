"""袋子颜色、内容与规则模型。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..core.text_utils import tokenize


@dataclass(frozen=True, order=True)
class BagColor:
    """袋子身份：(修饰词, 颜色)，按值比较。"""

    descriptor: str
    color: str

    @classmethod
    def parse(cls, text: str) -> "BagColor":
        """从 "shiny gold" / "shiny gold bags." 之类的文本构造。"""

        tokens = tokenize(text)
        if len(tokens) != 2:
            raise ValueError(f"Expected '<descriptor> <color>', got {text!r}")
        return cls(tokens[0], tokens[1])

    def describe(self, quantity: int | None = None) -> str:
        if quantity is None:
            return f"{self} bags"
        noun = "bag" if quantity == 1 else "bags"
        return f"{quantity} {self} {noun}"

    def __str__(self) -> str:
        return f"{self.descriptor} {self.color}"


@dataclass(frozen=True)
class Content:
    """容器内直接需要的 quantity 个 color 袋子。"""

    quantity: int
    color: BagColor

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Content quantity must be positive, got {self.quantity}")

    def __str__(self) -> str:
        return self.color.describe(self.quantity)


@dataclass(frozen=True)
class Rule:
    """一条容纳规则。

    contents 为空表示 "contains no other bags"：规则存在，只是不产生边。
    """

    container: BagColor
    contents: Tuple[Content, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.contents

    def contains(self, color: BagColor) -> bool:
        """是否直接装有 color（不看更深层级）。"""

        return any(content.color == color for content in self.contents)

    def describe(self, separator: str = " contain ", empty_marker: str = "no other bags") -> str:
        """渲染回输入格式的一行文本，可被解析器原样读回。"""

        if self.is_empty:
            body = empty_marker
        else:
            body = ", ".join(str(content) for content in self.contents)
        return f"{self.container.describe()}{separator}{body}."
