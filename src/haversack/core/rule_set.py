"""规则集与两类查询。"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Set, Tuple

from ..config import RuleConfig
from ..models.bag import BagColor, Content, Rule
from ..models.graph import ContainmentGraph
from .parser import parse_rules
from .text_utils import split_lines


@dataclass(frozen=True)
class QueryResult:
    """交给调用方的两个答案。"""

    container_count: int
    total_bags: int


class RuleSet:
    """一次输入构建出的全部规则，构建后只读。

    - 空内容规则不进入图，只记入 leaf_colors；
    - 同一容器颜色出现多次时，先出现的规则生效。
    """

    def __init__(self, rules: Iterable[Rule], config: RuleConfig | None = None) -> None:
        self.config = config or RuleConfig()
        self.graph = ContainmentGraph()
        self._rules: Dict[BagColor, Rule] = {}
        leaf_colors: Set[BagColor] = set()
        for rule in rules:
            if rule.container in self._rules or rule.container in leaf_colors:
                if self.config.warn_on_duplicates:
                    warnings.warn(
                        f"重复的规则：{rule.container}，保留先出现的一条。",
                        RuntimeWarning,
                    )
                continue
            if rule.is_empty:
                leaf_colors.add(rule.container)
                continue
            self._rules[rule.container] = rule
            for content in rule.contents:
                self.graph.add_edge(rule.container, content.color, content.quantity)
        self.leaf_colors = frozenset(leaf_colors)

    @classmethod
    def from_lines(cls, lines: Iterable[str], config: RuleConfig | None = None) -> "RuleSet":
        config = config or RuleConfig()
        return cls(parse_rules(lines, config), config)

    @classmethod
    def from_text(cls, text: str, config: RuleConfig | None = None) -> "RuleSet":
        return cls.from_lines(split_lines(text), config)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, color: object) -> bool:
        return color in self._rules

    def __iter__(self) -> Iterator[BagColor]:
        return iter(self._rules)

    def contents_of(self, color: BagColor) -> Tuple[Content, ...]:
        rule = self._rules.get(color)
        if rule is None:
            return ()
        return rule.contents

    def rules(self) -> List[Rule]:
        return list(self._rules.values())

    def known_colors(self) -> Set[BagColor]:
        """所有出现过的颜色：容器、内容与空规则。"""

        colors = set(self.graph.nodes())
        colors.update(self.leaf_colors)
        return colors

    def describe(self) -> str:
        return "\n".join(
            rule.describe(self.config.separator, self.config.empty_marker)
            for rule in self._rules.values()
        )

    def possible_containers(self, target: BagColor) -> Set[BagColor]:
        """能直接或间接装下 target 的所有颜色。

        反向广度传播：每轮把直接装有前沿颜色的容器加入结果，
        只有新出现的颜色进入下一轮前沿，因此有环也会停下。
        target 本身只有在环绕回自己时才会被计入。
        """

        found: Set[BagColor] = set()
        frontier = {target}
        while frontier:
            new_frontier: Set[BagColor] = set()
            for color in frontier:
                new_frontier.update(self.graph.neighbors(color, reverse=True))
            new_frontier -= found
            found |= new_frontier
            frontier = new_frontier
        return found

    def count_possible_containers(self, target: BagColor) -> int:
        return len(self.possible_containers(target))

    def count_total_contained_bags(self, target: BagColor) -> int:
        """一个 target 袋子里总共要装多少个袋子（逐层乘上数量）。

        前提：规则无环；有环时会以 RecursionError 结束。
        """

        memo: Dict[BagColor, int] = {}

        def total(color: BagColor) -> int:
            if color in memo:
                return memo[color]
            count = 0
            for inner, edge in self.graph.neighbors(color).items():
                count += edge.quantity * (1 + total(inner))
            memo[color] = count
            return count

        return total(target)

    def answer(self, target: BagColor | None = None) -> QueryResult:
        target = target or self.config.target
        return QueryResult(
            container_count=self.count_possible_containers(target),
            total_bags=self.count_total_contained_bags(target),
        )
