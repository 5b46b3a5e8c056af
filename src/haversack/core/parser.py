"""规则解析：一行文本 → Rule。"""

from __future__ import annotations

import warnings
from typing import Iterable, List

from ..config import RuleConfig
from ..models.bag import BagColor, Content, Rule
from .text_utils import tokenize


def parse_content(clause: str, config: RuleConfig | None = None) -> Content | None:
    """解析 "2 muted yellow bags" 这样的内容子句。

    数量不是正整数（包括 "no other bags"）或词元不足时返回 None，
    只丢弃这一个子句。
    """

    config = config or RuleConfig()
    tokens = tokenize(clause, config.bag_words)
    if len(tokens) < 3:
        return None
    try:
        quantity = int(tokens[0])
    except ValueError:
        return None
    if quantity < 1:
        return None
    return Content(quantity=quantity, color=BagColor(tokens[1], tokens[2]))


def parse_rule(line: str, config: RuleConfig | None = None) -> Rule | None:
    """解析一整行规则；空行或结构错误的行返回 None。

    "no other bags" 的行得到 contents 为空的 Rule，而不是 None。
    """

    config = config or RuleConfig()
    if not line or not line.strip():
        return None
    outer, found, inner = line.partition(config.separator)
    if not found:
        return None
    outer_tokens = tokenize(outer, config.bag_words)
    if len(outer_tokens) != 2:
        return None
    container = BagColor(outer_tokens[0], outer_tokens[1])
    contents = []
    for clause in inner.split(config.clause_separator):
        content = parse_content(clause, config)
        if content is not None:
            contents.append(content)
    return Rule(container=container, contents=tuple(contents))


def parse_rules(lines: Iterable[str], config: RuleConfig | None = None) -> List[Rule]:
    """逐行解析，坏行只影响自己。"""

    config = config or RuleConfig()
    rules: List[Rule] = []
    for line_number, line in enumerate(lines, start=1):
        rule = parse_rule(line, config)
        if rule is not None:
            rules.append(rule)
            continue
        if config.warn_on_malformed and line.strip():
            warnings.warn(
                f"第 {line_number} 行不是有效规则，已跳过：{line.strip()!r}",
                RuntimeWarning,
            )
    return rules
