"""Handy Haversacks：袋子容纳规则的解析与查询。"""

from .config import RuleConfig
from .core.parser import parse_content, parse_rule, parse_rules
from .core.rule_set import QueryResult, RuleSet
from .models.bag import BagColor, Content, Rule

__all__ = [
    "BagColor",
    "Content",
    "QueryResult",
    "Rule",
    "RuleConfig",
    "RuleSet",
    "parse_content",
    "parse_rule",
    "parse_rules",
]
