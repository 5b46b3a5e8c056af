"""全局配置与默认参数。"""

from dataclasses import dataclass, field
from typing import Tuple

from .models.bag import BagColor


@dataclass
class RuleConfig:
    """解析与查询的可调参数集合。

    默认值对应标准输入格式：
    ``<descriptor> <color> bags contain <N> <descriptor> <color> bag[s], ...``
    """

    # 外层袋子与内容之间的分隔词
    separator: str = " contain "
    # 内容子句之间的分隔符
    clause_separator: str = ","
    # 切词时忽略的量词
    bag_words: Tuple[str, ...] = ("bag", "bags")
    # 空内容的写法，渲染规则时使用
    empty_marker: str = "no other bags"
    # 默认查询目标
    target: BagColor = field(default_factory=lambda: BagColor("shiny", "gold"))
    # 跳过格式错误的行时是否发出警告（默认静默）
    warn_on_malformed: bool = False
    # 遇到重复的容器颜色时是否发出警告（先出现的规则生效）
    warn_on_duplicates: bool = True
