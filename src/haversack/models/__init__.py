"""数据模型。"""

from .bag import BagColor, Content, Rule
from .graph import ContainmentGraph, EdgeData

__all__ = ["BagColor", "Content", "ContainmentGraph", "EdgeData", "Rule"]
