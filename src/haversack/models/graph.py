"""包含关系图：只管颜色之间的边。"""

from dataclasses import dataclass
from typing import Dict, List

from .bag import BagColor


@dataclass
class EdgeData:
    """边的数据：容器里直接装了多少个目标颜色。"""

    quantity: int = 0


class ContainmentGraph:
    """有向图，边从容器指向被装的颜色。

    out_edges 用于向下累加数量，in_edges 用于向上找容器。
    """

    def __init__(self) -> None:
        self.out_edges: Dict[BagColor, Dict[BagColor, EdgeData]] = {}
        self.in_edges: Dict[BagColor, Dict[BagColor, EdgeData]] = {}

    def _ensure_node(self, node: BagColor) -> None:
        self.out_edges.setdefault(node, {})
        self.in_edges.setdefault(node, {})

    def add_edge(self, src: BagColor, dst: BagColor, quantity: int) -> None:
        """新增一条边；同一条规则重复列出同一颜色时数量累加。"""

        self._ensure_node(src)
        self._ensure_node(dst)
        edge = self.out_edges[src].get(dst)
        if edge is None:
            edge = EdgeData()
            self.out_edges[src][dst] = edge
            self.in_edges[dst][src] = edge
        edge.quantity += quantity

    def get_edge(self, src: BagColor, dst: BagColor) -> EdgeData | None:
        return self.out_edges.get(src, {}).get(dst)

    def neighbors(self, node: BagColor, *, reverse: bool = False) -> Dict[BagColor, EdgeData]:
        """获取邻居。

        reverse=False: node 直接装的颜色；
        reverse=True: 直接装有 node 的容器。
        """

        edges = self.in_edges if reverse else self.out_edges
        return dict(edges.get(node, {}))

    def nodes(self) -> List[BagColor]:
        return list(self.out_edges)

    def __contains__(self, node: object) -> bool:
        return node in self.out_edges
