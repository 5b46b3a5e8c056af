"""读取规则文件并输出两个统计结果。"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List

from haversack import BagColor, RuleSet


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="统计袋子容纳规则")
    parser.add_argument("path", help="规则文件路径（每行一条规则）")
    parser.add_argument("--target", default=None, help="目标颜色，例如 \"shiny gold\"")
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"找不到规则文件：{path}")

    target = None
    if args.target:
        try:
            target = BagColor.parse(args.target)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    rule_set = RuleSet.from_text(path.read_text(encoding="utf-8"))
    result = rule_set.answer(target)
    print(f"Part 1: {result.container_count}")
    print(f"Part 2: {result.total_bags}")


if __name__ == "__main__":
    main()
