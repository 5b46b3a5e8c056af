"""规则文本的规范化与切词工具。"""

from __future__ import annotations

import re
from typing import Iterable, List

# 规则行里只会出现句点与逗号，这里顺带兼容其他常见标点。
PUNCTUATION_PATTERN = re.compile(r"[.,;:!?\"']")

BAG_WORDS = ("bag", "bags")


def normalize_text(text: str) -> str:
    """删除标点并压缩空白，用于切词前的净化。"""

    if not text:
        return ""
    return " ".join(PUNCTUATION_PATTERN.sub(" ", text).split())


def tokenize(text: str, ignored: Iterable[str] = BAG_WORDS) -> List[str]:
    """切出有效词元，忽略 "bag"/"bags" 之类的量词。"""

    skip = set(ignored)
    return [token for token in normalize_text(text).split() if token not in skip]


def split_lines(text: str) -> List[str]:
    """按换行拆分文本，保留空行（由解析器负责跳过）。"""

    if not text:
        return []
    return text.splitlines()
