from __future__ import annotations
from collections import Counter
from typing import Iterable, Protocol


class _HasCode(Protocol):
    code: str


def summarize_warnings(warnings: Iterable[_HasCode]) -> Counter[str]:
    c: Counter[str] = Counter()
    for w in warnings:
        c[w.code or "UNKNOWN"] += 1
    return c
