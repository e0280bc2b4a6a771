"""Performance sentinel object graphs and budgets."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _budget_from_env(var_name: str, default_ms: float) -> float:
    raw = os.getenv(var_name)
    if not raw:
        return default_ms
    try:
        return float(raw)
    except ValueError:
        return default_ms


MAX_DEEP_CHAIN_MS = _budget_from_env("WRAPKIT_MAX_DEEP_CHAIN_MS", 200.0)
MAX_WIDE_LIST_MS = _budget_from_env("WRAPKIT_MAX_WIDE_LIST_MS", 500.0)


@dataclass
class ChainNode:
    index: int
    label: str
    child: Optional["ChainNode"] = None


@dataclass
class Row:
    id: int
    name: str
    tags: List[str] = field(default_factory=list)
    scores: dict = field(default_factory=dict)


@dataclass
class Table:
    rows: List[Row]


def build_deep_chain(depth: int = 150) -> ChainNode:
    """Linked chain of nested objects, ``depth`` levels deep."""
    node = ChainNode(index=depth - 1, label=f"n{depth - 1}")
    for i in range(depth - 2, -1, -1):
        node = ChainNode(index=i, label=f"n{i}", child=node)
    return node


def build_wide_table(rows: int = 5000) -> Table:
    """One object holding many small rows."""
    return Table(rows=[
        Row(id=i, name=f"row-{i}", tags=["a", "b"], scores={"x": i, "y": i * 2})
        for i in range(rows)
    ])
