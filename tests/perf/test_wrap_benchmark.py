"""Performance sentinels (gated)."""

from __future__ import annotations

import pytest

from wrapkit import wrap
from wrapkit._internal.benchmarks import (
    MAX_DEEP_CHAIN_MS,
    MAX_WIDE_LIST_MS,
    build_deep_chain,
    build_wide_table,
)


def _assert_budget(benchmark, max_ms: float) -> None:
    mean_ms = benchmark.stats.stats.mean * 1000.0
    assert mean_ms < max_ms, f"Mean {mean_ms:.2f} ms exceeded budget {max_ms:.2f} ms"


@pytest.mark.perf
def test_deep_chain_sentinel(benchmark):
    root = build_deep_chain()
    result = benchmark.pedantic(lambda: wrap(root), rounds=3, iterations=1)

    depth = 0
    node = result
    while "child" in node:
        node = node["child"]
        depth += 1
    assert depth == 149

    _assert_budget(benchmark, MAX_DEEP_CHAIN_MS)


@pytest.mark.perf
def test_wide_table_sentinel(benchmark):
    table = build_wide_table()
    result = benchmark.pedantic(lambda: wrap(table), rounds=3, iterations=1)

    assert len(result["rows"]) == 5000
    assert result["rows"][10] == {"id": 10, "name": "row-10", "tags": ["a", "b"], "scores": {"x": 10, "y": 20}}

    _assert_budget(benchmark, MAX_WIDE_LIST_MS)
