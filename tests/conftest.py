"""Pytest configuration and shared fixtures.

No sys.path hacks - tests should import from installed wrapkit package.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest


def pytest_addoption(parser):
    """Add gated perf test option."""
    parser.addoption(
        "--run-perf",
        action="store_true",
        default=False,
        help="Run performance sentinel benchmarks (gated)."
    )


def pytest_collection_modifyitems(config, items):
    """Skip perf-marked tests unless --run-perf is set."""
    if config.getoption("--run-perf"):
        return
    skip_perf = pytest.mark.skip(reason="perf tests gated; pass --run-perf")
    for item in items:
        if "perf" in item.keywords:
            item.add_marker(skip_perf)


@dataclass
class Pilot:
    name: str
    age: int


@dataclass
class Mission:
    name: str
    launchLiveStreamURL: Optional[str] = None
    lastPilot: Optional[Pilot] = None
    crew: List[Pilot] = field(default_factory=list)


@pytest.fixture
def pilot():
    return Pilot(name="John", age=28)


@pytest.fixture
def mission():
    return Mission(
        name="Apollo",
        crew=[Pilot(name="Neil", age=38), Pilot(name="Buzz", age=39)],
    )
