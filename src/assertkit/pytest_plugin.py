"""pytest plugin: the ``assert_reporter`` fixture.

Registered through the ``pytest11`` entry point, so it is active as soon as
assertkit is installed::

    from assertkit import equal

    def test_sum(assert_reporter):
        equal(assert_reporter, sum([1, 2]), 3)

Settings are read from ``[tool.assertkit]`` in the ``pyproject.toml`` at the
pytest root directory.
"""
from __future__ import annotations

from collections.abc import Iterator

import pytest

from assertkit.config import AssertConfig, load_config
from assertkit.reporting.reporter import PytestReporter

_CONFIG_KEY = pytest.StashKey[AssertConfig]()


@pytest.fixture()
def assert_reporter(request: pytest.FixtureRequest) -> Iterator[PytestReporter]:
    """Yield a ``PytestReporter``; continued failures fail the test at teardown."""
    stash = request.config.stash
    if _CONFIG_KEY not in stash:
        stash[_CONFIG_KEY] = load_config(request.config.rootpath / "pyproject.toml")
    reporter = PytestReporter(stash[_CONFIG_KEY])
    yield reporter
    reporter.raise_collected()
