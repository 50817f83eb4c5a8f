"""Reporting collaborators: where assertion failures go.

A ``Reporter`` exposes two ways to record a failure:

``report_and_continue(message)``
    Records the failure; the caller keeps running.
``report_and_abort(message)``
    Records the failure and unwinds the current check; never returns.

Three implementations are provided:

* ``PytestReporter`` delegates to ``pytest.fail``;
* ``TestCaseReporter`` delegates to a ``unittest.TestCase``;
* ``RecordingReporter`` captures failures so the assertion layer itself can
  be tested.

Usage
-----
::

    from assertkit import equal
    from assertkit.reporting import RecordingReporter

    recorder = RecordingReporter.record(lambda r: equal(r, 1, 2))
    assert recorder.failed
"""
from __future__ import annotations

import logging
import reprlib
import unittest
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import NoReturn

import pytest

from assertkit.config import DEFAULT_CONFIG, AssertConfig

logger = logging.getLogger(__name__)


class Reporter(ABC):
    """Abstract reporting collaborator.

    Parameters
    ----------
    config:
        Settings controlling how values are rendered in messages.
    """

    def __init__(self, config: AssertConfig | None = None) -> None:
        self.config: AssertConfig = config if config is not None else DEFAULT_CONFIG
        self._repr = reprlib.Repr()
        self._repr.maxstring = self.config.max_repr_length
        self._repr.maxother = self.config.max_repr_length

    @abstractmethod
    def report_and_continue(self, message: str) -> None:
        """Record a failure and return normally."""

    @abstractmethod
    def report_and_abort(self, message: str) -> NoReturn:
        """Record a failure and unwind the current check."""

    def describe(self, value: object) -> str:
        """Render ``value`` for a failure message, shortened per config."""
        return self._repr.repr(value)


class _CollectingReporter(Reporter):
    """Keeps the messages passed to ``report_and_continue``."""

    def __init__(self, config: AssertConfig | None = None) -> None:
        super().__init__(config)
        self.failures: list[str] = []

    def report_and_continue(self, message: str) -> None:
        logger.warning("Check failed: %s", message)
        self.failures.append(message)


class PytestReporter(_CollectingReporter):
    """Reporter for pytest test functions.

    Aborting calls ``pytest.fail``; continued failures are kept in
    ``failures`` until ``raise_collected`` is called.
    """

    def report_and_abort(self, message: str) -> NoReturn:
        logger.debug("Aborting check: %s", message)
        pytest.fail(message, pytrace=self.config.pytrace)

    def raise_collected(self) -> None:
        """Fail the running test if any continued failure was recorded."""
        if not self.failures:
            return
        count = len(self.failures)
        body = "\n".join(f"  - {failure}" for failure in self.failures)
        self.failures = []
        pytest.fail(f"{count} check(s) failed:\n{body}", pytrace=self.config.pytrace)


class TestCaseReporter(_CollectingReporter):
    """Reporter adapting a ``unittest.TestCase``.

    Parameters
    ----------
    case:
        The running test case; aborting calls ``case.fail``.
    config:
        Reporter settings.
    """

    __test__ = False  # not a pytest test class

    def __init__(self, case: unittest.TestCase, config: AssertConfig | None = None) -> None:
        super().__init__(config)
        self._case = case

    def report_and_abort(self, message: str) -> NoReturn:
        logger.debug("Aborting check: %s", message)
        self._case.fail(message)
        raise AssertionError(message)  # TestCase.fail always raises


class CheckAborted(Exception):
    """Raised by ``RecordingReporter.report_and_abort`` to unwind a check.

    Parameters
    ----------
    reporter:
        The recorder that raised it.
    message:
        The failure message.
    """

    def __init__(self, reporter: RecordingReporter, message: str) -> None:
        self.reporter = reporter
        super().__init__(message)


class RecordingReporter(Reporter):
    """Reporter that records failures instead of failing a test.

    Attributes
    ----------
    failed:
        True once any failure was reported.
    aborted:
        True once ``report_and_abort`` was called.
    messages:
        Every reported message, in order.
    """

    def __init__(self, config: AssertConfig | None = None) -> None:
        super().__init__(config)
        self.failed: bool = False
        self.aborted: bool = False
        self.messages: list[str] = []

    def report_and_continue(self, message: str) -> None:
        self.failed = True
        self.messages.append(message)

    def report_and_abort(self, message: str) -> NoReturn:
        self.failed = True
        self.aborted = True
        self.messages.append(message)
        raise CheckAborted(self, message)

    @classmethod
    def record(
        cls,
        check: Callable[[Reporter], object],
        config: AssertConfig | None = None,
    ) -> RecordingReporter:
        """Run ``check`` against a fresh recorder and return the recorder.

        Only the ``CheckAborted`` raised by that recorder is absorbed; any
        other exception propagates.
        """
        recorder = cls(config)
        try:
            check(recorder)
        except CheckAborted as exc:
            if exc.reporter is not recorder:
                raise
        return recorder
