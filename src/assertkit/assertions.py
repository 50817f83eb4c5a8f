"""Assertion functions.

Each function takes the reporter as its first argument, checks one
condition and, when it does not hold, reports through
``reporter.report_and_abort``.  Nothing is returned.

Usage
-----
::

    import numpy as np
    from assertkit import equal, nil, not_nil

    def test_width(assert_reporter):
        equal(assert_reporter, np.int32(5), np.uint8(5))
        not_nil(assert_reporter, {"a": 1})
        nil(assert_reporter, None)
"""
from __future__ import annotations

import numpy as np

from assertkit.equivalence.engine import equivalent
from assertkit.nilness.classifier import NilVerdict, nil_verdict
from assertkit.reporting.reporter import Reporter


def no_error(reporter: Reporter, err: BaseException | None) -> None:
    """Fail if ``err`` is an exception."""
    if err is not None:
        reporter.report_and_abort(reporter.describe(err))


def error(reporter: Reporter, err: BaseException | None) -> None:
    """Fail unless ``err`` is an exception."""
    if err is None:
        reporter.report_and_abort("expected an error")


def equal(reporter: Reporter, a: object, b: object) -> None:
    """Fail unless ``a`` and ``b`` are loosely equal.

    See ``assertkit.equivalence.equivalent`` for the rules.
    """
    if not equivalent(a, b):
        reporter.report_and_abort(f"{reporter.describe(a)} != {reporter.describe(b)}")


def deep_equal(reporter: Reporter, a: object, b: object) -> None:
    """Fail unless ``a`` and ``b`` have the same type and compare equal.

    No literal normalization is applied: ``1`` and ``np.uint64(1)`` differ.
    """
    if type(a) is not type(b) or not _strict_equal(a, b):
        reporter.report_and_abort(f"{reporter.describe(a)} != {reporter.describe(b)}")


def that(reporter: Reporter, condition: bool) -> None:
    """Fail unless ``condition`` holds."""
    if not condition:
        reporter.report_and_abort("expected condition failed")


def true(reporter: Reporter, condition: bool) -> None:
    if not condition:
        reporter.report_and_abort("expected true")


def false(reporter: Reporter, condition: bool) -> None:
    if condition:
        reporter.report_and_abort("expected false")


def nil(reporter: Reporter, value: object) -> None:
    """Fail unless ``value`` is ``None`` or a null reference.

    A value whose type cannot be nil at all always fails.
    """
    verdict = nil_verdict(value)
    if verdict is NilVerdict.CANNOT_BE_NIL:
        reporter.report_and_abort(f"{reporter.describe(value)} cannot be nil")
    if verdict is NilVerdict.NOT_NIL:
        reporter.report_and_abort(f"{reporter.describe(value)} != nil")


def not_nil(reporter: Reporter, value: object) -> None:
    """Fail if ``value`` is ``None`` or a null reference.

    A value whose type cannot be nil always passes.
    """
    if value is None:
        reporter.report_and_abort("expected not nil")
    if nil_verdict(value) is NilVerdict.NIL:
        reporter.report_and_abort(f"{reporter.describe(value)} == nil")


def _strict_equal(a: object, b: object) -> bool:
    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray):
        return a.dtype == b.dtype and bool(np.array_equal(a, b))
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # containers of arrays have no single truth value
        return False
