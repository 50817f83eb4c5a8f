"""assertkit — minimal assertion toolkit: loose literal equality and nilness checks.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import numpy as np
    import assertkit

    assertkit.equivalent(np.float32(1.0), 1.0)     # True: widths disappear
    assertkit.equivalent(np.int32(5), np.uint8(5)) # True: non-negative ints meet as unsigned
    assertkit.equivalent(1, 1.0)                   # False: families never mix
    assertkit.equivalent(None, 0)                  # True: nil equals numeric zero

    assertkit.admits_nil({})                       # True
    assertkit.admits_nil(1)                        # False

    def test_widths(assert_reporter):
        assertkit.equal(assert_reporter, np.int8(0), np.uint64(0))

    assertkit.__version__
    '0.1.0'
"""
from __future__ import annotations

__version__: str = "0.1.0"

from assertkit.assertions import (
    deep_equal,
    equal,
    error,
    false,
    nil,
    no_error,
    not_nil,
    that,
    true,
)
from assertkit.config import AssertConfig, load_config
from assertkit.equivalence import Explanation, Rule, equivalent, explain
from assertkit.errors import AssertKitError, ConfigError, LiteralSyntaxError, NilContractError
from assertkit.nilness import NilVerdict, admits_nil, is_nil, nil_verdict
from assertkit.reporting import (
    CheckAborted,
    PytestReporter,
    RecordingReporter,
    Reporter,
    TestCaseReporter,
)

__all__ = [
    "__version__",
    "equivalent",
    "explain",
    "admits_nil",
    "is_nil",
    "nil_verdict",
    "Explanation",
    "Rule",
    "NilVerdict",
    "no_error",
    "error",
    "equal",
    "deep_equal",
    "that",
    "true",
    "false",
    "nil",
    "not_nil",
    "Reporter",
    "PytestReporter",
    "TestCaseReporter",
    "RecordingReporter",
    "CheckAborted",
    "AssertConfig",
    "load_config",
    "AssertKitError",
    "NilContractError",
    "ConfigError",
    "LiteralSyntaxError",
]
