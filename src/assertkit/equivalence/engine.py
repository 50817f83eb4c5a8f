"""Equivalence engine: loose equality between two arbitrary values.

Two values are *equivalent* when they are the same value of the same type,
or when they reduce to the same canonical literal.  Byte sequences and numpy
arrays never go through the literal reduction: they compare element-wise.

A lone ``None`` is equivalent to a numeric zero of any integer or float
width.  The relaxation does not extend to ``""``, ``False``, ``0j`` or empty
containers.

Usage
-----
::

    import numpy as np
    from assertkit.equivalence import equivalent, explain

    equivalent(np.int32(5), np.uint8(5))      # True
    equivalent(np.int32(-5), np.uint8(251))   # False
    explain(np.float32(1.0), 1.0).rule        # Rule.LITERAL
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import numpy as np

from assertkit.values.categories import TypeCategory, classify
from assertkit.values.literal import CanonicalLiteral, to_literal

_BYTE_SEQUENCES = (bytes, bytearray, memoryview)


class Rule(Enum):
    """The rule that decided an equivalence verdict.

    IDENTICAL
        Same type and natively equal.
    BYTES
        Both sides are byte sequences; compared element-wise.
    ARRAY
        At least one side is a numpy array; compared element-wise.
    NIL_ZERO
        Exactly one side is ``None``; equivalent only to a numeric zero.
    LITERAL
        Both sides reduced to canonical literals and compared.
    """

    IDENTICAL = auto()
    BYTES = auto()
    ARRAY = auto()
    NIL_ZERO = auto()
    LITERAL = auto()


@dataclass(frozen=True)
class Explanation:
    """How ``equivalent`` reached its verdict for one pair of values.

    Parameters
    ----------
    left, right:
        The compared values.
    rule:
        The rule that decided the verdict.
    equivalent:
        The verdict.
    """

    left: object
    right: object
    rule: Rule
    equivalent: bool

    @property
    def left_category(self) -> TypeCategory:
        return classify(self.left)

    @property
    def right_category(self) -> TypeCategory:
        return classify(self.right)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON/YAML-compatible dict."""
        return {
            "equivalent": self.equivalent,
            "rule": self.rule.name,
            "left": _describe_side(self.left),
            "right": _describe_side(self.right),
        }


def equivalent(a: object, b: object) -> bool:
    """Return True if ``a`` and ``b`` are loosely equal.

    A native comparison that raises ``TypeError`` or ``ValueError``, or
    yields an ambiguous truth value, counts as "not equivalent".  Any other
    exception raised by a user-defined ``__eq__`` propagates.
    """
    return _decide(a, b)[1]


def explain(a: object, b: object) -> Explanation:
    """Return an ``Explanation`` of ``equivalent(a, b)``."""
    rule, verdict = _decide(a, b)
    return Explanation(left=a, right=b, rule=rule, equivalent=verdict)


def _decide(a: object, b: object) -> tuple[Rule, bool]:
    if isinstance(a, _BYTE_SEQUENCES) and isinstance(b, _BYTE_SEQUENCES):
        return Rule.BYTES, bytes(a) == bytes(b)
    if isinstance(a, np.ndarray) or isinstance(b, np.ndarray):
        return Rule.ARRAY, _arrays_equal(a, b)
    if type(a) is type(b) and _native_equal(a, b):
        return Rule.IDENTICAL, True
    if (a is None) != (b is None):
        return Rule.NIL_ZERO, _is_numeric_zero(b if a is None else a)
    return Rule.LITERAL, _native_equal(to_literal(a), to_literal(b))


def _arrays_equal(a: object, b: object) -> bool:
    if not (isinstance(a, np.ndarray) and isinstance(b, np.ndarray)):
        return False
    return a.dtype == b.dtype and bool(np.array_equal(a, b))


def _native_equal(a: object, b: object) -> bool:
    try:
        return bool(a == b)
    except (TypeError, ValueError):
        # e.g. containers of arrays, whose truth value is ambiguous
        return False


def _is_numeric_zero(value: object) -> bool:
    if not classify(value).is_numeric:
        return False
    literal = to_literal(value)
    return isinstance(literal, CanonicalLiteral) and literal.value == 0


def _describe_side(value: object) -> dict[str, object]:
    literal = to_literal(value)
    return {
        "repr": repr(value),
        "type": type(value).__qualname__,
        "category": classify(value).name,
        "literal": str(literal) if isinstance(literal, CanonicalLiteral) else None,
    }
