"""Canonical literal reduction.

Before two values are compared loosely, each one is reduced on its own to a
``CanonicalLiteral``: a ``(kind, value)`` pair in the widest representation of
its family.  Widths disappear (``float32(1.0)`` and ``1.0`` both become
``FLOAT64 1.0``) but families do not (``FLOAT64 1.0`` never equals
``UINT64 1``).

Signed integers are split by sign: negatives stay ``INT64`` while
non-negatives are reinterpreted as ``UINT64``, so that ``int32(5)`` and
``uint8(5)`` meet on common ground and ``int32(-5)`` can never match an
unsigned value.

Values outside the scalar families are returned unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from assertkit.values.categories import TypeCategory, classify


class LiteralKind(Enum):
    """The representation a canonical literal is held in."""

    BOOL = auto()
    TEXT = auto()
    INT64 = auto()
    UINT64 = auto()
    FLOAT64 = auto()
    COMPLEX128 = auto()


@dataclass(frozen=True, eq=False)
class CanonicalLiteral:
    """A scalar reduced to its widest representation.

    Parameters
    ----------
    kind:
        The representation family.
    value:
        The native Python value: ``bool``, ``str``, ``int``, ``float`` or
        ``complex``.  Integers keep their exact magnitude.
    """

    kind: LiteralKind
    value: bool | str | int | float | complex

    def __eq__(self, other: object) -> bool:
        # a NaN value never equals itself, even when it is the same object
        if not isinstance(other, CanonicalLiteral):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __hash__(self) -> int:
        return hash((self.kind, self.value))

    def __str__(self) -> str:
        return f"{self.kind.name} {self.value!r}"


def to_literal(value: object) -> CanonicalLiteral | object:
    """Reduce ``value`` to its ``CanonicalLiteral``.

    Returns ``value`` itself when it does not belong to a scalar family.
    """
    category = classify(value)
    if category is TypeCategory.BOOLEAN:
        return CanonicalLiteral(LiteralKind.BOOL, bool(value))
    if category is TypeCategory.TEXT:
        # str.__str__ strips any subclass, including overridden __str__
        return CanonicalLiteral(LiteralKind.TEXT, str.__str__(value))  # type: ignore[arg-type]
    if category is TypeCategory.FLOATING_POINT:
        return CanonicalLiteral(LiteralKind.FLOAT64, float(value))  # type: ignore[arg-type]
    if category is TypeCategory.COMPLEX_NUMBER:
        return CanonicalLiteral(LiteralKind.COMPLEX128, complex(value))  # type: ignore[arg-type]
    if category is TypeCategory.SIGNED_INTEGER:
        as_int = int(value)  # type: ignore[call-overload]
        if as_int < 0:
            return CanonicalLiteral(LiteralKind.INT64, as_int)
        return CanonicalLiteral(LiteralKind.UINT64, as_int)
    if category is TypeCategory.UNSIGNED_INTEGER:
        return CanonicalLiteral(LiteralKind.UINT64, int(value))  # type: ignore[call-overload]
    return value
