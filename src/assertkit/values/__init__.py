"""Value classification module.

Exports ``classify`` and ``reference_kind`` with their enums, and the
canonical literal reduction ``to_literal``.
"""
from __future__ import annotations

from assertkit.values.categories import ReferenceKind, TypeCategory, classify, reference_kind
from assertkit.values.literal import CanonicalLiteral, LiteralKind, to_literal

__all__ = [
    "TypeCategory",
    "ReferenceKind",
    "classify",
    "reference_kind",
    "LiteralKind",
    "CanonicalLiteral",
    "to_literal",
]
