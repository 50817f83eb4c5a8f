"""Nilness classifier module."""
from __future__ import annotations

from assertkit.nilness.classifier import NilVerdict, admits_nil, is_nil, nil_verdict

__all__ = [
    "admits_nil",
    "is_nil",
    "nil_verdict",
    "NilVerdict",
]
