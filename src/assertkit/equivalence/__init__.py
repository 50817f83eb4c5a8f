"""Equivalence engine module.

Exports ``equivalent`` and ``explain`` together with the ``Rule`` and
``Explanation`` types.
"""
from __future__ import annotations

from assertkit.equivalence.engine import Explanation, Rule, equivalent, explain

__all__ = [
    "equivalent",
    "explain",
    "Explanation",
    "Rule",
]
