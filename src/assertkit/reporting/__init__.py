"""Reporting module.

Exports the ``Reporter`` contract and its pytest, unittest and recording
implementations.
"""
from __future__ import annotations

from assertkit.reporting.reporter import (
    CheckAborted,
    PytestReporter,
    RecordingReporter,
    Reporter,
    TestCaseReporter,
)

__all__ = [
    "Reporter",
    "PytestReporter",
    "TestCaseReporter",
    "RecordingReporter",
    "CheckAborted",
]
