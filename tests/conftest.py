"""Shared test fixtures for assertkit.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import ctypes

import pytest

from assertkit.reporting import RecordingReporter


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def recorder() -> RecordingReporter:
    """Return a fresh ``RecordingReporter``."""
    return RecordingReporter()


@pytest.fixture()
def null_int_pointer() -> ctypes._Pointer:
    """Return a NULL ``int *``."""
    return ctypes.POINTER(ctypes.c_int)()


@pytest.fixture()
def live_int_pointer() -> ctypes._Pointer:
    """Return a freshly allocated, non-NULL ``int *``."""
    return ctypes.pointer(ctypes.c_int())
