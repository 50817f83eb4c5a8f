#!/usr/bin/env python3
"""Example: Quickstart — assertkit

Minimal working example: compare values of different widths, inspect how a
verdict was reached, check nilness, and run assertions against a recording
reporter.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install assertkit
"""
from __future__ import annotations

import ctypes

import numpy as np

import assertkit


def main() -> None:
    print(f"assertkit version: {assertkit.__version__}")

    # Step 1: Loose equality across widths and signedness
    pairs = [
        (np.float32(1.0), np.float64(1.0)),
        (np.int32(5), np.uint8(5)),
        (np.int32(-5), np.uint8(251)),
        (np.complex64(1 + 1j), 1.0),
        (None, 0),
        (None, ""),
    ]
    for left, right in pairs:
        explanation = assertkit.explain(left, right)
        print(f"  {left!r:>24} ~ {right!r:<24} -> {explanation.equivalent} ({explanation.rule.name})")

    # Step 2: Nilness
    null_pointer = ctypes.POINTER(ctypes.c_int)()
    live_pointer = ctypes.pointer(ctypes.c_int(7))
    for value in (None, null_pointer, live_pointer, {}, 1):
        print(f"  {value!r:>40}: {assertkit.nil_verdict(value).name}")

    # Step 3: Assertions against a recording reporter
    recorder = assertkit.RecordingReporter.record(lambda r: assertkit.nil(r, 1))
    print(f"nil(1) failed={recorder.failed}: {recorder.messages}")


if __name__ == "__main__":
    main()
