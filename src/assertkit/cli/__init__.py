"""CLI package.

The ``cli`` sub-package contains the Click application (``main``) and the
typed literal parser its commands use to build values from arguments.
"""
from __future__ import annotations
