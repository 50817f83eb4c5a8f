"""Nilness classifier.

Answers two questions about a single value:

* can its type represent "no reference" at all (``admits_nil``), and
* if so, is this value currently that null reference (``is_nil``).

``nil_verdict`` folds both answers, plus the universal ``None``, into the
three outcomes the "must be nil" and "must not be nil" checks act on.
"""
from __future__ import annotations

import ctypes
import logging
from enum import Enum, auto

from assertkit.errors import NilContractError
from assertkit.values.categories import ReferenceKind, TypeCategory, classify, reference_kind

logger = logging.getLogger(__name__)


class NilVerdict(Enum):
    """Outcome of the composite nil rule.

    NIL
        ``None``, or a reference that currently points nowhere.
    NOT_NIL
        A reference that points to something.
    CANNOT_BE_NIL
        A value type; asking whether it is nil is a contract violation.
    """

    NIL = auto()
    NOT_NIL = auto()
    CANNOT_BE_NIL = auto()


def admits_nil(value: object) -> bool:
    """Return True if the type of ``value`` can represent a null reference."""
    return classify(value) is TypeCategory.NIL_ADMITTING_REFERENCE


def is_nil(value: object) -> bool:
    """Return True if ``value`` is currently the null reference.

    Raises
    ------
    NilContractError
        If ``admits_nil(value)`` is False.
    """
    kind = reference_kind(value)
    if kind is None:
        logger.debug("is_nil called on non-admitting %s", type(value).__qualname__)
        raise NilContractError(value)

    if kind is ReferenceKind.POINTER:
        if isinstance(value, ctypes._SimpleCData):
            return value.value is None
        if isinstance(value, ctypes._Pointer):
            # NULL ctypes pointers are falsy
            return not value
        return value() is None  # weakref.ref

    if kind is ReferenceKind.FUNCTION and isinstance(value, ctypes._CFuncPtr):
        return not value

    if kind is ReferenceKind.HOLDER:
        try:
            value.value  # type: ignore[attr-defined]  # noqa: B018
        except ValueError:
            # "PyObject is NULL"
            return True
        return False

    # Live routines, mappings, sequences and queues always refer to something.
    return False


def nil_verdict(value: object) -> NilVerdict:
    """Classify ``value`` for the nil checks."""
    if value is None:
        return NilVerdict.NIL
    if not admits_nil(value):
        return NilVerdict.CANNOT_BE_NIL
    return NilVerdict.NIL if is_nil(value) else NilVerdict.NOT_NIL
