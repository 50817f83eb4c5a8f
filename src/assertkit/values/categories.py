"""Type categories: the coarse classification of a runtime value.

Every value falls into exactly one ``TypeCategory``.  Scalars are sorted by
the numeric or textual family they belong to, regardless of bit width or of
any subclassing (``IntEnum`` members are signed integers, ``StrEnum``
members are text).  Sized numeric families are modelled by numpy scalar
types, which are the only place Python distinguishes ``uint8`` from
``int64``.

Values whose type can represent "no reference" are additionally refined into
a ``ReferenceKind``::

    >>> import ctypes
    >>> classify(ctypes.POINTER(ctypes.c_int)())
    <TypeCategory.NIL_ADMITTING_REFERENCE: 7>
    >>> reference_kind({})
    <ReferenceKind.MAPPING: 4>
"""
from __future__ import annotations

import asyncio
import ctypes
import functools
import inspect
import queue
import weakref
from collections.abc import Mapping, MutableSequence
from enum import Enum, auto
from typing import Final

import numpy as np


class TypeCategory(Enum):
    """Coarse classification of a value's runtime type."""

    BOOLEAN = auto()
    TEXT = auto()
    SIGNED_INTEGER = auto()
    UNSIGNED_INTEGER = auto()
    FLOATING_POINT = auto()
    COMPLEX_NUMBER = auto()
    NIL_ADMITTING_REFERENCE = auto()
    OTHER = auto()

    @property
    def is_numeric(self) -> bool:
        """Return True for the integer and floating-point families."""
        return self in _ZERO_COMPARABLE


class ReferenceKind(Enum):
    """Refinement of ``TypeCategory.NIL_ADMITTING_REFERENCE``.

    FUNCTION
        Python routines, ``functools.partial`` objects and ctypes function
        pointers.
    CHANNEL
        Queue handles used to pass messages between producers and consumers.
    HOLDER
        ``ctypes.py_object``, a slot that may or may not hold an object.
    MAPPING
        Any ``collections.abc.Mapping``.
    POINTER
        ctypes pointers, pointer-valued simple types and weak references.
    SEQUENCE
        Any growable ``collections.abc.MutableSequence``.
    """

    FUNCTION = auto()
    CHANNEL = auto()
    HOLDER = auto()
    MAPPING = auto()
    POINTER = auto()
    SEQUENCE = auto()


_ZERO_COMPARABLE: Final[frozenset[TypeCategory]] = frozenset(
    {
        TypeCategory.SIGNED_INTEGER,
        TypeCategory.UNSIGNED_INTEGER,
        TypeCategory.FLOATING_POINT,
    }
)

# ctypes simple-type codes: "P" c_void_p, "z" c_char_p, "Z" c_wchar_p, "O" py_object
_POINTER_CODES: Final[frozenset[str]] = frozenset({"P", "z", "Z"})
_HOLDER_CODE: Final[str] = "O"

_CHANNEL_TYPES: Final[tuple[type, ...]] = (queue.Queue, queue.SimpleQueue, asyncio.Queue)


def classify(value: object) -> TypeCategory:
    """Return the ``TypeCategory`` of ``value``.

    The checks run from the most to the least specific: ``bool`` is tested
    before ``int`` because it subclasses it.
    """
    if isinstance(value, (bool, np.bool_)):
        return TypeCategory.BOOLEAN
    if isinstance(value, str):
        return TypeCategory.TEXT
    if isinstance(value, np.unsignedinteger):
        return TypeCategory.UNSIGNED_INTEGER
    if isinstance(value, (int, np.signedinteger)):
        return TypeCategory.SIGNED_INTEGER
    if isinstance(value, (float, np.floating)):
        return TypeCategory.FLOATING_POINT
    if isinstance(value, (complex, np.complexfloating)):
        return TypeCategory.COMPLEX_NUMBER
    if reference_kind(value) is not None:
        return TypeCategory.NIL_ADMITTING_REFERENCE
    return TypeCategory.OTHER


def reference_kind(value: object) -> ReferenceKind | None:
    """Return the ``ReferenceKind`` of ``value``, or None for value types."""
    if isinstance(value, (ctypes._Pointer, weakref.ReferenceType)):
        return ReferenceKind.POINTER
    if isinstance(value, ctypes._SimpleCData):
        code = getattr(type(value), "_type_", "")
        if code in _POINTER_CODES:
            return ReferenceKind.POINTER
        if code == _HOLDER_CODE:
            return ReferenceKind.HOLDER
        return None
    if isinstance(value, ctypes._CFuncPtr):
        return ReferenceKind.FUNCTION
    if inspect.isroutine(value) or isinstance(value, functools.partial):
        return ReferenceKind.FUNCTION
    if isinstance(value, _CHANNEL_TYPES):
        return ReferenceKind.CHANNEL
    if isinstance(value, Mapping):
        return ReferenceKind.MAPPING
    if isinstance(value, MutableSequence):
        return ReferenceKind.SEQUENCE
    return None
