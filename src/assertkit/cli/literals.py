"""Typed literal expressions for the command line.

The CLI needs values of specific widths (``uint8``, ``float32``...) which
plain Python literals cannot express.  This module accepts:

* ``nil`` / ``None``, ``true`` / ``false`` (as well as ``True`` / ``False``);
* sized numeric constructors: ``int8(5)``, ``uint64(0)``, ``float32(1.0)``,
  ``complex64(1+1j)``, ``bool_(true)`` ...;
* ``null_pointer`` and ``pointer(3)`` for ctypes ``int`` pointers;
* any Python literal accepted by ``ast.literal_eval``: ``'hi'``, ``b'hi'``,
  ``-5``, ``1+1j``, ``[1, 2]``, ``{'a': 1}`` ...
"""
from __future__ import annotations

import ast
import ctypes
from collections.abc import Callable
from typing import Final

import numpy as np

from assertkit.errors import LiteralSyntaxError

_NAMED: Final[dict[str, Callable[[], object]]] = {
    "nil": lambda: None,
    "None": lambda: None,
    "true": lambda: True,
    "false": lambda: False,
    "null_pointer": lambda: ctypes.POINTER(ctypes.c_int)(),
}

_CONSTRUCTORS: Final[dict[str, Callable[[object], object]]] = {
    "int8": np.int8,
    "int16": np.int16,
    "int32": np.int32,
    "int64": np.int64,
    "uint8": np.uint8,
    "uint16": np.uint16,
    "uint32": np.uint32,
    "uint64": np.uint64,
    "float16": np.float16,
    "float32": np.float32,
    "float64": np.float64,
    "complex64": np.complex64,
    "complex128": np.complex128,
    "bool_": np.bool_,
    "str_": np.str_,
    "pointer": lambda v: ctypes.pointer(ctypes.c_int(v)),  # type: ignore[arg-type]
}


def parse_literal(text: str) -> object:
    """Parse ``text`` into a Python value.

    Raises
    ------
    LiteralSyntaxError
        If ``text`` is neither a known name, a constructor call nor a
        Python literal.
    """
    text = text.strip()
    if text in _NAMED:
        return _NAMED[text]()

    try:
        node = ast.parse(text, mode="eval").body
    except SyntaxError as exc:
        raise LiteralSyntaxError(text, exc.msg) from exc

    if isinstance(node, ast.Call):
        return _call(text, node)
    try:
        return ast.literal_eval(node)
    except (ValueError, TypeError, SyntaxError, MemoryError, RecursionError) as exc:
        raise LiteralSyntaxError(text, "not a literal") from exc


def _call(text: str, node: ast.Call) -> object:
    if not isinstance(node.func, ast.Name) or node.func.id not in _CONSTRUCTORS:
        raise LiteralSyntaxError(
            text, f"unknown constructor; expected one of {', '.join(sorted(_CONSTRUCTORS))}"
        )
    if len(node.args) != 1 or node.keywords:
        raise LiteralSyntaxError(text, "constructors take exactly one argument")

    arg = node.args[0]
    if isinstance(arg, ast.Name) and arg.id in _NAMED:
        value = _NAMED[arg.id]()
    else:
        try:
            value = ast.literal_eval(arg)
        except ValueError as exc:
            raise LiteralSyntaxError(text, "argument is not a literal") from exc

    try:
        return _CONSTRUCTORS[node.func.id](value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise LiteralSyntaxError(text, str(exc)) from exc
