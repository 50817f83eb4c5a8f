"""Exception types raised by assertkit.

Assertion failures are never raised from here: they travel through a
``Reporter``.  These exceptions signal misuse of the toolkit itself, such as
asking whether an integer is nil or feeding the CLI an unparseable literal.
"""
from __future__ import annotations


class AssertKitError(Exception):
    """Base class for all assertkit errors."""


class NilContractError(AssertKitError, TypeError):
    """Raised when ``is_nil`` is called on a value whose type cannot be nil.

    Parameters
    ----------
    value:
        The offending value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"values of type {type(value).__qualname__!r} cannot be nil; "
            "check admits_nil() first"
        )


class ConfigError(AssertKitError, ValueError):
    """Raised when a ``[tool.assertkit]`` table is malformed.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    key:
        The offending configuration key, if any.
    """

    def __init__(self, message: str, key: str | None = None) -> None:
        self.key = key
        super().__init__(message if key is None else f"{key}: {message}")


class LiteralSyntaxError(AssertKitError, ValueError):
    """Raised when a typed literal expression cannot be parsed.

    Parameters
    ----------
    text:
        The source text that failed to parse.
    reason:
        Why it was rejected.
    """

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"cannot parse literal {text!r}: {reason}")
