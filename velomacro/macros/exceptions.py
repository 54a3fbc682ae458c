"""
Macro invocation errors.

Every error raised by the invocation machinery derives from ``MacroError``.
Errors of this family pass through nested macro invocations unchanged;
anything else raised while rendering a macro body is wrapped once in
``WrappedRenderError``.
"""

from __future__ import annotations

from enum import Enum
from typing import Sequence, Union

from .location import Location


class MacroError(Exception):
    """Base exception for all macro invocation errors."""

    pass


class ArgumentCountKind(str, Enum):
    TOO_MANY = "too_many"
    TOO_FEW = "too_few"


class ArgumentCountError(MacroError):
    """Raised in strict mode when a call site supplies the wrong number of arguments.

    ``expected`` is the number of accepted arguments for ``TOO_MANY`` and the
    minimum number of required arguments for ``TOO_FEW``.
    """

    def __init__(
        self,
        kind: ArgumentCountKind,
        macro: str,
        expected: int,
        got: int,
        location: Union[str, Location] = "",
    ):
        self.kind = kind
        self.macro = macro
        self.expected = expected
        self.got = got
        self.location = str(location) if location else ""

        if kind is ArgumentCountKind.TOO_MANY:
            message = (
                f"Provided {got} arguments but macro #{macro} "
                f"accepts at most {expected}"
            )
        else:
            message = (
                f"Need at least {expected} argument for macro #{macro} "
                f"but only {got} were provided"
            )
        if self.location:
            message += f" at {self.location}"
        super().__init__(message)

    @property
    def accepted(self) -> int:
        return self.expected

    @property
    def min_required(self) -> int:
        return self.expected


class RecursionLimitError(MacroError):
    """Raised when macro nesting reaches the configured maximum call depth."""

    def __init__(self, message: str, max_depth: int, macro: str, call_stack: Sequence[str]):
        self.max_depth = max_depth
        self.macro = macro
        self.call_stack = tuple(call_stack)
        super().__init__(message)


class WrappedRenderError(MacroError):
    """A non-macro exception raised while rendering a macro body.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, macro: str, message: str):
        self.macro = macro
        super().__init__(message)
