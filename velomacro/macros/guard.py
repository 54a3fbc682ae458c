"""
Call-depth guard
================
Tracks the names of the macros currently executing in one render and stops
runaway recursion.

The ``CallStack`` belongs to a single top-level render (it hangs off the
render's ``RenderContext``) and is shared by every scope nested inside it.
It is never shared between unrelated renders.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Union

from .exceptions import RecursionLimitError
from .location import Location

logger = logging.getLogger(__name__)

STACK_SEPARATOR = "->"


class CallStack:
    """Ordered names of the macros active in one render."""

    __slots__ = ("_names",)

    def __init__(self) -> None:
        self._names: list[str] = []

    def current_depth(self) -> int:
        return len(self._names)

    def push(self, name: str) -> None:
        self._names.append(name)

    def pop(self) -> str:
        return self._names.pop()

    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def drain(self) -> None:
        """Pop every name, leaving the stack empty."""
        while self._names:
            self._names.pop()

    def truncate(self, depth: int) -> None:
        """Discard names above *depth*.  No-op if the stack is already shallower."""
        del self._names[depth:]

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"CallStack({STACK_SEPARATOR.join(self._names)!r})"


class CallDepthGuard:
    """
    Enforce a maximum macro nesting depth.

    Usage::

        guard = CallDepthGuard(max_depth=20)
        with guard.enter(ctx.call_stack, "header", location):
            render_body()

    ``max_depth <= 0`` disables the limit.
    """

    def __init__(self, max_depth: int = 0) -> None:
        self.max_depth = max_depth

    def check(self, stack: CallStack, macro: str, location: Union[str, Location] = "") -> None:
        """Raise ``RecursionLimitError`` if pushing *macro* would exceed the limit.

        On overflow the error is logged and the stack is drained so the
        render-wide state stays consistent for anything that keeps rendering.
        """
        if self.max_depth <= 0 or stack.current_depth() < self.max_depth:
            return

        active = stack.names()
        message = (
            f"Max calling depth of {self.max_depth} was exceeded in macro "
            f"'{macro}' with Call Stack:{STACK_SEPARATOR.join(active)}"
        )
        if location:
            message += f" at {location}"
        logger.error(message)

        stack.drain()
        raise RecursionLimitError(message, self.max_depth, macro, active)

    @contextmanager
    def enter(
        self, stack: CallStack, macro: str, location: Union[str, Location] = "",
    ) -> Iterator[CallStack]:
        self.check(stack, macro, location)
        depth = stack.current_depth()
        stack.push(macro)
        try:
            yield stack
        finally:
            # after an overflow drain this is a no-op
            stack.truncate(depth)
