"""
Evaluation contexts
===================
``RenderContext`` is the root of a scope chain: it holds the caller-supplied
values and the render-wide state (template name, macro registry, call stack)
for one top-level render.

``ScopeContext`` is created fresh for every macro invocation and discarded
when the invocation returns.  It holds the macro's bound arguments and, for
block calls, the body reference.  Lookups that miss fall through to the
parent only when the scope is ``Visibility.INHERITED``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional, Union

from .guard import CallStack


class Visibility(str, Enum):
    LOCAL = "local"
    INHERITED = "inherited"


class RenderContext:
    """Top-level context for a single render request."""

    parent = None

    def __init__(
        self,
        values: Optional[Mapping[str, Any]] = None,
        template_name: Optional[str] = None,
        registry=None,
    ) -> None:
        self._values: dict[str, Any] = dict(values or {})
        self.template_name = template_name
        self.registry = registry
        self.call_stack = CallStack()

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def contains(self, name: str) -> bool:
        return name in self._values

    def put(self, name: str, value: Any) -> None:
        self._values[name] = value

    def assign(self, name: str, value: Any) -> None:
        self._values[name] = value

    def keys(self) -> list[str]:
        return list(self._values)


Context = Union[RenderContext, "ScopeContext"]


class ScopeContext:
    """Per-invocation scope chained onto the caller's context."""

    # one of these is built per macro call
    __slots__ = ("parent", "visibility", "_bindings")

    def __init__(self, parent: Context, visibility: Visibility = Visibility.INHERITED) -> None:
        self.parent = parent
        self.visibility = visibility
        self._bindings: Optional[dict[str, Any]] = None

    # ----------------------------------------------------------- render state

    @property
    def call_stack(self) -> CallStack:
        return self.parent.call_stack

    @property
    def template_name(self) -> Optional[str]:
        return self.parent.template_name

    @property
    def registry(self):
        return self.parent.registry

    # --------------------------------------------------------------- bindings

    @property
    def bindings(self) -> dict[str, Any]:
        return dict(self._bindings) if self._bindings else {}

    def is_bound(self, name: str) -> bool:
        return bool(self._bindings) and name in self._bindings

    def put(self, name: str, value: Any) -> None:
        if self._bindings is None:
            self._bindings = {}
        self._bindings[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        if self._bindings and name in self._bindings:
            return self._bindings[name]
        if self.visibility is Visibility.LOCAL:
            return default
        return self.parent.get(name, default)

    def contains(self, name: str) -> bool:
        if self.is_bound(name):
            return True
        if self.visibility is Visibility.LOCAL:
            return False
        return self.parent.contains(name)

    def assign(self, name: str, value: Any) -> None:
        """Template-level assignment.

        Local scopes keep every write.  Inherited scopes keep writes to their
        own bindings and pass anything else up to the caller.
        """
        if self.visibility is Visibility.LOCAL or self.is_bound(name):
            self.put(name, value)
        else:
            self.parent.assign(name, value)

    def __repr__(self) -> str:
        return f"ScopeContext({self.visibility.value}, {self.bindings!r})"
