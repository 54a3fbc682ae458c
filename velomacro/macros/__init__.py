"""
Macro subsystem: public API.
"""

from .exceptions import (
    ArgumentCountError,
    ArgumentCountKind,
    MacroError,
    RecursionLimitError,
    WrappedRenderError,
)
from .definition import CallSite, MacroDefinition, Parameter
from .context import RenderContext, ScopeContext, Visibility
from .guard import CallDepthGuard, CallStack
from .binder import bind_arguments
from .proxy import MacroProxy
from .registry import MacroRegistry
from .engine import MacroEngine

__all__ = [
    "ArgumentCountError",
    "ArgumentCountKind",
    "CallDepthGuard",
    "CallSite",
    "CallStack",
    "MacroDefinition",
    "MacroEngine",
    "MacroError",
    "MacroProxy",
    "MacroRegistry",
    "Parameter",
    "RecursionLimitError",
    "RenderContext",
    "ScopeContext",
    "Visibility",
    "WrappedRenderError",
    "bind_arguments",
]
