"""
Macro invocation engine for template rendering.
"""

from .core.config import Settings, get_settings
from .macros import (
    ArgumentCountError,
    CallSite,
    MacroDefinition,
    MacroEngine,
    MacroError,
    MacroProxy,
    MacroRegistry,
    Parameter,
    RecursionLimitError,
    WrappedRenderError,
)

__version__ = "0.1.0"

__all__ = [
    "ArgumentCountError",
    "CallSite",
    "MacroDefinition",
    "MacroEngine",
    "MacroError",
    "MacroProxy",
    "MacroRegistry",
    "Parameter",
    "RecursionLimitError",
    "Settings",
    "WrappedRenderError",
    "get_settings",
]
