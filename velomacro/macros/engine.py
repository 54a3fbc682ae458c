"""
MacroEngine
===========
Defines macros and renders ASTs that call them.

Every render gets its own ``RenderContext`` and therefore its own call
stack, so independent renders (for example in different request threads)
never share recursion state.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Iterable, Mapping, Optional

from ..core.config import Settings, get_settings
from .binder import Evaluator
from .context import RenderContext
from .definition import MacroDefinition, ParameterSpec
from .nodes import render_node
from .proxy import BodyRenderer, MacroProxy
from .registry import MacroRegistry

logger = logging.getLogger(__name__)


class MacroEngine:
    """
    Usage::

        engine = MacroEngine()
        engine.define("greet", ["name", ("greeting", Literal("hi"))],
                      Block(Reference("greeting"), Text(", "), Reference("name")))
        engine.render(MacroCall("greet", [Literal("Ann")]))   # "hi, Ann"
    """

    def __init__(
        self,
        registry: Optional[MacroRegistry] = None,
        settings: Optional[Settings] = None,
        evaluator: Optional[Evaluator] = None,
        renderer: Optional[BodyRenderer] = None,
    ) -> None:
        self._registry = registry if registry is not None else MacroRegistry()
        self._settings = settings or get_settings()
        self._evaluator = evaluator
        self._renderer = renderer or render_node

    @property
    def registry(self) -> MacroRegistry:
        return self._registry

    @property
    def settings(self) -> Settings:
        return self._settings

    # ----------------------------------------------------------------- define

    def define(
        self,
        name: str,
        parameters: Iterable[ParameterSpec] = (),
        body: Any = None,
    ) -> MacroProxy:
        definition = MacroDefinition.create(name, parameters, body)
        proxy = MacroProxy(definition, self._evaluator, self._renderer).init(self._settings)
        return self._registry.register(proxy)

    # ----------------------------------------------------------------- render

    def new_context(
        self,
        values: Optional[Mapping[str, Any]] = None,
        template_name: Optional[str] = None,
    ) -> RenderContext:
        return RenderContext(values, template_name, registry=self._registry)

    def render_to(
        self,
        ast: Any,
        sink,
        values: Optional[Mapping[str, Any]] = None,
        template_name: Optional[str] = None,
    ) -> RenderContext:
        """Render *ast* into *sink*; returns the context used for the render."""
        ctx = self.new_context(values, template_name)
        logger.debug("Rendering %s", template_name or "<anonymous>")
        self._renderer(ast, ctx, sink)
        return ctx

    def render(
        self,
        ast: Any,
        values: Optional[Mapping[str, Any]] = None,
        template_name: Optional[str] = None,
    ) -> str:
        out = io.StringIO()
        self.render_to(ast, out, values, template_name)
        return out.getvalue()
