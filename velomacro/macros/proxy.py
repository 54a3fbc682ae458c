"""
MacroProxy
==========
The invocation driver for one defined macro.  Each call:

  1. creates a fresh ``ScopeContext`` chained onto the caller's context
  2. exposes a block-call body under the configured body reference
  3. binds the call site's arguments (``bind_arguments``)
  4. checks the call depth and pushes the macro name
  5. renders the macro body into the sink
  6. pops the macro name

Configuration is read once by ``init()`` and cached on the proxy.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..core.config import Settings
from .binder import Evaluator, arity_message, bind_arguments
from .context import Context, ScopeContext, Visibility
from .definition import CallSite, MacroDefinition
from .exceptions import MacroError, WrappedRenderError
from .guard import CallDepthGuard
from .location import Location
from .nodes import evaluate_expression, render_node

logger = logging.getLogger(__name__)

BodyRenderer = Callable[[Any, Context, Any], Any]


class MacroProxy:

    # macros are line directives: they do not consume a trailing newline
    directive_type = "line"

    def __init__(
        self,
        definition: MacroDefinition,
        evaluator: Optional[Evaluator] = None,
        renderer: Optional[BodyRenderer] = None,
    ) -> None:
        self.definition = definition
        self._evaluate = evaluator or evaluate_expression
        self._render = renderer or render_node

        self.strict_arguments = False
        self.visibility = Visibility.INHERITED
        self.body_reference = "bodyContent"
        self._guard = CallDepthGuard(0)

    def init(self, settings: Settings) -> "MacroProxy":
        self.strict_arguments = settings.strict_arguments
        self.visibility = (
            Visibility.LOCAL if settings.local_context_scope else Visibility.INHERITED
        )
        self.body_reference = settings.body_reference
        self._guard = CallDepthGuard(settings.max_call_depth)
        return self

    # ------------------------------------------------------------ properties

    @property
    def name(self) -> str:
        return self.definition.name

    @property
    def accepted_arg_count(self) -> int:
        return self.definition.accepted_arg_count

    @property
    def max_call_depth(self) -> int:
        return self._guard.max_depth

    def build_error_message(self, given: int) -> str:
        return arity_message(self.name, self.accepted_arg_count, given)

    # ---------------------------------------------------------------- invoke

    def invoke(
        self,
        context: Context,
        sink,
        call_site: Optional[CallSite] = None,
        body: Any = None,
    ) -> bool:
        """Render this macro for one call site.  Returns True on success."""
        call_site = call_site or CallSite()
        if body is None:
            body = call_site.body

        scope = ScopeContext(context, self.visibility)
        location = Location(context.template_name, call_site.line, call_site.column)

        if body is not None:
            scope.put(self.body_reference, body)

        bind_arguments(
            self.definition,
            call_site.args,
            scope,
            context,
            evaluate=self._evaluate,
            strict=self.strict_arguments,
            location=location,
        )

        with self._guard.enter(scope.call_stack, self.name, location):
            try:
                self._render(self.definition.body, scope, sink)
            except MacroError:
                raise
            except Exception as exc:
                message = f"exception rendering macro #{self.name}() at {location}"
                logger.error(message, exc_info=exc)
                raise WrappedRenderError(self.name, message) from exc
        return True

    def __repr__(self) -> str:
        return f"<MacroProxy #{self.name} args={self.accepted_arg_count}>"
