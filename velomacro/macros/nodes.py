"""
Template AST nodes
==================
A deliberately small node set: enough to express macro bodies, argument
expressions and nested macro calls without a template parser.

Expression nodes expose ``value(context)``.  Every node exposes
``render(context, sink)``, writing text to any object with a ``write``
method.  ``evaluate_expression`` and ``render_node`` are the default
evaluator and body renderer used by ``MacroProxy``.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from .definition import CallSite


class Node:
    def render(self, context, sink) -> None:
        raise NotImplementedError


class Text(Node):
    def __init__(self, text: str) -> None:
        self.text = text

    def render(self, context, sink) -> None:
        sink.write(self.text)

    def __repr__(self) -> str:
        return f"Text({self.text!r})"


class Literal(Node):
    def __init__(self, constant: Any) -> None:
        self.constant = constant

    @property
    def source(self) -> str:
        return expression_source(self.constant)

    def value(self, context) -> Any:
        return self.constant

    def render(self, context, sink) -> None:
        sink.write(str(self.constant))

    def __repr__(self) -> str:
        return f"Literal({self.constant!r})"


class Reference(Node):
    """``$name``.  Renders its own source text when the name is unresolved."""

    def __init__(self, name: str) -> None:
        self.name = name

    @property
    def literal(self) -> str:
        return f"${self.name}"

    source = literal

    def value(self, context) -> Any:
        return context.get(self.name)

    def render(self, context, sink) -> None:
        value = context.get(self.name)
        if value is None:
            sink.write(self.literal)
        elif isinstance(value, Node):
            # a captured body block
            value.render(context, sink)
        else:
            sink.write(str(value))

    def __repr__(self) -> str:
        return f"Reference({self.name!r})"


class Apply(Node):
    """Call a plain Python callable on evaluated argument expressions."""

    def __init__(self, func: Callable[..., Any], *args: Any) -> None:
        self.func = func
        self.args = args

    @property
    def source(self) -> str:
        name = getattr(self.func, "__name__", "apply")
        return f"{name}(" + " ".join(expression_source(a) for a in self.args) + ")"

    def value(self, context) -> Any:
        return self.func(*(evaluate_expression(a, context) for a in self.args))

    def render(self, context, sink) -> None:
        sink.write(str(self.value(context)))


class Block(Node):
    def __init__(self, *children: Node) -> None:
        self.children = list(children)

    def render(self, context, sink) -> None:
        for child in self.children:
            child.render(context, sink)

    def __repr__(self) -> str:
        return f"Block({len(self.children)} nodes)"


class If(Node):
    def __init__(self, test: Any, then: Node, orelse: Optional[Node] = None) -> None:
        self.test = test
        self.then = then
        self.orelse = orelse

    def render(self, context, sink) -> None:
        if evaluate_expression(self.test, context):
            self.then.render(context, sink)
        elif self.orelse is not None:
            self.orelse.render(context, sink)


class Assign(Node):
    """``#set($name = expr)``"""

    def __init__(self, name: str, expr: Any) -> None:
        self.name = name
        self.expr = expr

    def render(self, context, sink) -> None:
        context.assign(self.name, evaluate_expression(self.expr, context))


class MacroCall(Node):
    """``#name(arg ...)`` or, with a body, ``#@name(arg ...) body #end``."""

    def __init__(
        self,
        name: str,
        args: Sequence[Any] = (),
        body: Optional[Node] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.name = name
        self.call_site = CallSite(tuple(args), body, line, column)

    def render(self, context, sink) -> None:
        registry = context.registry
        if registry is None:
            write_call_source(self.name, self.call_site, context, sink)
            return
        registry.call(self.name, context, sink, self.call_site)

    def __repr__(self) -> str:
        return f"MacroCall({self.name!r}, {len(self.call_site.args)} args)"


# ---------------------------------------------------------------------------
# Default collaborators
# ---------------------------------------------------------------------------

def evaluate_expression(expr: Any, context) -> Any:
    """Evaluate an argument or default expression.  Plain Python values
    evaluate to themselves."""
    value = getattr(expr, "value", None)
    if callable(value):
        return value(context)
    return expr


def render_node(node: Node, context, sink) -> bool:
    if node is not None:
        node.render(context, sink)
    return True


# ---------------------------------------------------------------------------
# Source text
# ---------------------------------------------------------------------------

def expression_source(expr: Any) -> str:
    """Template source for an argument expression: ``$ref``, ``"text"``, ``3``."""
    source = getattr(expr, "source", None)
    if isinstance(source, str):
        return source
    if isinstance(expr, str):
        return f'"{expr}"'
    if isinstance(expr, bool):
        return "true" if expr else "false"
    return str(expr)


def write_call_source(name: str, call_site: CallSite, context, sink) -> None:
    """Write a macro call back out as template text.  A body block is
    rendered in place between ``#@name(...)`` and ``#end``."""
    args = " ".join(expression_source(a) for a in call_site.args)
    if call_site.body is None:
        sink.write(f"#{name}({args})")
        return
    sink.write(f"#@{name}({args})")
    call_site.body.render(context, sink)
    sink.write("#end")
