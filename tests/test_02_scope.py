"""
Scope Context
=============
  - Local vs inherited lookup
  - Template assignment through a macro scope
  - Render-wide state shared along the chain
"""

from __future__ import annotations

from velomacro.macros import RenderContext, ScopeContext, Visibility
from velomacro.macros.nodes import Block, MacroCall, Reference, Text


def make_ctx(**values) -> RenderContext:
    return RenderContext(values, template_name="Scope.vm")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Lookup
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestLookup:
    def test_inherited_falls_through_to_parent(self):
        scope = ScopeContext(make_ctx(user="ann"), Visibility.INHERITED)
        assert scope.get("user") == "ann"
        assert scope.contains("user")

    def test_local_does_not_fall_through(self):
        scope = ScopeContext(make_ctx(user="ann"), Visibility.LOCAL)
        assert scope.get("user") is None
        assert not scope.contains("user")

    def test_local_sees_own_bindings(self):
        scope = ScopeContext(make_ctx(user="ann"), Visibility.LOCAL)
        scope.put("user", "bob")
        assert scope.get("user") == "bob"

    def test_binding_shadows_parent(self):
        caller = make_ctx(x=1)
        scope = ScopeContext(caller)
        scope.put("x", 2)
        assert scope.get("x") == 2
        assert caller.get("x") == 1

    def test_last_write_wins(self):
        scope = ScopeContext(make_ctx())
        scope.put("x", 1)
        scope.put("x", 2)
        assert scope.bindings == {"x": 2}

    def test_get_default(self):
        scope = ScopeContext(make_ctx(), Visibility.LOCAL)
        assert scope.get("missing", "fallback") == "fallback"

    def test_nested_inherited_chain(self):
        outer = ScopeContext(make_ctx(a=1))
        outer.put("b", 2)
        inner = ScopeContext(outer)
        assert inner.get("a") == 1
        assert inner.get("b") == 2

    def test_bindings_not_allocated_until_first_put(self):
        scope = ScopeContext(make_ctx())
        assert scope._bindings is None
        assert scope.bindings == {}
        assert not scope.is_bound("x")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Assignment
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestAssign:
    def test_inherited_assign_goes_to_caller(self):
        caller = make_ctx()
        scope = ScopeContext(caller, Visibility.INHERITED)
        scope.assign("total", 3)
        assert caller.get("total") == 3
        assert not scope.is_bound("total")

    def test_inherited_assign_to_parameter_stays_local(self):
        caller = make_ctx(name="outer")
        scope = ScopeContext(caller, Visibility.INHERITED)
        scope.put("name", "param")
        scope.assign("name", "changed")
        assert scope.get("name") == "changed"
        assert caller.get("name") == "outer"

    def test_local_assign_stays_local(self):
        caller = make_ctx()
        scope = ScopeContext(caller, Visibility.LOCAL)
        scope.assign("total", 3)
        assert scope.get("total") == 3
        assert not caller.contains("total")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Render-wide state
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestRenderState:
    def test_call_stack_shared_along_chain(self):
        root = make_ctx()
        inner = ScopeContext(ScopeContext(root, Visibility.LOCAL))
        assert inner.call_stack is root.call_stack
        assert inner.template_name == "Scope.vm"

    def test_each_render_context_has_own_stack(self):
        assert make_ctx().call_stack is not make_ctx().call_stack

    def test_local_scope_still_reaches_registry(self):
        registry = object()
        root = RenderContext(registry=registry)
        assert ScopeContext(root, Visibility.LOCAL).registry is registry


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Visibility through the engine
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TestVisibilityRendering:
    BODY = Block(Text("["), Reference("name"), Text("|"), Reference("user"), Text("]"))

    def test_inherited_scope_sees_caller_reference(self, engine):
        engine.define("show", ["name"], self.BODY)
        out = engine.render(MacroCall("show", ["x"]), {"user": "ann"})
        assert out == "[x|ann]"

    def test_local_scope_hides_caller_reference(self, make_settings):
        from velomacro.macros import MacroEngine

        engine = MacroEngine(settings=make_settings(local_context_scope=True))
        engine.define("show", ["name"], self.BODY)
        out = engine.render(MacroCall("show", ["x"]), {"user": "ann"})
        assert out == "[x|$user]"
