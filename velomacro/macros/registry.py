"""
MacroRegistry: store of the macros defined for an engine.

Register a proxy, then dispatch calls by name:

    registry = MacroRegistry()
    registry.register(MacroProxy(definition).init(settings))
    registry.call("greet", ctx, sink, CallSite(args=("Ann",)))

Names are case-sensitive.  Calls to unknown macros are written to the sink
as their template source text.
"""

from __future__ import annotations

import logging
from typing import Optional

from .definition import CallSite
from .nodes import write_call_source
from .proxy import MacroProxy

logger = logging.getLogger(__name__)


class MacroRegistry:
    def __init__(self) -> None:
        self._proxies: dict[str, MacroProxy] = {}

    # ---------------------------------------------------------------- register

    def register(self, proxy: MacroProxy) -> MacroProxy:
        if proxy.name in self._proxies:
            logger.debug("Redefining macro: #%s", proxy.name)
        self._proxies[proxy.name] = proxy
        logger.debug("Registered macro: #%s (args=%d)", proxy.name, proxy.accepted_arg_count)
        return proxy

    # ------------------------------------------------------------------ lookup

    def has(self, name: str) -> bool:
        return name in self._proxies

    def get(self, name: str) -> Optional[MacroProxy]:
        return self._proxies.get(name)

    def call(self, name: str, context, sink, call_site: Optional[CallSite] = None) -> bool:
        """Invoke a registered macro.  Returns False for unknown macros."""
        proxy = self._proxies.get(name)
        if proxy is None:
            # leave unknown macros intact
            write_call_source(name, call_site or CallSite(), context, sink)
            return False
        return proxy.invoke(context, sink, call_site)

    # ---------------------------------------------------------- introspection

    def registered_names(self) -> list[str]:
        return sorted(self._proxies.keys())

    def __len__(self) -> int:
        return len(self._proxies)
