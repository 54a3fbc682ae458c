#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Test fixtures
=============
Every test gets explicit ``Settings`` so nothing depends on the environment
or a stray .env file, and a fresh engine with its own registry.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import io

import pytest

from velomacro.core.config import Settings
from velomacro.macros import MacroEngine


# ── Settings ──────────────────────────────────────────────────────────────────

def _settings(**kwargs) -> Settings:
    defaults = dict(
        strict_arguments=False,
        local_context_scope=False,
        max_call_depth=20,
        body_reference="bodyContent",
    )
    defaults.update(kwargs)
    return Settings(**defaults)


@pytest.fixture
def make_settings():
    """Factory for Settings with test defaults; override any field by keyword."""
    return _settings


@pytest.fixture
def settings() -> Settings:
    return _settings()


@pytest.fixture
def strict_settings() -> Settings:
    return _settings(strict_arguments=True)


# ── Engines ───────────────────────────────────────────────────────────────────

@pytest.fixture
def engine(settings) -> MacroEngine:
    return MacroEngine(settings=settings)


@pytest.fixture
def strict_engine(strict_settings) -> MacroEngine:
    return MacroEngine(settings=strict_settings)


# ── Output sink ───────────────────────────────────────────────────────────────

@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


# -----------------------------------------------------------------------------
