#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Macro engine configuration.

All values can be overridden via environment variables (``VELOMACRO_`` prefix)
or a .env file.  Settings are read once when a macro is defined and cached on
the macro itself, never per call.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------

class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="VELOMACRO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Argument binding ───────────────────────────────────────────────────

    strict_arguments: bool = False      # arity mismatches raise instead of logging

    # ── Scoping ────────────────────────────────────────────────────────────

    local_context_scope: bool = False   # macro bodies cannot see caller references
    body_reference: str = "bodyContent"

    # ── Recursion ──────────────────────────────────────────────────────────

    max_call_depth: int = 20            # 0 or negative disables the limit


# -----------------------------------------------------------------------------

@lru_cache
def get_settings() -> Settings:
    return Settings()


# -----------------------------------------------------------------------------
