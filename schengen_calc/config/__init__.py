"""Runtime configuration helpers."""

from schengen_calc.config.settings import EngineSettings, resolve_member_codes, resolve_settings

__all__ = ["EngineSettings", "resolve_member_codes", "resolve_settings"]
