"""Configuration helpers for common-date-formats.

Exposes `load_config`, which reads environment variables and returns a
typed `FormatterConfig`, and the memoized `get_config` used by the
formatters when no explicit timezone or strictness is given.
"""

from .env import FormatterConfig, get_config, load_config

__all__ = ["FormatterConfig", "get_config", "load_config"]
