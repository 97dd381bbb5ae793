"""Environment configuration for common-date-formats.

Formatters take their timezone and strictness as explicit arguments;
these settings supply the defaults when the arguments are omitted.

```bash
export DATEFMT_TIMEZONE="America/Los_Angeles"
export DATEFMT_STRICT=false
export DATEFMT_LOG_LEVEL=DEBUG
```

```python
from common_date_formats.config import load_config
cfg = load_config()
print(cfg.timezone)
```
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ConfigError


class FormatterConfig(BaseSettings):
    """Formatter defaults loaded from environment variables.

    All environment variables are prefixed with DATEFMT_ (e.g., DATEFMT_TIMEZONE).
    An unset timezone means the process local time is used. The zone
    name and log level are checked where they are used, so formatters
    that need neither keep working when one of them is wrong.
    """

    timezone: Optional[str] = Field(
        default=None,
        description="IANA zone name used by the RSS and W3C formatters",
    )
    strict: bool = Field(
        default=False,
        description="Reject malformed dates instead of formatting them leniently",
    )
    log_level: str = Field(
        default="WARNING",
        description="Level for the package logger when logging is configured",
    )

    # pydantic-settings v2 config; a shared .env may hold other apps' keys
    model_config = SettingsConfigDict(
        env_prefix="DATEFMT_",
        case_sensitive=False,
        env_file=(".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("timezone", mode="before")
    @classmethod
    def _blank_timezone_is_local(cls, v):
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return str(v).strip().upper()


def load_config() -> FormatterConfig:
    """Load and validate configuration from environment variables.

    • All variables are prefixed with DATEFMT_.
    • Missing values fall back to the documented defaults.

    Raises:
        pydantic.ValidationError: If a value has the wrong type.
    """
    return FormatterConfig()


@lru_cache(maxsize=1)
def get_config() -> FormatterConfig:
    """Process-wide configuration, loaded once. Call ``get_config.cache_clear()`` to reload.

    Raises:
        ConfigError: If the environment holds an invalid value.
    """
    try:
        return load_config()
    except ValidationError as exc:
        raise ConfigError(
            "Invalid DATEFMT_ configuration",
            {"errors": [e["msg"] for e in exc.errors()]},
        ) from exc
