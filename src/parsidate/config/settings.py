"""CLI defaults, overridable through ``PARSIDATE_*`` environment variables.

    PARSIDATE_DATE_FORMAT      pattern or style used to print dates   (short)
    PARSIDATE_DATETIME_FORMAT  pattern used to print date-times       (%Y/%m/%d %H:%M:%S)
    PARSIDATE_TIMEZONE         IANA zone for ``now`` when --tz is absent (unset: local clock)
    PARSIDATE_LOG_LEVEL        DEBUG, INFO, WARNING or ERROR          (WARNING)
    PARSIDATE_LOG_JSON         1/true/yes to emit JSON log lines       (false)

The library itself reads none of this; only the CLI and diagnostics do.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PARSIDATE_", frozen=True)

    date_format: str = "short"
    datetime_format: str = "%Y/%m/%d %H:%M:%S"
    timezone: Optional[str] = None
    log_level: LogLevel = "WARNING"
    log_json: bool = False

    @field_validator("date_format", "datetime_format")
    @classmethod
    def _not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("format must not be empty")
        return v

    @field_validator("timezone")
    @classmethod
    def _empty_zone_is_local(cls, v: Optional[str]) -> Optional[str]:
        # an empty zone means "use the local clock"
        return v or None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        return v.strip().upper() if isinstance(v, str) else v

    @classmethod
    def from_env(cls) -> "Settings":
        """Defaults overlaid with whatever ``PARSIDATE_*`` variables are set."""
        return cls()
