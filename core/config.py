# =============================================================================
# core/config.py  —  Process-wide settings
# =============================================================================
#
# All configuration comes from environment variables, optionally loaded from
# a .env file in the project root (pydantic-settings).  Settings are read once at
# startup and never change afterwards.
#
#   GEMINI_API_KEY / GOOGLE_API_KEY / API_KEY   Gemini credential (first set wins)
#   RELOCATION_FAST_MODEL        letter + Anmeldung guide model
#   RELOCATION_REASONING_MODEL   WBS analysis model
#   RELOCATION_THINKING_BUDGET   thinking budget for the WBS analysis
#   RELOCATION_AGENT_MODEL       model driving the interactive agent (main.py)
#   LOG_LEVEL                    server log level
#
# A missing API key is NOT an error here: the server still starts, and every
# tool call answers with its fallback text.
# =============================================================================

import logging
from typing import Any, Mapping, Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_FAST_MODEL = "gemini-3-flash-preview"
DEFAULT_REASONING_MODEL = "gemini-3-pro-preview"
DEFAULT_THINKING_BUDGET = 4000
DEFAULT_AGENT_MODEL = "gemini-2.5-flash"


class Settings(BaseSettings):
    """Relocation assistant settings (environment variables and .env)."""

    api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY"),
    )
    fast_model: str = Field(default=DEFAULT_FAST_MODEL, validation_alias="RELOCATION_FAST_MODEL")
    reasoning_model: str = Field(
        default=DEFAULT_REASONING_MODEL, validation_alias="RELOCATION_REASONING_MODEL"
    )
    thinking_budget: int = Field(
        default=DEFAULT_THINKING_BUDGET, validation_alias="RELOCATION_THINKING_BUDGET"
    )
    agent_model: str = Field(default=DEFAULT_AGENT_MODEL, validation_alias="RELOCATION_AGENT_MODEL")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_empty_values(cls, data: Any) -> Any:
        # GEMINI_API_KEY= in a .env file means "unset", not "empty key"
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value != ""}
        return data

    @field_validator("thinking_budget", mode="before")
    @classmethod
    def _fallback_on_invalid_budget(cls, value: Any) -> Any:
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(
                f"Ignoring invalid RELOCATION_THINKING_BUDGET={value!r}; "
                f"using {DEFAULT_THINKING_BUDGET}"
            )
            return DEFAULT_THINKING_BUDGET

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the process environment and .env.

        Passing ``environ`` validates that mapping alone, without reading
        os.environ or .env (used by tests).
        """
        if environ is None:
            return cls()
        return cls.model_validate(dict(environ))
