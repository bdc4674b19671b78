"""Application configuration and its validation."""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field

TOKEN_ENV_VAR = "FB_ACCESS_TOKEN"

_GRANULARITIES = frozenset({"HALF_HOUR", "DAY", "MONTH"})
_TEMPLATE_GRANULARITIES = frozenset({"daily"})


class ConfigError(ValueError):
    """Raised when the configuration is incomplete or inconsistent."""


@dataclass
class Config:
    """Settings for one analytics run."""

    wba_id: str = ""
    start_date: str = ""
    end_date: str = ""
    granularity: str = "DAY"
    timezone: str = "America/Sao_Paulo"
    access_token: str = ""
    mode: str = "analytics"
    metric_types: list[str] = field(default_factory=list)
    template_ids: list[str] = field(default_factory=list)


def validate(config: Config) -> None:
    """Check ``config`` and raise ConfigError describing the first problem."""
    if not config.wba_id:
        raise ConfigError("WBA ID is required")
    if not config.start_date:
        raise ConfigError("start date is required")
    if not config.end_date:
        raise ConfigError("end date is required")

    if config.mode == "template":
        if config.granularity not in _TEMPLATE_GRANULARITIES:
            raise ConfigError("granularity for templates must be daily")
        if not config.template_ids:
            raise ConfigError("template IDs are required for template analytics")
        if not config.metric_types:
            raise ConfigError("metric types are required for template analytics")
    elif config.granularity not in _GRANULARITIES:
        raise ConfigError("granularity must be HALF_HOUR, DAY, or MONTH")

    if not config.access_token:
        raise ConfigError("access token is required")


def load_access_token(prompt: Callable[[], str]) -> str:
    """Return the token from the environment, or ask for it with ``prompt``."""
    token = os.environ.get(TOKEN_ENV_VAR, "")
    if token:
        return token
    return prompt()