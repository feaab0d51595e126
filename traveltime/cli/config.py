"""
Runtime configuration for the traveltime CLI
Assembled once from environment variables and passed to the pipeline
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from traveltime.core.errors import ConfigError, ParseError
from traveltime.core.models import NamedPoint
from traveltime.core.template import DEFAULT_FORMAT

API_KEY_ENV = "GOOGLE_API_KEY"
WORK_ENV = "TRAVEL_WORK_COORD"
HOME_ENV = "TRAVEL_HOME_COORD"
FORMAT_OUTPUT_ENV = "TRAVEL_FORMAT_OUTPUT"
TIMEOUT_ENV = "TRAVEL_TIMEOUT"
LOG_LEVEL_ENV = "TRAVEL_LOG_LEVEL"

DEFAULT_TIMEOUT = 5.0
DEFAULT_LOG_LEVEL = "WARNING"


class TravelConfig(BaseModel):
    """Everything a traveltime run needs"""

    api_key: str = Field(..., description="Google Maps Platform API key", min_length=1)
    work: NamedPoint = Field(..., description="Work location")
    home: NamedPoint = Field(..., description="Home location")
    output_format: str = Field(DEFAULT_FORMAT, description="Output template")
    timeout: float = Field(DEFAULT_TIMEOUT, description="Timeout budget for upstream calls in seconds", gt=0)
    log_level: str = Field(DEFAULT_LOG_LEVEL, description="Logging level name")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TravelConfig":
        """
        Build the configuration from environment variables

        Args:
            environ: Variables to read, defaults to os.environ

        Returns:
            Validated TravelConfig

        Raises:
            ConfigError: If a required variable is missing or a value is invalid
        """
        if environ is None:
            environ = os.environ

        api_key = _require(environ, API_KEY_ENV, "api key")
        work_arg = _require(environ, WORK_ENV, "work coordinate")
        home_arg = _require(environ, HOME_ENV, "home coordinate")

        work = _parse_point(work_arg, WORK_ENV)
        home = _parse_point(home_arg, HOME_ENV)

        timeout = DEFAULT_TIMEOUT
        timeout_arg = environ.get(TIMEOUT_ENV)
        if timeout_arg:
            try:
                timeout = float(timeout_arg)
            except ValueError:
                raise ConfigError(f"Invalid timeout {timeout_arg!r} in {TIMEOUT_ENV}, expected seconds")
            if not 0 < timeout < float("inf"):
                raise ConfigError(f"Invalid timeout {timeout_arg!r} in {TIMEOUT_ENV}, must be positive")

        log_level = (environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigError(f"Invalid log level {log_level!r} in {LOG_LEVEL_ENV}")

        return cls(
            api_key=api_key,
            work=work,
            home=home,
            output_format=environ.get(FORMAT_OUTPUT_ENV) or DEFAULT_FORMAT,
            timeout=timeout,
            log_level=log_level,
        )


def _require(environ: Mapping[str, str], name: str, what: str) -> str:
    value = environ.get(name, "")
    if not value:
        raise ConfigError(f"Missing {what}, use {name!r} to provide it")
    return value


def _parse_point(value: str, name: str) -> NamedPoint:
    try:
        return NamedPoint.parse(value)
    except ParseError as e:
        raise ParseError(f"{name}: {e}")
