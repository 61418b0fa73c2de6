# config.py

"""
Runtime settings for the calculator front ends.

Values come from FRACTION_CALC_* environment variables, optionally loaded
from a .env file, and are validated by a pydantic model. Command-line flags
override them in cli.main().
"""

import logging
import os
from typing import Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "FRACTION_CALC_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class CalculatorSettings(BaseModel):
    """Settings shared by the REPL and the batch runner."""
    history_file: str = Field(
        default_factory=lambda: os.path.expanduser("~/.fraction_calc_history"),
        description="File holding REPL line history",
    )
    log_level: str = Field("WARNING", description="Logging level name")
    strict: bool = Field(False, description="Reject tokens left after a complete expression")
    show_approximation: bool = Field(False, description="Print a decimal approximation next to results")
    prompt: str = "> "

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('strict', 'show_approximation', mode='before')
    @classmethod
    def parse_flag(cls, v):
        if isinstance(v, str):
            lowered = v.strip().lower()
            if lowered in _TRUE_VALUES:
                return True
            if lowered in _FALSE_VALUES:
                return False
            raise ValueError(f"Expected a boolean flag, got {v!r}")
        return v

    @field_validator('history_file')
    @classmethod
    def expand_history_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('History file cannot be empty')
        return os.path.expanduser(v.strip())


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  dotenv: bool = True) -> CalculatorSettings:
    """
    Build settings from the environment.

    Args:
        environ: mapping to read instead of os.environ (used by tests)
        dotenv: whether to load a .env file into os.environ first
    """
    if dotenv:
        load_dotenv()
    if environ is None:
        environ = os.environ
    values = {}
    for field in CalculatorSettings.model_fields:
        key = ENV_PREFIX + field.upper()
        if key in environ:
            values[field] = environ[key]
    # FRACTION_CALC_APPROX is the short spelling of show_approximation
    if ENV_PREFIX + "APPROX" in environ and "show_approximation" not in values:
        values["show_approximation"] = environ[ENV_PREFIX + "APPROX"]
    return CalculatorSettings(**values)
