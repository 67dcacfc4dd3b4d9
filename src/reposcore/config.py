"""Report settings loaded from the environment."""

import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "REPOSCORE_"


class ReportSettings(BaseModel):
    """Settings for one report run.

    Values come from ``REPOSCORE_*`` environment variables (a ``.env`` file is
    loaded by the CLI first); command-line options override them.
    """

    output_dir: Path = Path("results")
    timestamp_format: str = "%Y-%m-%d %H:%M"
    chart_width: int = Field(default=1080, gt=0)
    chart_height: int = Field(default=1920, gt=0)
    chart_dpi: int = Field(default=100, gt=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ReportSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (used by tests).
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw:
                values[name] = raw
        return cls(**values)
