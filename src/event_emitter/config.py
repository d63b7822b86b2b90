"""Settings models and the process-wide listener defaults."""

from __future__ import annotations

import math
import numbers
import os
from decimal import Decimal
from pathlib import Path
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_MAX_LISTENERS = 10

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def coerce_max_listeners(value: Any) -> int:
    """Coerce ``value`` to a non-negative listener cap.

    Anything that does not read as a number becomes 0, as do negatives.
    """

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        return max(int(value), 0)
    if isinstance(value, Decimal):
        if not value.is_finite():
            return 0
        return max(int(value), 0)
    if isinstance(value, numbers.Real):
        number = float(value)
        if not math.isfinite(number):
            return 0
        return max(int(number), 0)
    if isinstance(value, str):
        text = value.strip()
        try:
            return max(int(text), 0)
        except ValueError:
            pass
        try:
            return coerce_max_listeners(float(text))
        except ValueError:
            return 0
    return 0


class EmitterDefaults(BaseModel):
    """Shared configuration read by every registry at construction time."""

    model_config = ConfigDict(validate_assignment=True)

    default_max_listeners: int = DEFAULT_MAX_LISTENERS

    @field_validator("default_max_listeners", mode="before")
    @classmethod
    def coerce_default(cls, value: Any) -> int:
        return coerce_max_listeners(value)


defaults = EmitterDefaults()


def reset_defaults() -> None:
    defaults.default_max_listeners = DEFAULT_MAX_LISTENERS


class AppPaths(BaseModel):
    """Resolved directories for event-emitter tooling output."""

    base_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("EVENT_EMITTER_HOME", Path.home() / ".event_emitter"))
    )

    @property
    def logs_dir(self) -> Path:
        return self.base_dir / "logs"

    def ensure(self) -> None:
        for path in (self.base_dir, self.logs_dir):
            path.mkdir(parents=True, exist_ok=True)


class EmitterSettings(BaseModel):
    app_name: str = "event-emitter"
    paths: AppPaths = Field(default_factory=AppPaths)
    default_max_listeners: int = DEFAULT_MAX_LISTENERS
    log_level: LogLevel = "INFO"

    @field_validator("default_max_listeners", mode="before")
    @classmethod
    def coerce_default(cls, value: Any) -> int:
        return coerce_max_listeners(value)


def load_settings(env_path: Path | None = None) -> EmitterSettings:
    """Load settings from environment variables and defaults."""

    env_file = env_path or Path('.env')
    if env_file.exists():
        load_dotenv(env_file)

    overrides: dict[str, Any] = {}

    if (max_listeners := os.getenv('EVENT_EMITTER_DEFAULT_MAX_LISTENERS')) is not None:
        overrides['default_max_listeners'] = max_listeners

    if level := os.getenv('EVENT_EMITTER_LOG_LEVEL'):
        overrides['log_level'] = level.upper()

    settings = EmitterSettings(**overrides)
    settings.paths.ensure()
    return settings


def apply_settings(settings: EmitterSettings) -> EmitterDefaults:
    """Push loaded settings into the process-wide defaults."""

    defaults.default_max_listeners = settings.default_max_listeners
    return defaults
