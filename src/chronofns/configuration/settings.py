"""Typed settings for the chronofns resolver.

Resolver defaults (strict mode, first day of the week, log level) are kept
in a Pydantic model so the CLI and embedding applications can load them
from a JSON file and CHRONOFNS_* environment variables and rely on
validated values.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from chronofns.errors import InvalidConfigError, MissingConfigError
from chronofns.nlp.models import ParseOptions

ENV_STRICT = "CHRONOFNS_STRICT"
ENV_WEEK_START_DAY = "CHRONOFNS_WEEK_START_DAY"
ENV_LOG_LEVEL = "CHRONOFNS_LOG_LEVEL"

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ResolverSettings(BaseModel):
    """Defaults applied to resolution calls."""

    strict: bool = Field(False, description="Disable the date-literal fallback")
    week_start_day: int = Field(0, ge=0, le=6, description="First day of the week (0 = Sunday)")
    log_level: str = Field("WARNING", description="Logging level name for the CLI")

    @field_validator("log_level")
    def _validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(LOG_LEVELS)}")
        return level

    def to_parse_options(self, reference_instant: Optional[datetime] = None) -> ParseOptions:
        """Build ParseOptions carrying these defaults."""
        return ParseOptions(
            reference_instant=reference_instant,
            strict=self.strict,
            week_start_day=self.week_start_day,
        )

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def load_settings(path: Path) -> ResolverSettings:
    """Load settings from disk or raise if missing or invalid."""

    if not path.exists():
        raise MissingConfigError(
            f"Settings file not found at {path}", details={"path": str(path)}
        )
    try:
        payload = json.loads(path.read_text())
        return ResolverSettings.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise InvalidConfigError(
            f"Invalid configuration: {exc}", details={"path": str(path)}
        ) from exc


def save_settings(settings: ResolverSettings, path: Path) -> None:
    """Persist settings as JSON."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2))


def bootstrap_settings(
    *,
    path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> ResolverSettings:
    """Build settings from defaults or a file, then explicit and environment overrides."""

    settings = load_settings(path) if path is not None else ResolverSettings()

    merged = settings.model_dump(mode="python")
    merged = _apply_overrides(merged, overrides or {})
    merged = _apply_env_overrides(merged)

    try:
        return ResolverSettings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidConfigError(f"Invalid configuration: {exc}") from exc


def _apply_overrides(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    merged = base.copy()
    for key, value in overrides.items():
        if value is not None:
            merged[key] = value
    return merged


def _apply_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
    _set_env_override(data, "strict", ENV_STRICT, cast_bool=True)
    _set_env_override(data, "week_start_day", ENV_WEEK_START_DAY, cast_int=True)
    _set_env_override(data, "log_level", ENV_LOG_LEVEL)
    return data


def _set_env_override(
    mapping: Dict[str, Any],
    key: str,
    env_name: str,
    *,
    cast_bool: bool = False,
    cast_int: bool = False,
) -> None:
    raw = os.getenv(env_name)
    if raw is None:
        return
    if cast_bool:
        mapping[key] = raw.lower() in {"1", "true", "yes"}
    elif cast_int:
        try:
            mapping[key] = int(raw)
        except ValueError as exc:
            raise InvalidConfigError(
                f"{env_name} must be an integer, got {raw!r}",
                details={"env": env_name},
            ) from exc
    else:
        mapping[key] = raw
