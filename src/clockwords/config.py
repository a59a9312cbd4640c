"""Typed configuration for time expression scanning.

``ParserConfig`` is the per-scan configuration. ``ScannerSettings`` adds the
set of enabled languages and can be loaded from a JSON file and/or
environment variables, so a host application can tune the scanner without
code changes.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from clockwords.errors import ConfigurationError


DEFAULT_LANGUAGES = ("en", "de", "fr", "es")


class ParserConfig(BaseModel):
    """Per-scan options.

    Read once per ``scan()`` call and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    report_partial: bool = Field(
        True, description="Report prefixes of keywords that are still being typed"
    )
    max_matches: int = Field(10, ge=0, description="Maximum matches returned per scan")


class ScannerSettings(BaseModel):
    """Scanner construction settings."""

    languages: List[str] = Field(default_factory=lambda: list(DEFAULT_LANGUAGES))
    parser: ParserConfig = Field(default_factory=ParserConfig)

    @field_validator("languages")
    def _normalize_languages(cls, value: List[str]) -> List[str]:
        normalized = []
        for code in value:
            code = code.strip().lower()
            if code and code not in normalized:
                normalized.append(code)
        return normalized


def load_settings(path: Path) -> ScannerSettings:
    """Load settings from a JSON file or raise if invalid."""

    if not path.exists():
        raise FileNotFoundError(f"Settings file not found at {path}")
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {exc}") from exc
    return _validate(payload)


def settings_from_env(base: ScannerSettings | None = None) -> ScannerSettings:
    """Apply ``CLOCKWORDS_*`` environment overrides on top of ``base``."""

    data = (base or ScannerSettings()).model_dump(mode="python")
    raw_languages = os.getenv("CLOCKWORDS_LANGUAGES")
    if raw_languages is not None:
        data["languages"] = [code for code in raw_languages.split(",") if code.strip()]
    parser = data.setdefault("parser", {})
    _set_env_override(parser, "report_partial", "CLOCKWORDS_REPORT_PARTIAL", cast_bool=True)
    _set_env_override(parser, "max_matches", "CLOCKWORDS_MAX_MATCHES", cast_int=True)
    return _validate(data)


def save_settings(settings: ScannerSettings, path: Path) -> None:
    """Persist settings to disk."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8")


def _validate(payload: Dict[str, Any]) -> ScannerSettings:
    try:
        return ScannerSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


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
            raise ConfigurationError(f"{env_name} must be an integer, got {raw!r}") from exc
    else:
        mapping[key] = raw
