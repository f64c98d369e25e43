"""Layered configuration loader for Glossa."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping, Sequence

import yaml
from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import ConfigurationError

APP_NAME = "glossa"
CONFIG_FILENAME = "config.yaml"
DEFAULT_ENDPOINT = "https://translate.googleapis.com/translate_a/single"


class GlossaConfig(BaseModel):
    """Schema describing all supported configuration options."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    GLOSSA_ENDPOINT: str = Field(
        default=DEFAULT_ENDPOINT,
        description="Base URL of the gtx translate endpoint.",
    )
    GLOSSA_PROVIDER: Literal["gtx", "echo"] = Field(default="gtx")
    GLOSSA_SOURCE_LANGUAGE: str = Field(default="auto")
    GLOSSA_TARGET_LANGUAGE: str = Field(default="en")
    GLOSSA_TIMEOUT: float = Field(default=15.0, gt=0, description="HTTP timeout in seconds.")
    GLOSSA_USER_AGENT: str = Field(default="Mozilla/5.0 (glossa)")
    GLOSSA_PROVIDER_DEBUG: bool = Field(default=False)

    @model_validator(mode="before")
    @classmethod
    def _normalise_provider(cls, data: Any) -> Any:
        if isinstance(data, dict):
            raw_value = data.get("GLOSSA_PROVIDER")
            if isinstance(raw_value, str):
                normalized = raw_value.strip().lower()
                synonyms = {
                    "google": "gtx",
                    "default": "gtx",
                    "noop": "echo",
                    "mock": "echo",
                }
                data["GLOSSA_PROVIDER"] = synonyms.get(normalized, normalized)
        return data


def config_search_paths(app_dir: Path) -> list[Path]:
    """YAML files in increasing order of precedence."""

    return [
        Path.home() / ".config" / APP_NAME / CONFIG_FILENAME,
        app_dir / CONFIG_FILENAME,
    ]


@lru_cache(maxsize=4)
def _load_settings(app_dir: Path) -> GlossaConfig:
    combined = _load_discovered_yaml(app_dir=app_dir)
    _merge_env_sources(combined, app_dir=app_dir)
    try:
        return GlossaConfig.model_validate(combined)
    except ValidationError as exc:
        raise ConfigurationError(_format_validation_errors(exc.errors())) from exc


def _load_discovered_yaml(*, app_dir: Path) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for path in config_search_paths(app_dir):
        if not path.is_file():
            continue
        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(
                f"Configuration file {path} could not be read: {exc}"
            ) from exc
        if parsed is None:
            continue
        if not isinstance(parsed, Mapping):
            raise ConfigurationError(
                f"Invalid configuration file {path}: expected a mapping at the root."
            )
        result.update(parsed)
    return result


def _merge_env_sources(target: dict[str, Any], *, app_dir: Path) -> None:
    """Overlay .env values, then process environment variables."""

    allowed = set(GlossaConfig.model_fields)

    def merge_values(values: Mapping[str, str | None]) -> None:
        for key, value in values.items():
            if value is None or key not in allowed:
                continue
            target[key] = value

    dotenv_path = app_dir / ".env"
    if dotenv_path.exists():
        merge_values(dotenv_values(dotenv_path))
    merge_values(os.environ)


def _format_validation_errors(entries: Sequence[Mapping[str, Any]]) -> str:
    details: list[str] = []
    for entry in entries:
        location = ".".join(str(part) for part in entry.get("loc") or () if part != "")
        message = str(entry.get("msg") or "Invalid value")
        prefix = f"{location}: " if location else ""
        details.append(f"- {prefix}{message}")
    return "Configuration validation errors detected:\n" + "\n".join(details)


def get_settings(app_dir: Path | None = None) -> GlossaConfig:
    """Return the validated settings, loaded once per directory."""

    return _load_settings((app_dir or Path.cwd()).resolve())


def reset_settings() -> None:
    """Forget cached settings so the next call reloads every layer."""

    _load_settings.cache_clear()
