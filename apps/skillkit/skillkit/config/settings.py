"""Lint settings using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from skillkit.errors import ConfigError

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".skillkit.yaml"

_SEVERITIES = ("error", "warning", "info")


class LintSettings(BaseSettings):
    """Settings loaded from SKILLKIT_* environment variables / .env file.

    List and dict fields take JSON in the environment, e.g.
    SKILLKIT_IGNORE='["RF003"]'.
    """

    model_config = SettingsConfigDict(
        env_prefix="SKILLKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    skill_filename: str = Field(default="SKILL.md", description="File that marks a skill directory")
    references_dir: str = Field(default="references", description="Playbook directory inside a skill")
    evals_dir: str = Field(default="evals", description="Eval prompt list directory inside a skill")
    exclude_dirs: list[str] = Field(
        default_factory=lambda: [
            "archive", "archived", "drafts", ".git", "node_modules", "__pycache__", ".venv",
        ],
        description="Directory names never searched for skills",
    )
    include_archived: bool = Field(default=False, description="Also lint archived drafts")
    ignore: list[str] = Field(default_factory=list, description="Rule codes to skip")
    severity_overrides: dict[str, str] = Field(
        default_factory=dict,
        description="Per-rule severity, e.g. {'SK006': 'error'}",
    )
    strict: bool = Field(default=False, description="Treat warnings as failures")
    max_name_length: int = Field(default=64, ge=1)
    max_description_length: int = Field(default=1024, ge=1)
    log_level: str = Field(default="WARNING")

    @field_validator("ignore")
    @classmethod
    def upper_codes(cls, v: list[str]) -> list[str]:
        return [code.strip().upper() for code in v if code.strip()]

    @field_validator("severity_overrides")
    @classmethod
    def validate_overrides(cls, v: dict[str, str]) -> dict[str, str]:
        normalised = {}
        for code, severity in v.items():
            severity = severity.strip().lower()
            if severity not in _SEVERITIES:
                raise ValueError(
                    f"severity for {code} must be one of {list(_SEVERITIES)}, got {severity!r}"
                )
            normalised[code.strip().upper()] = severity
        return normalised

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def effective_exclude_dirs(self) -> set[str]:
        excluded = set(self.exclude_dirs)
        if self.include_archived:
            excluded -= {"archive", "archived", "drafts"}
        return excluded


@lru_cache
def get_settings() -> LintSettings:
    """Get cached settings instance."""
    return LintSettings()


def reload_settings() -> LintSettings:
    """Reload settings (clear cache and return new instance).

    Call this when .env or the environment changes.
    """
    get_settings.cache_clear()
    return get_settings()


def load_project_config(root: str | Path) -> dict[str, Any]:
    """Read .skillkit.yaml at the lint root, if any."""
    config_path = Path(root) / PROJECT_CONFIG_FILENAME
    if not config_path.is_file():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a mapping, got {type(data).__name__}")

    logger.debug("Loaded project config from %s", config_path)
    return data


def settings_for(root: str | Path, **overrides: Any) -> LintSettings:
    """Build settings for a lint run.

    Precedence: explicit overrides > .skillkit.yaml > environment > defaults.
    Overrides whose value is None are ignored.
    """
    base = get_settings().model_dump()
    base.update(load_project_config(root))
    base.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return LintSettings.model_validate(base)
    except ValidationError as e:
        raise ConfigError(str(e)) from e
