"""Configuration helpers for JDBC URL parsing."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MASK = "***"
DEFAULT_SECRET_KEYS = frozenset({
    "password",
    "pwd",
    "passwd",
    "secret",
    "token",
    "accesstoken",
    "apikey",
    "keystorepassword",
    "truststorepassword",
    "sslpassword",
    "sslkey",
    "clientsecret",
})

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


@dataclass(frozen=True)
class ParserConfig:
    log_level: str = DEFAULT_LOG_LEVEL
    secret_keys: frozenset[str] = DEFAULT_SECRET_KEYS
    mask: str = DEFAULT_MASK

    def is_secret(self, key: str) -> bool:
        return key.strip().lower() in self.secret_keys

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level)


def _load_yaml_config() -> dict[str, Any]:
    """Load the YAML configuration file if one exists."""

    config_env = os.environ.get("JDBCURL_CONFIG")
    candidate_paths: list[Path] = []
    if config_env:
        candidate_paths.append(Path(config_env).expanduser())
    candidate_paths.append(Path.home() / ".config" / "jdbcurl" / "config.yaml")

    for path in candidate_paths:
        if not path.is_file():
            continue
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        if isinstance(data, dict):
            return data
    return {}


def _extract_section(raw: dict[str, Any]) -> dict[str, Any]:
    section = raw.get("jdbcurl", {})
    return section if isinstance(section, dict) else {}


def _env_override(key: str) -> str | None:
    return os.environ.get(f"JDBCURL_{key.upper()}")


def load_config() -> ParserConfig:
    """Load configuration from env variables or YAML."""

    yaml_config = _extract_section(_load_yaml_config())

    def resolve_log_level(default: str) -> str:
        for value in (_env_override("log_level"), yaml_config.get("log_level")):
            if isinstance(value, str) and value.strip().upper() in _LOG_LEVELS:
                return value.strip().upper()
        return default

    def resolve_secret_keys(default: frozenset[str]) -> frozenset[str]:
        env_value = _env_override("secret_keys")
        if env_value is not None:
            keys = [key for key in env_value.split(",") if key.strip()]
        else:
            value = yaml_config.get("secret_keys")
            if isinstance(value, str):
                keys = value.split(",")
            elif isinstance(value, list):
                keys = [str(key) for key in value]
            else:
                return default
        normalized = frozenset(key.strip().lower() for key in keys if key.strip())
        return normalized or default

    def resolve_mask(default: str) -> str:
        for value in (_env_override("mask"), yaml_config.get("mask")):
            if isinstance(value, str) and value:
                return value
        return default

    return ParserConfig(
        log_level=resolve_log_level(DEFAULT_LOG_LEVEL),
        secret_keys=resolve_secret_keys(DEFAULT_SECRET_KEYS),
        mask=resolve_mask(DEFAULT_MASK),
    )


@lru_cache(maxsize=1)
def get_config() -> ParserConfig:
    """Process-wide configuration, loaded on first use."""
    return load_config()
