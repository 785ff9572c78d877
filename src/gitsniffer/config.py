"""Configuration management for gitsniffer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore

from gitsniffer.exceptions import ConfigurationError
from gitsniffer.models import ToolConfig, ToolFamily

CONFIG_FILENAME = ".gitsniffer.yml"

_DEFAULT_CONFIG = {
    "env": "local",
    "app_env": None,
    "phpcs": {
        "bin": "./vendor/bin/phpcs",
        "fixer_bin": "./vendor/bin/phpcbf",
        "standard": "PSR2",
        "encoding": "utf-8",
        "extensions": ["php"],
        "ignore": [],
    },
    "eslint": {
        "bin": None,
        "config": ".eslintrc.json",
        "ignore_path": None,
        "extensions": ["js"],
    },
    "tests": {
        "enabled": False,
        "bin": "./vendor/bin/phpunit",
    },
}


def _default_app_env() -> str:
    return os.environ.get("APP_ENV") or "local"


@dataclass
class SnifferConfig:
    """Full gitsniffer configuration loaded from `.gitsniffer.yml`."""

    env: str = "local"
    app_env: str = field(default_factory=_default_app_env)
    phpcs: ToolConfig = field(default_factory=lambda: ToolConfig(family=ToolFamily.PHPCS))
    eslint: ToolConfig = field(default_factory=lambda: ToolConfig(family=ToolFamily.ESLINT))
    run_tests: bool = False
    test_bin: str = ""

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> SnifferConfig:
        """Load configuration from a YAML file, falling back to defaults.

        Search order:
        1. Explicit ``config_path`` argument
        2. ``.gitsniffer.yml`` in the current directory
        3. Built-in defaults
        """
        raw: dict[str, Any] = dict(_DEFAULT_CONFIG)

        search_paths: list[Path] = []
        if config_path:
            search_paths.append(Path(config_path))
        search_paths.append(Path(CONFIG_FILENAME))

        for path in search_paths:
            if path.exists():
                try:
                    with open(path, encoding="utf-8") as f:
                        loaded = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e
                if loaded and isinstance(loaded, dict):
                    raw = _deep_merge(raw, loaded)
                break

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict[str, Any]) -> SnifferConfig:
        """Build config from a raw dict (merged defaults + user overrides)."""
        cfg = cls()
        cfg.env = str(raw.get("env") or cfg.env)
        cfg.app_env = str(raw.get("app_env") or cfg.app_env)

        phpcs = raw.get("phpcs") or {}
        cfg.phpcs = ToolConfig(
            family=ToolFamily.PHPCS,
            binary=_text(phpcs.get("bin")),
            fixer=_text(phpcs.get("fixer_bin")),
            extensions=_strings(phpcs.get("extensions")),
            standard=_text(phpcs.get("standard")),
            encoding=_text(phpcs.get("encoding")),
            ignore_patterns=_strings(phpcs.get("ignore")),
        )

        eslint = raw.get("eslint") or {}
        cfg.eslint = ToolConfig(
            family=ToolFamily.ESLINT,
            binary=_text(eslint.get("bin")),
            config_path=_text(eslint.get("config")),
            ignore_path=_text(eslint.get("ignore_path")),
            extensions=_strings(eslint.get("extensions")),
        )

        tests = raw.get("tests") or {}
        enabled = tests.get("enabled", cfg.run_tests)
        if not isinstance(enabled, bool):
            raise ConfigurationError(f"tests.enabled must be true or false, got {enabled!r}")
        cfg.run_tests = enabled
        cfg.test_bin = _text(tests.get("bin"))

        return cfg

    @property
    def enabled_tools(self) -> list[ToolConfig]:
        return [t for t in (self.phpcs, self.eslint) if t.enabled]


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _strings(value: Any) -> tuple[str, ...]:
    """Normalize a YAML scalar or list into a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, (list, tuple)):
        return tuple(str(v) for v in value if v is not None)
    return (str(value),)


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep-merge override dict into base dict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
