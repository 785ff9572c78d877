"""Environment gate and tool locator.

Both run before the repository is inspected: the environment gate decides
whether gitsniffer runs at all, and the locator fails fast when a configured
binary or config file does not exist.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from gitsniffer.config import SnifferConfig
from gitsniffer.exceptions import ConfigurationError


def environment_matches(config: SnifferConfig) -> bool:
    """Check if the active environment is the one gitsniffer targets."""
    return config.app_env == config.env


def locate_tools(
    config: SnifferConfig,
    exists: Callable[[str], bool] = os.path.exists,
) -> None:
    """Verify every configured tool artifact exists on disk.

    Args:
        config: The loaded configuration.
        exists: Path existence check, injectable for tests.

    Raises:
        ConfigurationError: Naming the first missing artifact, or when no
            tool family is configured at all.
    """
    phpcs = config.phpcs
    eslint = config.eslint

    if phpcs.enabled:
        if not exists(phpcs.binary):
            raise ConfigurationError("PHP CodeSniffer bin not found")
        if phpcs.fixer and not exists(phpcs.fixer):
            raise ConfigurationError("PHP Code Beautifier bin not found")

    if eslint.enabled:
        if not exists(eslint.binary):
            raise ConfigurationError("ESLint bin not found")
        if not eslint.config_path or not exists(eslint.config_path):
            raise ConfigurationError("ESLint config file not found")
        if eslint.ignore_path and not exists(eslint.ignore_path):
            raise ConfigurationError("ESLint ignore file not found")

    if not phpcs.enabled and not eslint.enabled:
        raise ConfigurationError("Eslint bin and Phpcs bin are not configured")
