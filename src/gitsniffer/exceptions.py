"""Error kinds raised by the gitsniffer pipeline stages.

Each stage raises one of these instead of exiting the process; the engine
turns them into a :class:`~gitsniffer.models.RunVerdict` and the CLI turns
the verdict into an exit status.
"""

from __future__ import annotations


class SnifferError(Exception):
    """Base class for every condition that ends a run early."""

    exit_code = 1

    def __init__(self, message: str, messages: list[str] | None = None) -> None:
        super().__init__(message)
        self.messages = list(messages) if messages else [message]


class ConfigurationError(SnifferError):
    """A configured tool, config or ignore file is missing, or nothing is configured."""


class NoWorkError(SnifferError):
    """Nothing staged, or no staged file matches any tool. Not a failure."""

    exit_code = 0


class ToolFailure(SnifferError):
    """A linting or formatting tool reported diagnostics."""


class TestFailure(SnifferError):
    """The test suite exited with a non-zero status."""

    __test__ = False
