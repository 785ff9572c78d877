"""Data models for gitsniffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property


class ToolFamily(str, Enum):
    """Tool families a staged file can be routed to."""

    PHPCS = "phpcs"
    ESLINT = "eslint"


@dataclass(frozen=True)
class ToolConfig:
    """Settings for one tool family, fixed for the duration of a run."""

    family: ToolFamily
    binary: str = ""
    fixer: str = ""
    config_path: str = ""
    ignore_path: str = ""
    extensions: tuple[str, ...] = ()
    standard: str = ""
    encoding: str = ""
    ignore_patterns: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return bool(self.binary)

    @cached_property
    def extension_set(self) -> frozenset[str]:
        return frozenset(self.extensions)

    def accepts(self, extension: str) -> bool:
        """Check whether a file extension is in this family's allow-list."""
        return extension in self.extension_set


@dataclass(frozen=True)
class StagedChange:
    """A single added, copied, modified or renamed path in the index."""

    path: str
    status: str = "M"


@dataclass
class WorkQueue:
    """Paths routed to one tool family, in diff order."""

    family: ToolFamily
    paths: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.paths)


@dataclass
class ToolCommand:
    """One external tool invocation built from a work queue."""

    tool: str
    binary: str
    options: list[str] = field(default_factory=list)
    paths: list[str] = field(default_factory=list)
    restage: bool = False

    @property
    def argv(self) -> list[str]:
        return [self.binary, *self.options, *self.paths]

    def render(self) -> str:
        """Render the shell-style form, binary and paths double-quoted."""
        parts = [quote(self.binary), *self.options]
        parts.extend(quote(p) for p in self.paths)
        return " ".join(parts)


@dataclass
class ToolResult:
    """Captured output and exit status of one tool invocation."""

    tool: str
    output: str = ""
    exit_status: int = 0

    @property
    def failed(self) -> bool:
        return bool(self.output.strip())


@dataclass
class RunVerdict:
    """The overall outcome of one gitsniffer run."""

    passed: bool
    messages: list[str] = field(default_factory=list)
    skipped: bool = False

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1


def quote(value: str) -> str:
    return f'"{value}"'
