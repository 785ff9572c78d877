"""Subprocess seam for gitsniffer.

Every external program (git, the linters, the test runner) is started
through :class:`ProcessRunner`, so the rest of the pipeline never touches
``subprocess`` directly.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence

from gitsniffer.exceptions import ConfigurationError, ToolFailure
from gitsniffer.models import ToolCommand, ToolResult

# Exit status reported when a binary cannot be started at all
_NOT_STARTED = 127


class ProcessRunner:
    """Run external commands synchronously, without a shell or timeout."""

    def __init__(self, cwd: str | None = None, verbose: bool = False) -> None:
        self.cwd = cwd
        self.verbose = verbose

    def run(self, command: ToolCommand) -> ToolResult:
        """Run a tool command and capture its combined stdout/stderr.

        Args:
            command: The command to run.

        Returns:
            A ToolResult with the captured text and exit status.
        """
        self._echo(command.render())
        try:
            result = subprocess.run(
                command.argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                cwd=self.cwd,
            )
        except OSError as e:
            return ToolResult(
                tool=command.tool,
                output=f"{command.tool}: could not run {command.binary}: {e}",
                exit_status=_NOT_STARTED,
            )
        return ToolResult(tool=command.tool, output=result.stdout or "", exit_status=result.returncode)

    def stream(self, argv: Sequence[str], on_line: Callable[[str], None] = print) -> int:
        """Run a command, handing each output line to ``on_line`` as it arrives.

        Returns:
            The process exit status, or 127 if it could not be started.
        """
        self._echo(" ".join(argv))
        try:
            proc = subprocess.Popen(
                list(argv),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                bufsize=1,
                cwd=self.cwd,
            )
        except OSError as e:
            on_line(f"could not run {argv[0]}: {e}")
            return _NOT_STARTED

        assert proc.stdout is not None
        with proc.stdout:
            for line in proc.stdout:
                on_line(line.rstrip("\n"))
        return proc.wait()

    def git(self, *args: str) -> subprocess.CompletedProcess:
        """Run a git subcommand, capturing stdout and stderr separately.

        Output is decoded as UTF-8; undecodable bytes in file names survive
        as surrogate escapes and map back to the same bytes in argv.
        """
        cmd = ["git", *args]
        self._echo(" ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                encoding="utf-8",
                errors="surrogateescape",
                cwd=self.cwd,
            )
        except FileNotFoundError as e:
            raise ConfigurationError("git is not installed or not in PATH") from e

    def restage(self, paths: Sequence[str]) -> None:
        """Add paths back to the index after an auto-fixer rewrote them."""
        if not paths:
            return
        result = self.git("add", "--", *paths)
        if result.returncode != 0:
            raise ToolFailure(f"git add failed: {(result.stderr or '').strip()}")

    def _echo(self, text: str) -> None:
        if self.verbose:
            print(f"$ {text}", file=sys.stderr)
