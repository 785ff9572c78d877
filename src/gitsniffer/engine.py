"""Core gitsniffer engine — runs the staged-file checks and produces a verdict."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable

from gitsniffer.commands import build_commands
from gitsniffer.config import SnifferConfig
from gitsniffer.diff_resolver import staged_changes
from gitsniffer.exceptions import NoWorkError, SnifferError
from gitsniffer.locator import environment_matches, locate_tools
from gitsniffer.models import RunVerdict, ToolCommand, ToolResult
from gitsniffer.router import route
from gitsniffer.runner import ProcessRunner
from gitsniffer.testsuite import run_test_suite
from gitsniffer.verdict import aggregate


class SnifferEngine:
    """Orchestrates one pre-commit check from tool lookup to test suite.

    Stages run strictly in order and each either hands its result to the
    next or raises a :class:`SnifferError`. The engine converts that error
    into a RunVerdict; it never exits the process itself.
    """

    def __init__(
        self,
        config: SnifferConfig,
        runner: ProcessRunner | None = None,
        exists: Callable[[str], bool] = os.path.exists,
    ) -> None:
        self.config = config
        self.runner = runner or ProcessRunner()
        self._exists = exists

    def run(self) -> RunVerdict:
        """Run every stage and return the verdict for this commit."""
        if not environment_matches(self.config):
            return RunVerdict(
                passed=True,
                messages=[
                    f"Environment '{self.config.app_env}' does not match "
                    f"'{self.config.env}', skipping checks"
                ],
                skipped=True,
            )

        try:
            locate_tools(self.config, exists=self._exists)
            changes = staged_changes(self.runner)
            queues = route(changes, self.config)
            commands = build_commands(queues, self.config)
            results = self._run_commands(commands)
            lint_verdict = aggregate(results)
            test_verdict = run_test_suite(self.config, self.runner)
        except NoWorkError as e:
            print(f"ℹ️  {e}", file=sys.stderr)
            return RunVerdict(passed=True, messages=e.messages)
        except SnifferError as e:
            print(f"🚫 Commit blocked: {e}", file=sys.stderr)
            return RunVerdict(passed=False, messages=e.messages)

        return RunVerdict(passed=True, messages=lint_verdict.messages + test_verdict.messages)

    def _run_commands(self, commands: list[ToolCommand]) -> list[ToolResult]:
        """Run commands in order, re-staging after every auto-fix."""
        results: list[ToolResult] = []
        for command in commands:
            result = self.runner.run(command)
            if command.restage:
                # The fixer may have rewritten files; its exit status is not checked
                print(result.output)
                self.runner.restage(command.paths)
            results.append(result)
        return results
