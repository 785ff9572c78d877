"""Optional test suite run after linting passes."""

from __future__ import annotations

from pathlib import Path

from gitsniffer.config import SnifferConfig
from gitsniffer.exceptions import TestFailure
from gitsniffer.models import RunVerdict
from gitsniffer.runner import ProcessRunner

_RESET_COLORS = "\x1b[0m"


def run_test_suite(
    config: SnifferConfig,
    runner: ProcessRunner,
    project_name: str | None = None,
) -> RunVerdict:
    """Run the configured test binary with no arguments.

    Output is streamed line by line as the suite produces it.

    Args:
        config: Loaded configuration; ``run_tests`` and ``test_bin`` apply.
        runner: Process runner used to start the suite.
        project_name: Name for the summary line. Defaults to the leaf name
            of the current working directory.

    Returns:
        A passing RunVerdict when the suite is disabled or exits with 0.

    Raises:
        TestFailure: If the suite exits non-zero or cannot be started.
    """
    if not config.run_tests:
        return RunVerdict(passed=True, messages=["Test suite disabled"])

    name = project_name or Path.cwd().name

    print()
    print(">> Starting unit tests")
    status = runner.stream([config.test_bin], on_line=print)
    print()

    if status != 0:
        print(f">> Test suite for {name} failed:")
        print(_RESET_COLORS)
        print()
        raise TestFailure(f"Test suite for {name} failed with exit status {status}")

    summary = f">> All tests for {name} passed."
    print(summary)
    print()
    return RunVerdict(passed=True, messages=[summary])
