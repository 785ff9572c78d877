"""Merge tool results into a single pass/fail verdict."""

from __future__ import annotations

import sys

from gitsniffer.exceptions import ToolFailure
from gitsniffer.models import RunVerdict, ToolResult

# Tools whose output decides the verdict; auto-fix output never does
VERDICT_TOOLS = ("phpcs", "eslint")


def aggregate(results: list[ToolResult]) -> RunVerdict:
    """Fail the run if any analysis tool produced output.

    phpcs output is printed verbatim to stdout and ESLint output to stderr
    before the failure is raised.

    Args:
        results: Results of every tool that ran; tools whose queue was
            empty are simply absent.

    Returns:
        A passing RunVerdict when no analysis tool reported anything.

    Raises:
        ToolFailure: Carrying each failing tool's output as a message.
    """
    by_tool = {r.tool: r for r in results}
    phpcs = by_tool.get("phpcs")
    eslint = by_tool.get("eslint")

    failures = [r for r in (phpcs, eslint) if r is not None and r.failed]
    if not failures:
        ran = [t for t in VERDICT_TOOLS if t in by_tool]
        return RunVerdict(passed=True, messages=[f"{t}: no issues" for t in ran])

    if phpcs is not None and phpcs.failed:
        print(phpcs.output)
    if eslint is not None and eslint.failed:
        print(eslint.output, file=sys.stderr)

    raise ToolFailure(
        f"{', '.join(r.tool for r in failures)} reported problems",
        messages=[r.output for r in failures],
    )
