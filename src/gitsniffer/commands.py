"""Build tool invocations for each non-empty work queue."""

from __future__ import annotations

from gitsniffer.config import SnifferConfig
from gitsniffer.models import ToolCommand, ToolConfig, ToolFamily, WorkQueue


def build_fix_command(tool: ToolConfig, queue: WorkQueue) -> ToolCommand:
    """Build the phpcbf call that rewrites the queued files in place."""
    return ToolCommand(
        tool="phpcbf",
        binary=tool.fixer,
        options=["-p"],
        paths=list(queue.paths),
        restage=True,
    )


def build_phpcs_command(tool: ToolConfig, queue: WorkQueue) -> ToolCommand:
    """Build the phpcs analysis call for the queued files."""
    options = [
        "-s",
        f"--standard={tool.standard}",
        f"--encoding={tool.encoding}",
        f"--extensions={','.join(tool.extensions)}",
    ]
    if tool.ignore_patterns:
        options.append(f"--ignore={','.join(tool.ignore_patterns)}")
    return ToolCommand(tool="phpcs", binary=tool.binary, options=options, paths=list(queue.paths))


def build_eslint_command(tool: ToolConfig, queue: WorkQueue) -> ToolCommand:
    """Build the ESLint call for the queued files."""
    options = ["-c", tool.config_path]
    if tool.ignore_path:
        options.extend(["--ignore-path", tool.ignore_path])
    else:
        options.append("--no-ignore")
    options.append("--quiet")
    return ToolCommand(tool="eslint", binary=tool.binary, options=options, paths=list(queue.paths))


def build_commands(queues: dict[ToolFamily, WorkQueue], config: SnifferConfig) -> list[ToolCommand]:
    """Build every invocation for this run, in execution order.

    The phpcbf fix always precedes the phpcs analysis of the same files.
    Families whose queue is empty or missing produce nothing.
    """
    commands: list[ToolCommand] = []

    php_queue = queues.get(ToolFamily.PHPCS)
    if config.phpcs.enabled and php_queue:
        if config.phpcs.fixer:
            commands.append(build_fix_command(config.phpcs, php_queue))
        commands.append(build_phpcs_command(config.phpcs, php_queue))

    eslint_queue = queues.get(ToolFamily.ESLINT)
    if config.eslint.enabled and eslint_queue:
        commands.append(build_eslint_command(config.eslint, eslint_queue))

    return commands
