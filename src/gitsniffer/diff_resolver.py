"""Staged change resolver for gitsniffer."""

from __future__ import annotations

from gitsniffer.exceptions import ConfigurationError, NoWorkError
from gitsniffer.models import StagedChange
from gitsniffer.runner import ProcessRunner

# Hash of git's empty tree, the diff base before the first commit
EMPTY_TREE_HASH = "4b825dc642cb6eb9a060e54bf8d69288fbee4904"

# Added, copied, modified, renamed. Never deleted.
DIFF_FILTER = "ACMR"


def resolve_diff_base(runner: ProcessRunner) -> str:
    """Return ``HEAD`` when the repository has a commit, else the empty tree."""
    result = runner.git("rev-parse", "--verify", "HEAD")
    if result.returncode == 0 and result.stdout.strip():
        return "HEAD"
    return EMPTY_TREE_HASH


def parse_name_status(text: str) -> list[StagedChange]:
    """Parse ``git diff-index -z --name-status`` output into staged changes.

    Args:
        text: Raw NUL-separated output. Each record is a status field
            followed by one path, or by the source and destination paths
            for renames and copies (``R100\\0old\\0new\\0``). Paths are
            verbatim, never quoted or escaped by git.

    Returns:
        StagedChange objects in diff order, destination path for renames.
    """
    changes: list[StagedChange] = []
    fields = text.split("\0")
    index = 0

    while index < len(fields):
        status = fields[index].strip()[:1]
        index += 1
        if not status:
            continue
        path_count = 2 if status in "RC" else 1
        paths = fields[index : index + path_count]
        index += path_count
        if len(paths) < path_count or not paths[-1]:
            break
        if status not in DIFF_FILTER:
            continue
        changes.append(StagedChange(path=paths[-1], status=status))

    return changes


def staged_changes(runner: ProcessRunner) -> list[StagedChange]:
    """List the staged paths worth checking.

    Raises:
        NoWorkError: If nothing added, copied, modified or renamed is staged.
        ConfigurationError: If git cannot list the index.
    """
    against = resolve_diff_base(runner)
    result = runner.git(
        "diff-index",
        "--cached",
        "-z",
        "-M",
        "--name-status",
        f"--diff-filter={DIFF_FILTER}",
        against,
        "--",
    )
    if result.returncode != 0:
        raise ConfigurationError(f"Error running git diff-index: {(result.stderr or '').strip()}")

    changes = parse_name_status(result.stdout)
    if not changes:
        raise NoWorkError("No staged changes to check.")
    return changes
