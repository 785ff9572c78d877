"""Route staged files to tool families by extension."""

from __future__ import annotations

from gitsniffer.config import SnifferConfig
from gitsniffer.exceptions import NoWorkError
from gitsniffer.models import StagedChange, ToolFamily, WorkQueue


def file_extension(path: str) -> str:
    """Return the text after the last dot of the file name, case preserved."""
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def route(changes: list[StagedChange], config: SnifferConfig) -> dict[ToolFamily, WorkQueue]:
    """Split staged changes into one work queue per enabled tool family.

    A path lands in every queue whose allow-list contains its extension and
    is dropped when none does.

    Raises:
        NoWorkError: If no staged file matches any enabled tool.
    """
    tools = config.enabled_tools
    queues = {tool.family: WorkQueue(family=tool.family) for tool in tools}

    for change in changes:
        ext = file_extension(change.path)
        for tool in tools:
            if tool.accepts(ext):
                queues[tool.family].paths.append(change.path)

    if not any(queues.values()):
        raise NoWorkError("No staged files match a configured tool.")
    return queues
