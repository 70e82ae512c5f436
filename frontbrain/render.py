"""Box-drawing rendering of the structure tree."""

from __future__ import annotations

from typing import List, Sequence

from .models import DirectoryNode, FolderNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE_INDENT = "│   "
SPACE_INDENT = "    "


def render_tree(nodes: Sequence[DirectoryNode]) -> str:
    """Return the outline of ``nodes`` as newline-joined text."""
    lines: List[str] = []
    _render_level(nodes, lines, prefix="")
    return "\n".join(lines)


def _render_level(nodes: Sequence[DirectoryNode], lines: List[str], prefix: str) -> None:
    total = len(nodes)
    for index, node in enumerate(nodes):
        is_last = index == total - 1
        connector = LAST_BRANCH if is_last else BRANCH
        if isinstance(node, FolderNode):
            # Folder labels carry the full relative path; show only the last segment.
            name = node.folder.rsplit("/", 1)[-1]
            lines.append(f"{prefix}{connector}{name}/")
            _render_level(node.children, lines, prefix + (SPACE_INDENT if is_last else PIPE_INDENT))
        else:
            lines.append(f"{prefix}{connector}{node.file}")


__all__ = ["render_tree"]
