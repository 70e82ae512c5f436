"""Directory traversal producing file records and the mirrored structure tree."""

from __future__ import annotations

import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from .extractors import Extractor, select_extractor
from .logging import get_logger
from .models import DirectoryNode, FileNode, FileRecord, FolderNode


@dataclass
class WalkResult:
    """Records and tree nodes collected beneath one directory."""

    records: List[FileRecord] = field(default_factory=list)
    nodes: List[DirectoryNode] = field(default_factory=list)


@dataclass(frozen=True)
class _WalkContext:
    root: Path
    base: Path


class TreeWalker:
    """Walks a source tree, dispatching each recognised file to an extractor.

    Listing order within a directory is either the raw filesystem order or,
    with ``sort_entries``, directories first and then files, each group sorted
    by name. Unrecognised files appear neither in the records nor in the tree.
    Any ``OSError`` raised while listing, stat-ing or reading aborts the walk.
    """

    def __init__(
        self,
        extractors: Iterable[Extractor],
        *,
        sort_entries: bool = True,
        exclude_dirs: Sequence[str] = (),
    ) -> None:
        self.extractors = list(extractors)
        self.sort_entries = sort_entries
        self.exclude_dirs = set(exclude_dirs)
        self.logger = get_logger("walker")

    def walk(self, root: Path, *, relative_to: Path | None = None) -> WalkResult:
        """Scan ``root``; record paths are made relative to ``relative_to`` (default ``root``)."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Source directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Source path is not a directory: {root}")

        base = Path(relative_to).expanduser().resolve() if relative_to is not None else root_path
        return self._walk_directory(root_path, _WalkContext(root=root_path, base=base))

    def _walk_directory(self, directory: Path, context: _WalkContext) -> WalkResult:
        result = WalkResult()
        for entry, is_dir in self._list_entries(directory):
            if is_dir:
                if entry.name in self.exclude_dirs:
                    self.logger.debug("Skipping excluded directory %s", entry)
                    continue
                child = self._walk_directory(entry, context)
                result.records.extend(child.records)
                result.nodes.append(
                    FolderNode(
                        folder=entry.relative_to(context.root).as_posix(),
                        children=child.nodes,
                    )
                )
                continue

            extractor = select_extractor(self.extractors, entry)
            if extractor is None:
                continue
            rel_path = _relative_posix(entry, context.base)
            self.logger.debug("Extracting %s with %s", rel_path, type(extractor).__name__)
            text = entry.read_text(encoding="utf-8", errors="replace")
            result.records.append(extractor.extract(rel_path, text))
            result.nodes.append(FileNode(file=entry.name))
        return result

    def _list_entries(self, directory: Path) -> List[Tuple[Path, bool]]:
        entries = [
            (entry, stat.S_ISDIR(entry.stat().st_mode)) for entry in directory.iterdir()
        ]
        if self.sort_entries:
            entries.sort(key=lambda item: (not item[1], item[0].name))
        return entries


def _relative_posix(path: Path, base: Path) -> str:
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


__all__ = ["TreeWalker", "WalkResult"]
