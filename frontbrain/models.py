"""Core data models shared across frontbrain components."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass
class MarkupRecord:
    """Facts extracted from a markup component file."""

    path: str
    tags: List[str] = field(default_factory=list)
    script_apis: List[str] = field(default_factory=list)
    description: str = "Vue component"
    kind: str = field(default="markup", init=False)


@dataclass
class ModuleRecord:
    """Facts extracted from a plain module file."""

    path: str
    exported_names: List[str] = field(default_factory=list)
    description: str = "JS utility or plugin"
    kind: str = field(default="module", init=False)


FileRecord = Union[MarkupRecord, ModuleRecord]


@dataclass
class FileNode:
    """Leaf of the structure tree."""

    file: str


@dataclass
class FolderNode:
    """Directory in the structure tree, labelled with its path relative to the scan root."""

    folder: str
    children: List["DirectoryNode"] = field(default_factory=list)


DirectoryNode = Union[FolderNode, FileNode]


@dataclass
class MemorySnapshot:
    """Flat component inventory produced once per run."""

    scanned_at: str
    components: List[FileRecord]
    plugins: List[str]
    env_vars: List[str]
    registered: List[str]
    missing: List[str]
    status: str


@dataclass
class StructureSnapshot:
    """Hierarchical directory snapshot plus its textual rendering."""

    hierarchy: List[DirectoryNode]
    rendered_tree: str
