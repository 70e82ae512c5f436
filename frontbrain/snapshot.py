"""Assembly, serialization and persistence of memory and structure snapshots."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .models import (
    DirectoryNode,
    FileNode,
    FileRecord,
    FolderNode,
    MarkupRecord,
    MemorySnapshot,
    ModuleRecord,
    StructureSnapshot,
)
from .render import render_tree

STATUS_OK = "ok: all used components are registered"
STATUS_WARNING = "warning: components used but not registered"


def derive_status(missing: Sequence[str]) -> str:
    return STATUS_WARNING if missing else STATUS_OK


def utc_timestamp() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def build_memory_snapshot(
    *,
    components: Sequence[FileRecord],
    plugins: Sequence[str],
    env_vars: Sequence[str],
    registered: Sequence[str],
    missing: Sequence[str],
    scanned_at: Optional[str] = None,
) -> MemorySnapshot:
    return MemorySnapshot(
        scanned_at=scanned_at or utc_timestamp(),
        components=list(components),
        plugins=list(plugins),
        env_vars=list(env_vars),
        registered=list(registered),
        missing=list(missing),
        status=derive_status(missing),
    )


def build_structure_snapshot(hierarchy: Sequence[DirectoryNode]) -> StructureSnapshot:
    return StructureSnapshot(hierarchy=list(hierarchy), rendered_tree=render_tree(hierarchy))


# ----------------------------------------------------------------------
# Serialization


def record_to_dict(record: FileRecord) -> Dict[str, Any]:
    if isinstance(record, MarkupRecord):
        return {
            "path": record.path,
            "kind": record.kind,
            "tags": sorted(record.tags),
            "scriptApis": sorted(record.script_apis),
            "description": record.description,
        }
    return {
        "path": record.path,
        "kind": record.kind,
        "exportedNames": list(record.exported_names),
        "description": record.description,
    }


def record_from_dict(payload: Dict[str, Any]) -> FileRecord:
    kind = payload.get("kind")
    if kind == "markup":
        return MarkupRecord(
            path=payload["path"],
            tags=list(payload.get("tags", [])),
            script_apis=list(payload.get("scriptApis", [])),
            description=payload.get("description", "Vue component"),
        )
    if kind == "module":
        return ModuleRecord(
            path=payload["path"],
            exported_names=list(payload.get("exportedNames", [])),
            description=payload.get("description", "JS utility or plugin"),
        )
    raise ValueError(f"Unknown record kind: {kind!r}")


def node_to_dict(node: DirectoryNode) -> Dict[str, Any]:
    if isinstance(node, FolderNode):
        return {"folder": node.folder, "children": [node_to_dict(child) for child in node.children]}
    return {"file": node.file}


def node_from_dict(payload: Dict[str, Any]) -> DirectoryNode:
    if "folder" in payload:
        return FolderNode(
            folder=payload["folder"],
            children=[node_from_dict(child) for child in payload.get("children", [])],
        )
    if "file" in payload:
        return FileNode(file=payload["file"])
    raise ValueError("Structure node must contain 'folder' or 'file'")


def memory_to_dict(snapshot: MemorySnapshot) -> Dict[str, Any]:
    return {
        "scannedAt": snapshot.scanned_at,
        "components": [record_to_dict(record) for record in snapshot.components],
        "plugins": list(snapshot.plugins),
        "envVars": list(snapshot.env_vars),
        "registered": list(snapshot.registered),
        "missing": list(snapshot.missing),
        "status": snapshot.status,
    }


def memory_from_dict(payload: Dict[str, Any]) -> MemorySnapshot:
    return MemorySnapshot(
        scanned_at=payload["scannedAt"],
        components=[record_from_dict(item) for item in payload.get("components", [])],
        plugins=list(payload.get("plugins", [])),
        env_vars=list(payload.get("envVars", [])),
        registered=list(payload.get("registered", [])),
        missing=list(payload.get("missing", [])),
        status=payload.get("status", ""),
    )


def structure_to_dict(snapshot: StructureSnapshot) -> Dict[str, Any]:
    return {
        "hierarchy": [node_to_dict(node) for node in snapshot.hierarchy],
        "renderedTree": snapshot.rendered_tree,
    }


def structure_from_dict(payload: Dict[str, Any]) -> StructureSnapshot:
    return StructureSnapshot(
        hierarchy=[node_from_dict(node) for node in payload.get("hierarchy", [])],
        rendered_tree=payload.get("renderedTree", ""),
    )


# ----------------------------------------------------------------------
# Persistence


def write_memory_snapshot(snapshot: MemorySnapshot, path: Path) -> Path:
    _write_json(path, memory_to_dict(snapshot))
    return path


def write_structure_snapshot(snapshot: StructureSnapshot, path: Path) -> Path:
    _write_json(path, structure_to_dict(snapshot))
    return path


def read_memory_snapshot(path: Path) -> MemorySnapshot:
    return memory_from_dict(json.loads(path.read_text(encoding="utf-8")))


def read_structure_snapshot(path: Path) -> StructureSnapshot:
    return structure_from_dict(json.loads(path.read_text(encoding="utf-8")))


def _write_json(path: Path, payload: Dict[str, Any]) -> None:
    """Replace ``path`` wholesale so readers never observe a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__: List[str] = [
    "STATUS_OK",
    "STATUS_WARNING",
    "build_memory_snapshot",
    "build_structure_snapshot",
    "derive_status",
    "memory_from_dict",
    "memory_to_dict",
    "read_memory_snapshot",
    "read_structure_snapshot",
    "structure_from_dict",
    "structure_to_dict",
    "write_memory_snapshot",
    "write_structure_snapshot",
]
