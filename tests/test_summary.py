"""Tests for frontbrain.summary."""

from __future__ import annotations

from pathlib import Path

from frontbrain.models import FileNode, MarkupRecord, ModuleRecord
from frontbrain.snapshot import build_memory_snapshot, build_structure_snapshot
from frontbrain.summary import render_summary


def _snapshots(missing: list[str]):
    memory = build_memory_snapshot(
        components=[MarkupRecord(path="src/App.vue"), ModuleRecord(path="src/main.js")],
        plugins=[],
        env_vars=["API_BASE"],
        registered=["VApp", "VBtn"],
        missing=missing,
        scanned_at="2026-01-01T00:00:00Z",
    )
    structure = build_structure_snapshot([FileNode(file="App.vue"), FileNode(file="main.js")])
    return memory, structure


def test_summary_reports_counts_and_tree() -> None:
    memory, structure = _snapshots(["VCard"])

    text = render_summary(memory, structure)

    assert "components : 2 (1 markup, 1 module)" in text
    assert "plugins    : (none)" in text
    assert "env vars   : API_BASE" in text
    assert "registered : 2" in text
    assert "missing    : VCard" in text
    assert "status     : warning" in text
    assert "├── App.vue\n└── main.js" in text
    assert "saved to" not in text


def test_summary_omits_missing_line_when_clean() -> None:
    memory, structure = _snapshots([])

    text = render_summary(
        memory,
        structure,
        memory_path=Path("jod/memory/frontendMemory.json"),
        structure_path=Path("jod/memory/frontendStructure.json"),
    )

    assert "missing" not in text
    assert "status     : ok" in text
    assert "Memory saved to jod/memory/frontendMemory.json" in text
    assert "Structure saved to jod/memory/frontendStructure.json" in text


def test_summary_handles_empty_tree() -> None:
    memory, _ = _snapshots([])
    text = render_summary(memory, build_structure_snapshot([]))
    assert "(empty source tree)" in text
