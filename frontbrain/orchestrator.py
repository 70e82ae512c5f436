"""Pipeline orchestration for a single frontend scan."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import FrontbrainConfig, load_config
from .differ import collect_used, find_missing
from .env_reader import read_env_vars
from .extractors import discover_extractors
from .logging import get_logger
from .models import MemorySnapshot, StructureSnapshot
from .registry import read_registered
from .snapshot import (
    build_memory_snapshot,
    build_structure_snapshot,
    write_memory_snapshot,
    write_structure_snapshot,
)
from .walker import TreeWalker


@dataclass
class ScanOutcome:
    """Result of one scan: both snapshots plus where they were written."""

    memory: MemorySnapshot
    structure: StructureSnapshot
    used: List[str]
    memory_path: Optional[Path] = None
    structure_path: Optional[Path] = None


class Orchestrator:
    """Coordinates walking, registry/env reading, diffing and snapshot output."""

    def __init__(self, config: FrontbrainConfig | None = None) -> None:
        self._config = config
        self.logger = get_logger("orchestrator")

    def build(self, path: str | Path = ".", *, scanned_at: str | None = None) -> ScanOutcome:
        """Build both snapshots in memory without touching the output directory."""
        return self._build(self._resolve_config(path), scanned_at)

    def run(self, path: str | Path = ".", *, scanned_at: str | None = None) -> ScanOutcome:
        """Build both snapshots, then overwrite the memory and structure artifacts."""
        config = self._resolve_config(path)
        outcome = self._build(config, scanned_at)

        outcome.memory_path = write_memory_snapshot(outcome.memory, config.memory_path)
        outcome.structure_path = write_structure_snapshot(outcome.structure, config.structure_path)
        self.logger.info("Memory saved to %s", outcome.memory_path)
        self.logger.info("Structure saved to %s", outcome.structure_path)
        return outcome

    def _resolve_config(self, path: str | Path) -> FrontbrainConfig:
        if self._config is not None:
            return self._config
        project_root = Path(path).expanduser().resolve()
        if not project_root.exists():
            raise FileNotFoundError(f"Project path not found: {path}")
        if not project_root.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {path}")
        return load_config(project_root)

    def _build(self, config: FrontbrainConfig, scanned_at: str | None) -> ScanOutcome:
        self.logger.info("Scanning %s", config.source_path)

        walker = TreeWalker(
            discover_extractors(config, config.extractors),
            sort_entries=config.sort_entries,
            exclude_dirs=config.exclude_dirs,
        )
        walked = walker.walk(config.source_path, relative_to=config.root)
        self.logger.debug("Walker collected %d records", len(walked.records))

        registered = read_registered(
            config.registry_path,
            key=config.registry_key,
            prefix=config.identifier_prefix,
        )
        env_vars = read_env_vars(config.env_paths)
        plugins = self._list_plugins(config)

        used = collect_used(
            walked.records,
            tag_prefix=config.tag_prefix,
            identifier_prefix=config.identifier_prefix,
        )
        missing = find_missing(used, registered)
        if missing:
            self.logger.warning("Missing component registrations: %s", ", ".join(missing))

        memory = build_memory_snapshot(
            components=walked.records,
            plugins=plugins,
            env_vars=env_vars,
            registered=registered,
            missing=missing,
            scanned_at=scanned_at,
        )
        structure = build_structure_snapshot(walked.nodes)
        return ScanOutcome(memory=memory, structure=structure, used=used)

    def _list_plugins(self, config: FrontbrainConfig) -> List[str]:
        plugins_dir = config.plugins_path
        if not plugins_dir.is_dir():
            self.logger.debug("Plugins directory %s not found", plugins_dir)
            return []
        names = [
            entry.name
            for entry in plugins_dir.iterdir()
            if entry.name.endswith(config.module_suffix)
        ]
        return sorted(names) if config.sort_entries else names


__all__ = ["Orchestrator", "ScanOutcome"]
