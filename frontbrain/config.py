"""Configuration loading for frontbrain (.frontbrain.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".frontbrain.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """Where the memory and structure artifacts are written."""

    directory: str = "jod/memory"
    memory_file: str = "frontendMemory.json"
    structure_file: str = "frontendStructure.json"


@dataclass
class FrontbrainConfig:
    """Represents the settings defined in .frontbrain.yml."""

    root: Path
    source_dir: str = "src"
    plugins_dir: str = "src/plugins"
    registry_file: str = "src/plugins/vuetify.js"
    registry_key: str = "components"
    env_files: List[str] = field(default_factory=lambda: [".env", ".env.dev"])
    markup_suffix: str = ".vue"
    module_suffix: str = ".js"
    tag_prefix: str = "v"
    identifier_prefix: str = "V"
    sort_entries: bool = True
    exclude_dirs: List[str] = field(default_factory=list)
    extractors: List[str] = field(default_factory=list)
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def source_path(self) -> Path:
        return self.root / self.source_dir

    @property
    def plugins_path(self) -> Path:
        return self.root / self.plugins_dir

    @property
    def registry_path(self) -> Path:
        return self.root / self.registry_file

    @property
    def env_paths(self) -> List[Path]:
        return [self.root / name for name in self.env_files]

    @property
    def memory_path(self) -> Path:
        return self.root / self.output.directory / self.output.memory_file

    @property
    def structure_path(self) -> Path:
        return self.root / self.output.directory / self.output.structure_file


def load_config(config_path: Path) -> FrontbrainConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return FrontbrainConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = FrontbrainConfig(root=root)

    scan_data = _as_dict(data.get("scan"))
    registry_data = _as_dict(data.get("registry"))
    output_data = _as_dict(data.get("output"))

    output = OutputConfig()
    if output_data:
        output.directory = _as_str(output_data.get("directory")) or output.directory
        output.memory_file = _as_str(output_data.get("memory_file")) or output.memory_file
        output.structure_file = (
            _as_str(output_data.get("structure_file")) or output.structure_file
        )

    env_files = data.get("env_files")
    sort_entries = _as_bool(scan_data.get("sort_entries"))

    return FrontbrainConfig(
        root=root,
        source_dir=_as_str(scan_data.get("source_dir")) or defaults.source_dir,
        plugins_dir=_as_str(scan_data.get("plugins_dir")) or defaults.plugins_dir,
        registry_file=_as_str(registry_data.get("file")) or defaults.registry_file,
        registry_key=_as_str(registry_data.get("key")) or defaults.registry_key,
        env_files=_as_str_list(env_files) if env_files is not None else defaults.env_files,
        markup_suffix=_as_str(scan_data.get("markup_suffix")) or defaults.markup_suffix,
        module_suffix=_as_str(scan_data.get("module_suffix")) or defaults.module_suffix,
        tag_prefix=_as_str(registry_data.get("tag_prefix")) or defaults.tag_prefix,
        identifier_prefix=(
            _as_str(registry_data.get("identifier_prefix")) or defaults.identifier_prefix
        ),
        sort_entries=defaults.sort_entries if sort_entries is None else sort_entries,
        exclude_dirs=_as_str_list(scan_data.get("exclude_dirs")),
        extractors=_as_str_list(scan_data.get("extractors")),
        output=output,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "FrontbrainConfig", "OutputConfig", "load_config"]
