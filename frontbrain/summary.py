"""Human-readable run summary rendered from a Jinja template."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from jinja2 import Environment, PackageLoader

from .models import MarkupRecord, MemorySnapshot, StructureSnapshot

_TEMPLATE_NAME = "summary.j2"


def _create_env() -> Environment:
    return Environment(
        loader=PackageLoader("frontbrain", "templates"),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_summary(
    memory: MemorySnapshot,
    structure: StructureSnapshot,
    *,
    memory_path: Optional[Path] = None,
    structure_path: Optional[Path] = None,
) -> str:
    """Render counts, status and the directory outline for console output."""
    markup_count = sum(1 for record in memory.components if isinstance(record, MarkupRecord))
    template = _create_env().get_template(_TEMPLATE_NAME)
    return template.render(
        memory=memory,
        structure=structure,
        markup_count=markup_count,
        module_count=len(memory.components) - markup_count,
        memory_path=memory_path,
        structure_path=structure_path,
    )


__all__ = ["render_summary"]
