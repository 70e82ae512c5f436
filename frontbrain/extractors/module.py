"""Extractor for plain module files (exported function names)."""

from __future__ import annotations

import re
from typing import List

from .base import SuffixExtractor
from ..models import ModuleRecord

_EXPORT_FUNCTION = re.compile(r"export function (\w+)")


def extract_exports(text: str) -> List[str]:
    """Return exported function names in file order.

    Repeated names are kept as separate entries so that duplicate exports stay
    visible in the inventory.
    """
    return [match.group(1) for match in _EXPORT_FUNCTION.finditer(text)]


def extract_module(rel_path: str, text: str) -> ModuleRecord:
    return ModuleRecord(path=rel_path, exported_names=extract_exports(text))


class ModuleExtractor(SuffixExtractor):
    """Handles plain script modules such as ``utils/format.js``."""

    def __init__(self, suffix: str = ".js") -> None:
        super().__init__(suffix)

    def extract(self, rel_path: str, text: str) -> ModuleRecord:
        return extract_module(rel_path, text)


__all__ = ["ModuleExtractor", "extract_exports", "extract_module"]
