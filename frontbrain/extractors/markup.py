"""Extractor for markup component files (template tags and script APIs).

Matching is plain regex over the whole file, so tags or API names that only
appear inside comments and strings are still reported, and unusual formatting
(a tag name split across lines, say) is missed. The results are advisory.
"""

from __future__ import annotations

import re
from typing import List

from .base import SuffixExtractor
from ..models import MarkupRecord

_TAG_OPEN = re.compile(r"<([\w-]+)[\s>]")

SCRIPT_APIS = (
    "ref",
    "reactive",
    "onMounted",
    "computed",
    "fetch",
    "watch",
    "defineComponent",
    "defineProps",
    "defineExpose",
    "defineEmits",
)

_SCRIPT_API = re.compile(r"\b(" + "|".join(SCRIPT_APIS) + r")\b")


def extract_tags(text: str) -> List[str]:
    """Return the distinct opening-tag names found in ``text``, sorted."""
    return sorted({match.group(1) for match in _TAG_OPEN.finditer(text)})


def extract_script_apis(text: str) -> List[str]:
    """Return the distinct reactive API names mentioned anywhere in ``text``, sorted."""
    return sorted({match.group(1) for match in _SCRIPT_API.finditer(text)})


def extract_markup(rel_path: str, text: str) -> MarkupRecord:
    return MarkupRecord(
        path=rel_path,
        tags=extract_tags(text),
        script_apis=extract_script_apis(text),
    )


class MarkupExtractor(SuffixExtractor):
    """Handles single-file components such as ``App.vue``."""

    def __init__(self, suffix: str = ".vue") -> None:
        super().__init__(suffix)

    def extract(self, rel_path: str, text: str) -> MarkupRecord:
        return extract_markup(rel_path, text)


__all__ = ["MarkupExtractor", "SCRIPT_APIS", "extract_markup", "extract_script_apis", "extract_tags"]
