"""Reader for the plugin file that registers UI components."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .logging import get_logger

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"//[^\n]*")

logger = get_logger("registry")


def strip_comments(text: str) -> str:
    """Remove ``/* ... */`` and ``// ...`` comments from script text."""
    without_blocks = _BLOCK_COMMENT.sub("", text)
    return _LINE_COMMENT.sub("", without_blocks)


def extract_registered(text: str, *, key: str = "components", prefix: str = "V") -> List[str]:
    """Return sorted identifiers registered inside the ``key: { ... }`` map literal.

    Only the first such block counts. Identifiers outside it (imports, other
    options) and anything inside comments are ignored.
    """
    cleaned = strip_comments(text)
    block = re.search(r"\b" + re.escape(key) + r"\s*:\s*\{(.*?)\}", cleaned, re.DOTALL)
    if block is None:
        return []
    identifier = re.compile(r"\b(" + re.escape(prefix) + r"\w+)\b")
    return sorted({match.group(1) for match in identifier.finditer(block.group(1))})


def read_registered(path: Path, *, key: str = "components", prefix: str = "V") -> List[str]:
    """Read the registry file, returning ``[]`` when it does not exist."""
    if not path.exists():
        logger.debug("Registry file %s not found; assuming nothing is registered", path)
        return []
    text = path.read_text(encoding="utf-8", errors="replace")
    return extract_registered(text, key=key, prefix=prefix)


__all__ = ["extract_registered", "read_registered", "strip_comments"]
