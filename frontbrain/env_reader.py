"""Collects variable names declared in dotenv-style files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List

from .logging import get_logger

_ENV_KEY = re.compile(r"^([A-Z_]+)=", re.MULTILINE)

logger = get_logger("env")


def extract_env_keys(text: str) -> List[str]:
    return [match.group(1) for match in _ENV_KEY.finditer(text)]


def read_env_vars(paths: Iterable[Path]) -> List[str]:
    """Return declared keys across ``paths`` in first-seen order, skipping missing files."""
    seen: Dict[str, None] = {}
    for path in paths:
        if not path.is_file():
            logger.debug("Env file %s not found; skipping", path)
            continue
        for key in extract_env_keys(path.read_text(encoding="utf-8", errors="replace")):
            seen.setdefault(key, None)
    return list(seen)


__all__ = ["extract_env_keys", "read_env_vars"]
