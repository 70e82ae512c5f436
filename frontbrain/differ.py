"""Compares component tags used in markup against the registered set."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .models import FileRecord, MarkupRecord


def normalize_tag(tag: str, *, tag_prefix: str = "v", identifier_prefix: str = "V") -> Optional[str]:
    """Map ``v-card-title`` to ``VCardTitle``; None for tags outside the prefix.

    Empty segments from doubled or trailing hyphens contribute nothing, and a
    tag with no name after the prefix yields None.
    """
    marker = f"{tag_prefix}-"
    if not tag.startswith(marker):
        return None
    segments = tag[len(marker):].split("-")
    body = "".join(segment[:1].upper() + segment[1:] for segment in segments)
    if not body:
        return None
    return identifier_prefix + body


def collect_used(
    records: Iterable[FileRecord], *, tag_prefix: str = "v", identifier_prefix: str = "V"
) -> List[str]:
    """Return the sorted identifiers implied by prefixed tags across all markup records."""
    used = set()
    for record in records:
        if not isinstance(record, MarkupRecord):
            continue
        for tag in record.tags:
            identifier = normalize_tag(
                tag, tag_prefix=tag_prefix, identifier_prefix=identifier_prefix
            )
            if identifier is not None:
                used.add(identifier)
    return sorted(used)


def find_missing(used: Iterable[str], registered: Iterable[str]) -> List[str]:
    """Return ``used - registered``, sorted."""
    return sorted(set(used) - set(registered))


__all__ = ["collect_used", "find_missing", "normalize_tag"]
