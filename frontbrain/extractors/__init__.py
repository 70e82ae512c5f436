"""Extractor implementations and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import PurePath
from typing import Callable, Iterable, List, Optional, Sequence, Set

from .base import Extractor, SuffixExtractor
from .markup import MarkupExtractor, extract_markup
from .module import ModuleExtractor, extract_module
from ..config import FrontbrainConfig

_ENTRY_POINT_GROUP = "frontbrain.extractors"


def _builtin_factories(config: FrontbrainConfig) -> dict[str, Callable[[], Extractor]]:
    return {
        "markup": lambda: MarkupExtractor(config.markup_suffix),
        "module": lambda: ModuleExtractor(config.module_suffix),
    }


def discover_extractors(
    config: FrontbrainConfig, enabled: Sequence[str] | None = None
) -> List[Extractor]:
    """Return instantiated extractors, honoring optional enabled names.

    Built-ins come first so they win over plugins registered for the same suffix.
    """

    enabled_set: Set[str] | None = None
    if enabled:
        enabled_set = {name.lower() for name in enabled}

    extractors: List[Extractor] = []
    seen: Set[str] = set()

    def _add(name: str, factory: Callable[[], Extractor]) -> None:
        key = name.lower()
        if enabled_set is not None and key not in enabled_set:
            return
        if key in seen:
            return
        instance = factory()
        if not isinstance(instance, Extractor):
            raise TypeError(f"Extractor factory for '{name}' did not return an Extractor instance")
        extractors.append(instance)
        seen.add(key)

    for name, factory in _builtin_factories(config).items():
        _add(name, factory)

    for entry in _iter_entry_points():
        name = entry.name
        try:
            loaded = entry.load()
        except Exception as exc:
            raise RuntimeError(f"Failed to load extractor entry point '{name}': {exc}") from exc

        def _factory(obj: object = loaded) -> Extractor:
            return _coerce_extractor(obj)

        _add(name, _factory)

    if enabled_set:
        unknown = enabled_set - seen
        if unknown:
            raise ValueError(f"Unknown extractors requested: {', '.join(sorted(unknown))}")

    return extractors


def select_extractor(extractors: Iterable[Extractor], path: PurePath) -> Optional[Extractor]:
    """Return the first extractor that handles ``path``, or None to skip the file."""
    for extractor in extractors:
        if extractor.supports(path):
            return extractor
    return None


def _coerce_extractor(obj: object) -> Extractor:
    if isinstance(obj, Extractor):
        return obj
    if isinstance(obj, type) and issubclass(obj, Extractor):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, Extractor):
            return instance
    raise TypeError("Extractor entry point must be an Extractor subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "Extractor",
    "MarkupExtractor",
    "ModuleExtractor",
    "SuffixExtractor",
    "discover_extractors",
    "extract_markup",
    "extract_module",
    "select_extractor",
]
