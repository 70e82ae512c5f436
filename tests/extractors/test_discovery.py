"""Tests for extractor discovery and dispatch."""

from __future__ import annotations

from pathlib import Path, PurePath

import pytest

import frontbrain.extractors as extractors_module
from frontbrain.config import FrontbrainConfig
from frontbrain.extractors import (
    Extractor,
    MarkupExtractor,
    ModuleExtractor,
    SuffixExtractor,
    discover_extractors,
    select_extractor,
)
from frontbrain.models import ModuleRecord


class _TsExtractor(SuffixExtractor):
    def __init__(self) -> None:
        super().__init__(".ts")

    def extract(self, rel_path: str, text: str) -> ModuleRecord:
        return ModuleRecord(path=rel_path, description="TypeScript module")


class _FakeEntryPoint:
    def __init__(self, name: str, obj: object) -> None:
        self.name = name
        self._obj = obj

    def load(self) -> object:
        return self._obj


@pytest.fixture
def no_entry_points(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(extractors_module, "_iter_entry_points", lambda: [])


def test_discover_returns_builtins_in_order(tmp_path: Path, no_entry_points: None) -> None:
    found = discover_extractors(FrontbrainConfig(root=tmp_path))

    assert [type(item) for item in found] == [MarkupExtractor, ModuleExtractor]


def test_discover_honours_enabled_names(tmp_path: Path, no_entry_points: None) -> None:
    found = discover_extractors(FrontbrainConfig(root=tmp_path), ["Markup"])

    assert [type(item) for item in found] == [MarkupExtractor]


def test_discover_rejects_unknown_names(tmp_path: Path, no_entry_points: None) -> None:
    with pytest.raises(ValueError, match="svelte"):
        discover_extractors(FrontbrainConfig(root=tmp_path), ["markup", "svelte"])


def test_discover_loads_entry_point_extractors(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        extractors_module,
        "_iter_entry_points",
        lambda: [_FakeEntryPoint("typescript", _TsExtractor)],
    )

    found = discover_extractors(FrontbrainConfig(root=tmp_path))

    assert isinstance(found[-1], _TsExtractor)
    chosen = select_extractor(found, PurePath("src/api.ts"))
    assert isinstance(chosen, _TsExtractor)


def test_discover_rejects_non_extractor_entry_points(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(
        extractors_module,
        "_iter_entry_points",
        lambda: [_FakeEntryPoint("broken", object())],
    )

    with pytest.raises(TypeError):
        discover_extractors(FrontbrainConfig(root=tmp_path))


def test_select_extractor_uses_configured_suffixes(tmp_path: Path, no_entry_points: None) -> None:
    config = FrontbrainConfig(root=tmp_path, markup_suffix=".svelte", module_suffix=".mjs")
    found = discover_extractors(config)

    assert isinstance(select_extractor(found, PurePath("Card.svelte")), MarkupExtractor)
    assert isinstance(select_extractor(found, PurePath("util.mjs")), ModuleExtractor)
    assert select_extractor(found, PurePath("App.vue")) is None


def test_extractor_is_abstract() -> None:
    with pytest.raises(TypeError):
        Extractor()  # type: ignore[abstract]
