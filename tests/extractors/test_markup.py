"""Tests for the markup extractor."""

from __future__ import annotations

from pathlib import PurePath

from frontbrain.extractors.markup import MarkupExtractor, extract_markup, extract_tags


def test_extract_markup_collects_distinct_tags_and_apis() -> None:
    text = """
<template>
  <v-app>
    <v-btn @click="go">Click</v-btn>
    <v-btn>Again</v-btn>
    <my-widget/>
  </v-app>
</template>
<script setup>
import { ref, computed } from 'vue'
const count = ref(0)
const double = computed(() => count.value * 2)
const other = ref(1)
</script>
"""
    record = extract_markup("src/App.vue", text)

    assert record.kind == "markup"
    assert record.path == "src/App.vue"
    assert record.tags == ["script", "template", "v-app", "v-btn"]
    assert record.script_apis == ["computed", "ref"]
    assert record.description == "Vue component"


def test_extract_tags_ignores_closing_and_self_closing_without_space() -> None:
    # `<my-widget/>` has neither whitespace nor `>` right after the name.
    assert extract_tags("<my-widget/></v-card>") == []
    assert extract_tags("<v-card\n  flat>") == ["v-card"]


def test_api_vocabulary_matches_inside_comments() -> None:
    record = extract_markup("x.vue", "<!-- uses onMounted and watch -->\n// fetch later")
    assert record.script_apis == ["fetch", "onMounted", "watch"]


def test_api_vocabulary_requires_word_boundaries() -> None:
    record = extract_markup("x.vue", "const prefetch = refresh(); reactiveish()")
    assert record.script_apis == []


def test_extract_markup_never_fails_on_empty_or_odd_input() -> None:
    assert extract_markup("empty.vue", "").tags == []
    record = extract_markup("odd.vue", "<<<>>> < > <- \x00")
    assert record.script_apis == []


def test_markup_extractor_supports_configured_suffix() -> None:
    extractor = MarkupExtractor(".vue")
    assert extractor.supports(PurePath("src/App.vue"))
    assert not extractor.supports(PurePath("src/main.js"))
    assert MarkupExtractor(".svelte").supports(PurePath("Card.svelte"))
