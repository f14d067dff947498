"""
Tests for FilterSelection, SearchQuery and the catalog filter pipeline.
"""
import random

import pytest

from bookshelf.ui.catalog.controllers.filter_controller import (
    ALL_TOPICS,
    FilterController,
    FilterSelection,
    SearchQuery,
    available_topics,
    filter_catalog,
)


class TestFilterSelection:
    """Tests for the multi-select toggle algorithm."""

    def test_default_is_all(self):
        selection = FilterSelection()

        assert selection.topics == (ALL_TOPICS,)
        assert selection.is_unrestricted

    def test_toggle_replaces_all(self):
        selection = FilterSelection()
        selection.toggle("React")

        assert selection.topics == ("React",)
        assert ALL_TOPICS not in selection

    def test_toggle_adds_and_removes(self):
        selection = FilterSelection()
        selection.toggle("React")
        selection.toggle("CSS")
        assert selection.topics == ("React", "CSS")

        selection.toggle("React")
        assert selection.topics == ("CSS",)

    def test_removing_last_topic_restores_all(self):
        selection = FilterSelection(["React"])
        selection.toggle("React")

        assert selection.is_unrestricted

    def test_all_clears_everything(self):
        selection = FilterSelection(["React", "CSS"])
        selection.toggle(ALL_TOPICS)

        assert selection.topics == (ALL_TOPICS,)

    def test_all_when_already_all(self):
        selection = FilterSelection()
        selection.toggle(ALL_TOPICS)

        assert selection.is_unrestricted

    def test_constructor_normalizes(self):
        assert FilterSelection([]).is_unrestricted
        assert FilterSelection(["React", ALL_TOPICS]).is_unrestricted
        assert FilterSelection(["CSS", "CSS"]).topics == ("CSS",)

    def test_double_toggle_restores_selection(self):
        for topic in ("React", "CSS", "HTML"):
            selection = FilterSelection(["React", "CSS"])
            before = selection.copy()
            selection.toggle(topic)
            selection.toggle(topic)
            assert selection == before

    def test_random_toggles_keep_invariant(self):
        rng = random.Random(1234)
        topics = [ALL_TOPICS, "React", "CSS", "HTML", "Node.js"]
        selection = FilterSelection()

        for _ in range(500):
            selection.toggle(rng.choice(topics))
            assert len(selection) > 0
            if ALL_TOPICS in selection:
                assert selection.topics == (ALL_TOPICS,)

    def test_unknown_topic_is_accepted(self):
        selection = FilterSelection()
        selection.toggle("Rust")

        assert selection.topics == ("Rust",)

    def test_reset(self):
        selection = FilterSelection(["React"])
        selection.reset()

        assert selection.is_unrestricted

    def test_includes_category(self):
        assert FilterSelection().includes_category("Anything")
        assert FilterSelection(["CSS"]).includes_category("CSS")
        assert not FilterSelection(["CSS"]).includes_category("React")


class TestSearchQuery:
    """Tests for SearchQuery state."""

    def test_is_active(self):
        assert not SearchQuery().is_active
        assert not SearchQuery("   ").is_active
        assert SearchQuery("react").is_active

    def test_none_is_empty(self):
        assert SearchQuery(None).text == ""  # type: ignore[arg-type]


class TestFilterCatalog:
    """Tests for the category -> flatten -> search pipeline."""

    def test_all_keeps_catalog_order(self, small_catalog):
        result = filter_catalog(small_catalog, FilterSelection(), SearchQuery(""))

        assert [entry.topic for entry in result] == ["React", "React", "CSS"]
        assert [entry.title for entry in result] == [
            "Learning React Hooks",
            "Fluent React",
            "CSS Secrets",
        ]

    def test_category_and_search(self, small_catalog):
        result = filter_catalog(small_catalog, FilterSelection(["React"]), SearchQuery("hooks"))

        assert [entry.title for entry in result] == ["Learning React Hooks"]
        assert all(entry.topic == "React" for entry in result)

    def test_search_is_case_insensitive(self, small_catalog):
        selection = FilterSelection()
        upper = filter_catalog(small_catalog, selection, SearchQuery("REACT"))
        lower = filter_catalog(small_catalog, selection, SearchQuery("react"))

        assert upper == lower
        assert len(lower) == 2

    def test_search_matches_author(self, small_catalog):
        result = filter_catalog(small_catalog, FilterSelection(), SearchQuery("verou"))

        assert [entry.topic for entry in result] == ["CSS"]

    def test_topics_are_in_scope(self, small_catalog):
        for topics in (["CSS"], ["React"], ["React", "CSS"], [ALL_TOPICS]):
            selection = FilterSelection(topics)
            for entry in filter_catalog(small_catalog, selection, SearchQuery("")):
                assert selection.includes_category(entry.topic)

    def test_no_match_is_empty(self, small_catalog):
        assert filter_catalog(small_catalog, FilterSelection(), SearchQuery("cobol")) == []
        assert filter_catalog(small_catalog, FilterSelection(["Rust"]), SearchQuery("")) == []

    def test_source_catalog_not_mutated(self, small_catalog):
        filter_catalog(small_catalog, FilterSelection(), SearchQuery(""))

        item = small_catalog.get("CSS").items[0]
        assert not hasattr(item, "topic")

    def test_available_topics(self, small_catalog):
        assert available_topics(small_catalog) == [ALL_TOPICS, "React", "CSS"]


class TestFilterController:
    """Tests for FilterController state."""

    def test_apply(self, small_catalog):
        controller = FilterController()
        controller.toggle_topic("CSS")

        assert [entry.title for entry in controller.apply(small_catalog)] == ["CSS Secrets"]
        assert controller.is_active

    def test_clear(self, small_catalog):
        controller = FilterController()
        controller.toggle_topic("CSS")
        controller.set_text_filter("nothing")
        controller.clear()

        assert not controller.is_active
        assert controller.text_filter == ""
        assert len(controller.apply(small_catalog)) == 3

    @pytest.mark.parametrize("text", ["", "   "])
    def test_blank_search_is_inactive(self, text):
        controller = FilterController()
        controller.set_text_filter(text)

        assert not controller.is_active
