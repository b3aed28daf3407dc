"""
Tests for the candidate filter pipeline.
"""

import re

import pytest

from nodefinder import FilterOptions
from nodefinder.selectors import (
    CustomFilter,
    FilterPipeline,
    SelectedFilter,
    TextFilter,
    VisibilityFilter,
)


class RecordingFilter:
    """Kind filter that records the nodes it was asked about."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def __call__(self, node, value):
        self.calls.append((node, value))
        return self.result


class TestFilterPipelineBuild:
    """Tests for FilterPipeline.build()."""

    def test_empty(self):
        """Test that no options means no filters."""
        assert len(FilterPipeline.build(FilterOptions(), {})) == 0

    def test_order(self):
        """Test visibility, text, selected, then kind filters."""
        options = FilterOptions(
            text=re.compile("a"),
            visible=True,
            selected=["x"],
            custom={"checked": True},
        )
        pipeline = FilterPipeline.build(options, {"checked": lambda node, value: True})
        kinds = [type(f) for f in pipeline.filters]
        assert kinds == [VisibilityFilter, TextFilter, SelectedFilter, CustomFilter]

    def test_unused_kind_filters_skipped(self):
        """Test that kind filters not named in the options are left out."""
        pipeline = FilterPipeline.build(FilterOptions(), {"checked": lambda node, value: True})
        assert pipeline.filters == []

    def test_unknown_options_ignored(self):
        """Test that options without a kind filter add nothing."""
        pipeline = FilterPipeline.build(FilterOptions(custom={"colour": "red"}), {})
        assert len(pipeline) == 0

    def test_descriptions(self):
        """Test filter descriptions used in debug logs."""
        assert VisibilityFilter().description == "visible"
        assert TextFilter(re.compile("Quox")).description == "text matching 'Quox'"
        assert SelectedFilter(["x"]).description == "selected in ['x']"


class TestFilterPipelineMatches:
    """Tests for FilterPipeline.matches()."""

    @pytest.mark.asyncio
    async def test_all_pass(self, page):
        """Test a node that passes every filter."""
        item = await page.find("li", text="Third")
        options = FilterOptions(text=re.compile("Quox"), visible=True)
        assert await FilterPipeline.build(options, {}).matches(item)

    @pytest.mark.asyncio
    async def test_visibility_rejects(self, page):
        """Test that a hidden node fails the visibility filter."""
        hidden = await page.find("li", text="Second")
        assert not await FilterPipeline.build(FilterOptions(visible=True), {}).matches(hidden)

    @pytest.mark.asyncio
    async def test_short_circuit(self, page):
        """Test that later filters are not run after a failure."""
        hidden = await page.find("li", text="Second")
        recorder = RecordingFilter(True)
        options = FilterOptions(visible=True, custom={"probe": 1})

        assert not await FilterPipeline.build(options, {"probe": recorder}).matches(hidden)
        assert recorder.calls == []

    @pytest.mark.asyncio
    async def test_sync_custom_filter(self, page):
        """Test a plain function as kind filter."""
        item = await page.find("li", text="First")
        recorder = RecordingFilter(False)
        pipeline = FilterPipeline.build(FilterOptions(custom={"probe": "v"}), {"probe": recorder})

        assert not await pipeline.matches(item)
        assert recorder.calls == [(item, "v")]

    @pytest.mark.asyncio
    async def test_async_custom_filter(self, page):
        """Test a coroutine function as kind filter."""

        async def has_class(node, value):
            return await node.attr("class") == value

        item = await page.find("li", text="First")
        pipeline = FilterPipeline.build(
            FilterOptions(custom={"has_class": "item"}), {"has_class": has_class}
        )
        assert await pipeline.matches(item)

    @pytest.mark.asyncio
    async def test_selected_intersection(self, page):
        """Test that any shared selected value passes."""
        tags = await page.find("#tags")
        assert await SelectedFilter(["y", "q"]).check(tags)
        assert not await SelectedFilter(["z"]).check(tags)

    @pytest.mark.asyncio
    async def test_text_uses_search(self, page):
        """Test that text patterns match anywhere in the text."""
        item = await page.find("li", text="Quox")
        assert await TextFilter(re.compile("Quox")).check(item)
        assert not await TextFilter(re.compile("^Quox")).check(item)
