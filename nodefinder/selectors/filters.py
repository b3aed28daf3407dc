"""
Candidate filters for nodefinder.

A FilterPipeline holds the ordered checks a candidate node must pass to
satisfy a selector: visibility, text, selected state, then the filters
contributed by the selector kind. Evaluation stops at the first failing
check. A failing check is not an error; only backend failures raise.
"""

from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Pattern

from nodefinder.selectors.options import FilterOptions

if TYPE_CHECKING:
    from nodefinder.node.element import Element
    from nodefinder.selectors.registry import NodeFilterFunc

logger = logging.getLogger(__name__)


class NodeFilter(ABC):
    """Base class for a single candidate check."""

    @abstractmethod
    async def check(self, node: "Element") -> bool:
        """Check whether the node passes.

        Args:
            node: Candidate element.

        Returns:
            True if the node passes this filter.
        """
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the filter."""
        ...


class VisibilityFilter(NodeFilter):
    """Node must be visible."""

    async def check(self, node: "Element") -> bool:
        return await node.is_visible()

    @property
    def description(self) -> str:
        return "visible"


class TextFilter(NodeFilter):
    """Node text must contain the pattern."""

    def __init__(self, pattern: Pattern[str]) -> None:
        self._pattern = pattern

    async def check(self, node: "Element") -> bool:
        return self._pattern.search(await node.text()) is not None

    @property
    def description(self) -> str:
        return f"text matching {self._pattern.pattern!r}"


class SelectedFilter(NodeFilter):
    """Node's selected values must share at least one value with the set."""

    def __init__(self, values: list[Any]) -> None:
        self._values = values

    async def check(self, node: "Element") -> bool:
        selected = await node.selected_values()
        return any(value in selected for value in self._values)

    @property
    def description(self) -> str:
        return f"selected in {self._values!r}"


class CustomFilter(NodeFilter):
    """Kind-specific filter, sync or async."""

    def __init__(self, name: str, func: "NodeFilterFunc", value: Any) -> None:
        self._name = name
        self._func = func
        self._value = value

    async def check(self, node: "Element") -> bool:
        result = self._func(node, self._value)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    @property
    def description(self) -> str:
        return f"{self._name}={self._value!r}"


class FilterPipeline:
    """Ordered candidate checks for one selector.

    Example:
        pipeline = FilterPipeline.build(options, kind.filters)
        if await pipeline.matches(node):
            ...
    """

    def __init__(self, filters: list[NodeFilter]) -> None:
        self._filters = filters

    @classmethod
    def build(
        cls,
        options: FilterOptions,
        custom_filters: Mapping[str, "NodeFilterFunc"],
    ) -> "FilterPipeline":
        """Assemble the checks requested by the options.

        Args:
            options: Normalized finder options.
            custom_filters: Filters contributed by the selector kind; only
                those named in the options are used.
        """
        filters: list[NodeFilter] = []
        if options.visible:
            filters.append(VisibilityFilter())
        if options.text is not None:
            filters.append(TextFilter(options.text))
        if options.selected is not None:
            filters.append(SelectedFilter(options.selected))
        for name, func in custom_filters.items():
            if name in options.custom:
                filters.append(CustomFilter(name, func, options.custom[name]))
        return cls(filters)

    @property
    def filters(self) -> list[NodeFilter]:
        return list(self._filters)

    async def matches(self, node: "Element") -> bool:
        for node_filter in self._filters:
            if not await node_filter.check(node):
                logger.debug(f"{node!r} rejected: not {node_filter.description}")
                return False
        return True

    def __len__(self) -> int:
        return len(self._filters)
