"""
Finder methods shared by documents and elements.

    await session.find("#foo")                         # css by default
    await session.find("xpath", '//div[contains(., "bar")]')
    await session.find("li", text="Quox")
    await element.all("a", visible=True)

Every call takes one configuration snapshot from its session at the start
and uses it throughout, including every poll of find().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Optional, Sequence

from nodefinder.exceptions import ElementNotFound
from nodefinder.node.reporting import build_failure_message
from nodefinder.node.retry import RetryScheduler
from nodefinder.selectors.options import extract_normalized_options
from nodefinder.selectors.registry import BuiltinSelector
from nodefinder.selectors.selector import Selector

if TYPE_CHECKING:
    from nodefinder.config.options import FinderConfig
    from nodefinder.node.element import Element
    from nodefinder.session import Session

logger = logging.getLogger(__name__)


class Finders(ABC):
    """Mixin providing find/first/all against ``self.base``.

    Subclasses provide ``session`` and ``base``; a ``base`` of None means
    the current document root.
    """

    session: "Session"

    @property
    @abstractmethod
    def base(self) -> Any:
        """Raw node queries run against, or None for the document root."""
        ...

    async def find(self, *args: Any, **options: Any) -> "Element":
        """Find one element, waiting for it if the document is dynamic.

        Takes the same arguments as all(), plus a ``message`` option used
        verbatim as the error message.

        Raises:
            ElementNotFound: If nothing matches before the wait time expires.
        """
        config = self.session.config
        selector = self._normalize(args, options, config)
        scheduler = RetryScheduler(
            timeout=config.default_wait_time,
            polling_interval=config.polling_interval,
            enabled=self.session.backend.dynamic,
        )
        outcome = await scheduler.run(lambda: self._first(selector, config))
        if outcome.satisfied:
            return outcome.value
        raise self._find_error(selector) from outcome.last_error

    async def find_field(self, locator: str) -> "Element":
        """Find a form field by its id, name, placeholder or label text."""
        return await self.find(BuiltinSelector.FIELD, locator)

    field_labeled = find_field

    async def find_link(self, locator: str) -> "Element":
        """Find a link by its id, title, text or image alt text."""
        return await self.find(BuiltinSelector.LINK, locator)

    async def find_button(self, locator: str) -> "Element":
        """Find a button by its id, value, title or text."""
        return await self.find(BuiltinSelector.BUTTON, locator)

    async def find_by_id(self, id: str) -> "Element":
        """Find an element by its id."""
        return await self.find(BuiltinSelector.ID, id)

    async def all(self, *args: Any, **options: Any) -> list["Element"]:
        """Find all elements matching a selector, without waiting.

        Args:
            *args: ``(locator,)`` or ``(kind, locator)``; a trailing dict is
                read as options. Without a kind the configured default
                selector is used.
            **options: ``text`` (str or compiled pattern) the element text
                must contain, ``visible`` to only accept visible elements,
                ``selected`` values of which one must be selected, and any
                filter the selector kind defines.

        Returns:
            Matches in document order, expression by expression.
        """
        config = self.session.config
        selector = self._normalize(args, options, config)
        found: list["Element"] = []
        for xpath in selector.xpaths:
            for node in await self._find_in_base(selector, xpath):
                if await selector.matches_filters(node):
                    found.append(node)
        return found

    async def first(self, *args: Any, **options: Any) -> Optional["Element"]:
        """Find the first matching element, or None, without waiting.

        With prefer_visible_elements the first visible match is returned,
        falling back to the first match of any visibility.
        """
        config = self.session.config
        selector = self._normalize(args, options, config)
        return await self._first(selector, config)

    async def _first(self, selector: Selector, config: "FinderConfig") -> Optional["Element"]:
        found: list["Element"] = []
        for xpath in selector.xpaths:
            for node in await self._find_in_base(selector, xpath):
                if await selector.matches_filters(node):
                    found.append(node)
                    if not config.prefer_visible_elements or await node.is_visible():
                        return node
        return found[0] if found else None

    def _find_error(self, selector: Selector) -> ElementNotFound:
        message = build_failure_message(self, selector)
        logger.debug(f"Find failed: {message}")
        return ElementNotFound(message, selector=selector)

    async def _find_in_base(self, selector: Selector, xpath: str) -> list["Element"]:
        from nodefinder.node.element import Element

        natives = await self.session.backend.query(self.base, xpath)
        return [Element(self.session, native, self, selector) for native in natives]

    def _normalize(
        self,
        args: Sequence[Any],
        options: dict[str, Any],
        config: "FinderConfig",
    ) -> Selector:
        args, _ = extract_normalized_options(args, config, options)
        return Selector.normalize(*args, config=config, registry=self.session.registry)
