"""
Sessions for nodefinder.

A Session ties a document backend to the configuration and selector registry
its finders use. Finder calls on the session run against the document root.
"""

from __future__ import annotations

from typing import Any, Optional

from nodefinder.backends.base import DocumentBackend
from nodefinder.config.options import FinderConfig
from nodefinder.config.runtime import get_default_config
from nodefinder.node.document import Document
from nodefinder.node.element import Element
from nodefinder.selectors.registry import SelectorRegistry, get_registry


class Session:
    """Entry point for finding nodes in a document.

    Example:
        backend = LxmlBackend(html, dynamic=True)
        session = Session(backend, config=FinderConfig(default_wait_time=5))

        button = await session.find_button("Save")
        rows = await session.all("css", "table#users tr", text="admin")

    Args:
        backend: Document backend to query.
        config: Fixed configuration; when omitted the process-wide default
            is read at the start of every call.
        registry: Selector kinds; defaults to the process-wide registry.
    """

    def __init__(
        self,
        backend: DocumentBackend,
        *,
        config: Optional[FinderConfig] = None,
        registry: Optional[SelectorRegistry] = None,
    ) -> None:
        self.backend = backend
        self._config = config
        self._registry = registry
        self._document = Document(self)

    @property
    def config(self) -> FinderConfig:
        """Get the configuration snapshot for a new call."""
        return self._config if self._config is not None else get_default_config()

    @config.setter
    def config(self, config: Optional[FinderConfig]) -> None:
        self._config = config

    @property
    def registry(self) -> SelectorRegistry:
        return self._registry if self._registry is not None else get_registry()

    @property
    def document(self) -> Document:
        return self._document

    # Finders, against the document root

    async def find(self, *args: Any, **options: Any) -> Element:
        return await self._document.find(*args, **options)

    async def first(self, *args: Any, **options: Any) -> Optional[Element]:
        return await self._document.first(*args, **options)

    async def all(self, *args: Any, **options: Any) -> list[Element]:
        return await self._document.all(*args, **options)

    async def find_field(self, locator: str) -> Element:
        return await self._document.find_field(locator)

    field_labeled = find_field

    async def find_link(self, locator: str) -> Element:
        return await self._document.find_link(locator)

    async def find_button(self, locator: str) -> Element:
        return await self._document.find_button(locator)

    async def find_by_id(self, id: str) -> Element:
        return await self._document.find_by_id(id)

    def __repr__(self) -> str:
        return f"<Session backend={type(self.backend).__name__}>"
