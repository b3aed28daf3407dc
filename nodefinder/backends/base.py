"""
Document backend interface for nodefinder.

A backend owns the live document. The finder engine only ever hands it
XPath expressions and raw node handles it previously returned; it never
inspects a raw handle itself.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional


class DocumentBackend(ABC):
    """Abstract base class for document backends.

    Implementations wrap whatever actually holds the document (an lxml tree,
    a CDP session, a remote driver) behind a small async interface.
    """

    @property
    def dynamic(self) -> bool:
        """Whether the document can change between two queries.

        find() only polls when this is true. A static document gives the
        same answer every time, so a single attempt is enough.
        """
        return False

    @abstractmethod
    async def query(self, scope: Optional[Any], xpath: str) -> list[Any]:
        """Evaluate an XPath expression.

        Args:
            scope: Raw node to evaluate against, or None for the current
                document root.
            xpath: XPath expression, passed through verbatim.

        Returns:
            Raw node handles in document order.

        Raises:
            BackendError: If the expression cannot be evaluated.
        """
        ...

    @abstractmethod
    async def text(self, node: Any) -> str:
        """Get the rendered, whitespace-normalized text of a node."""
        ...

    @abstractmethod
    async def is_visible(self, node: Any) -> bool:
        """Check whether a node would be rendered."""
        ...

    @abstractmethod
    async def selected_values(self, node: Any) -> list[str]:
        """Get the selected option texts of a node (empty if not selectable)."""
        ...

    @abstractmethod
    async def is_checked(self, node: Any) -> bool:
        """Check whether a checkbox or radio node is checked."""
        ...

    @abstractmethod
    async def attribute(self, node: Any, name: str) -> Optional[str]:
        """Get an attribute value, or None if it is not set."""
        ...

    @abstractmethod
    async def tag_name(self, node: Any) -> str:
        """Get the lowercase tag name of a node."""
        ...
