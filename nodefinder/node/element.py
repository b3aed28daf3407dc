"""
Element handles for nodefinder.

An Element wraps one raw backend node together with the session it came
from, the scope it was found in and the selector that found it. Elements are
created fresh by every query; nothing is cached between polls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

from nodefinder.node.finders import Finders

if TYPE_CHECKING:
    from nodefinder.selectors.selector import Selector
    from nodefinder.session import Session


class Element(Finders):
    """A found node. Also a scope for nested finds.

    Example:
        form = await session.find("form#login")
        field = await form.find_field("Email")
        assert await field.attr("type") == "email"
    """

    def __init__(
        self,
        session: "Session",
        native: Any,
        parent: Finders,
        selector: "Selector",
    ) -> None:
        self.session = session
        self.native = native
        self.parent = parent
        self.selector = selector

    @property
    def base(self) -> Any:
        return self.native

    # Node state, answered by the backend

    async def text(self) -> str:
        """Get the rendered, whitespace-normalized text."""
        return await self.session.backend.text(self.native)

    async def is_visible(self) -> bool:
        return await self.session.backend.is_visible(self.native)

    async def selected_values(self) -> list[str]:
        """Get the texts of the selected options (select or option nodes)."""
        return await self.session.backend.selected_values(self.native)

    async def is_checked(self) -> bool:
        return await self.session.backend.is_checked(self.native)

    async def attr(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute value.

        Args:
            name: Attribute name.
            default: Value returned when the attribute is not set.
        """
        value = await self.session.backend.attribute(self.native, name)
        return default if value is None else value

    async def tag_name(self) -> str:
        return await self.session.backend.tag_name(self.native)

    # Identity follows the raw node

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        return self.session.backend is other.session.backend and self.native == other.native

    def __hash__(self) -> int:
        return hash(self.native)

    def __repr__(self) -> str:
        return f"<Element {self.selector.name} {self.selector.locator!r} native={self.native!r}>"
