"""
lxml document backend for nodefinder.

Parses HTML with lxml and evaluates XPath against the parsed tree. The
document can be swapped wholesale with load(), which is how callers mirror a
page that is still being rendered elsewhere.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from lxml import etree, html
from lxml.etree import _Element

from nodefinder.backends.base import DocumentBackend
from nodefinder.exceptions import BackendError

logger = logging.getLogger(__name__)

# Tags whose content is never rendered
_NON_RENDERED_TAGS = ("head", "script", "style", "template", "noscript", "title")

_HIDDEN_XPATH = etree.XPath(
    "./ancestor-or-self::*["
    "contains(translate(@style, ' ', ''), 'display:none')"
    " or contains(translate(@style, ' ', ''), 'visibility:hidden')"
    " or @hidden"
    + "".join(f" or name()='{tag}'" for tag in _NON_RENDERED_TAGS)
    + "]"
)


class LxmlBackend(DocumentBackend):
    """Document backend over an lxml HTML tree.

    Example:
        backend = LxmlBackend("<a href='/'>Home</a>")
        session = Session(backend)
        link = await session.find_link("Home")

    Args:
        html_content: Initial HTML document.
        dynamic: Whether the document is expected to change, which makes
            find() poll until its wait time runs out.
        base_url: Base URL stored on the parsed document.
    """

    def __init__(
        self,
        html_content: str = "",
        *,
        dynamic: bool = False,
        base_url: Optional[str] = None,
    ) -> None:
        self._dynamic = dynamic
        self._base_url = base_url
        self._tree = self._parse(html_content)

    def _parse(self, html_content: str) -> etree._ElementTree:
        if not html_content.strip():
            html_content = "<html><body></body></html>"
        root = html.document_fromstring(html_content, base_url=self._base_url)
        return root.getroottree()

    # Document

    @property
    def dynamic(self) -> bool:
        return self._dynamic

    @property
    def root(self) -> _Element:
        """Get the current document root element."""
        return self._tree.getroot()

    def load(self, html_content: str) -> None:
        """Replace the whole document.

        Nodes returned before the load keep pointing at the old tree.
        """
        self._tree = self._parse(html_content)
        logger.debug(f"Document replaced ({len(html_content)} chars)")

    @property
    def html(self) -> str:
        """Get the serialized current document."""
        return etree.tostring(self._tree, encoding="unicode", method="html")

    # Queries

    async def query(self, scope: Optional[Any], xpath: str) -> list[Any]:
        context = self._tree if scope is None else scope
        try:
            results = context.xpath(xpath)
        except etree.XPathError as e:
            raise BackendError(f"Invalid XPath {xpath!r}: {e}", expression=xpath) from e

        if not isinstance(results, list):
            return []
        return [
            el for el in results
            if isinstance(el, _Element) and isinstance(el.tag, str)
        ]

    # Node state

    async def text(self, node: Any) -> str:
        return " ".join(node.text_content().split())

    async def is_visible(self, node: Any) -> bool:
        if node.tag == "input" and (node.get("type") or "").lower() == "hidden":
            return False
        return not _HIDDEN_XPATH(node)

    async def selected_values(self, node: Any) -> list[str]:
        if node.tag == "option":
            if "selected" in node.attrib:
                return [await self.text(node)]
            return []

        if node.tag != "select":
            return []

        options = node.xpath(".//option")
        selected = [opt for opt in options if "selected" in opt.attrib]
        if not selected and options and "multiple" not in node.attrib:
            selected = options[:1]
        return [await self.text(opt) for opt in selected]

    async def is_checked(self, node: Any) -> bool:
        return "checked" in node.attrib

    async def attribute(self, node: Any, name: str) -> Optional[str]:
        return node.get(name)

    async def tag_name(self, node: Any) -> str:
        return str(node.tag).lower()
