"""
Selector kind registry for nodefinder.

A selector kind turns a locator into XPath expressions and may add its own
filters and failure message. Kinds are plain values registered by name; new
kinds are added with SelectorRegistry.add() (or add_selector() for the
process-wide registry), never by subclassing.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Optional, Sequence, Union

from nodefinder.exceptions import UnknownSelectorKind

if TYPE_CHECKING:
    from nodefinder.node.element import Element
    from nodefinder.selectors.options import FilterOptions
    from nodefinder.selectors.selector import Selector

logger = logging.getLogger(__name__)

XPathGenerator = Callable[[str, "FilterOptions"], Union[str, Sequence[str]]]
LocatorMatcher = Callable[[Any], bool]
FailureMessage = Callable[[Any, "Selector"], str]
NodeFilterFunc = Callable[["Element", Any], Union[bool, Awaitable[bool]]]


class BuiltinSelector(str, Enum):
    """Names of the selector kinds registered out of the box."""

    XPATH = "xpath"
    CSS = "css"
    ID = "id"
    FIELD = "field"
    FIELDSET = "fieldset"
    LINK_OR_BUTTON = "link_or_button"
    LINK = "link"
    BUTTON = "button"
    FILLABLE_FIELD = "fillable_field"
    RADIO_BUTTON = "radio_button"
    CHECKBOX = "checkbox"
    SELECT = "select"
    OPTION = "option"
    FILE_FIELD = "file_field"
    CONTENT = "content"
    TABLE = "table"


@dataclass(frozen=True, eq=False)
class SelectorKind:
    """A registered selector kind.

    Attributes:
        name: Registry key, also used in default error messages.
        xpath: Generator producing one or more XPath expressions from a
            locator and the normalized filter options.
        match: Optional predicate; a bare locator it accepts selects this
            kind instead of the configured default.
        failure_message: Optional hook building the ElementNotFound message
            from the calling scope and the selector.
        filters: Kind-specific filters, applied when the caller passes an
            option with the same name.
    """

    name: str
    xpath: XPathGenerator
    match: Optional[LocatorMatcher] = None
    failure_message: Optional[FailureMessage] = None
    filters: Mapping[str, NodeFilterFunc] = field(default_factory=dict)

    def call(self, locator: str, options: "FilterOptions") -> tuple[str, ...]:
        """Run the path generator and normalize its result to a tuple."""
        result = self.xpath(locator, options)
        if isinstance(result, str):
            return (result,)
        return tuple(result)

    def matches(self, locator: Any) -> bool:
        return self.match is not None and bool(self.match(locator))


class SelectorRegistry:
    """Lookup table of selector kinds.

    Example:
        registry = SelectorRegistry()
        registry.add("data_test", lambda loc, opts: f".//*[@data-test={literal(loc)}]")
        await session.find("data_test", "login-form")
    """

    def __init__(self) -> None:
        self._kinds: dict[str, SelectorKind] = {}
        self._lock = threading.Lock()

    def add(
        self,
        name: Union[str, Enum],
        xpath: XPathGenerator,
        *,
        match: Optional[LocatorMatcher] = None,
        failure_message: Optional[FailureMessage] = None,
        filters: Optional[Mapping[str, NodeFilterFunc]] = None,
    ) -> SelectorKind:
        """Register (or replace) a selector kind.

        Returns:
            The registered kind.
        """
        key = self._key(name)
        kind = SelectorKind(
            name=key,
            xpath=xpath,
            match=match,
            failure_message=failure_message,
            filters=dict(filters or {}),
        )
        with self._lock:
            self._kinds[key] = kind
        logger.debug(f"Registered selector kind: {key}")
        return kind

    def remove(self, name: Union[str, Enum]) -> None:
        """Unregister a selector kind.

        Raises:
            UnknownSelectorKind: If the kind is not registered.
        """
        key = self._key(name)
        with self._lock:
            if key not in self._kinds:
                raise UnknownSelectorKind(key)
            del self._kinds[key]

    def resolve(self, kind: Union[str, Enum, SelectorKind]) -> SelectorKind:
        """Look up a selector kind.

        Raises:
            UnknownSelectorKind: If the kind is not registered.
        """
        if isinstance(kind, SelectorKind):
            return kind
        try:
            return self._kinds[self._key(kind)]
        except (KeyError, TypeError):
            raise UnknownSelectorKind(kind) from None

    def detect(self, locator: Any) -> Optional[SelectorKind]:
        """Get the first kind whose match predicate accepts the locator."""
        for kind in list(self._kinds.values()):
            if kind.matches(locator):
                return kind
        return None

    def names(self) -> list[str]:
        return list(self._kinds)

    def __contains__(self, name: object) -> bool:
        try:
            return self._key(name) in self._kinds  # type: ignore[arg-type]
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._kinds)

    @staticmethod
    def _key(name: Union[str, Enum]) -> str:
        if isinstance(name, Enum):
            name = name.value
        if not isinstance(name, str):
            raise TypeError(f"Selector kind must be a string, got {type(name).__name__}")
        return name


_registry: Optional[SelectorRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> SelectorRegistry:
    """Get the process-wide registry, populated with the builtin kinds."""
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                from nodefinder.selectors.builtin import register_builtin_selectors

                registry = SelectorRegistry()
                register_builtin_selectors(registry)
                _registry = registry
    return _registry


def add_selector(
    name: Union[str, Enum],
    xpath: XPathGenerator,
    *,
    match: Optional[LocatorMatcher] = None,
    failure_message: Optional[FailureMessage] = None,
    filters: Optional[Mapping[str, NodeFilterFunc]] = None,
) -> SelectorKind:
    """Register a selector kind in the process-wide registry."""
    return get_registry().add(
        name,
        xpath,
        match=match,
        failure_message=failure_message,
        filters=filters,
    )
